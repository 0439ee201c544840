"""API tests for the savings summary."""

SUMMARY = "/api/v1/summary"
GOALS = "/api/v1/goals"


class TestSummary:

    async def test_trip_scenario(self, async_client, alice, create_goal):
        goal = await create_goal(
            alice, title="Trip", target_amount=1000, start_date="2024-01-01", end_date="2024-12-31"
        )
        url = f"{GOALS}/{goal['id']}/deposits"
        assert (await async_client.post(url, json={"amount": 200, "date": "2024-02-01"}, headers=alice)).status_code == 200
        assert (await async_client.post(url, json={"amount": 150, "date": "2024-03-01"}, headers=alice)).status_code == 200

        resp = await async_client.get(SUMMARY, headers=alice)
        assert resp.status_code == 200
        assert resp.json() == {
            "totalSaved": 350,
            "goals": [
                {"id": goal["id"], "title": "Trip", "target_amount": 1000, "current_amount": 350},
            ],
        }

    async def test_goals_without_deposits_count_as_zero(self, async_client, alice, create_goal):
        first = await create_goal(alice, title="Car", start_date="2024-06-01", end_date=None)
        await create_goal(alice, title="Empty", start_date="2024-01-01", end_date=None)
        await async_client.post(
            f"{GOALS}/{first['id']}/deposits", json={"amount": "12.34", "date": "2024-06-02"}, headers=alice
        )

        body = (await async_client.get(SUMMARY, headers=alice)).json()
        assert body["totalSaved"] == 12.34
        assert [(g["title"], g["current_amount"]) for g in body["goals"]] == [("Car", 12.34), ("Empty", 0)]

    async def test_summary_is_scoped_to_caller(self, async_client, alice, bob, create_goal):
        goal = await create_goal(alice)
        await async_client.post(
            f"{GOALS}/{goal['id']}/deposits", json={"amount": 99, "date": "2024-02-01"}, headers=alice
        )

        body = (await async_client.get(SUMMARY, headers=bob)).json()
        assert body == {"totalSaved": 0, "goals": []}

    async def test_sum_of_many_deposits_is_exact(self, async_client, alice, create_goal):
        goal = await create_goal(alice)
        url = f"{GOALS}/{goal['id']}/deposits"
        amounts = [5, 17, 250, 1, 33, 94]
        for i, amount in enumerate(amounts):
            await async_client.post(url, json={"amount": amount, "date": f"2024-02-{i + 1:02d}"}, headers=alice)

        body = (await async_client.get(SUMMARY, headers=alice)).json()
        assert body["totalSaved"] == sum(amounts)
        assert body["goals"][0]["current_amount"] == sum(amounts)
