from fastapi import APIRouter

from app.api.v1.routes import auth, goals, deposits, summary

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(goals.router)
api_router.include_router(deposits.router)
api_router.include_router(summary.router)
