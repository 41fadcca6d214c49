"""Aggregate API v1 router."""

from fastapi import APIRouter

from keno_analytics.api.v1.endpoints import data, payouts, statistics

api_router = APIRouter()

api_router.include_router(statistics.router, prefix="/stats", tags=["Statistics"])
api_router.include_router(payouts.router, prefix="/payouts", tags=["Payouts"])
api_router.include_router(data.router, prefix="/data", tags=["Data"])
