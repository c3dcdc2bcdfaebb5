"""API v1 routes"""
from fastapi import APIRouter
from app.api.v1 import (
    currencies,
    conversions,
    exchange_rates,
)

api_router = APIRouter()

# Include route modules
api_router.include_router(currencies.router)
api_router.include_router(conversions.router)
api_router.include_router(exchange_rates.router)
