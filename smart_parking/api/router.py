"""API router."""

from fastapi import APIRouter

from smart_parking.api.endpoints import bookings, health, lots

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(lots.router, tags=["lots"])
api_router.include_router(bookings.router, tags=["bookings"])
