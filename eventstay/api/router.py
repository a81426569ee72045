"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from eventstay.api.routes import auth, events, enrollments, tickets, payments, hotels, bookings

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(events.router)
api_router.include_router(enrollments.router)
api_router.include_router(tickets.router)
api_router.include_router(payments.router)
api_router.include_router(hotels.router)
api_router.include_router(bookings.router)
