"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import events, bookings
from app.schemas.error import ErrorResponse

# Documented error bodies; rendered by app.api.errors
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Record not found"},
    409: {"model": ErrorResponse, "description": "Unique field already taken"},
    422: {"model": ErrorResponse, "description": "Record failed validation"},
    503: {"model": ErrorResponse, "description": "Storage check could not complete"},
}

api_router = APIRouter(prefix="/api/v1", responses=ERROR_RESPONSES)
api_router.include_router(events.router)
api_router.include_router(bookings.router)
