"""
Booking endpoints. Every write re-checks that the referenced event exists.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.booking import BookingCreate, BookingUpdate, BookingResponse
from app.services.booking_service import create_booking, update_booking, get_booking

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book an event by email.

    Returns 422 DANGLING_REFERENCE if the event does not exist and
    503 DEPENDENCY_UNAVAILABLE if the existence check could not complete.
    """
    return await create_booking(db, booking_data.model_dump())


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking_endpoint(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await get_booking(db, booking_id)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking_endpoint(
    booking_id: int,
    changes: BookingUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await update_booking(db, booking_id, changes.model_dump(exclude_unset=True))
