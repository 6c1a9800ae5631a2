"""
Booking endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.db.session import get_db
from devevent.schemas.booking import BookingCreate, BookingUpdate, BookingResponse
from devevent.services.booking_service import create_booking, update_booking

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book a spot at an event.

    Rejected with 422 when the email is malformed or the event does not
    exist; nothing is written in either case.
    """
    return await create_booking(db, booking_data)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking_endpoint(
    booking_id: int,
    booking_data: BookingUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await update_booking(db, booking_id, booking_data)
