"""
Booking routes
Plain CRUD plus the paired booking/room operations (check-in, check-out, cancel).
"""
from typing import List
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import Booking
from hotel_pms.models.schemas import BookingCreate, BookingUpdate, StayTransitionResponse
from hotel_pms.services.booking_service import BookingService
from hotel_pms.services.stay_service import StayService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=List[Booking])
def list_bookings(store: MemoryStore = Depends(get_store)):
    return BookingService(store).get_bookings()


@router.get("/arrivals/today", response_model=List[Booking])
def get_todays_arrivals(store: MemoryStore = Depends(get_store)):
    """Check-in falls today"""
    return BookingService(store).get_todays_arrivals()


@router.get("/departures/today", response_model=List[Booking])
def get_todays_departures(store: MemoryStore = Depends(get_store)):
    """Check-out falls today"""
    return BookingService(store).get_todays_departures()


@router.get("/range", response_model=List[Booking])
def get_bookings_by_date_range(start: datetime, end: datetime,
                               store: MemoryStore = Depends(get_store)):
    """Bookings lying entirely inside [start, end]"""
    return BookingService(store).get_bookings_by_date_range(start, end)


@router.get("/guest/{guest_id}", response_model=List[Booking])
def get_bookings_by_guest(guest_id: str, store: MemoryStore = Depends(get_store)):
    return BookingService(store).get_bookings_by_guest(guest_id)


@router.get("/room/{room_id}", response_model=List[Booking])
def get_bookings_by_room(room_id: str, store: MemoryStore = Depends(get_store)):
    return BookingService(store).get_bookings_by_room(room_id)


@router.get("/{booking_id}", response_model=Booking)
def get_booking(booking_id: str, store: MemoryStore = Depends(get_store)):
    booking = BookingService(store).get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(data: BookingCreate, store: MemoryStore = Depends(get_store)):
    return BookingService(store).create_booking(data)


@router.patch("/{booking_id}", response_model=Booking)
def update_booking(booking_id: str, data: BookingUpdate, store: MemoryStore = Depends(get_store)):
    """Unvalidated partial update; the room is not touched"""
    return BookingService(store).update_booking(booking_id, data)


@router.post("/{booking_id}/check-in", response_model=StayTransitionResponse)
def check_in(booking_id: str, store: MemoryStore = Depends(get_store)):
    """Booking -> checked_in and room -> occupied"""
    booking, room = StayService(store).check_in(booking_id)
    return StayTransitionResponse(booking=booking, room=room)


@router.post("/{booking_id}/check-out", response_model=StayTransitionResponse)
def check_out(booking_id: str, store: MemoryStore = Depends(get_store)):
    """Booking -> checked_out and room -> available"""
    booking, room = StayService(store).check_out(booking_id)
    return StayTransitionResponse(booking=booking, room=room)


@router.post("/{booking_id}/cancel", response_model=StayTransitionResponse)
def cancel_booking(booking_id: str, store: MemoryStore = Depends(get_store)):
    booking, room = StayService(store).cancel(booking_id)
    return StayTransitionResponse(booking=booking, room=room)
