from fastapi import APIRouter, Depends
from typing import List
from firebase_client import get_store
from guards import require_roles
from models import Booking, MessageResponse, StatusUpdateRequest
from services.booking_service import find_bookings, update_booking_status

# Directors can do everything admins can
router = APIRouter(prefix="/admin", dependencies=[Depends(require_roles("admin", "director"))])


@router.get("/bookings", response_model=List[Booking])
def all_bookings(store=Depends(get_store)):
    return find_bookings(store)


@router.put("/update-status/{booking_id}", response_model=MessageResponse)
def update_status(booking_id: str, request: StatusUpdateRequest, store=Depends(get_store)):
    update_booking_status(store, booking_id, request.status)
    return {"message": "Status Updated"}


@router.get("/search/{phone}", response_model=List[Booking])
def search_bookings(phone: str, store=Depends(get_store)):
    return find_bookings(store, customerPhone=phone)
