from fastapi import APIRouter, Depends
from typing import List
from firebase_client import get_store
from guards import authenticate, require_roles
from models import Booking, BookingRequest, Identity, MessageResponse
from services.booking_service import create_booking, find_bookings

router = APIRouter(dependencies=[Depends(require_roles("customer"))])


@router.post("/book", response_model=MessageResponse, status_code=201)
def book(request: BookingRequest, identity: Identity = Depends(authenticate), store=Depends(get_store)):
    create_booking(store, identity.id, request)
    return {"message": "Booking Created"}


@router.get("/my-bookings", response_model=List[Booking])
def my_bookings(identity: Identity = Depends(authenticate), store=Depends(get_store)):
    return find_bookings(store, customerId=identity.id)
