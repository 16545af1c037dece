from fastapi import APIRouter, Depends, Query
from typing import List
from firebase_client import get_store
from guards import require_roles
from models import MessageResponse, RegisterRequest, RevenueReport, UserPage, Vehicle, VehicleCreate, VehicleUpdate
from services.auth_service import create_account
from services.booking_service import revenue_summary
from services.user_service import list_users, toggle_user_active
from services.vehicle_service import add_vehicle, list_vehicles, update_vehicle
import logging

router = APIRouter(prefix="/director", dependencies=[Depends(require_roles("director"))])
logger = logging.getLogger(__name__)


@router.post("/create-admin", response_model=MessageResponse)
def create_admin(request: RegisterRequest, store=Depends(get_store)):
    create_account(store, request.name, request.phoneNumber, request.password, "admin")
    return {"message": "Admin Created Successfully"}


@router.post("/create-driver", response_model=MessageResponse)
def create_driver(request: RegisterRequest, store=Depends(get_store)):
    create_account(store, request.name, request.phoneNumber, request.password, "driver")
    return {"message": "Driver Created Successfully"}


@router.post("/add-vehicle", response_model=MessageResponse)
def add_vehicle_route(data: VehicleCreate, store=Depends(get_store)):
    vehicle = add_vehicle(store, data)
    logger.info(f"Vehicle added: {vehicle['id']}")
    return {"message": "Vehicle Added"}


@router.put("/update-vehicle/{vehicle_id}", response_model=MessageResponse)
def update_vehicle_route(vehicle_id: str, data: VehicleUpdate, store=Depends(get_store)):
    update_vehicle(store, vehicle_id, data)
    return {"message": "Vehicle Updated"}


@router.get("/revenue", response_model=RevenueReport)
def revenue(store=Depends(get_store)):
    return revenue_summary(store)


@router.get("/all-users", response_model=UserPage)
def all_users(
    page: int = Query(1, ge=1),
    limit: int = Query(25, ge=1),
    search: str = "",
    role: str = "",
    store=Depends(get_store),
):
    return list_users(store, page=page, limit=limit, search=search, role=role)


@router.put("/toggle-user/{user_id}", response_model=MessageResponse)
def toggle_user(user_id: str, store=Depends(get_store)):
    is_active = toggle_user_active(store, user_id)
    logger.info(f"User {user_id} active set to {is_active}")
    return {"message": "User status updated"}


@router.get("/vehicles", response_model=List[Vehicle])
def vehicles(store=Depends(get_store)):
    return list_vehicles(store)
