from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import List, Literal

Role = Literal["customer", "admin", "director", "driver"]
BookingStatus = Literal["pending", "approved", "completed", "cancelled"]
VehicleStatus = Literal["available", "booked", "maintenance"]

ROLES = ("customer", "admin", "director", "driver")


class Identity(BaseModel):
    """Claims decoded from a verified bearer token."""
    id: str
    role: str


class User(BaseModel):
    id: str
    name: str
    phoneNumber: str
    role: Role
    isActive: bool = True
    createdAt: datetime


class Vehicle(BaseModel):
    id: str
    vehicleNumber: str
    type: str
    capacity: int | None = None
    driverId: str | None = None
    status: VehicleStatus = "available"
    createdAt: datetime

    model_config = ConfigDict(extra="allow")


class VehicleCreate(BaseModel):
    """New vehicle; unknown fields are kept as sent."""
    vehicleNumber: str = Field(min_length=1)
    type: str = Field(min_length=1)
    capacity: int | None = None
    driverId: str | None = None
    status: VehicleStatus = "available"

    model_config = ConfigDict(extra="allow")


class VehicleUpdate(BaseModel):
    vehicleNumber: str | None = Field(default=None, min_length=1)
    type: str | None = Field(default=None, min_length=1)
    capacity: int | None = None
    driverId: str | None = None
    status: VehicleStatus | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("vehicleNumber", "type", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class Booking(BaseModel):
    id: str
    customerId: str
    customerName: str | None = None
    customerPhone: str | None = None
    vehicleId: str | None = None
    vehicleType: str | None = None
    fromLocation: str | None = None
    toLocation: str | None = None
    travelDate: datetime | None = None
    amount: float | None = None
    status: BookingStatus = "pending"
    createdAt: datetime


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    phoneNumber: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        # bcrypt only uses the first 72 bytes
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return v


class LoginRequest(BaseModel):
    phoneNumber: str
    password: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: User


class BookingRequest(BaseModel):
    vehicleId: str | None = None
    vehicleType: str | None = None
    fromLocation: str | None = None
    toLocation: str | None = None
    travelDate: datetime | None = None
    amount: float | None = None


class StatusUpdateRequest(BaseModel):
    status: BookingStatus


class UserPage(BaseModel):
    users: List[User]
    totalPages: int
    currentPage: int


class RevenueReport(BaseModel):
    totalCompletedTrips: int
    totalRevenue: float


class MessageResponse(BaseModel):
    message: str
