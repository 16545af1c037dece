from fastapi import APIRouter, Depends, Response
from config import settings
from firebase_client import get_store
from models import RegisterRequest, LoginRequest, AuthResponse, MessageResponse
from services.auth_service import create_account, login_user

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(request: RegisterRequest, store=Depends(get_store)):
    # Self-registration always yields a customer
    create_account(store, request.name, request.phoneNumber, request.password, "customer",
                   conflict_message="User Exists")
    return {"message": "Customer Registered"}


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, response: Response, store=Depends(get_store)):
    token, user_data = login_user(store, request.phoneNumber, request.password)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.AUTH_COOKIE_SECURE,
        max_age=settings.JWT_EXPIRES_DAYS * 24 * 60 * 60,
    )
    return {"message": "Login Success", "token": token, "user": user_data}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME)
    return {"message": "Logged Out"}
