from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventhub.services import auth_service
from eventhub.core import security
from eventhub.schemas import auth_schemas, common_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.post("/register", response_model=common_schemas.MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: auth_schemas.RegisterRequest,
    db: Session = Depends(get_db),
):
    auth_service.register_user(db=db, user_in=user_in)
    return {"message": "Registration successful"}


@router.post("/login", response_model=auth_schemas.LoginResponse)
def login(
    credentials: auth_schemas.LoginRequest,
    db: Session = Depends(get_db),
):
    user = auth_service.authenticate_user(db=db, email=credentials.email, password=credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email or password")

    access_token = security.create_user_token(user)
    return {
        "message": "Login successful",
        "token": access_token,
        "access_token": access_token,
        "token_type": "bearer",
        "user": user,
    }
