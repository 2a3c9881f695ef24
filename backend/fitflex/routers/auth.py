from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.models import User
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.user import UserRegister, UserLogin, UserRead, TokenRead
from fitflex.security import hash_password, verify_password, create_access_token
from fitflex.deps.auth import get_current_user
from fitflex.errors import Conflict
from fitflex.repositories.user_repo import UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=ApiResponse[UserRead], status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise Conflict("Email already registered")
    user = repo.create(
        email=payload.email,
        name=payload.name,
        password_hash=hash_password(payload.password),
    )
    return ApiResponse(data=UserRead.model_validate(user))

@router.post("/login", response_model=ApiResponse[TokenRead])
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(sub=user.id)
    return ApiResponse(data=TokenRead(access_token=token))

@router.get("/me", response_model=ApiResponse[UserRead])
def me(current_user: User = Depends(get_current_user)):
    return ApiResponse(data=UserRead.model_validate(current_user))
