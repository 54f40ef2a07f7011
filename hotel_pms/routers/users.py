"""
User routes
Passwords go in, never come out.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.schemas import UserCreate, UserResponse
from hotel_pms.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, store: MemoryStore = Depends(get_store)):
    user = UserService(store).get_user(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse(**user.model_dump(exclude={"password"}))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, store: MemoryStore = Depends(get_store)):
    user = UserService(store).create_user(data)
    return UserResponse(**user.model_dump(exclude={"password"}))
