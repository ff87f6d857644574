from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.data.store import Store
from app.domain.schemas import LoginIn, LoginOut, UserCreate, UserCreated, UserRead
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_service(store: Store = Depends(get_store)) -> UserService:
    return UserService(store.users)


@router.post("", response_model=UserCreated, status_code=201)
def create_user(payload: UserCreate, service: UserService = Depends(get_service)):
    user = service.register(payload.username, payload.password)
    return {"id": user.id, "username": user.username}


@router.get("", response_model=List[UserRead])
def list_users(service: UserService = Depends(get_service)):
    return service.list_users()


@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, service: UserService = Depends(get_service)):
    return service.login(payload.username, payload.password)
