# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, PlainSerializer, StrictInt
from typing import Annotated, List, Optional
from decimal import Decimal
from datetime import datetime

from app.services.checkout_service import CheckoutState

# Decimal w srodku, liczba w JSON (klient liczy total z cen katalogu)
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MessageOut(BaseModel):
    message: str


class AddToCartIn(BaseModel):
    """Dodanie produktu do koszyka. Brak user_id/item_id -> 400 z serwisu."""

    user_id: Optional[StrictInt] = None
    item_id: Optional[StrictInt] = None
    quantity: StrictInt = Field(1, description="Ilosc, sumowana z istniejaca pozycja")


class CartItemOut(BaseModel):
    item_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    id: int
    user_id: int
    items: List[CartItemOut]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemIn(BaseModel):
    item_id: StrictInt
    quantity: StrictInt


class OrderCreate(BaseModel):
    user_id: Optional[StrictInt] = None
    cart_id: Optional[StrictInt] = None
    items: Optional[List[OrderItemIn]] = None
    total: Optional[Decimal] = None


class OrderItemOut(BaseModel):
    item_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    user_id: int
    cart_id: int
    items: List[OrderItemOut]
    total: Optional[Money] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CheckoutIn(BaseModel):
    """Checkout: pozycje i total policzone po stronie klienta."""

    user_id: StrictInt = Field(..., description="ID uzytkownika")
    items: List[OrderItemIn]
    total: Optional[Decimal] = None


class CheckoutOut(BaseModel):
    order: OrderOut
    state: CheckoutState
    cart_cleared: bool
    detail: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ItemIn(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    description: str = ""


class ItemOut(BaseModel):
    id: int
    name: str
    price: Money
    description: str

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class UserCreated(UserRead):
    message: str = "User created successfully"


class LoginIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginOut(BaseModel):
    id: int
    token: str
    message: str = "Login successful"
