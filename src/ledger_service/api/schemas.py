from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = None
    phone_number: Optional[str] = None
    pin: Optional[int] = None
    balance: Optional[Decimal] = None


class AccountUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = None
    phone_number: Optional[str] = None
    pin: Optional[int] = None


class AccountOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    balance: float
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TransferIn(BaseModel):
    sender_id: int
    receiver_id: int
    # Sign is checked by TransferService so it reports INVALID_AMOUNT
    amount: Decimal = Field(..., examples=[100.00])
    reason: str = ""


class TransferOut(BaseModel):
    id: int
    sender: AccountOut
    receiver: AccountOut
    amount: float
    reason: Optional[str] = None
    date: Optional[str] = None
    status: str
    sender_balance_after: Optional[float] = None
    receiver_balance_after: Optional[float] = None


class ErrorOut(BaseModel):
    error: str
    detail: str
