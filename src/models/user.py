"""User models. Passwords are accepted on registration and never returned."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from src.validators.user_validators import (
    AddressValidatorMixin,
    UserNameValidatorMixin,
    UserValidatorMixin,
)


class UserName(UserNameValidatorMixin, BaseModel):
    first: str
    middle: Optional[str] = None
    last: str


class UserAddress(AddressValidatorMixin, BaseModel):
    city: str
    state: str
    country: str


class UserCreate(UserValidatorMixin, BaseModel):
    email: EmailStr
    password: str
    name: UserName
    phone: str
    address: UserAddress


class UserDB(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: UserName
    email: str
    is_admin: bool = False
    phone: Optional[str] = None
    address: Optional[UserAddress] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReviewAuthor(BaseModel):
    """Reviewer details attached to listed reviews."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[UserName] = None
    email: Optional[str] = None
