from typing import Generic, List, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from contact_api import config

T = TypeVar("T")

# SQLite INTEGER is a signed 64-bit value
MAX_ID = 2 ** 63 - 1
MAX_PAGE = MAX_ID // config.MAX_PAGE_SIZE


class FieldError(BaseModel):
    field: str
    message: str


class Paging(BaseModel):
    current_page: int
    total_page: int
    size: int


class WebResponse(BaseModel, Generic[T]):
    data: T


class PageResponse(BaseModel, Generic[T]):
    data: List[T]
    paging: Paging


# users

class RegisterUserRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)


class LoginUserRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=1, max_length=100)


class UserResponse(BaseModel):
    username: str
    name: str

    class Config:
        from_attributes = True


class LoginResponse(UserResponse):
    token: str


# contacts

class ContactBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=20)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"value is not a valid email address: {exc}")
        return value


class CreateContactRequest(ContactBase):
    pass


class UpdateContactRequest(ContactBase):
    id: int = Field(gt=0, le=MAX_ID)


class SearchContactRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=20)
    page: int = Field(config.DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    size: int = Field(config.DEFAULT_PAGE_SIZE, ge=1)

    @field_validator("size")
    @classmethod
    def size_within_limit(cls, value: int) -> int:
        if value <= config.MAX_PAGE_SIZE:
            return value
        if config.PAGE_SIZE_POLICY == "cap":
            return config.MAX_PAGE_SIZE
        raise ValueError(f"Input should be less than or equal to {config.MAX_PAGE_SIZE}")


class ContactResponse(BaseModel):
    id: int
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


# addresses

class AddressBase(BaseModel):
    street: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    province: Optional[str] = Field(None, min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class CreateAddressRequest(AddressBase):
    contact_id: int = Field(gt=0, le=MAX_ID)


class UpdateAddressRequest(AddressBase):
    id: int = Field(gt=0, le=MAX_ID)
    contact_id: int = Field(gt=0, le=MAX_ID)


class AddressResponse(BaseModel):
    id: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: str
    postal_code: str

    class Config:
        from_attributes = True
