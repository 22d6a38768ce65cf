"""Pydantic request/response schemas for the identity API.

These are external contracts, separate from internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterRequest(BaseModel):
    company_name: str = Field(min_length=1, max_length=255)
    contact_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=254)
    phone: str | None = None
    password: str = Field(min_length=1, max_length=255)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "company_name": "Harbor Bistro",
                    "contact_name": "Ava Brooks",
                    "email": "orders@harborbistro.com",
                    "phone": "555-0142",
                    "password": "s3cret-pass",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str
    password: str


class SendOtpRequest(BaseModel):
    email: str


class VerifyOtpRequest(BaseModel):
    email: str
    otp: str


class RefreshRequest(BaseModel):
    refresh_token: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserSchema(BaseModel):
    id: str
    company_name: str
    contact_name: str
    email: str
    phone: str | None = None
    is_email_verified: bool
    role: str


class TokensSchema(BaseModel):
    access_token: str
    refresh_token: str
    expires_at: datetime


class AuthResponse(BaseModel):
    user: UserSchema
    tokens: TokensSchema


class AddressSchema(BaseModel):
    id: str
    company_name: str
    street_address: str
    city: str
    state: str
    zip_code: str
    contact_name: str | None = None
    contact_phone: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"


def user_to_schema(user) -> UserSchema:
    return UserSchema(
        id=str(user.id),
        company_name=user.company_name,
        contact_name=user.contact_name,
        email=user.email,
        phone=user.phone,
        is_email_verified=user.is_email_verified,
        role=user.role,
    )


def auth_to_schema(authenticated) -> AuthResponse:
    session = authenticated.session
    return AuthResponse(
        user=user_to_schema(authenticated.user),
        tokens=TokensSchema(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
        ),
    )


def address_to_schema(address) -> AddressSchema:
    return AddressSchema(
        id=str(address.id),
        company_name=address.company_name,
        street_address=address.street_address,
        city=address.city,
        state=address.state,
        zip_code=address.zip_code,
        contact_name=address.contact_name,
        contact_phone=address.contact_phone,
    )
