"""Pydantic request/response schemas for the payments API."""

from pydantic import BaseModel, Field


class CreateIntentRequest(BaseModel):
    amount: float = Field(gt=0)
    currency: str = "usd"


class PaymentIntentSchema(BaseModel):
    client_secret: str
    amount: float
    currency: str


class ConfirmPaymentRequest(BaseModel):
    client_secret: str


class PaymentConfirmationSchema(BaseModel):
    success: bool
    payment_reference: str
