"""FastAPI endpoints for the checkout payment steps."""

from fastapi import APIRouter, Depends

from breadboard.errors import PaymentError
from breadboard.identity.api.dependencies import current_user_id
from breadboard.payments.api.schemas import (
    ConfirmPaymentRequest,
    CreateIntentRequest,
    PaymentConfirmationSchema,
    PaymentIntentSchema,
)
from breadboard.payments.checkout import confirm_payment, create_payment_intent
from breadboard.shared.faults import FaultProfile, fault_point

router = APIRouter(prefix="/payments", tags=["payments"])

_PAYMENT_SERVICE_FAULTS = FaultProfile(server_error=True, server_error_cls=PaymentError)


@router.post(
    "/intents",
    status_code=201,
    response_model=PaymentIntentSchema,
    dependencies=[Depends(current_user_id), Depends(fault_point("payments.intent", _PAYMENT_SERVICE_FAULTS))],
)
async def create_intent(body: CreateIntentRequest) -> PaymentIntentSchema:
    intent = create_payment_intent(body.amount, body.currency)
    return PaymentIntentSchema(client_secret=intent.client_secret, amount=intent.amount, currency=intent.currency)


@router.post(
    "/confirm",
    response_model=PaymentConfirmationSchema,
    dependencies=[Depends(current_user_id), Depends(fault_point("payments.confirm"))],
)
async def confirm(body: ConfirmPaymentRequest) -> PaymentConfirmationSchema:
    reference = confirm_payment(body.client_secret)
    return PaymentConfirmationSchema(success=True, payment_reference=reference)
