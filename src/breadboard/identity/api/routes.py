"""FastAPI endpoints for accounts, sessions and delivery addresses."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from breadboard.identity.access import require_user
from breadboard.identity.address import list_addresses
from breadboard.identity.api.dependencies import bearer_token, current_user_id
from breadboard.identity.api.schemas import (
    AddressSchema,
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    SendOtpRequest,
    StatusResponse,
    UserSchema,
    VerifyOtpRequest,
    address_to_schema,
    auth_to_schema,
    user_to_schema,
)
from breadboard.identity.authentication import Login, Logout, RefreshSession
from breadboard.identity.registration import RegisterUser
from breadboard.identity.verification import SendOtp, VerifyOtp
from breadboard.shared.faults import RATE_LIMIT_AND_SERVER_ERROR, fault_point

# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post(
    "/register",
    status_code=201,
    response_model=AuthResponse,
    dependencies=[Depends(fault_point("auth.register", RATE_LIMIT_AND_SERVER_ERROR))],
)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(
        company_name=body.company_name,
        contact_name=body.contact_name,
        email=body.email,
        phone=body.phone,
        password=body.password,
    )
    result = current_domain.process(command, asynchronous=False)
    return auth_to_schema(result)


@auth_router.post(
    "/login",
    response_model=AuthResponse,
    dependencies=[Depends(fault_point("auth.login", RATE_LIMIT_AND_SERVER_ERROR))],
)
async def login(body: LoginRequest) -> AuthResponse:
    result = current_domain.process(Login(email=body.email, password=body.password), asynchronous=False)
    return auth_to_schema(result)


@auth_router.post(
    "/otp/send",
    response_model=StatusResponse,
    dependencies=[Depends(fault_point("auth.send_otp"))],
)
async def send_otp(body: SendOtpRequest) -> StatusResponse:
    current_domain.process(SendOtp(email=body.email), asynchronous=False)
    return StatusResponse()


@auth_router.post(
    "/otp/verify",
    response_model=AuthResponse,
    dependencies=[Depends(fault_point("auth.verify_otp"))],
)
async def verify_otp(body: VerifyOtpRequest) -> AuthResponse:
    result = current_domain.process(VerifyOtp(email=body.email, otp=body.otp), asynchronous=False)
    return auth_to_schema(result)


@auth_router.post(
    "/refresh",
    response_model=AuthResponse,
    dependencies=[Depends(fault_point("auth.refresh"))],
)
async def refresh(body: RefreshRequest) -> AuthResponse:
    result = current_domain.process(RefreshSession(refresh_token=body.refresh_token), asynchronous=False)
    return auth_to_schema(result)


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(access_token: str = Depends(bearer_token)) -> StatusResponse:
    current_domain.process(Logout(access_token=access_token), asynchronous=False)
    return StatusResponse()


@auth_router.get("/me", response_model=UserSchema)
async def me(user_id: str = Depends(current_user_id)) -> UserSchema:
    return user_to_schema(require_user(user_id))


# ---------------------------------------------------------------------------
# Address Router
# ---------------------------------------------------------------------------
address_router = APIRouter(prefix="/addresses", tags=["addresses"])


@address_router.get(
    "",
    response_model=list[AddressSchema],
    dependencies=[Depends(fault_point("addresses.list"))],
)
async def get_addresses(user_id: str = Depends(current_user_id)) -> list[AddressSchema]:
    require_user(user_id)
    return [address_to_schema(address) for address in list_addresses()]
