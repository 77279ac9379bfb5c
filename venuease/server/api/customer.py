"""
Customer account endpoints of the booking site.

Self-registration and credential check. No session or token is issued;
the client keeps the returned profile.
"""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import IntegrityError

from venuease.core.database.entities import Customer
from venuease.core.logging_config import get_logger
from venuease.core.models.domain.enums import UserType
from venuease.core.models.io import (
    CustomerRegister,
    CustomerRegistered,
    LoginRequest,
    LoginResponse,
    UserProfile,
)
from venuease.core.security import hash_password, verify_password
from venuease.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["customer"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post(
    "/register",
    response_model=CustomerRegistered,
    status_code=status.HTTP_201_CREATED,
    summary="Register Customer",
    responses={400: {"description": "Missing fields or email already registered"}},
)
async def register_customer(payload: CustomerRegister, repos: ReposDep) -> CustomerRegistered:
    """
    Register a new customer account.

    The email must not be registered yet. The password is stored hashed.
    """
    if await repos.customers.get_by_email(payload.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customer already exists with this email",
        )

    customer = Customer(
        full_name=payload.full_name,
        email=payload.email,
        phone=payload.phone,
        password_hash=hash_password(payload.password),
    )
    try:
        customer = await repos.customers.create(customer)
    except IntegrityError as e:
        await repos.customers.session.rollback()
        logger.info(f"Concurrent registration for {payload.email} rejected: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customer already exists with this email",
        ) from e

    logger.info(f"Registered customer {customer.customer_id}")
    return CustomerRegistered(
        message="Customer registered successfully",
        customer_id=customer.customer_id,
        full_name=customer.full_name,
        email=customer.email,
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Customer Login",
    responses={400: {"description": "Invalid credentials or inactive account"}},
)
async def login_customer(credentials: LoginRequest, repos: ReposDep) -> LoginResponse:
    """Verify customer credentials and return the customer profile."""
    customer = await repos.customers.get_by_email(credentials.email)
    if customer is None or not customer.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)
    if not verify_password(credentials.password, customer.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)

    return LoginResponse(
        user=UserProfile(
            user_id=customer.customer_id,
            full_name=customer.full_name,
            email=customer.email,
            phone=customer.phone,
            role=UserType.customer.value,
            user_type=UserType.customer,
        )
    )
