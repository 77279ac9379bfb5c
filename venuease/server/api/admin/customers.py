"""
Customer management endpoints of the admin console.

Staff can list, inspect, edit, (de)activate and delete customer accounts.
Passwords are never returned or changed here.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError

from venuease.core.database.entities import Customer
from venuease.core.logging_config import get_logger
from venuease.core.models.io import CustomerRead, CustomerStatusUpdate, CustomerUpdate
from venuease.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["admin-customers"])


async def _get_customer_or_404(repos: ReposDep, customer_id: int) -> Customer:
    customer = await repos.customers.get_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer {customer_id} not found")
    return customer


@router.get("", response_model=List[CustomerRead], summary="List Customers")
async def list_customers(repos: ReposDep, limit: int = 100, offset: int = 0) -> List[CustomerRead]:
    """
    List customer accounts, newest first.

    - **limit**: Maximum number of customers to return.
    - **offset**: Number of customers to skip.
    """
    customers = await repos.customers.list(limit=limit, offset=offset)
    return [CustomerRead.model_validate(c) for c in customers]


@router.get(
    "/{customer_id}",
    response_model=CustomerRead,
    summary="Get Customer",
    responses={404: {"description": "Customer not found"}},
)
async def get_customer(customer_id: int, repos: ReposDep) -> CustomerRead:
    customer = await _get_customer_or_404(repos, customer_id)
    return CustomerRead.model_validate(customer)


@router.put(
    "/{customer_id}",
    response_model=CustomerRead,
    summary="Update Customer",
    responses={
        400: {"description": "Email already used by another customer"},
        404: {"description": "Customer not found"},
    },
)
async def update_customer(customer_id: int, payload: CustomerUpdate, repos: ReposDep) -> CustomerRead:
    """
    Update a customer's profile fields.

    Only the fields present in the request body are changed.
    """
    customer = await _get_customer_or_404(repos, customer_id)
    changes = payload.model_dump(exclude_unset=True)

    new_email = changes.get("email")
    if new_email and new_email != customer.email:
        other = await repos.customers.get_by_email(new_email)
        if other is not None and other.customer_id != customer_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Customer already exists with this email",
            )

    try:
        customer = await repos.customers.update(customer, changes)
    except IntegrityError as e:
        await repos.customers.session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Customer update rejected") from e
    return CustomerRead.model_validate(customer)


@router.put(
    "/{customer_id}/status",
    response_model=CustomerRead,
    summary="Set Customer Status",
    responses={404: {"description": "Customer not found"}},
)
async def set_customer_status(customer_id: int, payload: CustomerStatusUpdate, repos: ReposDep) -> CustomerRead:
    """Activate or deactivate a customer. Inactive customers cannot log in."""
    customer = await _get_customer_or_404(repos, customer_id)
    customer = await repos.customers.set_active(customer, payload.is_active)
    logger.info(f"Customer {customer_id} is_active set to {payload.is_active}")
    return CustomerRead.model_validate(customer)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Customer",
    responses={
        400: {"description": "Customer still has bookings"},
        404: {"description": "Customer not found"},
    },
)
async def delete_customer(customer_id: int, repos: ReposDep) -> Response:
    try:
        deleted = await repos.customers.delete(customer_id)
    except IntegrityError as e:
        await repos.customers.session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Customer {customer_id} still has bookings",
        ) from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer {customer_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
