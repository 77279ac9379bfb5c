"""Payment management endpoints of the admin console."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response, status

from venuease.core.database.entities import Payment
from venuease.core.database.repositories import RepoBundle
from venuease.core.models.io import PaymentCreate, PaymentRead, PaymentUpdate
from venuease.server.services.deps import ReposDep

router = APIRouter(tags=["admin-payments"])


async def _get_payment_or_404(repos: RepoBundle, payment_id: int) -> Payment:
    payment = await repos.payments.get_by_id(payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Payment {payment_id} not found")
    return payment


@router.get("", response_model=List[PaymentRead], summary="List Payments")
async def list_payments(repos: ReposDep, booking_id: Optional[int] = None) -> List[PaymentRead]:
    """
    List payments, newest first.

    - **booking_id**: Only return payments recorded against this booking.
    """
    if booking_id is not None:
        payments = await repos.payments.list_for_booking(booking_id)
    else:
        payments = await repos.payments.list()
    return [PaymentRead.model_validate(p) for p in payments]


@router.post(
    "",
    response_model=PaymentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Payment",
    responses={400: {"description": "Unknown booking or invalid amount"}},
)
async def create_payment(payload: PaymentCreate, repos: ReposDep) -> PaymentRead:
    if await repos.bookings.get_by_id(payload.booking_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Booking {payload.booking_id} not found")
    payment = Payment(
        booking_id=payload.booking_id,
        amount=payload.amount,
        payment_method=payload.payment_method,
        payment_status=payload.payment_status.value,
        transaction_ref=payload.transaction_ref,
    )
    payment = await repos.payments.create(payment)
    return PaymentRead.model_validate(payment)


@router.get(
    "/{payment_id}",
    response_model=PaymentRead,
    summary="Get Payment",
    responses={404: {"description": "Payment not found"}},
)
async def get_payment(payment_id: int, repos: ReposDep) -> PaymentRead:
    return PaymentRead.model_validate(await _get_payment_or_404(repos, payment_id))


@router.put(
    "/{payment_id}",
    response_model=PaymentRead,
    summary="Update Payment",
    responses={404: {"description": "Payment not found"}},
)
async def update_payment(payment_id: int, payload: PaymentUpdate, repos: ReposDep) -> PaymentRead:
    payment = await _get_payment_or_404(repos, payment_id)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("payment_status") is not None:
        changes["payment_status"] = payload.payment_status.value
    payment = await repos.payments.update(payment, changes)
    return PaymentRead.model_validate(payment)


@router.delete(
    "/{payment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Payment",
    responses={404: {"description": "Payment not found"}},
)
async def delete_payment(payment_id: int, repos: ReposDep) -> Response:
    if not await repos.payments.delete(payment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Payment {payment_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
