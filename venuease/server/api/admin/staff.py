"""
Staff account management endpoints of the admin console.

Staff accounts live in the ``admin`` table. Passwords are hashed on create
and on update; the hash is never returned.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError

from venuease.core.database.entities import Admin
from venuease.core.logging_config import get_logger
from venuease.core.models.io import StaffCreate, StaffRead, StaffUpdate
from venuease.core.security import hash_password
from venuease.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["admin-staff"])

# The console's "create staff" form posts to /api/admin/create
create_alias_router = APIRouter(tags=["admin-staff"])

DUPLICATE_EMAIL = "Staff already exists with this email"


async def _get_staff_or_404(repos: ReposDep, admin_id: int) -> Admin:
    admin = await repos.staff.get_by_id(admin_id)
    if admin is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Staff {admin_id} not found")
    return admin


@router.get("", response_model=List[StaffRead], summary="List Staff")
async def list_staff(repos: ReposDep) -> List[StaffRead]:
    """List staff accounts grouped by role, newest first within a role."""
    return [StaffRead.model_validate(a) for a in await repos.staff.list()]


@router.post(
    "",
    response_model=StaffRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Staff",
    responses={400: {"description": "Invalid data or email already registered"}},
)
async def create_staff(payload: StaffCreate, repos: ReposDep) -> StaffRead:
    """
    Create a staff account.

    - **full_name**: Staff member full name.
    - **email**: Login email, unique across staff accounts.
    - **password**: Plain-text password, stored hashed.
    - **role**: One of admin, manager or staff.
    """
    if await repos.staff.get_by_email(payload.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_EMAIL)

    admin = Admin(
        full_name=payload.full_name,
        email=payload.email,
        role=payload.role.value,
        password_hash=hash_password(payload.password),
    )
    try:
        admin = await repos.staff.create(admin)
    except IntegrityError as e:
        await repos.staff.session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_EMAIL) from e

    logger.info(f"Created staff account {admin.admin_id} with role {admin.role}")
    return StaffRead.model_validate(admin)


create_alias_router.add_api_route(
    "/create",
    create_staff,
    methods=["POST"],
    response_model=StaffRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)


@router.get(
    "/{admin_id}",
    response_model=StaffRead,
    summary="Get Staff",
    responses={404: {"description": "Staff not found"}},
)
async def get_staff(admin_id: int, repos: ReposDep) -> StaffRead:
    return StaffRead.model_validate(await _get_staff_or_404(repos, admin_id))


@router.put(
    "/{admin_id}",
    response_model=StaffRead,
    summary="Update Staff",
    responses={
        400: {"description": "Email already used by another account"},
        404: {"description": "Staff not found"},
    },
)
async def update_staff(admin_id: int, payload: StaffUpdate, repos: ReposDep) -> StaffRead:
    """
    Update a staff account.

    Only the fields present in the request body are changed. A new password
    replaces the stored hash.
    """
    admin = await _get_staff_or_404(repos, admin_id)
    changes = payload.model_dump(exclude_unset=True)

    new_email = changes.get("email")
    if new_email and new_email != admin.email:
        other = await repos.staff.get_by_email(new_email)
        if other is not None and other.admin_id != admin_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_EMAIL)

    password = changes.pop("password", None)
    if password:
        changes["password_hash"] = hash_password(password)
    if changes.get("role") is not None:
        changes["role"] = payload.role.value

    try:
        admin = await repos.staff.update(admin, changes)
    except IntegrityError as e:
        await repos.staff.session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_EMAIL) from e
    return StaffRead.model_validate(admin)


@router.delete(
    "/{admin_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Staff",
    responses={404: {"description": "Staff not found"}},
)
async def delete_staff(admin_id: int, repos: ReposDep) -> Response:
    if not await repos.staff.delete(admin_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Staff {admin_id} not found")
    logger.info(f"Deleted staff account {admin_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
