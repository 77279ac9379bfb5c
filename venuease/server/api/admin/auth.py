"""Staff login for the admin console."""

from fastapi import APIRouter, HTTPException, status

from venuease.core.logging_config import get_logger
from venuease.core.models.domain.enums import UserType
from venuease.core.models.io import LoginRequest, LoginResponse, UserProfile
from venuease.core.security import verify_password
from venuease.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["admin-auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Staff Login",
    responses={400: {"description": "Invalid credentials or inactive account"}},
)
async def login_staff(credentials: LoginRequest, repos: ReposDep) -> LoginResponse:
    """
    Verify staff credentials and return the staff profile.

    The profile carries the staff role (admin, manager or staff) so the
    console can decide which sections to show.
    """
    admin = await repos.staff.get_by_email(credentials.email)
    if admin is None or not admin.is_active or not verify_password(credentials.password, admin.password_hash):
        logger.info(f"Rejected staff login for {credentials.email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email or password")

    return LoginResponse(
        user=UserProfile(
            user_id=admin.admin_id,
            full_name=admin.full_name,
            email=admin.email,
            role=admin.role,
            user_type=UserType.admin,
        )
    )
