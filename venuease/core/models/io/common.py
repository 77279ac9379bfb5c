"""Shared validators and error schema for the I/O models."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Trim and lowercase an email address, rejecting obviously malformed ones."""
    if value is None:
        return None
    email = value.strip().lower()
    local, _, domain = email.partition("@")
    if not local or "." not in domain or " " in email:
        raise ValueError("Invalid email address")
    return email


EmailAddress = Annotated[str, AfterValidator(normalize_email)]


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str = Field(description="Human-readable error message")
