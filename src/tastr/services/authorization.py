"""Ownership checks shared by every private operation."""

from tastr.domain.errors import ForbiddenError


def ensure_owner(caller_email: str, owner_email: str | None) -> None:
    """Raise ForbiddenError unless the caller is the resource owner."""
    if owner_email is None or caller_email != owner_email:
        raise ForbiddenError(caller_email, owner_email)
