"""Authentication request schemas."""

from typing import Annotated

from pydantic import StringConstraints

from applybureau.schemas.common import Email, Password, PersonName, StrictSchema, StrongPassword


class LoginRequest(StrictSchema):
    """Credentials for password login."""

    email: Email
    password: Password


class InviteRequest(StrictSchema):
    """Staff invitation of a new client."""

    email: Email
    full_name: PersonName


class CompleteRegistrationRequest(StrictSchema):
    """Invited client finishing registration."""

    token: Annotated[str, StringConstraints(strip_whitespace=False, min_length=10)]
    password: StrongPassword
    full_name: PersonName | None = None
