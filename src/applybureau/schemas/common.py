"""Reusable field types and base classes for request schemas."""

import re
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

NAME_PATTERN = r"^[a-zA-Z\s'-]+$"
SALARY_RANGE_PATTERN = r"^\$?\d{1,3}(,?\d{3})*\s*-\s*\$?\d{1,3}(,?\d{3})*$"
TIME_OF_DAY_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
STRONG_PASSWORD_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]"


class StrictSchema(BaseModel):
    """Base for request bodies.

    Undeclared fields are silently dropped, strings are trimmed before any
    length or pattern check, and enum members are stored as plain values so
    the validated model can be handed straight to the ORM.
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        use_enum_values=True,
    )


def matches(pattern: str, code: str, message: str) -> AfterValidator:
    """Build a validator that rejects strings not matching ``pattern``."""
    regex = re.compile(pattern)

    def check(value: str) -> str:
        if not regex.match(value):
            raise PydanticCustomError(code, message)
        return value

    return AfterValidator(check)


_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    # Empty string is an accepted "no URL" marker
    if value == "":
        return value
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("invalid_url", "Invalid URL")
    return value


def _lower(value: str) -> str:
    return value.lower()


Email = Annotated[EmailStr, AfterValidator(_lower)]

PersonName = Annotated[
    str,
    StringConstraints(min_length=2, max_length=100),
    matches(
        NAME_PATTERN,
        "invalid_name",
        "Name can only contain letters, spaces, hyphens, and apostrophes",
    ),
]

SalaryRange = Annotated[
    str,
    StringConstraints(min_length=5, max_length=50),
    matches(SALARY_RANGE_PATTERN, "invalid_salary_range", "Invalid salary range format"),
]

TimeOfDay = Annotated[
    str,
    matches(TIME_OF_DAY_PATTERN, "invalid_time", "Invalid time format"),
]

Password = Annotated[
    str,
    StringConstraints(strip_whitespace=False, min_length=8),
]

StrongPassword = Annotated[
    Password,
    matches(
        STRONG_PASSWORD_PATTERN,
        "weak_password",
        "Password must contain uppercase, lowercase, number, and special character",
    ),
]

UrlOrEmpty = Annotated[str, StringConstraints(max_length=2048), AfterValidator(_check_url)]

Rating = Annotated[int, Field(ge=1, le=10)]


ShortText = Annotated[str, StringConstraints(min_length=2, max_length=100)]
