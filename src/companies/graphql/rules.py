"""
Field rules for company mutation arguments
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..dbmodels import COMPANY_FIELDS
from .errors import CompanyValidationError

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class CompanyAttributes(BaseModel):
    """The six client-supplied fields of a company."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., max_length=255, description="The name of a company")
    contact_email: str = Field(
        ..., max_length=255, description="The primary point of contact for a company"
    )
    street_address: str = Field(
        ..., max_length=255, description="The street address of a company headquarters"
    )
    city: str = Field(..., max_length=255, description="The city of a company headquarters")
    country: str = Field(..., max_length=255, description="The country of a company headquarters")
    domain: str = Field(..., max_length=255, description="The web domain for a company")

    @field_validator("contact_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("Invalid email format")
        return v


def validate_company_arguments(**arguments: Any) -> dict[str, str]:
    """
    Check mutation arguments against the company field rules.

    Returns:
        The validated fields, ready to pass to the ORM

    Raises:
        CompanyValidationError: naming each offending field
    """
    try:
        attributes = CompanyAttributes(**arguments)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise CompanyValidationError(f"Invalid company arguments: {problems}") from e

    return {field: getattr(attributes, field) for field in COMPANY_FIELDS}
