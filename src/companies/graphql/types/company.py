"""
Company GraphQL type definitions
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Companies


@strawberry.type(description="A company and its headquarters")
class Company:
    """Company type for GraphQL API."""

    id: strawberry.ID = strawberry.field(description="The auto incremented ID of a company")
    name: str = strawberry.field(description="The name of a company")
    contact_email: str = strawberry.field(
        description="The primary point of contact for a company"
    )
    street_address: str = strawberry.field(
        description="The street address of a company headquarters"
    )
    city: str = strawberry.field(description="The city of a company headquarters")
    country: str = strawberry.field(description="The country of a company headquarters")
    domain: str = strawberry.field(description="The web domain for a company")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, company: Companies) -> Company:
        """Convert a SQLAlchemy row to the GraphQL type."""
        return cls(
            id=strawberry.ID(str(company.id)),
            name=company.name,
            contact_email=company.contact_email,
            street_address=company.street_address,
            city=company.city,
            country=company.country,
            domain=company.domain,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )
