"""
Company resolvers

Each resolver opens one session and performs a single ORM operation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import strawberry
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...database.connection import get_async_session
from ...dbmodels import COMPANY_FIELDS, Companies
from ...logging import get_logger, operation_context
from ..errors import CompanyNotFoundError
from ..rules import validate_company_arguments

if TYPE_CHECKING:
    from ..types.company import Company

logger = get_logger(__name__)

# The id column is a 32-bit INTEGER on PostgreSQL
MAX_PRIMARY_KEY = 2**31
ID_PATTERN = re.compile(r"[0-9]+")


def parse_company_id(id: strawberry.ID | str | int) -> int:
    """Parse a GraphQL ID into a primary key, failing as not found when it cannot match."""
    text = str(id)
    if not ID_PATTERN.fullmatch(text):
        raise CompanyNotFoundError()
    pk = int(text)
    if not 0 < pk < MAX_PRIMARY_KEY:
        raise CompanyNotFoundError()
    return pk


async def find_company_or_fail(session: AsyncSession, id: strawberry.ID | str | int) -> Companies:
    """Load a company by primary key or raise CompanyNotFoundError."""
    company = await session.get(Companies, parse_company_id(id))
    if company is None:
        logger.info("Company not found")
        raise CompanyNotFoundError()
    return company


# Query resolvers
async def resolve_company_by_id(info: strawberry.Info, id: strawberry.ID) -> Company:
    """Resolve a single company by its ID."""
    from ..types.company import Company as CompanyType

    with operation_context("company", company_id=str(id)):
        async with get_async_session() as session:
            company = await find_company_or_fail(session, id)
            return CompanyType.from_model(company)


async def resolve_companies(info: strawberry.Info) -> list[Company]:
    """Resolve every company, ordered by ID."""
    from ..types.company import Company as CompanyType

    async with get_async_session() as session:
        result = await session.execute(select(Companies).order_by(Companies.id.asc()))
        return [CompanyType.from_model(company) for company in result.scalars().all()]


# Mutation resolvers
async def create_company(info: strawberry.Info, **arguments: Any) -> Company:
    """Create a company from the six required fields."""
    from ..types.company import Company as CompanyType

    with operation_context("createCompany"):
        attributes = validate_company_arguments(**arguments)

        async with get_async_session() as session:
            company = Companies(**attributes)
            session.add(company)
            await session.commit()
            await session.refresh(company)

            logger.info("Company created", company_id=company.id, name=company.name)

            return CompanyType.from_model(company)


async def update_company(info: strawberry.Info, id: strawberry.ID, **arguments: Any) -> Company:
    """Overwrite all six fields of an existing company and return the refreshed row."""
    from ..types.company import Company as CompanyType

    with operation_context("updateCompany", company_id=str(id)):
        attributes = validate_company_arguments(**arguments)

        async with get_async_session() as session:
            company = await find_company_or_fail(session, id)

            for field in COMPANY_FIELDS:
                setattr(company, field, attributes[field])

            await session.commit()
            await session.refresh(company)

            logger.info("Company updated", updated_at=company.updated_at.isoformat())

            return CompanyType.from_model(company)


async def delete_company(info: strawberry.Info, id: strawberry.ID) -> bool:
    """Delete a company by ID."""
    with operation_context("deleteCompany", company_id=str(id)):
        async with get_async_session() as session:
            company = await find_company_or_fail(session, id)

            await session.delete(company)
            await session.commit()

            logger.info("Company deleted")

            return True
