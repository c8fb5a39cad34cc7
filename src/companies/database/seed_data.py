"""
Reusable seed data functions for database initialization.

Provides a fixed set of sample companies for local development and demos.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Companies
from ..logging import get_logger

logger = get_logger(__name__)

SAMPLE_COMPANIES: list[dict[str, Any]] = [
    {
        "name": "Acme Corporation",
        "contact_email": "hello@acme.example",
        "street_address": "1 Roadrunner Way",
        "city": "Phoenix",
        "country": "United States",
        "domain": "acme.example",
    },
    {
        "name": "Globex Industries",
        "contact_email": "info@globex.example",
        "street_address": "42 Cypress Creek Road",
        "city": "Springfield",
        "country": "United States",
        "domain": "globex.example",
    },
    {
        "name": "Initech Solutions",
        "contact_email": "contact@initech.example",
        "street_address": "4120 Freidrich Lane",
        "city": "Austin",
        "country": "United States",
        "domain": "initech.example",
    },
    {
        "name": "Umbrella Logistics",
        "contact_email": "office@umbrella.example",
        "street_address": "17 Raccoon Street",
        "city": "Toronto",
        "country": "Canada",
        "domain": "umbrella.example",
    },
    {
        "name": "Stark Manufacturing",
        "contact_email": "partners@stark.example",
        "street_address": "200 Park Avenue",
        "city": "New York",
        "country": "United States",
        "domain": "stark.example",
    },
    {
        "name": "Wayne Holdings",
        "contact_email": "enquiries@wayne.example",
        "street_address": "1007 Mountain Drive",
        "city": "London",
        "country": "United Kingdom",
        "domain": "wayne.example",
    },
    {
        "name": "Tyrell Systems",
        "contact_email": "support@tyrell.example",
        "street_address": "88 Harbour Road",
        "city": "Sydney",
        "country": "Australia",
        "domain": "tyrell.example",
    },
    {
        "name": "Soylent Foods",
        "contact_email": "sales@soylent.example",
        "street_address": "9 Rue de la Paix",
        "city": "Paris",
        "country": "France",
        "domain": "soylent.example",
    },
]


async def seed_companies(db: AsyncSession, count: int | None = None) -> list[Companies]:
    """
    Insert sample companies that are not already present.

    Companies are matched by name, so running the seed twice does not
    create duplicates.

    Args:
        db: Database session
        count: Number of sample companies to consider (defaults to all)

    Returns:
        The newly created companies
    """
    samples = SAMPLE_COMPANIES if count is None else SAMPLE_COMPANIES[: max(count, 0)]
    if not samples:
        return []

    stmt = select(Companies.name).where(Companies.name.in_([s["name"] for s in samples]))
    result = await db.execute(stmt)
    existing = set(result.scalars().all())

    created = [Companies(**sample) for sample in samples if sample["name"] not in existing]
    if not created:
        logger.debug("Sample companies already present", count=len(samples))
        return []

    db.add_all(created)
    await db.commit()

    logger.info(
        "Seeded sample companies",
        created=len(created),
        skipped=len(samples) - len(created),
    )
    return created
