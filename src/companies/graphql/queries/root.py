"""
Root GraphQL query definitions
"""

import strawberry

from ..types.company import Company


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def company(self, info: strawberry.Info, id: strawberry.ID) -> Company:
        """Get a company by ID, failing when it does not exist."""
        from ..resolvers.company import resolve_company_by_id

        return await resolve_company_by_id(info, id)

    @strawberry.field
    async def companies(self, info: strawberry.Info) -> list[Company]:
        """Get all companies."""
        from ..resolvers.company import resolve_companies

        return await resolve_companies(info)
