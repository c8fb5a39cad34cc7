"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.company import Company

# Argument types for the six company fields
Name = Annotated[str, strawberry.argument(description="The name of a company")]
ContactEmail = Annotated[
    str, strawberry.argument(description="The primary point of contact for a company")
]
StreetAddress = Annotated[
    str, strawberry.argument(description="The street address of a company headquarters")
]
City = Annotated[str, strawberry.argument(description="The city of a company headquarters")]
Country = Annotated[str, strawberry.argument(description="The country of a company headquarters")]
Domain = Annotated[str, strawberry.argument(description="The web domain for a company")]


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createCompany")
    async def create_company(
        self,
        info: strawberry.Info,
        name: Name,
        contact_email: ContactEmail,
        street_address: StreetAddress,
        city: City,
        country: Country,
        domain: Domain,
    ) -> Company:
        """Create a new company."""
        from ..resolvers.company import create_company

        return await create_company(
            info,
            name=name,
            contact_email=contact_email,
            street_address=street_address,
            city=city,
            country=country,
            domain=domain,
        )

    @strawberry.mutation(name="updateCompany")
    async def update_company(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: Name,
        contact_email: ContactEmail,
        street_address: StreetAddress,
        city: City,
        country: Country,
        domain: Domain,
    ) -> Company:
        """Overwrite an existing company."""
        from ..resolvers.company import update_company

        return await update_company(
            info,
            id,
            name=name,
            contact_email=contact_email,
            street_address=street_address,
            city=city,
            country=country,
            domain=domain,
        )

    @strawberry.mutation(name="deleteCompany")
    async def delete_company(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a company."""
        from ..resolvers.company import delete_company

        return await delete_company(info, id)
