"""
Tests for company query resolvers
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest
from structlog.contextvars import get_contextvars

from companies.dbmodels import Companies
from companies.graphql.errors import CompanyNotFoundError
from companies.graphql.resolvers.company import (
    parse_company_id,
    resolve_companies,
    resolve_company_by_id,
)


def make_company(id: int, name: str = "Acme Corporation") -> MagicMock:
    company = MagicMock(spec=Companies)
    company.id = id
    company.name = name
    company.contact_email = "hello@acme.example"
    company.street_address = "1 Roadrunner Way"
    company.city = "Phoenix"
    company.country = "United States"
    company.domain = "acme.example"
    company.created_at = datetime.now(UTC)
    company.updated_at = datetime.now(UTC)
    return company


class TestParseCompanyId:
    """Tests for parse_company_id."""

    def test_numeric_string(self):
        assert parse_company_id("42") == 42

    def test_integer(self):
        assert parse_company_id(7) == 7

    def test_largest_int4_key(self):
        assert parse_company_id(str(2**31 - 1)) == 2**31 - 1

    @pytest.mark.parametrize(
        "value",
        ["abc", "", "1.5", None, "0", "-3", "1_0", " 2 ", "+4", "\u0665", str(2**31), str(2**63)],
    )
    def test_unmatchable_ids_are_not_found(self, value):
        with pytest.raises(CompanyNotFoundError, match="Company not found"):
            parse_company_id(value)


class TestResolveCompanyById:
    """Tests for resolve_company_by_id."""

    @pytest.mark.asyncio
    async def test_existing_company(self, mock_info, mock_session):
        company = make_company(3)
        mock_session.get.return_value = company

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            result = await resolve_company_by_id(mock_info, "3")

        assert result.id == "3"
        assert result.name == "Acme Corporation"
        assert result.contact_email == "hello@acme.example"
        assert result.created_at == company.created_at
        mock_session.get.assert_awaited_once_with(Companies, 3)

    @pytest.mark.asyncio
    async def test_missing_company_raises(self, mock_info, mock_session):
        mock_session.get.return_value = None

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            with pytest.raises(CompanyNotFoundError):
                await resolve_company_by_id(mock_info, "999")

    @pytest.mark.asyncio
    async def test_lookup_logs_under_operation_context(self, mock_info, mock_session):
        seen = {}

        async def record_context(model, pk):
            seen.update(get_contextvars())
            return make_company(pk)

        mock_session.get.side_effect = record_context

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            await resolve_company_by_id(mock_info, "5")

        assert seen["graphql_operation"] == "company"
        assert seen["company_id"] == "5"
        assert "graphql_operation" not in get_contextvars()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("id", ["not-a-number", "1_0", " 2 "])
    async def test_malformed_id_never_queries(self, mock_info, mock_session, id):
        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            with pytest.raises(CompanyNotFoundError):
                await resolve_company_by_id(mock_info, id)

        mock_session.get.assert_not_awaited()


class TestResolveCompanies:
    """Tests for resolve_companies."""

    @pytest.mark.asyncio
    async def test_returns_all_rows(self, mock_info, mock_session):
        rows = [make_company(1, "Acme Corporation"), make_company(2, "Globex Industries")]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_session.execute.return_value = mock_result

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            result = await resolve_companies(mock_info)

        assert [c.id for c in result] == ["1", "2"]
        assert [c.name for c in result] == ["Acme Corporation", "Globex Industries"]

    @pytest.mark.asyncio
    async def test_empty_table(self, mock_info, mock_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_session.execute.return_value = mock_result

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            assert await resolve_companies(mock_info) == []
