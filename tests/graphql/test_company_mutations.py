"""
Unit tests for company mutation functions
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest

from companies.dbmodels import Companies
from companies.graphql.errors import CompanyNotFoundError, CompanyValidationError
from companies.graphql.resolvers.company import create_company, delete_company, update_company


@pytest.fixture
def company_arguments():
    return {
        "name": "Initech Solutions",
        "contact_email": "contact@initech.example",
        "street_address": "4120 Freidrich Lane",
        "city": "Austin",
        "country": "United States",
        "domain": "initech.example",
    }


@pytest.fixture
def sample_company():
    """Create a sample company row for testing."""
    company = MagicMock(spec=Companies)
    company.id = 11
    company.name = "Old Name"
    company.contact_email = "old@example.com"
    company.street_address = "Old Street 1"
    company.city = "Old City"
    company.country = "Old Country"
    company.domain = "old.example"
    company.created_at = datetime.now(UTC)
    company.updated_at = datetime.now(UTC)
    return company


class TestCreateCompany:
    """Tests for create_company mutation."""

    @pytest.mark.asyncio
    async def test_create_company_success(self, mock_info, mock_session, company_arguments):
        created_at = datetime.now(UTC)

        async def mock_refresh(company):
            company.id = 1
            company.created_at = created_at
            company.updated_at = created_at

        mock_session.refresh = mock_refresh

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            result = await create_company(mock_info, **company_arguments)

        assert result.id == "1"
        assert result.name == "Initech Solutions"
        assert result.domain == "initech.example"
        assert result.created_at == created_at

        mock_session.add.assert_called_once()
        added = mock_session.add.call_args.args[0]
        assert isinstance(added, Companies)
        assert added.contact_email == "contact@initech.example"
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_email_rejected_before_touching_database(
        self, mock_info, company_arguments
    ):
        company_arguments["contact_email"] = "not-an-email"

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            with pytest.raises(CompanyValidationError, match="contact_email"):
                await create_company(mock_info, **company_arguments)

            mock_get_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_field_rejected(self, mock_info, company_arguments):
        del company_arguments["domain"]

        with pytest.raises(CompanyValidationError, match="domain"):
            await create_company(mock_info, **company_arguments)


class TestUpdateCompany:
    """Tests for update_company mutation."""

    @pytest.mark.asyncio
    async def test_update_overwrites_every_field(
        self, mock_info, mock_session, sample_company, company_arguments
    ):
        mock_session.get.return_value = sample_company

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            result = await update_company(mock_info, "11", **company_arguments)

        for field, value in company_arguments.items():
            assert getattr(sample_company, field) == value
            assert getattr(result, field) == value
        assert result.id == "11"

        mock_session.get.assert_awaited_once_with(Companies, 11)
        mock_session.commit.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(sample_company)

    @pytest.mark.asyncio
    async def test_update_missing_company(self, mock_info, mock_session, company_arguments):
        mock_session.get.return_value = None

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            with pytest.raises(CompanyNotFoundError):
                await update_company(mock_info, "404", **company_arguments)

        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_validates_email(self, mock_info, company_arguments):
        company_arguments["contact_email"] = "two@@example.com"

        with pytest.raises(CompanyValidationError, match="Invalid email format"):
            await update_company(mock_info, "11", **company_arguments)


class TestDeleteCompany:
    """Tests for delete_company mutation."""

    @pytest.mark.asyncio
    async def test_delete_company_success(self, mock_info, mock_session, sample_company):
        mock_session.get.return_value = sample_company

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            assert await delete_company(mock_info, "11") is True

        mock_session.delete.assert_awaited_once_with(sample_company)
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_company(self, mock_info, mock_session):
        mock_session.get.return_value = None

        with patch("companies.graphql.resolvers.company.get_async_session") as mock_get_session:
            mock_get_session.return_value.__aenter__.return_value = mock_session

            with pytest.raises(CompanyNotFoundError):
                await delete_company(mock_info, "11")

        mock_session.delete.assert_not_awaited()
