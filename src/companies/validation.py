"""
Configuration validation for the Companies service.

Checks run at startup to make sure the service is usable before it
accepts traffic.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect

from .database import connection
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await connection.test_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


async def validate_companies_table() -> dict[str, Any]:
    """Check that migrations have created the companies table."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    engine = connection.get_async_engine()
    async with engine.connect() as conn:
        has_table = await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table("companies"))

    if not has_table:
        results["warnings"].append(
            "Table 'companies' does not exist; run 'companies-migrate upgrade'"
        )
        logger.warning("Companies table missing")

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """Run all startup validation checks and summarize the results."""
    database = await validate_database_connection()

    schema: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}
    if database["valid"]:
        schema = await validate_companies_table()

    overall_valid = database["valid"] and schema["valid"]

    logger.info(
        "Startup validation completed",
        overall_valid=overall_valid,
        warnings=len(database["warnings"]) + len(schema["warnings"]),
    )

    return {
        "overall_valid": overall_valid,
        "database": database,
        "schema": schema,
    }


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """Turn validation results into actionable recommendations."""
    recommendations: list[str] = []

    if not validation_results["database"]["valid"]:
        recommendations.append("Check COMPANIES_DATABASE_URL and that the database is running")

    recommendations.extend(validation_results["schema"]["warnings"])

    return recommendations
