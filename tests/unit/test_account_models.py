"""
Unit tests for account request models.
"""

from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from services.bbbee_scoring.engine.scorecards import Sector
from services.bbbee_scoring.models.account import (
    ProfileUpdate,
    SignupRequest,
    parse_financial_year_end,
)


class TestFinancialYearEnd:
    """Tests for DD/MMM/YYYY parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("31/Mar/2025", date(2025, 3, 31)),
            ("28/feb/2025", date(2025, 2, 28)),
            ("29/FEB/2024", date(2024, 2, 29)),
            ("01/Dec/1900", date(1900, 12, 1)),
        ],
    )
    def test_valid_dates(self, value: str, expected: date) -> None:
        """Test that well-formed calendar dates parse."""
        assert parse_financial_year_end(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["2025-03-31", "31/03/2025", "1/Mar/2025", "31/March/2025", "31/Mar/25", ""],
    )
    def test_wrong_format(self, value: str) -> None:
        """Test that other layouts are rejected."""
        with pytest.raises(ValueError, match="DD/MMM/YYYY"):
            parse_financial_year_end(value)

    @pytest.mark.parametrize("value", ["31/Feb/2025", "29/Feb/2025", "32/Jan/2025", "15/Foo/2025", "01/Jan/1899"])
    def test_impossible_dates(self, value: str) -> None:
        """Test that well-formed but invalid dates are rejected."""
        with pytest.raises(ValueError, match="Invalid date value"):
            parse_financial_year_end(value)


class TestSignupRequest:
    """Tests for the signup model."""

    def test_valid(self, sample_signup_data: dict[str, Any]) -> None:
        """Test a complete signup payload."""
        request = SignupRequest.model_validate(sample_signup_data)

        assert request.financial_year_end == date(2025, 2, 28)
        assert request.sector is Sector.CONSTRUCTION

    def test_sector_optional(self, sample_signup_data: dict[str, Any]) -> None:
        """Test that sector may be omitted at signup."""
        del sample_signup_data["sector"]

        assert SignupRequest.model_validate(sample_signup_data).sector is None

    def test_invalid_financial_year_end(self, sample_signup_data: dict[str, Any]) -> None:
        """Test that a bad date fails validation."""
        sample_signup_data["financial_year_end"] = "2025-02-28"

        with pytest.raises(ValidationError):
            SignupRequest.model_validate(sample_signup_data)

    def test_invalid_email(self, sample_signup_data: dict[str, Any]) -> None:
        """Test that the business email must be an address."""
        sample_signup_data["email"] = "not-an-email"

        with pytest.raises(ValidationError):
            SignupRequest.model_validate(sample_signup_data)


class TestProfileUpdate:
    """Tests for the profile update model."""

    def test_requires_both_fields(self) -> None:
        """Test that business name and sector are both required."""
        with pytest.raises(ValidationError):
            ProfileUpdate.model_validate({"business_name": "Thando Build"})

    def test_rejects_unknown_sector(self) -> None:
        """Test that profile sectors must be published sectors."""
        with pytest.raises(ValidationError):
            ProfileUpdate.model_validate({"business_name": "Thando Build", "sector": "Mining"})
