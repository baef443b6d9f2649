"""Tests for donation field validation."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from givingcircle.domain.entities import Donation, Frequency
from givingcircle.domain.errors import InvalidInputError
from givingcircle.domain.validation import (
    merge_fields,
    normalize_keys,
    parse_amount_value,
    parse_date_value,
    parse_frequency_value,
    validate_fields,
)


class TestAmount:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (100, Decimal("100.00")),
            ("25.5", Decimal("25.50")),
            (Decimal("19.99"), Decimal("19.99")),
            (0.1, Decimal("0.10")),
            ("10.005", Decimal("10.01")),
        ],
    )
    def test_valid_amounts_round_to_cents(self, value, expected):
        assert parse_amount_value(value) == expected

    @pytest.mark.parametrize("value", [0, -5, "-0.01", "0.004", "ten", "", True, [], float("inf")])
    def test_invalid_amounts(self, value):
        with pytest.raises(InvalidInputError):
            parse_amount_value(value)


class TestDate:
    def test_iso_string(self):
        assert parse_date_value("2023-12-15") == date(2023, 12, 15)

    def test_date_and_datetime(self):
        assert parse_date_value(date(2024, 1, 2)) == date(2024, 1, 2)
        assert parse_date_value(datetime(2024, 1, 2, 9, 30)) == date(2024, 1, 2)

    @pytest.mark.parametrize("value", ["12/15/2023", "2023-13-01", "yesterday", 20231215])
    def test_invalid_dates(self, value):
        with pytest.raises(InvalidInputError):
            parse_date_value(value)


class TestFrequency:
    @pytest.mark.parametrize("value", ["one-time", "MONTHLY", " annual ", Frequency.MONTHLY])
    def test_valid(self, value):
        assert isinstance(parse_frequency_value(value), Frequency)

    @pytest.mark.parametrize("value", ["weekly", "onetime", None, 1])
    def test_invalid(self, value):
        with pytest.raises(InvalidInputError):
            parse_frequency_value(value)


class TestValidateFields:
    def test_reports_all_missing_fields(self):
        with pytest.raises(InvalidInputError) as excinfo:
            validate_fields({"amount": 10})
        message = str(excinfo.value)
        assert "organization_name" in message
        assert "date" in message
        assert "frequency" in message

    def test_strips_text_and_blanks_become_none(self):
        fields = validate_fields(
            {
                "amount": 10,
                "organizationName": "  Red Cross ",
                "date": "2024-01-01",
                "frequency": "monthly",
                "category": "   ",
                "notes": " thanks ",
            }
        )
        assert fields.organization_name == "Red Cross"
        assert fields.category is None
        assert fields.notes == "thanks"

    def test_unknown_keys_rejected(self):
        with pytest.raises(InvalidInputError, match="Unknown"):
            normalize_keys({"amount": 1, "recipient": "x"})

    def test_non_text_category_rejected(self):
        with pytest.raises(InvalidInputError):
            validate_fields(
                {
                    "amount": 10,
                    "organizationName": "Red Cross",
                    "date": "2024-01-01",
                    "frequency": "monthly",
                    "category": 5,
                }
            )


def test_merge_fields_overlays_partial_update():
    existing = Donation(
        id="d1",
        user_id="u1",
        amount=Decimal("100.00"),
        organization_name="Red Cross",
        date=date(2023, 12, 15),
        frequency=Frequency.ONE_TIME,
        category="Disaster Relief",
        notes=None,
    )

    merged = merge_fields(existing, {"amount": "150", "notes": "Matched"})

    assert merged.amount == Decimal("150.00")
    assert merged.notes == "Matched"
    assert merged.organization_name == "Red Cross"
    assert merged.date == date(2023, 12, 15)
    assert merged.frequency is Frequency.ONE_TIME
    assert merged.category == "Disaster Relief"
