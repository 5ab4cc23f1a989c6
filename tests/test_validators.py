from decimal import Decimal

import pytest

from bookflow.common.utils.validators import ensure_password, ensure_price, normalize_email


class TestNormalizeEmail:
    def test_trims_and_lower_cases(self):
        assert normalize_email("  User@Example.COM ") == "user@example.com"

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "   ",
            "not-an-email",
            "user@",
            "@example.com",
            "user@example",
            "user@@example.com",
            "us er@example.com",
            "user@example..com",
            "user@.example.com",
            ".user@example.com",
            "user..name@example.com",
        ],
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            normalize_email(value)


class TestEnsurePassword:
    def test_accepts_six_characters(self):
        assert ensure_password("abcdef") == "abcdef"

    @pytest.mark.parametrize("value", [None, "", "abc"])
    def test_rejects_missing_or_short(self, value):
        with pytest.raises(ValueError):
            ensure_password(value)


class TestEnsurePrice:
    def test_quantizes_to_cents(self):
        assert ensure_price("12.5") == Decimal("12.50")
        assert ensure_price(0) == Decimal("0.00")

    @pytest.mark.parametrize("value", ["-1", "abc", None, "NaN", "Infinity"])
    def test_rejects_negative_and_non_numeric(self, value):
        with pytest.raises(ValueError):
            ensure_price(value)
