"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from menu.domain.value import DishCategory, DishName, Weekday


class TestDishName:
    """Tests for DishName validation."""

    def test_trims_surrounding_whitespace(self):
        """Name should be stored trimmed."""
        assert DishName("  Kabuli Pulao \n").root == "Kabuli Pulao"

    def test_accepts_max_length(self):
        """A 100 character name is allowed."""
        name = "x" * 100
        assert DishName(name).root == name

    def test_rejects_too_long(self):
        """A 101 character name is rejected."""
        with pytest.raises(ValidationError):
            DishName("x" * 101)

    def test_length_is_checked_after_trimming(self):
        """Padding does not count towards the limit."""
        assert len(DishName("  " + "x" * 100 + "  ").root) == 100

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_rejects_blank(self, value):
        """Empty or whitespace-only names are rejected."""
        with pytest.raises(ValidationError):
            DishName(value)

    def test_equality_by_value(self):
        """Names compare by their trimmed value."""
        assert DishName("Mantu") == DishName(" Mantu ")


class TestEnums:
    """Tests for closed value sets."""

    def test_categories(self):
        assert {c.value for c in DishCategory} == {"regular", "meat", "rice", "sabzi"}

    def test_weekdays_exclude_weekend(self):
        assert [d.value for d in Weekday] == [
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
        ]
        with pytest.raises(ValueError):
            Weekday("saturday")
