"""
Tests for Hijri date conversion and display
"""

import pytest

from editorial.utils.hijri import (
    HIJRI_MONTH_NAMES,
    format_hijri_for_display,
    hijri_date_to_timestamp,
    is_timestamp_format,
    to_hijri_date,
)

# 2024-09-15T12:00:00Z, 12 Rabi al-Awwal 1446 in Umm al-Qura
MAWLID_1446 = "1726401600000"


class TestTimestampFormat:
    """Test timestamp detection"""

    def test_digits(self):
        assert is_timestamp_format(MAWLID_1446) is True

    @pytest.mark.parametrize(
        "value", ["", None, "12 Ramadan 1446", "-1000", "1726401600000.5", "1726401600000\n", "١٧٢٦٤٠١٦٠٠٠٠٠"]
    )
    def test_not_timestamps(self, value):
        assert is_timestamp_format(value) is False


class TestFormatForDisplay:
    """Test display formatting of stored event dates"""

    def test_timestamp(self):
        assert format_hijri_for_display(MAWLID_1446) == "12 ربیع الاول 1446 AH"

    def test_legacy_text_unchanged(self):
        assert format_hijri_for_display("12 Ramadan 1446") == "12 Ramadan 1446"

    def test_arabic_indic_digits_unchanged(self):
        assert format_hijri_for_display("١٧٢٦٤٠١٦٠٠٠٠٠") == "١٧٢٦٤٠١٦٠٠٠٠٠"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert format_hijri_for_display(value) == ""

    def test_out_of_range_returned_unchanged(self):
        """Dates outside the Umm al-Qura tables are shown as stored"""
        far_future = "99999999999999"
        assert format_hijri_for_display(far_future) == far_future


class TestConversion:
    """Test Hijri / timestamp conversion"""

    def test_to_hijri_date(self):
        hijri = to_hijri_date(MAWLID_1446)
        assert (hijri.year, hijri.month, hijri.day) == (1446, 3, 12)

    def test_to_hijri_date_rejects_text(self):
        with pytest.raises(ValueError):
            to_hijri_date("Ramadan")

    def test_round_trip(self):
        stored = hijri_date_to_timestamp(1446, 9, 1)

        assert int(stored) % 86_400_000 == 0
        assert format_hijri_for_display(stored) == f"1 {HIJRI_MONTH_NAMES[8]} 1446 AH"

    def test_twelve_months(self):
        assert len(HIJRI_MONTH_NAMES) == 12
