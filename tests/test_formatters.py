import math

import pandas as pd
import pytest

from utils.formatters import dataframe_to_excel, extract_creative_name, format_currency


@pytest.mark.parametrize("raw, expected", [
    ("V1 - Summer", "V1 - Summer"),
    ("V1 - Summer | Reels", "V1 - Summer"),
    ("V1 - Summer - Copy", "V1 - Summer"),
    ("V1 - Summer - Copy 2", "V1 - Summer"),
    ("V1 - Summer (copy)", "V1 - Summer"),
    ("V1 - Summer_20240101", "V1 - Summer"),
    ("V1 - Summer 2024-01-01", "V1 - Summer"),
    ("V1 - Summer_20240101 | Stories - Copy", "V1 - Summer"),
    ("  V1   -  Summer ", "V1 - Summer"),
    ("Summer 2024", "Summer 2024"),
])
def test_extract_creative_name(raw, expected):
    assert extract_creative_name(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", math.nan, "Unknown"])
def test_extract_creative_name_unknown(raw):
    assert extract_creative_name(raw) == "Unknown"


@pytest.mark.parametrize("raw", [
    "120208765432100123",
    "12345678",
    "Ad 123456789",
    "Promo 2024-01-01 20240102",
    "SKU-99920240101",
])
def test_trailing_digits_are_not_date_stamps(raw):
    assert extract_creative_name(raw) == raw


def test_numeric_ad_ids_stay_distinct():
    """Meta-style numeric ad IDs must not collapse into one creative"""
    first = extract_creative_name("120208765432100123")
    second = extract_creative_name("120208765432100999")

    assert first != second


@pytest.mark.parametrize("raw", ["V1 - Summer | Reels", "Hook Test - Copy 3", "A_20240101"])
def test_extract_creative_name_is_idempotent(raw):
    once = extract_creative_name(raw)
    assert extract_creative_name(once) == once


def test_format_currency():
    assert format_currency(1234.4) == "฿1,234"
    assert format_currency(50, currency="AED ", decimals=2) == "AED 50.00"


def test_dataframe_to_excel_returns_xlsx_bytes():
    data = dataframe_to_excel(pd.DataFrame({'Creative Name': ['V1'], 'Spend': [150.0]}), "A very long sheet name over the limit")

    assert isinstance(data, bytes)
    assert data[:2] == b"PK"  # xlsx is a zip container
