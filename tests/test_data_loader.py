import pandas as pd
import pytest

from core.data_loader import (
    ROW_COLUMNS, DAY_COL, RAW_NAME_COL, PRODUCT_COL, COST_COL, LEADS_COL,
    missing_columns, prepare_rows, safe_numeric, validate_report,
)


def test_prepare_rows_schema(summer_rows):
    rows = prepare_rows(summer_rows)

    assert list(rows.columns) == ROW_COLUMNS
    assert len(rows) == 2
    assert rows[DAY_COL].iloc[0] == pd.Timestamp('2024-01-01')


def test_name_falls_back_to_creative_then_unknown():
    rows = prepare_rows([
        {'Ad_name': 'From Ad', 'Creative': 'From Creative'},
        {'Ad_name': '', 'Creative': 'From Creative'},
        {'Ad_name': None, 'Creative': None},
    ])

    assert list(rows[RAW_NAME_COL]) == ['From Ad', 'From Creative', 'Unknown']


def test_missing_fields_get_defaults():
    rows = prepare_rows([{'Day': '2024-01-01', 'Ad_name': 'X'}])

    assert rows[PRODUCT_COL].iloc[0] == 'Unknown'
    assert rows[COST_COL].iloc[0] == 0
    assert rows[LEADS_COL].iloc[0] == 0


def test_numbers_are_parsed_leniently():
    rows = prepare_rows([
        {'Ad_name': 'A', 'Cost': '฿1,200.50', 'Leads': '3'},
        {'Ad_name': 'B', 'Cost': 'n/a', 'Leads': None},
        {'Ad_name': 'C', 'Cost': -40, 'Leads': 2},
    ])

    assert list(rows[COST_COL]) == [1200.5, 0.0, 0.0]
    assert list(rows[LEADS_COL]) == [3.0, 0.0, 2.0]


def test_days_are_iso_calendar_dates():
    rows = prepare_rows([
        {'Day': '2024-01-02T18:45:00', 'Ad_name': 'A'},
        {'Day': '02/01/2024', 'Ad_name': 'B'},
        {'Day': None, 'Ad_name': 'C'},
    ])

    assert rows[DAY_COL].iloc[0] == pd.Timestamp('2024-01-02')
    assert pd.isna(rows[DAY_COL].iloc[1])
    assert pd.isna(rows[DAY_COL].iloc[2])


def test_report_aliases_are_mapped():
    report = pd.DataFrame({
        'Date': ['2024-01-01'],
        'Ad name': ['V1 - Summer'],
        'Amount spent': ['1,000'],
        'Results': [4],
    })

    rows = prepare_rows(report)

    assert rows[RAW_NAME_COL].iloc[0] == 'V1 - Summer'
    assert rows[COST_COL].iloc[0] == 1000
    assert rows[LEADS_COL].iloc[0] == 4


def test_prepare_rows_does_not_modify_input():
    report = pd.DataFrame({'Day': ['2024-01-01'], 'Ad_name': [' V1 '], 'Cost': ['10']})
    before = report.copy()

    prepare_rows(report)

    pd.testing.assert_frame_equal(report, before)


def test_prepare_rows_empty():
    rows = prepare_rows([])

    assert rows.empty
    assert list(rows.columns) == ROW_COLUMNS


def test_safe_numeric_numeric_series():
    assert list(safe_numeric(pd.Series([1, None, -2.5]))) == [1.0, 0.0, 0.0]


def test_validate_report_accepts_minimal_report():
    report = pd.DataFrame({'Day': ['2024-01-01'], 'Creative': ['X'], 'Spend': [1]})

    assert validate_report(report) == (True, "")


@pytest.mark.parametrize("report, missing", [
    (pd.DataFrame({'Ad_name': ['X'], 'Cost': [1]}), 'Day'),
    (pd.DataFrame({'Day': ['2024-01-01'], 'Cost': [1]}), 'Ad_name / Creative'),
    (pd.DataFrame({'Day': ['2024-01-01'], 'Ad_name': ['X'], 'Leads': [1]}), 'Cost'),
])
def test_validate_report_accepts_missing_columns(report, missing):
    """Missing fields are reported but the rows still load with defaults"""
    assert validate_report(report) == (True, "")
    assert missing in missing_columns(report)


def test_report_without_cost_defaults_to_zero_spend():
    report = pd.DataFrame({'Day': ['2024-01-01'], 'Ad_name': ['X'], 'Leads': [1]})

    rows = prepare_rows(report)

    assert rows.iloc[0][COST_COL] == 0
    assert rows.iloc[0][LEADS_COL] == 1


def test_missing_columns_of_complete_report(summer_rows):
    assert missing_columns(pd.DataFrame(summer_rows)) == []


def test_validate_report_rejects_empty():
    assert validate_report(pd.DataFrame()) == (False, "Report is empty.")
