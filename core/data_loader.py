"""
Data Loader

Ingestion boundary for daily creative reports. Maps raw report columns to the
canonical row schema and applies every defaulting rule once, so the
aggregation code never has to deal with missing fields.

Canonical columns:
    Day       datetime64, calendar date (NaT if missing/malformed)
    Raw Name  str, Ad_name -> Creative -> "Unknown"
    Product   str, "Unknown" if missing
    Cost      float >= 0
    Leads     float >= 0
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

logger = logging.getLogger(__name__)

UNKNOWN = 'Unknown'

DAY_COL = 'Day'
RAW_NAME_COL = 'Raw Name'
PRODUCT_COL = 'Product'
COST_COL = 'Cost'
LEADS_COL = 'Leads'

ROW_COLUMNS = [DAY_COL, RAW_NAME_COL, PRODUCT_COL, COST_COL, LEADS_COL]

# Report header -> source field. First match wins; order matters for names
# because Ad_name takes precedence over Creative.
COLUMN_ALIASES: Dict[str, List[str]] = {
    'Day': ['Day', 'day', 'Date', 'date', 'Reporting starts'],
    'Ad_name': ['Ad_name', 'Ad name', 'Ad Name', 'ad_name'],
    'Creative': ['Creative', 'creative', 'Creative Name'],
    'Product': ['Product', 'product'],
    'Cost': ['Cost', 'cost', 'Spend', 'spend', 'Amount spent', 'Amount spent (THB)'],
    'Leads': ['Leads', 'leads', 'Results'],
}

RowsLike = Union[pd.DataFrame, Sequence[Mapping[str, Any]]]


def safe_numeric(series: pd.Series) -> pd.Series:
    """
    Parse a column of report numbers leniently.

    Strips currency symbols and thousands separators. Missing, unparseable
    and negative values become 0.
    """
    if pd.api.types.is_numeric_dtype(series):
        values = pd.to_numeric(series, errors='coerce')
    else:
        cleaned = (
            series.astype(str)
            .str.replace(r'[^0-9.\-eE]', '', regex=True)
            .str.strip()
        )
        values = pd.to_numeric(cleaned, errors='coerce')
    values = values.fillna(0.0).astype(float)
    return values.clip(lower=0.0)


def parse_days(series: pd.Series) -> pd.Series:
    """Parse ISO 8601 dates, truncated to the calendar day. Anything else is NaT."""
    parsed = pd.to_datetime(series, format='ISO8601', errors='coerce')
    if parsed.dt.tz is not None:
        parsed = parsed.dt.tz_localize(None)
    return parsed.dt.normalize()


def map_columns(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    """Find the report column backing each source field (None if absent)."""
    mapping = {}
    for field, aliases in COLUMN_ALIASES.items():
        mapping[field] = next((c for c in aliases if c in df.columns), None)
    return mapping


def _text_column(df: pd.DataFrame, col: Optional[str]) -> pd.Series:
    if col is None:
        return pd.Series(pd.NA, index=df.index, dtype='object')
    text = df[col].astype('string').str.strip()
    return text.mask(text.fillna('') == '', pd.NA)


def prepare_rows(rows: RowsLike) -> pd.DataFrame:
    """
    Build the canonical row frame from a report DataFrame or a list of dicts.

    The caller's data is not modified.

    Args:
        rows: Raw rows using the report's own headers

    Returns:
        DataFrame with exactly ROW_COLUMNS, in input order
    """
    if isinstance(rows, pd.DataFrame):
        df = rows
    else:
        df = pd.DataFrame(list(rows))

    if df.empty:
        return empty_rows()

    cols = map_columns(df)

    out = pd.DataFrame(index=df.index)

    if cols['Day']:
        out[DAY_COL] = parse_days(df[cols['Day']])
    else:
        out[DAY_COL] = pd.Series(pd.NaT, index=df.index, dtype='datetime64[ns]')

    raw_name = _text_column(df, cols['Ad_name']).fillna(_text_column(df, cols['Creative']))
    out[RAW_NAME_COL] = raw_name.fillna(UNKNOWN).astype(str)

    out[PRODUCT_COL] = _text_column(df, cols['Product']).fillna(UNKNOWN).astype(str)

    for field, target in (('Cost', COST_COL), ('Leads', LEADS_COL)):
        if cols[field]:
            out[target] = safe_numeric(df[cols[field]])
        else:
            out[target] = 0.0

    missing_days = int(out[DAY_COL].isna().sum())
    logger.info(f"Prepared {len(out)} creative rows ({missing_days} without a valid Day)")
    logger.debug(f"Column mapping: {cols}")

    return out.reset_index(drop=True)[ROW_COLUMNS]


def empty_rows() -> pd.DataFrame:
    return pd.DataFrame({
        DAY_COL: pd.Series(dtype='datetime64[ns]'),
        RAW_NAME_COL: pd.Series(dtype='object'),
        PRODUCT_COL: pd.Series(dtype='object'),
        COST_COL: pd.Series(dtype='float'),
        LEADS_COL: pd.Series(dtype='float'),
    })


def missing_columns(df: pd.DataFrame) -> List[str]:
    """Report fields with no matching column. Their rows fall back to the ingestion defaults."""
    cols = map_columns(df)
    missing = []
    if not cols['Day']:
        missing.append('Day')
    if not cols['Ad_name'] and not cols['Creative']:
        missing.append('Ad_name / Creative')
    if not cols['Cost']:
        missing.append('Cost')
    if not cols['Leads']:
        missing.append('Leads')
    return missing


def validate_report(df: pd.DataFrame) -> tuple[bool, str]:
    """
    Check that a raw report has something to analyze.

    Only an empty report is rejected; missing columns are logged and defaulted.

    Returns:
        (is_valid, error_message)
    """
    if df is None or df.empty:
        return False, "Report is empty."

    missing = missing_columns(df)
    if missing:
        logger.warning(f"Report missing columns {missing}; using defaults")
    return True, ""


def load_report(file) -> pd.DataFrame:
    """Read an uploaded CSV report into a raw DataFrame."""
    name = getattr(file, 'name', str(file))
    df = pd.read_csv(file)
    logger.info(f"Loaded report {name}: {len(df)} rows, {len(df.columns)} columns")
    return df
