"""
Output Formatting Utilities

Creative name normalization, currency display and Excel export.
"""

import re
import pandas as pd
from io import BytesIO

UNKNOWN_CREATIVE = 'Unknown'

# Trailing decorations added by ad managers when duplicating/scheduling ads
_COPY_SUFFIX = re.compile(r'\s*(?:-\s*copy(?:\s*\d+)?|\(\s*copy(?:\s*\d+)?\s*\))\s*$', re.IGNORECASE)
_PLACEMENT_TAG = re.compile(r'\s*\|[^|]*$')
_DATE_STAMP = re.compile(r'(?<!\d)[\s_-]+(?:\d{4}-\d{2}-\d{2}|(?:19|20)\d{6})$')
_WHITESPACE = re.compile(r'\s+')


def extract_creative_name(raw_name) -> str:
    """
    Normalize an ad name to the creative it runs.

    Daily duplicates, placement variants and dated re-launches of the same
    creative collapse to one name.

    Examples:
        'V1 - Summer | Reels'       -> 'V1 - Summer'
        'V1 - Summer - Copy 2'      -> 'V1 - Summer'
        'V1 - Summer_20240101'      -> 'V1 - Summer'
        '120208765432100123'        -> '120208765432100123'
        '  V1   -  Summer '         -> 'V1 - Summer'
        None / ''                   -> 'Unknown'
    """
    if raw_name is None or (not isinstance(raw_name, str) and pd.isna(raw_name)):
        return UNKNOWN_CREATIVE

    name = _WHITESPACE.sub(' ', str(raw_name)).strip()

    # Strip decorations until stable; they can stack in any order
    previous = None
    while name and name != previous:
        previous = name
        name = _COPY_SUFFIX.sub('', name)
        name = _PLACEMENT_TAG.sub('', name)
        name = _DATE_STAMP.sub('', name)
        name = name.strip(' -_|')

    return name or UNKNOWN_CREATIVE


def format_currency(value: float, currency: str = "฿", decimals: int = 0) -> str:
    """
    Format number as currency.

    Returns:
        Formatted string like "฿1,235"
    """
    return f"{currency}{value:,.{decimals}f}"


def dataframe_to_excel(df: pd.DataFrame, sheet_name: str = "Sheet1") -> bytes:
    """
    Convert DataFrame to Excel bytes.

    Args:
        df: DataFrame to convert
        sheet_name: Name for the Excel sheet

    Returns:
        Excel file as bytes
    """
    output = BytesIO()

    with pd.ExcelWriter(output, engine='xlsxwriter') as writer:
        # Excel caps sheet names at 31 chars
        df.to_excel(writer, sheet_name=sheet_name[:31], index=False)

    return output.getvalue()
