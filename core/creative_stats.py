"""
Creative Stats

Pure derivations behind the Creative Analysis page: default date range,
product options, per-creative aggregation with recommendations, search and
summary counts. All functions take the canonical row frame produced by
core.data_loader.prepare_rows and never modify their inputs.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd

from core.data_loader import (
    DAY_COL, RAW_NAME_COL, PRODUCT_COL, COST_COL, LEADS_COL, UNKNOWN,
)
from utils.formatters import extract_creative_name
from utils.recommendations import ACTION_CATEGORIES, Recommendation, get_smart_recommendation

logger = logging.getLogger(__name__)

ALL_PRODUCTS = 'All'

NAME_COL = 'Creative Name'
SPEND_COL = 'Spend'
DAYS_COL = 'Days Active'
CPL_COL = 'CPL'
ACTION_COL = 'Action'
CATEGORY_COL = 'Category'
REASON_COL = 'Reason'

AGGREGATE_COLUMNS = [
    NAME_COL, RAW_NAME_COL, PRODUCT_COL, SPEND_COL, LEADS_COL,
    DAYS_COL, CPL_COL, ACTION_COL, CATEGORY_COL, REASON_COL,
]

DateLike = Union[date, str, pd.Timestamp, None]
Recommender = Callable[[Mapping[str, Any], float], Recommendation]


def _to_timestamp(value: DateLike) -> Optional[pd.Timestamp]:
    if value is None or value == '':
        return None
    try:
        ts = pd.Timestamp(value)
    except ValueError:
        logger.warning(f"Ignoring unparseable date bound: {value!r}")
        return None
    if pd.isna(ts):
        return None
    return ts.normalize()


def default_date_range(rows: pd.DataFrame, start_date: DateLike = None,
                       end_date: DateLike = None) -> Tuple[DateLike, DateLike]:
    """
    Fill unset date bounds from the earliest and latest Day in the rows.

    Bounds the caller already chose are returned as-is. With no rows, or no
    valid days, both bounds come back unchanged.
    """
    if rows is None or rows.empty:
        return start_date, end_date

    days = rows[DAY_COL].dropna()
    if days.empty:
        return start_date, end_date

    if not start_date:
        start_date = days.min().date()
    if not end_date:
        end_date = days.max().date()
    return start_date, end_date


def product_options(rows: pd.DataFrame) -> List[str]:
    """Product selector options: 'All' followed by the distinct products, sorted."""
    if rows is None or rows.empty:
        return [ALL_PRODUCTS]
    products = rows[PRODUCT_COL].dropna().astype(str)
    unique = {p for p in products if p.strip() and p != UNKNOWN}
    return [ALL_PRODUCTS] + sorted(unique)


def empty_aggregates() -> pd.DataFrame:
    return pd.DataFrame({
        NAME_COL: pd.Series(dtype='object'),
        RAW_NAME_COL: pd.Series(dtype='object'),
        PRODUCT_COL: pd.Series(dtype='object'),
        SPEND_COL: pd.Series(dtype='float'),
        LEADS_COL: pd.Series(dtype='float'),
        DAYS_COL: pd.Series(dtype='int'),
        CPL_COL: pd.Series(dtype='float'),
        ACTION_COL: pd.Series(dtype='object'),
        CATEGORY_COL: pd.Series(dtype='object'),
        REASON_COL: pd.Series(dtype='object'),
    })


def aggregate_creatives(
    rows: pd.DataFrame,
    start_date: DateLike = None,
    end_date: DateLike = None,
    target_cpl: float = 0.0,
    product_filter: Optional[str] = ALL_PRODUCTS,
    recommender: Recommender = get_smart_recommendation,
    name_extractor: Callable[[str], str] = extract_creative_name,
) -> pd.DataFrame:
    """
    Aggregate daily rows into one line per creative.

    Rows outside [start_date, end_date] (inclusive) or not matching the
    selected product are skipped. When either bound is set, rows without a
    valid Day are skipped too.

    Args:
        rows: Canonical row frame (see core.data_loader)
        start_date, end_date: Optional inclusive bounds
        target_cpl: Target cost per lead passed to the recommender
        product_filter: Product name, or 'All' / None for every product
        recommender: Callable(stats, target_cpl) -> Recommendation
        name_extractor: Callable(raw_name) -> creative name

    Returns:
        DataFrame with AGGREGATE_COLUMNS sorted by Spend descending. Ties keep
        the order in which each creative first appeared.
    """
    if rows is None or rows.empty:
        return empty_aggregates()

    start = _to_timestamp(start_date)
    end = _to_timestamp(end_date)

    mask = pd.Series(True, index=rows.index)
    # NaT compares False, so undated rows drop out once a bound is set
    if start is not None:
        mask &= rows[DAY_COL] >= start
    if end is not None:
        mask &= rows[DAY_COL] <= end
    if product_filter and product_filter != ALL_PRODUCTS:
        mask &= rows[PRODUCT_COL] == product_filter

    df = rows[mask]
    logger.debug(
        f"Creative window {start} -> {end}, product={product_filter}: "
        f"{len(df)}/{len(rows)} rows"
    )
    if df.empty:
        return empty_aggregates()

    df = df.assign(**{NAME_COL: df[RAW_NAME_COL].map(name_extractor)})

    grouped = df.groupby(NAME_COL, sort=False).agg(**{
        RAW_NAME_COL: (RAW_NAME_COL, 'first'),
        PRODUCT_COL: (PRODUCT_COL, 'first'),
        SPEND_COL: (COST_COL, 'sum'),
        LEADS_COL: (LEADS_COL, 'sum'),
        # Undated rows add spend but no active day
        DAYS_COL: (DAY_COL, 'nunique'),
    }).reset_index()

    grouped[CPL_COL] = np.where(
        grouped[LEADS_COL] > 0,
        grouped[SPEND_COL] / grouped[LEADS_COL].where(grouped[LEADS_COL] > 0, 1.0),
        0.0
    )

    recs = [
        recommender(_recommendation_input(record), target_cpl)
        for record in grouped.to_dict('records')
    ]
    grouped[ACTION_COL] = [r.action for r in recs]
    grouped[CATEGORY_COL] = [r.category for r in recs]
    grouped[REASON_COL] = [r.reason for r in recs]

    grouped = grouped.sort_values(SPEND_COL, ascending=False, kind='stable').reset_index(drop=True)
    logger.debug(f"Aggregated {len(grouped)} creatives")

    return grouped[AGGREGATE_COLUMNS]


def _recommendation_input(record: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'name': record[NAME_COL],
        'raw_name': record[RAW_NAME_COL],
        'product': record[PRODUCT_COL],
        'cost': float(record[SPEND_COL]),
        'leads': float(record[LEADS_COL]),
        'cpl': float(record[CPL_COL]),
        'days_active': int(record[DAYS_COL]),
    }


def filter_by_search(aggregates: pd.DataFrame, search_term: Optional[str]) -> pd.DataFrame:
    """Keep creatives whose name contains search_term, ignoring case. Empty term keeps all."""
    if not search_term:
        return aggregates
    needle = search_term.lower()
    mask = aggregates[NAME_COL].astype(str).str.lower().str.contains(needle, regex=False)
    return aggregates[mask]


def count_by_action(aggregates: pd.DataFrame) -> Dict[str, int]:
    """Count creatives per action bucket. Qualified labels such as 'SCALE HARD' count as SCALE."""
    if aggregates is None or aggregates.empty:
        return {category: 0 for category in ACTION_CATEGORIES}
    actions = aggregates[ACTION_COL].astype(str)
    return {
        category: int(actions.str.contains(category, regex=False).sum())
        for category in ACTION_CATEGORIES
    }


def spend_by_action(aggregates: pd.DataFrame) -> Dict[str, float]:
    """Total spend per action bucket."""
    if aggregates is None or aggregates.empty:
        return {category: 0.0 for category in ACTION_CATEGORIES}
    totals = aggregates.groupby(CATEGORY_COL)[SPEND_COL].sum()
    return {category: float(totals.get(category, 0.0)) for category in ACTION_CATEGORIES}


def summarize_creatives(aggregates: pd.DataFrame, search_term: Optional[str] = None) -> Dict[str, Any]:
    """
    Split aggregates into the searched view and the bucket summary.

    Summary counts and spend always cover every aggregate; the search term
    only narrows 'visible'.
    """
    visible = filter_by_search(aggregates, search_term)
    return {
        'visible': visible,
        'counts': count_by_action(aggregates),
        'spend': spend_by_action(aggregates),
    }
