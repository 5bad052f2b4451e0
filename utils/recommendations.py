"""
Creative Recommendations

Classifies a creative's aggregated performance against a target CPL into one
of four action buckets. Pure logic only: colours and icons for each bucket
live in ui.theme.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

SCALE = 'SCALE'
MAINTAIN = 'MAINTAIN'
MONITOR = 'MONITOR'
STOP = 'STOP'

ACTION_CATEGORIES = [SCALE, MAINTAIN, MONITOR, STOP]

DEFAULT_CONFIG = {
    # CPL bands as multiples of target CPL
    "SCALE_HARD_CPL_MULT": 0.5,    # CPL <= 50% of target
    "SCALE_CPL_MULT": 0.8,         # CPL <= 80% of target
    "MAINTAIN_CPL_MULT": 1.1,      # Within 10% above target
    "MONITOR_CPL_MULT": 1.5,       # Above this -> STOP

    # Zero-lead spend cap as multiple of target CPL
    "NO_LEAD_SPEND_MULT": 2.0,

    # Learning phase
    "MIN_DAYS_ACTIVE": 4,
}


@dataclass(frozen=True)
class Recommendation:
    action: str      # Display label, e.g. "SCALE HARD"
    category: str    # One of ACTION_CATEGORIES
    reason: str


def _num(stats: Mapping[str, Any], key: str) -> float:
    value = stats.get(key, 0)
    return float(value) if value is not None else 0.0


def get_smart_recommendation(stats: Mapping[str, Any], target_cpl: float,
                             config: Optional[Dict[str, Any]] = None) -> Recommendation:
    """
    Recommend the next step for one creative.

    Args:
        stats: Aggregated creative stats with 'cost', 'leads', 'cpl' and
            'days_active' keys (extra keys are ignored)
        target_cpl: Cost per lead the account is aiming for
        config: Optional overrides for DEFAULT_CONFIG thresholds

    Returns:
        Recommendation whose action always contains exactly one category token
    """
    cfg = {**DEFAULT_CONFIG, **(config or {})}

    cost = _num(stats, 'cost')
    leads = _num(stats, 'leads')
    cpl = _num(stats, 'cpl')
    days_active = int(_num(stats, 'days_active'))
    target = float(target_cpl or 0)
    min_days = int(cfg["MIN_DAYS_ACTIVE"])

    if target <= 0:
        return Recommendation(MONITOR, MONITOR, "No target CPL set")

    if leads <= 0:
        spend_cap = target * cfg["NO_LEAD_SPEND_MULT"]
        if cost >= spend_cap:
            return Recommendation(STOP, STOP, f"No leads after {cost:,.0f} spend (≥ {spend_cap:,.0f})")
        if days_active < min_days:
            return Recommendation(MONITOR, MONITOR, f"Learning phase: {days_active}d, no leads yet")
        return Recommendation(MONITOR, MONITOR, f"No leads yet ({cost:,.0f} spent)")

    if days_active < min_days:
        return Recommendation(MONITOR, MONITOR, f"Learning phase: {days_active}d, CPL {cpl:,.0f}")

    ratio = cpl / target

    if ratio <= cfg["SCALE_HARD_CPL_MULT"]:
        return Recommendation(f"{SCALE} HARD", SCALE, f"CPL {cpl:,.0f} ≤ {target * cfg['SCALE_HARD_CPL_MULT']:,.0f}")
    if ratio <= cfg["SCALE_CPL_MULT"]:
        return Recommendation(SCALE, SCALE, f"CPL {cpl:,.0f} ≤ {target * cfg['SCALE_CPL_MULT']:,.0f}")
    if ratio <= cfg["MAINTAIN_CPL_MULT"]:
        return Recommendation(MAINTAIN, MAINTAIN, f"CPL {cpl:,.0f} ~ target {target:,.0f}")
    if ratio <= cfg["MONITOR_CPL_MULT"]:
        return Recommendation(MONITOR, MONITOR, f"CPL {cpl:,.0f} above target {target:,.0f}")
    return Recommendation(STOP, STOP, f"CPL {cpl:,.0f} > {target * cfg['MONITOR_CPL_MULT']:,.0f}")
