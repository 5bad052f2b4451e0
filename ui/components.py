"""
Shared UI Components

Reusable UI elements to ensure consistent styling across pages.
"""

import streamlit as st

from ui.theme import action_style


def metric_card(label: str, value: str, icon: str = None, accent: str = None, subtitle: str = None):
    """
    Render a styled summary tile using HTML.

    Args:
        label: The label text (e.g. "SCALE")
        value: The value text (e.g. "12")
        icon: Optional emoji/icon shown in a round badge
        accent: CSS background for the badge (colour or gradient)
        subtitle: Optional subtitle text below the value
    """
    subtitle_html = ""
    if subtitle:
        subtitle_html = f'<p style="color: #64748b; font-size: 11px; margin: 4px 0 0 0;">{subtitle}</p>'

    badge_html = ""
    if icon:
        badge_bg = accent or "#334155"
        badge_html = f'<div style="width: 40px; height: 40px; border-radius: 50%; background: {badge_bg}; display: flex; align-items: center; justify-content: center; font-size: 18px; box-shadow: 0 4px 12px rgba(0,0,0,0.25);">{icon}</div>'

    bg_color = "rgba(15, 23, 42, 0.6)"
    border_color = "rgba(255, 255, 255, 0.05)"

    # Single-line HTML; Streamlit's markdown treats indented lines as code
    html = f'<div style="background-color: {bg_color}; padding: 16px; border-radius: 12px; border: 1px solid {border_color}; margin-bottom: 10px; display: flex; align-items: center; justify-content: space-between;"><div><p style="color: #94a3b8; font-size: 0.7rem; font-weight: 700; text-transform: uppercase; letter-spacing: 0.1em; margin: 0 0 6px 0;">{label}</p><p style="color: #F5F5F7; font-size: 1.6rem; font-weight: 800; line-height: 1; margin: 0;">{value}</p>{subtitle_html}</div>{badge_html}</div>'
    st.markdown(html, unsafe_allow_html=True)


def action_tile(category: str, count: int, spend: float = None, currency: str = ""):
    """Summary tile for one recommendation bucket, with its spend underneath when given."""
    from utils.formatters import format_currency

    style = action_style(category)
    subtitle = f"{format_currency(spend, currency)} spend" if spend is not None else None
    metric_card(category, f"{count:,}", icon=style['icon'], accent=style['gradient'], subtitle=subtitle)
