"""
Help and Documentation Page - Creative Suite
"""

import streamlit as st

from config.settings import get_settings
from utils.recommendations import DEFAULT_CONFIG
from ui.theme import action_style


def render_readme():
    """Render the help page."""

    st.title("📚 Creative Suite Help")

    tab_overview, tab_actions, tab_setup = st.tabs(["🚀 Overview", "🎯 Recommendations", "⚙️ Report Format"])

    with tab_overview:
        st.markdown("""
        ### Smart Creative Analysis

        Upload a daily ad report and every creative is rolled up across days, placements
        and copies of the same ad, then graded against your **Target CPL**.

        #### 🔄 Workflow

        1.  **📥 Upload** a daily creative report in the sidebar.
        2.  **🎚️ Filter** by product and date range (defaults to the full report).
        3.  **🎯 Act** on the SCALE / MAINTAIN / MONITOR / STOP buckets.

        #### 🎯 Core Concepts

        | Concept | Definition |
        | :--- | :--- |
        | **Creative** | One ad asset. Copies, placement tags and dated re-launches (`V1 - Summer - Copy`, `V1 - Summer_20240101`) count as the same creative. |
        | **CPL** | Spend divided by leads. Shown as 0 when there are no leads yet. |
        | **Days Active** | Distinct days with activity inside the selected range. |
        """)

    with tab_actions:
        st.markdown("### Action Buckets")
        mult = DEFAULT_CONFIG
        rules = {
            'SCALE': f"CPL at or below {mult['SCALE_CPL_MULT']:.0%} of target (`SCALE HARD` at {mult['SCALE_HARD_CPL_MULT']:.0%}).",
            'MAINTAIN': f"CPL within {mult['MAINTAIN_CPL_MULT'] - 1:.0%} above target.",
            'MONITOR': f"Learning phase (under {get_settings().min_days_active} active days), no leads yet, or CPL up to {mult['MONITOR_CPL_MULT']:.0%} of target.",
            'STOP': f"CPL above {mult['MONITOR_CPL_MULT']:.0%} of target, or no leads after spending {mult['NO_LEAD_SPEND_MULT']:.0f}× target CPL.",
        }
        for category, rule in rules.items():
            style = action_style(category)
            st.markdown(
                f'<div style="border-left: 4px solid {style["color"]}; padding: 8px 12px; margin-bottom: 8px; background: {style["background"]}; border-radius: 4px;">'
                f'<b>{style["icon"]} {category}</b><br><span style="font-size: 0.9rem;">{rule}</span></div>',
                unsafe_allow_html=True
            )
        st.info("**💡 Tip:** The summary tiles always count every creative in the range, even when the search box narrows the table.")

    with tab_setup:
        st.markdown("""
        ### Report Columns

        | Column | Expected | Notes |
        | :--- | :--- | :--- |
        | `Day` | ✅ | ISO dates, e.g. `2024-01-31` (`Date` also accepted); undated rows only count without a date range |
        | `Ad_name` or `Creative` | ✅ | `Ad_name` wins when both exist; missing means `Unknown` |
        | `Cost` | ✅ | `Spend` / `Amount spent` also accepted; missing means 0 |
        | `Leads` | | `Results` also accepted; missing means 0 |
        | `Product` | | Enables the product filter |

        Blank numbers count as 0, blank names as **Unknown**. Rows with unreadable dates
        are left out once a date range is applied.
        """)
