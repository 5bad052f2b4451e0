"""
Creative Analysis Module

Smart per-creative performance view.
Features:
- Date range / product / search filters (date range defaults to the data)
- Action summary tiles (SCALE / MAINTAIN / MONITOR / STOP)
- Spend vs CPL bubble chart
- Sortable creative table with recommendations
"""

import logging
import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from functools import partial
from typing import Dict, Any, Optional

from features._base import BaseFeature
from core.data_loader import prepare_rows, missing_columns, validate_report, RAW_NAME_COL, PRODUCT_COL, LEADS_COL
from core.creative_stats import (
    ALL_PRODUCTS, NAME_COL, SPEND_COL, DAYS_COL, CPL_COL, ACTION_COL, CATEGORY_COL, REASON_COL,
    aggregate_creatives, default_date_range, product_options, summarize_creatives,
)
from utils.recommendations import ACTION_CATEGORIES, get_smart_recommendation
from ui.theme import ThemeManager, action_style

logger = logging.getLogger(__name__)

START_KEY = 'ca_start_date'
END_KEY = 'ca_end_date'
PRODUCT_KEY = 'ca_product'
SEARCH_KEY = 'ca_search'
TARGET_CPL_KEY = 'target_cpl'

EMPTY_MESSAGE = "No creatives found matching your criteria."

DISPLAY_COLUMNS = [
    NAME_COL, DAYS_COL, SPEND_COL, LEADS_COL, CPL_COL,
    'Recommendation', REASON_COL, RAW_NAME_COL, PRODUCT_COL,
]


@st.cache_data(show_spinner=False)
def _prepare(raw: pd.DataFrame) -> pd.DataFrame:
    return prepare_rows(raw)


@st.cache_data(show_spinner=False)
def _aggregate(rows: pd.DataFrame, start_date, end_date, target_cpl: float, product: str,
               min_days_active: int) -> pd.DataFrame:
    recommender = partial(get_smart_recommendation, config={"MIN_DAYS_ACTIVE": min_days_active})
    return aggregate_creatives(rows, start_date, end_date, target_cpl, product, recommender=recommender)


def build_display_table(aggregates: pd.DataFrame) -> pd.DataFrame:
    """Creative table in display order. Keeps the aggregate index for styling."""
    table = aggregates.rename(columns={ACTION_COL: 'Recommendation'})
    return table[DISPLAY_COLUMNS].copy()


def style_display_table(table: pd.DataFrame, categories: pd.Series, min_days_active: int):
    """Colour recommendations by bucket and flag creatives still in their learning phase."""
    def styles(frame: pd.DataFrame) -> pd.DataFrame:
        css = pd.DataFrame('', index=frame.index, columns=frame.columns)
        for idx, category in categories.items():
            if idx in css.index:
                s = action_style(category)
                css.at[idx, 'Recommendation'] = f"background-color: {s['background']}; color: {s['color']}; font-weight: 700"
        learning = frame[DAYS_COL] < min_days_active
        css.loc[learning, DAYS_COL] = 'background-color: rgba(234, 179, 8, 0.18); color: #eab308; font-weight: 700'
        return css

    return table.style.apply(styles, axis=None)


def build_spend_cpl_chart(aggregates: pd.DataFrame, target_cpl: float, currency: str = "") -> go.Figure:
    """Bubble chart: Spend (x) vs CPL (y), size = Leads, one trace per action bucket."""
    fig = go.Figure()
    if aggregates.empty:
        return fig

    max_leads = aggregates[LEADS_COL].max()
    sizeref = 2. * max_leads / (40. ** 2) if max_leads > 0 else 1

    for category in ACTION_CATEGORIES:
        subset = aggregates[aggregates[CATEGORY_COL] == category]
        if subset.empty:
            continue
        fig.add_trace(go.Scatter(
            x=subset[SPEND_COL],
            y=subset[CPL_COL],
            mode='markers',
            name=category,
            text=subset[NAME_COL],
            customdata=subset[[LEADS_COL, ACTION_COL]].to_numpy(),
            marker=dict(
                size=subset[LEADS_COL],
                sizemode='area',
                sizeref=sizeref,
                sizemin=5,
                color=action_style(category)['color'],
                line=dict(color='rgba(255,255,255,0.2)', width=1)
            ),
            hovertemplate=(
                f"<b>%{{text}}</b><br>Spend: {currency}%{{x:,.0f}}<br>CPL: {currency}%{{y:,.0f}}"
                "<br>Leads: %{customdata[0]:,.0f}<br>%{customdata[1]}<extra></extra>"
            )
        ))

    if target_cpl and target_cpl > 0:
        fig.add_hline(
            y=target_cpl,
            line_dash="dot",
            line_color="#f59e0b",
            line_width=2,
            annotation_text="Target CPL",
            annotation_position="top left",
            annotation_font=dict(color="#f59e0b")
        )

    fig.update_layout(
        xaxis=dict(title=dict(text="Spend"), showgrid=False, zeroline=True),
        yaxis=dict(title=dict(text="CPL"), showgrid=False, zeroline=True),
        height=420,
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


class CreativeAnalysisModule(BaseFeature):
    """Smart Creative Analysis page."""

    def __init__(self):
        super().__init__()
        self.rows: Optional[pd.DataFrame] = None

    def render_ui(self):
        """Render header and filter controls."""
        st.markdown("""
        <div style="background: linear-gradient(135deg, rgba(245, 158, 11, 0.10) 0%, rgba(245, 158, 11, 0.04) 100%);
                    border: 1px solid rgba(245, 158, 11, 0.25);
                    border-radius: 8px;
                    padding: 12px 16px;
                    margin-bottom: 24px;">
            <span style="font-size: 1.5rem; font-weight: 800;">💡 Smart Creative Analysis</span>
            <div style="color: #8F8CA3; font-size: 0.85rem; margin-top: 4px;">Insights and next steps for your ad creatives.</div>
        </div>
        """, unsafe_allow_html=True)

        raw = st.session_state.get('creative_data')
        if raw is None:
            st.info("ℹ️ Upload a daily creative report in the sidebar to get started.")
            return

        self.data = raw
        is_valid, _ = self.validate_data(raw)
        if not is_valid:
            return

        missing = missing_columns(raw)
        if missing:
            st.warning(f"⚠️ Report has no {', '.join(missing)} column; defaults are used.")

        self.rows = _prepare(raw)
        self._render_controls(self.rows)

    def _render_controls(self, rows: pd.DataFrame):
        # Fill unset bounds from the data; never overwrite the user's choice
        start, end = default_date_range(rows, st.session_state.get(START_KEY), st.session_state.get(END_KEY))
        st.session_state[START_KEY] = start
        st.session_state[END_KEY] = end

        products = product_options(rows)
        if st.session_state.get(PRODUCT_KEY) not in products:
            st.session_state[PRODUCT_KEY] = ALL_PRODUCTS

        c1, c2, c3, c4 = st.columns([2, 2, 2, 3])
        with c1:
            st.selectbox("Filter Product", products, key=PRODUCT_KEY)
        with c2:
            st.date_input("Start Date", key=START_KEY)
        with c3:
            st.date_input("End Date", key=END_KEY)
        with c4:
            st.text_input("Search Creative", key=SEARCH_KEY, placeholder="Search Creative...")

    def validate_data(self, data: pd.DataFrame) -> tuple[bool, str]:
        """Validate required columns."""
        return validate_report(data)

    def analyze(self, data: pd.DataFrame) -> Dict[str, Any]:
        """Aggregate, recommend and filter creatives for the current controls."""
        rows = self.rows if self.rows is not None else _prepare(data)
        target_cpl = float(st.session_state.get(TARGET_CPL_KEY, self.config['target_cpl']))

        aggregates = _aggregate(
            rows,
            st.session_state.get(START_KEY),
            st.session_state.get(END_KEY),
            target_cpl,
            st.session_state.get(PRODUCT_KEY, ALL_PRODUCTS),
            self.config['min_days_active'],
        )
        summary = summarize_creatives(aggregates, st.session_state.get(SEARCH_KEY, ''))
        visible = summary['visible']

        logger.info(f"Creative analysis: {len(aggregates)} creatives, {len(visible)} after search")

        return {
            'data': build_display_table(visible),
            'aggregates': aggregates,
            'visible': visible,
            'counts': summary['counts'],
            'spend': summary['spend'],
            'target_cpl': target_cpl,
        }

    def display_results(self, results: Dict[str, Any]):
        """Display summary tiles, chart and table."""
        from ui.components import action_tile

        currency = self.config['currency']

        # Counts ignore the search box
        cols = st.columns(len(ACTION_CATEGORIES))
        for col, category in zip(cols, ACTION_CATEGORIES):
            with col:
                action_tile(category, results['counts'][category], results['spend'][category], currency)

        aggregates = results['aggregates']
        if not aggregates.empty:
            st.markdown("### 🎯 Spend vs CPL")
            fig = build_spend_cpl_chart(aggregates, results['target_cpl'], currency)
            is_dark = st.session_state.get('theme_mode', 'dark') == 'dark'
            text_color = '#f3f4f6' if is_dark else '#1f2937'
            fig.update_layout(
                template=ThemeManager.get_chart_template(),
                paper_bgcolor='rgba(0,0,0,0)',
                plot_bgcolor='rgba(0,0,0,0)',
                font=dict(color=text_color),
            )
            st.plotly_chart(fig, use_container_width=True)

        st.markdown("### 📋 Creatives")
        table = results['data']
        if table.empty:
            st.info(EMPTY_MESSAGE)
            return

        styled = style_display_table(
            table, results['visible'][CATEGORY_COL], self.config['min_days_active']
        )
        st.dataframe(
            styled,
            use_container_width=True,
            column_config={
                NAME_COL: st.column_config.TextColumn("Creative Name (Smart)"),
                DAYS_COL: st.column_config.NumberColumn(format="%d Days"),
                SPEND_COL: st.column_config.NumberColumn(format=f"{currency}%.0f"),
                LEADS_COL: st.column_config.NumberColumn(format="%d"),
                CPL_COL: st.column_config.NumberColumn(format=f"{currency}%.0f"),
                'Recommendation': st.column_config.TextColumn("AI Recommendation"),
                RAW_NAME_COL: st.column_config.TextColumn("Source Ad Name"),
            },
            hide_index=True
        )
