import streamlit as st

from utils.recommendations import SCALE, MAINTAIN, MONITOR, STOP

# Presentation for each action bucket. Recommendations only carry the
# category; everything visual is looked up here.
ACTION_STYLES = {
    SCALE: {
        'color': '#10b981',
        'background': 'rgba(16, 185, 129, 0.15)',
        'gradient': 'linear-gradient(135deg, #10b981 0%, #22c55e 100%)',
        'icon': '⚡',
    },
    MAINTAIN: {
        'color': '#3b82f6',
        'background': 'rgba(59, 130, 246, 0.15)',
        'gradient': 'linear-gradient(135deg, #3b82f6 0%, #06b6d4 100%)',
        'icon': '✅',
    },
    MONITOR: {
        'color': '#f59e0b',
        'background': 'rgba(245, 158, 11, 0.15)',
        'gradient': 'linear-gradient(135deg, #f59e0b 0%, #f97316 100%)',
        'icon': '📈',
    },
    STOP: {
        'color': '#f43f5e',
        'background': 'rgba(244, 63, 94, 0.15)',
        'gradient': 'linear-gradient(135deg, #f43f5e 0%, #ef4444 100%)',
        'icon': '⛔',
    },
}

_FALLBACK_STYLE = {
    'color': '#94a3b8',
    'background': 'rgba(148, 163, 184, 0.15)',
    'gradient': 'linear-gradient(135deg, #64748b 0%, #94a3b8 100%)',
    'icon': '',
}


def action_style(category: str) -> dict:
    """Colour/icon set for an action category (neutral grey if unknown)."""
    return ACTION_STYLES.get(category, _FALLBACK_STYLE)


class ThemeManager:
    """Manages dynamic theme switching (Dark/Light) via CSS injection."""

    @staticmethod
    def init_theme():
        """Initialize theme state if not present."""
        if 'theme_mode' not in st.session_state:
            st.session_state.theme_mode = 'dark' # Default

    @staticmethod
    def render_toggle():
        """Render the toggle in sidebar and apply styles."""
        ThemeManager.init_theme()

        is_dark = st.sidebar.toggle('🌙 Dark Mode', value=(st.session_state.theme_mode == 'dark'))

        new_mode = 'dark' if is_dark else 'light'
        if new_mode != st.session_state.theme_mode:
            st.session_state.theme_mode = new_mode
            st.rerun()

        ThemeManager.apply_css()

    @staticmethod
    def palette() -> dict:
        """Colour tokens for the current mode."""
        ThemeManager.init_theme()
        if st.session_state.theme_mode == 'dark':
            return {
                'bg': "#151b26",
                'secondary_bg': "#1e2736",
                'text': "#e2e8f0",
                'text_muted': "#94a3b8",
                'border': "#2d3a4f",
                'card_bg': "#1e2736",
                'accent': "#f59e0b",          # Amber, matches the page header bulb
            }
        return {
            'bg': "#f8fafc",
            'secondary_bg': "#e2e8f0",
            'text': "#1e293b",
            'text_muted': "#475569",
            'border': "#cbd5e1",
            'card_bg': "#ffffff",
            'accent': "#d97706",
        }

    @staticmethod
    def apply_css():
        """Inject CSS for the current mode."""
        p = ThemeManager.palette()

        css = f"""
        <style>
            :root {{
                --bg-color: {p['bg']};
                --secondary-bg: {p['secondary_bg']};
                --text-color: {p['text']};
                --text-muted: {p['text_muted']};
                --border-color: {p['border']};
                --card-bg: {p['card_bg']};
                --accent: {p['accent']};
            }}

            .stApp {{
                background-color: var(--bg-color);
                color: var(--text-color);
            }}

            [data-testid="stSidebar"] {{
                background-color: var(--secondary-bg);
            }}

            h1, h2, h3, h4, h5, h6, .stMarkdown p, .stMarkdown li, .stText {{
                color: var(--text-color);
            }}

            [data-testid="stSidebar"] p,
            [data-testid="stSidebar"] span,
            [data-testid="stSidebar"] label {{
                color: var(--text-color) !important;
            }}

            /* Filter controls */
            .stSelectbox div[data-baseweb="select"] > div,
            .stDateInput input,
            .stTextInput input {{
                background-color: var(--secondary-bg);
                color: var(--text-color);
                border-color: var(--border-color);
            }}

            .stButton > button, .stDownloadButton > button {{
                background-color: var(--accent) !important;
                color: #0f172a !important;
                border: none !important;
                font-weight: 500;
            }}

            .stCaption, small {{
                color: var(--text-muted) !important;
            }}

            .stDataFrame {{
                background-color: var(--card-bg);
                border: 1px solid var(--border-color);
                border-radius: 8px;
            }}
        </style>
        """
        st.markdown(css, unsafe_allow_html=True)

    @staticmethod
    def get_chart_template():
        """Return the Plotly template name."""
        return 'plotly_dark' if st.session_state.get('theme_mode', 'dark') == 'dark' else 'plotly_white'
