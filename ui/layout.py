"""
UI Layout Components

Page setup and sidebar (report upload, target CPL, navigation).
"""

import logging
import streamlit as st

from config.settings import get_settings
from core.data_loader import load_report
from ui.theme import ThemeManager

logger = logging.getLogger(__name__)


def setup_page():
    """Setup page CSS and styling."""
    ThemeManager.apply_css()


def render_upload():
    """CSV uploader. Stores the raw report in session state under 'creative_data'."""
    uploaded = st.sidebar.file_uploader("Daily Creative Report (CSV)", type=["csv"], key="creative_upload")
    if uploaded is None:
        return

    # Only re-read when a different file is dropped in
    file_token = (uploaded.name, uploaded.size)
    if st.session_state.get('creative_file_token') == file_token:
        return

    try:
        st.session_state['creative_data'] = load_report(uploaded)
        st.session_state['creative_file_token'] = file_token
    except Exception as e:
        logger.error(f"Failed to read {uploaded.name}: {e}")
        st.sidebar.error(f"❌ Could not read {uploaded.name}: {e}")


def render_sidebar(navigate_to):
    """
    Render sidebar navigation.

    Args:
        navigate_to: Function to navigate between modules

    Returns:
        Selected module name
    """
    settings = get_settings()

    st.sidebar.markdown("## 💡 Creative Suite")
    st.sidebar.markdown("##### DATA")
    render_upload()

    if 'target_cpl' not in st.session_state:
        st.session_state['target_cpl'] = settings.target_cpl
    st.sidebar.number_input(
        f"Target CPL ({settings.currency_symbol})",
        min_value=0.0,
        step=10.0,
        key="target_cpl",
        help="Cost per lead you are aiming for. Recommendations are graded against it."
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown("##### ANALYZE")

    if st.sidebar.button("Creative Analysis", use_container_width=True):
        navigate_to('creative_analysis')

    st.sidebar.markdown("---")

    if st.sidebar.button("Help", use_container_width=True):
        navigate_to('readme')

    st.sidebar.markdown("---")
    ThemeManager.render_toggle()

    return st.session_state.get('current_module', 'creative_analysis')
