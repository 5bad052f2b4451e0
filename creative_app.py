import streamlit as st

# ==========================================
# PAGE CONFIGURATION (Must be very first ST command)
# ==========================================
st.set_page_config(
    page_title="Creative Suite",
    layout="wide",
    page_icon="💡"
)

import os

from config.settings import configure_logging

# BRIDGE: Load Streamlit Secrets into OS Environment for config.settings
try:
    for _key in ("CREATIVE_TARGET_CPL", "CREATIVE_CURRENCY_SYMBOL", "CREATIVE_MIN_DAYS_ACTIVE", "CREATIVE_LOG_LEVEL"):
        if _key in st.secrets:
            os.environ[_key] = str(st.secrets[_key])
except FileNotFoundError:
    pass

from ui.layout import setup_page, render_sidebar

configure_logging()

# Initialize session state
if 'current_module' not in st.session_state:
    st.session_state['current_module'] = 'creative_analysis'


def main():
    setup_page()

    def navigate_to(target_module):
        st.session_state['current_module'] = target_module
        st.rerun()

    current = render_sidebar(navigate_to)

    # Routing
    if current == 'readme':
        from ui.readme import render_readme
        render_readme()
    else:
        from features.creative_analysis import CreativeAnalysisModule
        CreativeAnalysisModule().run()


if __name__ == "__main__":
    main()
