"""
Base Feature Template

All pages inherit from this class to maintain consistency.
This provides:
- Standard initialization
- Config management
- Data validation
- Output generation patterns
"""

import logging
import streamlit as st
import pandas as pd
from typing import Dict, Any
from abc import ABC, abstractmethod

from config.settings import get_settings

logger = logging.getLogger(__name__)


class BaseFeature(ABC):
    """Base class for all Creative Suite pages."""

    def __init__(self):
        """Initialize feature with config and data."""
        self.config = self.load_config()
        self.data = None
        self.results = None

    def load_config(self) -> Dict[str, Any]:
        """Load feature-specific configuration."""
        settings = get_settings()
        return {
            'target_cpl': settings.target_cpl,
            'currency': settings.currency_symbol,
            'min_days_active': settings.min_days_active,
        }

    @abstractmethod
    def render_ui(self):
        """Render the feature's controls. Sets self.data when there is something to analyze."""
        pass

    @abstractmethod
    def validate_data(self, data: pd.DataFrame) -> tuple[bool, str]:
        """
        Validate input data.

        Returns:
            (is_valid, error_message)
        """
        pass

    @abstractmethod
    def analyze(self, data: pd.DataFrame) -> Dict[str, Any]:
        """
        Core business logic - analyze the data.

        Returns:
            Dictionary of results
        """
        pass

    def generate_output(self, results: Dict[str, Any]) -> bytes:
        """
        Generate downloadable output file.

        Returns:
            Excel file as bytes
        """
        from utils.formatters import dataframe_to_excel
        return dataframe_to_excel(results.get('data'))

    def run(self):
        """Main execution flow - orchestrates everything."""
        try:
            self.render_ui()

            if self.data is None:
                return

            is_valid, error_msg = self.validate_data(self.data)
            if not is_valid:
                st.error(f"❌ {error_msg}")
                return

            self.results = self.analyze(self.data)

            self.display_results(self.results)

            if self.results:
                output = self.generate_output(self.results)
                st.download_button(
                    label="📥 Download Results",
                    data=output,
                    file_name=f"{self.__class__.__name__}_results.xlsx",
                    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
                )

        except Exception as e:
            logger.exception(f"{self.__class__.__name__} failed")
            st.error(f"❌ Error: {str(e)}")
            st.exception(e)

    def display_results(self, results: Dict[str, Any]):
        """Display results in UI - override in subclass."""
        st.success("✅ Analysis complete!")
        st.json(results)
