"""Conversion result components for Streamlit pages."""

import streamlit as st

from convert_it.converter import display_result, format_value


def render_result(category: str, value: float, source_unit: str, target_unit: str):
    """Render the converted value as a large metric.

    Args:
        category: Conversion type (e.g., "Length")
        value: Value entered by the user
        source_unit: Unit the value is given in
        target_unit: Unit to show the result in

    Same-unit selections show the input unconverted.
    """
    result = display_result(category, value, source_unit, target_unit)
    st.metric(
        label=f"{format_value(value)} {source_unit} in {target_unit}",
        value=f"{format_value(result)} 👋",
    )
