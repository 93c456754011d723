"""Streamlit frontend for the Unit Converter.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from convert_it.config import CATEGORIES
from convert_it.converter import default_units, units_for
from pages.components.result_card import render_result

st.set_page_config(
    page_title="Convert It",
    page_icon="🧑‍🚀",
    layout="centered",
    initial_sidebar_state="collapsed"
)

# Initialize session state variables
if 'conversion_type' not in st.session_state:
    st.session_state.conversion_type = CATEGORIES[0]
if 'unit_from' not in st.session_state:
    st.session_state.unit_from, st.session_state.unit_to = default_units(CATEGORIES[0])
if 'unit_value' not in st.session_state:
    st.session_state.unit_value = 0.0


def _reset_units():
    """Select the default pair for the newly chosen conversion type."""
    defaults = default_units(st.session_state.conversion_type)
    if defaults:
        st.session_state.unit_from, st.session_state.unit_to = defaults


st.title("Convert It 🧑‍🚀")

st.markdown("#### Conversion Type")
st.radio(
    "Conversion Type",
    options=CATEGORIES,
    key="conversion_type",
    horizontal=True,
    label_visibility="collapsed",
    on_change=_reset_units,
)

category = st.session_state.conversion_type
units = units_for(category)

st.markdown("#### From - To")
col1, col2 = st.columns(2)
with col1:
    st.selectbox("From Unit", options=units, key="unit_from")
with col2:
    st.selectbox("To Unit", options=units, key="unit_to")

st.markdown(f"#### Unit as {st.session_state.unit_from}")
st.number_input(
    f"Unit as {st.session_state.unit_from}",
    key="unit_value",
    format="%g",
    label_visibility="collapsed",
)

st.markdown("#### Final Conversion Result 🔮")
render_result(
    category,
    st.session_state.unit_value,
    st.session_state.unit_from,
    st.session_state.unit_to,
)

st.caption("See every unit at once on the **Conversion Table** page.")
