"""Conversion Table Page.

Show one value in every unit of a conversion type.
"""

import streamlit as st

from convert_it.config import CATEGORIES
from convert_it.converter import default_units, format_value, units_for
from pages.components.charts import conversion_dataframe, create_conversion_bar_chart

st.set_page_config(page_title="Conversion Table | Convert It", page_icon="📏", layout="wide")
st.title("📏 Conversion Table")

col1, col2, col3 = st.columns([2, 2, 2])

with col1:
    category = st.selectbox("Conversion Type", options=CATEGORIES)

with col2:
    units = units_for(category)
    default_from, _ = default_units(category)
    source_unit = st.selectbox("Unit", options=units, index=units.index(default_from))

with col3:
    value = st.number_input("Value", value=1.0, format="%g")

df = conversion_dataframe(category, value, source_unit)

st.markdown(f"### {format_value(value)} {source_unit} is")
st.dataframe(
    df.assign(Value=df["Value"].map(format_value)),
    hide_index=True,
    use_container_width=True,
)

fig = create_conversion_bar_chart(df, source_unit)
st.plotly_chart(fig, use_container_width=True)
