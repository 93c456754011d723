"""Chart components using Plotly for data visualization."""

import pandas as pd
import plotly.express as px

from convert_it.converter import conversion_table


def conversion_dataframe(category: str, value: float, source_unit: str) -> pd.DataFrame:
    """Build a dataframe with the value expressed in every unit of the category."""
    rows = conversion_table(category, value, source_unit)
    return pd.DataFrame(rows, columns=["Unit", "Value"])


def create_conversion_bar_chart(df: pd.DataFrame, source_unit: str):
    """Create bar chart comparing a value across units.

    Args:
        df: DataFrame from conversion_dataframe()
        source_unit: Unit the value was entered in (highlighted)

    Returns:
        Plotly figure
    """
    df = df.assign(Source=df["Unit"] == source_unit)

    fig = px.bar(
        df,
        x="Unit",
        y="Value",
        color="Source",
        title=f"Same quantity, every unit (from {source_unit})",
        color_discrete_map={True: '#4B0082', False: '#4ECDC4'},
        log_y=bool((df["Value"] > 0).all()),
    )

    fig.update_layout(showlegend=False, yaxis_title="Value", xaxis_title="")

    return fig
