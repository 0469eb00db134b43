"""Migration status donut chart on the Overview tab.

Clicking a segment (or its legend button) opens the VMs tab filtered to that
segment.
"""

from typing import Any, List, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from config.config_loader import get_chart_config
from config.constants import SEGMENT_MIGRATABLE, SEGMENT_NON_MIGRATABLE
from config.logging_config import get_logger
from src.inventory.facets import MigrationSummary
from src.inventory.navigation import SEGMENT_HAS_ISSUES, filters_for_segment, navigate_to_vms

from .location import StreamlitLocation

logger = get_logger("app.migration_chart")


def open_segment(segment: str) -> bool:
    """
    Navigate to the VMs tab filtered to a chart segment.

    Returns:
        True if the segment resolved to filters.
    """
    filters = filters_for_segment(segment)
    if filters is None:
        return False
    logger.info(f"Chart click-through: {segment} -> {filters.get_summary()}")
    navigate_to_vms(StreamlitLocation(), filters)
    return True


def _selected_segment(event: Any) -> Optional[str]:
    if event is None:
        return None
    points: List[dict] = event.selection.get("points", []) if event.selection else []
    for point in points:
        label = point.get("label")
        if label:
            return label
    return None


def render_migration_chart(summary: MigrationSummary, key: str = "migration_chart") -> None:
    """
    Render the migratable vs non-migratable donut.

    Args:
        summary: Counts for the whole inventory.
        key: Unique key prefix for widgets.
    """
    st.subheader("Migration Status")

    if summary.total == 0:
        st.info("No VMs in inventory.")
        return

    chart_config = get_chart_config()
    df = pd.DataFrame(
        {
            "segment": [SEGMENT_MIGRATABLE, SEGMENT_NON_MIGRATABLE],
            "count": [summary.migratable, summary.non_migratable],
        }
    )

    fig = px.pie(
        df,
        values="count",
        names="segment",
        color="segment",
        color_discrete_map={
            segment: chart_config.get_segment_color(segment) for segment in df["segment"]
        },
        hole=0.6,
    )

    fig.update_traces(
        textposition="inside",
        textinfo="value+label",
    )

    fig.update_layout(
        showlegend=False,
        margin=dict(l=0, r=0, t=30, b=0),
        height=chart_config.height,
        annotations=[dict(text=f"{summary.total:,} VMs", showarrow=False, font_size=16)],
    )

    event = st.plotly_chart(
        fig,
        use_container_width=True,
        on_select="rerun",
        selection_mode="points",
        key=f"{key}_plot",
    )

    segment = _selected_segment(event)
    if segment and open_segment(segment):
        st.rerun()

    col1, col2, col3 = st.columns(3)
    with col1:
        st.button(
            f"{summary.migratable:,} migratable",
            key=f"{key}_migratable",
            on_click=open_segment,
            args=(SEGMENT_MIGRATABLE,),
        )
    with col2:
        st.button(
            f"{summary.non_migratable:,} non-migratable",
            key=f"{key}_non_migratable",
            on_click=open_segment,
            args=(SEGMENT_NON_MIGRATABLE,),
        )
    with col3:
        st.button(
            f"{summary.with_issues:,} with issues",
            key=f"{key}_issues",
            on_click=open_segment,
            args=(SEGMENT_HAS_ISSUES,),
        )
