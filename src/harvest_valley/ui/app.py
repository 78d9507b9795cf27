"""Harvest Valley - Streamlit entry point.

Run with ``streamlit run src/harvest_valley/ui/app.py``. The FarmSession
lives in ``st.session_state`` and every widget callback goes through the
session's input methods; this page only renders ``session.state``.
"""

from __future__ import annotations

import asyncio

import streamlit as st

from harvest_valley.core.config import get_settings
from harvest_valley.core.constants import GRID_WIDTH
from harvest_valley.core.logging import configure_from_settings, get_logger
from harvest_valley.engine.session import FarmSession
from harvest_valley.models.enums import ToolType
from harvest_valley.ui.components import (
    energy_warning,
    plot_label,
    plot_tooltip,
    seed_tools,
    seed_tooltip,
    tool_label,
)


logger = get_logger(__name__)


# =============================================================================
# Session State
# =============================================================================


def init_session_state() -> FarmSession:
    """Create the farm session on first run and return it."""
    if "farm" not in st.session_state:
        settings = get_settings()
        configure_from_settings(settings)
        st.session_state.farm = FarmSession(
            notification_seconds=settings.ui.notification_seconds,
        )
        logger.info("Initialized farm session state")
    return st.session_state.farm


# =============================================================================
# Sections
# =============================================================================


def render_header(farm: FarmSession) -> None:
    state = farm.state
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("📅 Day", state.day)
    with col2:
        st.metric("🪙 Coins", state.money)
    with col3:
        label = "⚡ Energy (low!)" if energy_warning(state.energy, state.max_energy) else "⚡ Energy"
        st.metric(label, f"{state.energy}/{state.max_energy}")


def render_morning_report(farm: FarmSession) -> None:
    event = farm.state.daily_event
    with st.container(border=True):
        st.caption("MORNING REPORT")
        if event is None:
            st.write("Connecting to satellite...")
            return
        st.subheader(f"{event.weather.icon} {event.weather}")
        st.write(f"_\"{event.message}\"_")


def render_controls(farm: FarmSession) -> None:
    state = farm.state

    st.caption("TOOLS")
    for tool in (ToolType.HOE, ToolType.WATERING_CAN, ToolType.BASKET):
        st.button(
            tool_label(tool),
            key=f"tool-{tool}",
            type="primary" if state.selected_tool == tool else "secondary",
            use_container_width=True,
            on_click=farm.select_tool,
            args=(tool,),
        )

    st.caption("SEEDS")
    for seed in seed_tools():
        st.button(
            tool_label(seed),
            key=f"tool-{seed}",
            help=seed_tooltip(seed),
            type="primary" if state.selected_tool == seed else "secondary",
            use_container_width=True,
            on_click=farm.select_tool,
            args=(seed,),
        )

    st.caption(f"WATER {state.water_level}/{state.max_water}")
    st.progress(state.water_level / state.max_water)
    st.button(
        "Refill at the well",
        key="refill",
        disabled=state.is_sleeping,
        on_click=farm.refill_water,
    )

    if st.button(
        "Sleeping... 💤" if state.is_sleeping else "End Day 🌙",
        key="end-day",
        disabled=state.is_sleeping,
        use_container_width=True,
    ):
        with st.spinner("Sleeping... 💤"):
            asyncio.run(farm.end_day())
        st.rerun()

    st.caption("Tips: Use Hoe to till, Seeds to plant, Water to grow crops. Harvest when ready!")


def render_sidebar(farm: FarmSession) -> None:
    with st.sidebar:
        st.caption(f"{get_settings().app_name} v{get_settings().app_version}")
        st.button(
            "Start a new farm",
            key="reset",
            disabled=farm.is_sleeping,
            on_click=farm.reset,
        )


def render_grid(farm: FarmSession) -> None:
    state = farm.state
    width = GRID_WIDTH
    for start in range(0, len(state.plots), width):
        columns = st.columns(width)
        for column, plot in zip(columns, state.plots[start:start + width]):
            with column:
                st.button(
                    plot_label(plot),
                    key=f"plot-{plot.id}",
                    help=plot_tooltip(plot),
                    use_container_width=True,
                    disabled=state.is_sleeping,
                    on_click=farm.click_plot,
                    args=(plot.id,),
                )


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the farm page."""
    st.set_page_config(
        page_title=get_settings().ui.page_title,
        page_icon="🌾",
        layout="wide",
    )
    farm = init_session_state()

    render_sidebar(farm)
    st.title("🌾 Harvest Valley")
    render_header(farm)
    st.divider()

    left, right = st.columns([4, 8])
    with left:
        render_morning_report(farm)
        render_controls(farm)
    with right:
        render_grid(farm)

    notification = farm.notification
    if notification:
        st.toast(notification)


if __name__ == "__main__":
    main()
