"""
Workout Programs - Main Streamlit Application
"""
import logging

import streamlit as st

from config import settings
from src.programs.catalog import ProgramCatalog
from src.view.cards import cooldown_card_html, exercise_card_html, program_card_html, warmup_card_html
from src.view.controller import ProgramView

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="Workout Programs",
    page_icon="💪",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Custom CSS for the cards
st.markdown(
    """
    <style>
    .exercise-block h3, .cooldown-block h3 {
        font-size: 1.1rem;
        color: #0f172a;
    }
    .exercise-block a:hover, .cooldown-block a:hover {
        background-color: #1d4ed8 !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


@st.cache_resource
def get_catalog() -> ProgramCatalog:
    """One catalog per server process; summaries are loaded once"""
    return ProgramCatalog()


# Initialize session state for view management
if "program_view" not in st.session_state:
    st.session_state.program_view = ProgramView()

view: ProgramView = st.session_state.program_view
catalog = get_catalog()


# Sidebar
with st.sidebar:
    st.title("💪 Workout Programs")
    st.markdown("---")
    st.markdown("Pick a program, then follow it day by day")
    if st.button("Reload programs", width="stretch"):
        catalog.refresh()
        st.rerun()


# ============================================================================
# VIEW A: PROGRAM SELECTION
# ============================================================================
def show_program_selection():
    st.title("Choose Your Program")

    if view.last_error:
        st.error(f"Could not open program: {view.last_error}")

    summaries = catalog.summaries
    if not summaries:
        st.info("No programs available. Check that the program files exist in the data source.")
        return

    for summary in summaries:
        with st.container():
            st.markdown(program_card_html(summary), unsafe_allow_html=True)
            if st.button("Start Program →", key=f"select_{summary.id}", type="primary"):
                view.load_program(summary.id)
                st.rerun()


# ============================================================================
# VIEW B: PROGRAM DETAIL WITH DAY TABS
# ============================================================================
def show_program_detail():
    model = view.render()
    header = model.header

    if st.button("← Back to programs"):
        view.return_to_catalog()
        st.rerun()

    st.title(header.title)
    st.markdown(header.description)

    col1, col2 = st.columns(2)
    with col1:
        st.success(f"🎯 **Primary Goal**: {header.primary_goal}")
    with col2:
        if header.safety_note:
            st.warning(f"⚠️ **Safety**: {header.safety_note}")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Warm-up", header.warmup_duration)
    col2.metric("Workout", header.workout_moves)
    col3.metric("Cardio", header.cardio_duration)
    col4.metric("Cool-down", header.cooldown_duration)

    st.markdown("---")

    # Tab strip
    tab_columns = st.columns(len(model.tabs))
    for column, tab in zip(tab_columns, model.tabs):
        with column:
            if st.button(
                tab.label,
                key=f"tab_{tab.day_id}",
                type="primary" if tab.active else "secondary",
                width="stretch",
            ):
                view.select_day(tab.day_id)
                st.rerun()

    # Only the active day is drawn
    day = model.visible_day
    if day.warmup:
        st.markdown(warmup_card_html(day.warmup), unsafe_allow_html=True)
    for exercise in day.exercises:
        st.markdown(exercise_card_html(exercise), unsafe_allow_html=True)

    if model.cooldown:
        st.markdown("---")
        st.subheader(model.cooldown.title)
        if model.cooldown.cardio:
            st.markdown(cooldown_card_html(model.cooldown.cardio, "Watch Demo"), unsafe_allow_html=True)
        if model.cooldown.stretch:
            st.markdown(cooldown_card_html(model.cooldown.stretch), unsafe_allow_html=True)


# Main routing
if view.state.is_loaded:
    show_program_detail()
else:
    show_program_selection()
