"""Workout Tracker — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from workout_tracker.examples import example_workouts
from workout_tracker.exceptions import WorkoutValidationError
from workout_tracker.models.enums import ACTIVITY_LABELS
from workout_tracker.report import build_summary

from helpers import (
    ACTIVITY_NAMES,
    DEFAULT_STEP_LENGTHS,
    REPETITION_LABELS,
    build_activity,
    format_duration,
    summaries_table,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Workout Tracker",
    page_icon="🏃",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Sidebar — Workout inputs
# ---------------------------------------------------------------------------

st.sidebar.title("Workout")

kind_name = st.sidebar.selectbox(
    "Activity",
    list(ACTIVITY_NAMES),
    format_func=lambda name: ACTIVITY_LABELS[ACTIVITY_NAMES[name]],
)
activity_type = ACTIVITY_NAMES[kind_name]

with st.sidebar.expander("Workout", expanded=True):
    repetition_count = st.number_input(
        REPETITION_LABELS[activity_type], min_value=0, value=5000, step=100
    )
    step_length = st.number_input(
        "Step / stroke length (m)",
        min_value=0.01,
        value=DEFAULT_STEP_LENGTHS[activity_type],
        step=0.01,
        key=f"step_length_{kind_name}",
    )
    duration_min = st.number_input("Duration (min)", min_value=0.0, value=30.0, step=5.0)
    weight_kg = st.number_input("Weight (kg)", min_value=0.0, value=85.0, step=0.5)

params = {
    "repetition_count": repetition_count,
    "step_length": step_length,
    "duration_min": duration_min,
    "weight_kg": weight_kg,
}

if kind_name == "walking":
    with st.sidebar.expander("Walking", expanded=True):
        params["height_cm"] = st.number_input("Height (cm)", min_value=1.0, value=185.0)
elif kind_name == "swimming":
    with st.sidebar.expander("Pool", expanded=True):
        params["pool_length_m"] = st.number_input("Pool length (m)", min_value=0, value=50)
        params["pool_crossings"] = st.number_input("Pool crossings", min_value=0, value=5)


# ---------------------------------------------------------------------------
# Main content — 2 tabs
# ---------------------------------------------------------------------------

st.title("Workout Tracker")

tab_report, tab_examples = st.tabs(["Report", "Examples"])

with tab_report:
    try:
        activity = build_activity(activity_type, params)
    except WorkoutValidationError as exc:
        st.error(str(exc))
    else:
        summary = build_summary(activity)
        cols = st.columns(4)
        cols[0].metric("Duration", format_duration(summary.duration_minutes))
        cols[1].metric("Distance", f"{summary.distance_km:.2f} km")
        cols[2].metric("Avg speed", f"{summary.avg_speed_kmh:.2f} km/h")
        cols[3].metric("Calories", f"{summary.calories_kcal:.2f} kcal")
        st.code(summary.render(), language=None)

with tab_examples:
    workouts = example_workouts()
    st.dataframe(summaries_table(workouts), hide_index=True)
    for workout in workouts:
        st.code(build_summary(workout).render(), language=None)
