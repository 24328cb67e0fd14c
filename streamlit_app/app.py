"""Hybrid Periodization: Streamlit plan viewer.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from periodization_engine.engine import MesocycleGenerator
from periodization_engine.exceptions import ConfigurationError
from periodization_engine.math.training_max import KEY_LIFTS
from periodization_engine.models.enums import (
    DomainPriority,
    Equipment,
    TrainingLevel,
    WeekDay,
)
from periodization_engine.models.mesocycle import MesocycleSession, format_session_summary
from periodization_engine.scheduling import generate_week_template
from periodization_engine.serialization import to_plan_json_string

from config import DEFAULT_MESOCYCLE_WEEKS, LOG_LEVEL
from helpers import (
    DAY_NAMES,
    DOMAIN_COLORS,
    DOMAIN_LABELS,
    build_mesocycle_config,
    format_duration,
    format_rep_range,
    format_rest,
    format_weight,
    label,
    lift_max_entries,
    list_profiles,
    load_profile,
    mesocycle_frame,
    save_profile,
    volume_frame,
)

logging.basicConfig(level=LOG_LEVEL)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Hybrid Periodization",
    page_icon="🏋️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached generator
# ---------------------------------------------------------------------------


@st.cache_resource
def get_generator() -> MesocycleGenerator:
    return MesocycleGenerator()


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _render_session(session: MesocycleSession) -> None:
    """Render one session as a colour-coded card with its exercise table."""
    color = DOMAIN_COLORS.get(session.domain, "#CCCCCC")
    title = f"{DAY_NAMES[session.day.offset]} {session.date:%d %b} · {session.session_type}"
    st.markdown(
        f'<div style="border-left:6px solid {color};padding:4px 12px;margin:6px 0;">'
        f"<strong>{title}</strong><br>"
        f'<small style="color:#666;">{format_session_summary(session)}</small></div>',
        unsafe_allow_html=True,
    )
    if not session.exercises:
        return
    with st.expander(f"{len(session.exercises)} exercises"):
        st.table(
            [
                {
                    "Exercise": ex.exercise.name,
                    "Muscle": label(ex.muscle),
                    "Sets": ex.sets,
                    "Reps": format_rep_range(ex.rep_range_min, ex.rep_range_max),
                    "RPE": f"{ex.target_rpe:g}",
                    "Rest": format_rest(ex.rest_seconds),
                    "Weight": format_weight(ex.suggested_weight_kg),
                }
                for ex in session.exercises
            ]
        )


def _bump_widget_version() -> None:
    """Force widgets to re-read ``value=`` after a profile is loaded."""
    st.session_state["_wv"] = st.session_state.get("_wv", 0) + 1


def _wk(name: str) -> str:
    """Return a versioned widget key like ``weeks_v0``."""
    v = st.session_state.get("_wv", 0)
    return f"{name}_v{v}"


def _get_pdata(key: str, default):
    """Get value from loaded profile data, or return default."""
    return st.session_state.get("profile_data", {}).get(key, default)


def _names(enum_cls) -> list[str]:
    return [m.name for m in enum_cls]


# ---------------------------------------------------------------------------
# Sidebar: athlete profile
# ---------------------------------------------------------------------------

st.sidebar.title("Athlete Profile")

with st.sidebar.expander("Mesocycle", expanded=True):
    name = st.text_input("Name", value=_get_pdata("name", "Hybrid Block"), key=_wk("name"))
    total_weeks = st.number_input(
        "Weeks (incl. deload)", 3, 12,
        int(_get_pdata("total_weeks", DEFAULT_MESOCYCLE_WEEKS)), key=_wk("weeks"),
    )
    start_date = st.date_input(
        "Start date", value=_get_pdata("start_date", date.today()), key=_wk("start"),
    )
    include_deload = st.checkbox(
        "Final week is a deload", value=bool(_get_pdata("include_deload", True)),
        key=_wk("deload"),
    )
    training_level = st.selectbox(
        "Training level", _names(TrainingLevel),
        index=_names(TrainingLevel).index(_get_pdata("training_level", "INTERMEDIATE")),
        format_func=lambda n: n.title(), key=_wk("level"),
    )

with st.sidebar.expander("Schedule", expanded=True):
    available_days = st.multiselect(
        "Available days", _names(WeekDay),
        default=_get_pdata("available_days", ["MONDAY", "WEDNESDAY", "FRIDAY"]),
        format_func=lambda n: n.title(), key=_wk("days"),
    )
    max_sessions_per_day = st.number_input(
        "Max sessions per day", 1, 3, int(_get_pdata("max_sessions_per_day", 1)),
        key=_wk("per_day"),
    )
    session_duration_min = st.number_input(
        "Session duration (min)", 20, 180, int(_get_pdata("session_duration_min", 60)),
        step=5, key=_wk("duration"),
    )

with st.sidebar.expander("Domain priorities", expanded=True):
    priorities = {}
    for field_name, default in (
        ("strength_priority", "PRIMARY"),
        ("rucking_priority", "SECONDARY"),
        ("cardio_priority", "MAINTENANCE"),
    ):
        priorities[field_name] = st.selectbox(
            field_name.split("_")[0].title(), _names(DomainPriority),
            index=_names(DomainPriority).index(_get_pdata(field_name, default)),
            format_func=lambda n: n.title(), key=_wk(field_name),
        )

with st.sidebar.expander("Equipment"):
    equipment = st.multiselect(
        "Available equipment", _names(Equipment),
        default=_get_pdata("equipment", ["BARBELL", "DUMBBELLS", "BENCH", "SQUAT_RACK"]),
        format_func=lambda n: n.replace("_", " ").title(), key=_wk("equipment"),
    )

with st.sidebar.expander("Key lifts (optional)"):
    bodyweight_kg = st.number_input(
        "Bodyweight kg (0 = unknown)", 0.0, 250.0, float(_get_pdata("bodyweight_kg", 0.0)),
        step=0.5, key=_wk("bodyweight"),
    )
    saved_lifts = _get_pdata("lifts", {})
    lifts: dict[str, dict] = {}
    for lift in KEY_LIFTS:
        st.caption(lift.name)
        c_w, c_r, c_rir = st.columns(3)
        data = saved_lifts.get(lift.key, {})
        weight = c_w.number_input(
            "kg", 0.0, 500.0, float(data.get("weight_kg", 0.0)), step=2.5,
            key=_wk(f"{lift.key}_kg"),
        )
        reps = c_r.number_input(
            "reps", 0, 30, int(data.get("reps", 0)), key=_wk(f"{lift.key}_reps"),
        )
        rir = c_rir.number_input(
            "RIR", 0, 5, int(data.get("rir", 0)), key=_wk(f"{lift.key}_rir"),
        )
        if weight and reps:
            lifts[lift.key] = {"weight_kg": weight, "reps": reps, "rir": rir}


def _collect_profile_from_sidebar() -> dict:
    """Collect all sidebar widget values into a dict."""
    return {
        "name": name,
        "total_weeks": total_weeks,
        "start_date": start_date,
        "include_deload": include_deload,
        "training_level": training_level,
        "available_days": available_days,
        "max_sessions_per_day": max_sessions_per_day,
        "session_duration_min": session_duration_min,
        "equipment": equipment,
        "bodyweight_kg": bodyweight_kg,
        "lifts": lifts,
        **priorities,
    }


with st.sidebar.expander("Load / Save Profile"):
    profiles = list_profiles()
    if profiles:
        selected_profile = st.selectbox("Load profile", ["(none)"] + profiles)
        if st.button("Load") and selected_profile != "(none)":
            st.session_state["profile_data"] = load_profile(selected_profile)
            _bump_widget_version()
            st.rerun()
    else:
        st.caption("No saved profiles yet.")

    save_name = st.text_input("Save as", value="my_profile")
    if st.button("Save Profile"):
        save_profile(save_name, _collect_profile_from_sidebar())
        st.success(f"Saved as '{save_name}'")


# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

st.title("Hybrid Periodization")

if st.button("Generate Mesocycle", type="primary"):
    profile = _collect_profile_from_sidebar()
    try:
        config = build_mesocycle_config(profile)
        st.session_state["last_mesocycle"] = get_generator().generate(config)
        st.session_state["last_week_template"] = generate_week_template(config)
        st.session_state["last_lift_maxes"] = lift_max_entries(profile)
    except ConfigurationError as e:
        for problem in e.problems:
            st.error(problem)

mesocycle = st.session_state.get("last_mesocycle")
if mesocycle is None:
    st.info("Fill in the profile and click **Generate Mesocycle** to get started.")
    st.stop()

template = st.session_state["last_week_template"]
progress = mesocycle.progress(date.today())

mc1, mc2, mc3, mc4 = st.columns(4)
mc1.metric("Weeks", str(len(mesocycle.weeks)))
mc2.metric("Sessions / week", str(template.total_sessions))
mc3.metric("Hours / week", f"{template.total_hours:.1f}")
mc4.metric("Current week", f"{progress.current_week} / {progress.total_weeks}")

st.caption(
    " · ".join(
        f"{DOMAIN_LABELS[domain]}: {count}"
        for domain, count in template.domain_breakdown.items()
    )
)

st.download_button(
    "Download plan (.json)",
    data=to_plan_json_string(mesocycle),
    file_name=f"{mesocycle.config.name[:32].replace(' ', '_')}.json",
    mime="application/json",
)

week_tabs = st.tabs(
    [f"Week {w.week_number}{' (deload)' if w.is_deload else ''}" for w in mesocycle.weeks]
    + ["Overview", "Training maxes"]
)

for tab, week in zip(week_tabs, mesocycle.weeks):
    with tab:
        wc1, wc2, wc3 = st.columns(3)
        wc1.metric("Volume", f"{week.volume_multiplier:.2f}×")
        wc2.metric("Target RPE", f"{week.target_rpe:g}")
        wc3.metric("Duration", format_duration(week.total_duration_min))
        if week.is_deload:
            st.warning("Deload week: half volume, reduced intensity")

        col_sessions, col_volume = st.columns([3, 2])
        with col_sessions:
            for session in week.sessions:
                _render_session(session)
        with col_volume:
            st.subheader("Weekly volume")
            st.dataframe(volume_frame(week), use_container_width=True)

with week_tabs[-2]:
    st.dataframe(mesocycle_frame(mesocycle), use_container_width=True, hide_index=True)

with week_tabs[-1]:
    maxes = st.session_state.get("last_lift_maxes", {})
    if not maxes:
        st.info("Enter a bodyweight or a logged set to estimate training maxes.")
    for key, entry in maxes.items():
        st.markdown(
            f"**{key.replace('_', ' ').title()}**: E1RM {format_weight(entry.e1rm)}, "
            f"TM {format_weight(entry.training_max)} "
            f"({label(entry.method)}, {label(entry.confidence)} confidence)"
        )
