# app.py
# Run:
#   streamlit run app.py
#
# Habits live in st.session_state only: a browser reload starts over
# from the two default habits.

import streamlit as st

from app_utils.config import configure_logging, load_settings
from app_utils.plots import breakdown_bar
from app_utils.storage import get_store
from features.insights import habit_label, habits_frame, percent_label, progress_breakdown

settings = load_settings()
configure_logging(settings.log_level)

# =========================
# 0) APP CONFIG + THEME
# =========================
st.set_page_config(page_title=settings.page_title, layout="centered", page_icon="✅")

CUSTOM_CSS = """
<style>
.block-container {padding-top: 1.2rem; padding-bottom: 2rem; max-width: 820px;}
h1, h2, h3 {letter-spacing: -0.02em;}
.small {opacity: 0.85; font-size: 0.92rem;}
.eyebrow {opacity: 0.6; font-size: 0.8rem; letter-spacing: 0.3em; text-transform: uppercase;}
.badge {
  display:inline-block;
  padding: 4px 10px;
  border-radius: 999px;
  background: rgba(52, 211, 153, 0.18);
  border: 1px solid rgba(52, 211, 153, 0.35);
  font-size: 0.85rem;
}
.empty {border: 1px dashed rgba(255,255,255,0.15); border-radius: 18px; padding: 28px; text-align: center; opacity: 0.7;}
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

store = get_store(st.session_state, seed=settings.seed)


# =========================
# 1) CALLBACKS
# =========================
def on_add():
    if store.add(st.session_state.get("new_habit", "")) is not None:
        st.session_state["new_habit"] = ""


def on_toggle(habit_id):
    store.toggle(habit_id)


def on_remove(habit_id):
    store.remove(habit_id)


def on_reset():
    store.reset_all()


# =========================
# 2) UI BLOCKS
# =========================
def header_block():
    st.markdown("""
    <div class="eyebrow">Habit Tracker</div>
    <h1 style="margin-top:0.4rem;">Build consistency, one checkmark at a time.</h1>
    <div class="small">
      Add habits you care about, toggle when completed, and keep a quick
      pulse on your daily progress.
    </div>
    """, unsafe_allow_html=True)


def progress_banner(progress):
    c1, c2 = st.columns([2, 1])
    with c1:
        st.markdown(f"""
        <div class="small">Today's progress</div>
        <h3 style="margin:0;">{progress.label}</h3>
        """, unsafe_allow_html=True)
    with c2:
        st.markdown(f'<div class="badge">{percent_label(progress)}</div>', unsafe_allow_html=True)
        st.button("Reset today", key="reset_all", on_click=on_reset, type="primary")

    st.progress(progress.progress)


def add_form():
    c1, c2 = st.columns([3, 1])
    with c1:
        st.text_input(
            "Add a habit",
            key="new_habit",
            placeholder="Add a new habit (e.g. 20-minute walk)",
            label_visibility="collapsed",
        )
    with c2:
        st.button("Add habit", key="add_habit", on_click=on_add, use_container_width=True)


def habit_list(habits):
    c1, c2 = st.columns([2, 1])
    c1.subheader("Your habits")
    c2.caption("No habits yet." if not habits else "Tap to toggle.")

    if not habits:
        st.markdown('<div class="empty">Start by adding your first habit above.</div>', unsafe_allow_html=True)
        return

    for h in habits:
        row = st.columns([4, 1])
        row[0].button(habit_label(h), key=f"toggle_{h.id}", on_click=on_toggle, args=(h.id,), use_container_width=True)
        row[1].button("Remove", key=f"remove_{h.id}", on_click=on_remove, args=(h.id,), use_container_width=True)


def breakdown_panel(habits, progress):
    with st.expander("Breakdown"):
        fig = breakdown_bar(progress_breakdown(progress))
        if fig is None:
            st.caption("The chart appears once you have habits.")
        else:
            st.plotly_chart(fig, use_container_width=True)

        if habits:
            show = habits_frame(habits)
            st.dataframe(show[["name", "completed"]], use_container_width=True, hide_index=True)


# =========================
# 3) APP UI
# =========================
habits = store.habits
progress = store.summary()

header_block()
with st.container(border=True):
    progress_banner(progress)
with st.container(border=True):
    add_form()
habit_list(habits)
breakdown_panel(habits, progress)

st.markdown("---")
st.caption("Habits are kept for this browser session only.")
