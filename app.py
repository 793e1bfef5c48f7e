# app.py
from __future__ import annotations

"""
Streamlit UI (nth element from the back)

What this UI does:
- Sidebar inputs (list size, offset n, trace options)
- KPI tiles for both finders
- Leader/follower chart for the two-pointer finder
- Depth/distance chart for the recursive finder
- Cross-check table of both finders for every n
- CSV download
"""

from dotenv import load_dotenv
load_dotenv(override=True)

import sys

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from ds_linkedlist import build_sequential, to_values
from nth_from_back import (
    env_int,
    find_from_back,
    find_from_back_iterative,
    trace_from_back,
    trace_from_back_iterative,
)


# -----------------------------
# Page config + styling
# -----------------------------

st.set_page_config(page_title="Nth From Back", page_icon="N", layout="wide")

st.markdown(
    """
    <style>
      .block-container { padding-top: 1.1rem; padding-bottom: 2rem; }
      div[data-testid="stMetric"] { background: rgba(255,255,255,0.03); padding: 12px; border-radius: 14px; }
      .small-note { opacity: 0.8; font-size: 0.92rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title("Nth element from the back")
st.caption("Two pointers vs. recursion on a singly linked list of 0 .. size-1.")


# -----------------------------
# Sidebar controls
# -----------------------------

default_size = max(0, min(env_int("NTH_LIST_SIZE", 100), 2000))

with st.sidebar:
    st.header("Inputs")

    size = st.number_input("List size", min_value=0, max_value=2000, value=default_size, step=1)
    n = st.number_input("n (0 = tail)", min_value=0, max_value=2000, value=5, step=1)

    st.markdown("---")
    st.subheader("Traces")
    show_iterative = st.checkbox("Two-pointer trace", value=True)
    show_recursive = st.checkbox("Recursive trace", value=True)

    st.markdown("---")
    run = st.button("Find", type="primary", use_container_width=True)

    st.markdown("---")
    st.markdown(
        f'<div class="small-note">Recursion limit: {sys.getrecursionlimit()}. '
        "Longer lists make the recursive finder fail.</div>",
        unsafe_allow_html=True,
    )


# -----------------------------
# Caching
# -----------------------------

@st.cache_data(show_spinner=False)
def _run_cached(size_: int, n_: int) -> dict:
    head = build_sequential(size_)
    found_it, steps_it = trace_from_back_iterative(head, n_)

    audit = {
        "size": size_,
        "n": n_,
        "first_values": to_values(head)[:10],
        "recursion_limit": sys.getrecursionlimit(),
    }
    try:
        found_rec, steps_rec = trace_from_back(head, n_)
        rec_error = None
    except RecursionError as e:
        found_rec, steps_rec, rec_error = None, [], f"RecursionError: {e}"
    audit["recursive_error"] = rec_error

    return {
        "iterative": None if found_it is None else found_it.val,
        "recursive": None if found_rec is None else found_rec.val,
        "steps_it": pd.DataFrame(steps_it),
        "steps_rec": pd.DataFrame(steps_rec),
        "rec_error": rec_error,
        "audit": audit,
    }


@st.cache_data(show_spinner=False)
def _cross_check(size_: int) -> pd.DataFrame:
    head = build_sequential(size_)
    rows = []
    for k in range(size_ + 1):
        it = find_from_back_iterative(head, k)
        try:
            rec = find_from_back(head, k)
            rec_val = None if rec is None else rec.val
        except RecursionError:
            rec_val = "RecursionError"
        it_val = None if it is None else it.val
        rows.append({"n": k, "iterative": it_val, "recursive": rec_val, "agree": it_val == rec_val})
    return pd.DataFrame(rows)


# -----------------------------
# Plot helpers
# -----------------------------

def _plot_two_pointer(steps: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    if not steps.empty:
        fig.add_trace(go.Scatter(x=steps["step"], y=steps["leader"], mode="lines+markers", name="Leader"))
        fig.add_trace(go.Scatter(x=steps["step"], y=steps["follower"], mode="lines+markers", name="Follower"))

    fig.update_layout(
        height=380,
        margin=dict(l=10, r=10, t=30, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Step",
        yaxis_title="Node value",
    )
    return fig


def _plot_recursion(steps: pd.DataFrame) -> go.Figure:
    """
    Plot:
    - stack depth per frame event (descend then unwind)
    - distance from the tail reported on each unwind
    """
    fig = go.Figure()
    if not steps.empty:
        fig.add_trace(go.Scatter(x=steps["step"], y=steps["depth"], mode="lines", name="Depth"))
        unwind = steps[steps["phase"] == "unwind"]
        fig.add_trace(go.Scatter(x=unwind["step"], y=unwind["distance"], mode="markers", name="Distance"))

    fig.update_layout(
        height=380,
        margin=dict(l=10, r=10, t=30, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Frame event",
        yaxis_title="Depth / distance",
    )
    return fig


# -----------------------------
# Main
# -----------------------------

if not run:
    st.info("Use the left sidebar to run the finders.")
    st.stop()

with st.spinner("Walking the list..."):
    try:
        out = _run_cached(int(size), int(n))
        check = _cross_check(int(size))
    except (ValueError, TypeError) as e:
        st.error(str(e))
        st.stop()

c1, c2, c3, c4 = st.columns(4)
c1.metric("Size", f"{int(size)}")
c2.metric("Two pointers", "None" if out["iterative"] is None else f"{out['iterative']}")
c3.metric("Recursive", "None" if out["recursive"] is None else f"{out['recursive']}")
c4.metric("All n agree", "Yes" if bool(check["agree"].all()) else "No")

if out["rec_error"]:
    st.error(out["rec_error"])

st.markdown("")

tab_trace, tab_check, tab_export, tab_debug = st.tabs(["Trace", "Cross-check", "Export", "Debug"])

with tab_trace:
    left, right = st.columns(2, gap="large")

    with left:
        st.subheader("Two pointers")
        if show_iterative:
            st.plotly_chart(_plot_two_pointer(out["steps_it"]), use_container_width=True)
        st.caption("Leader runs n nodes ahead, then both move until the leader is the tail.")

    with right:
        st.subheader("Recursion")
        if show_recursive:
            st.plotly_chart(_plot_recursion(out["steps_rec"]), use_container_width=True)
        st.caption("One frame per node. Distance counts up from -1 past the tail while unwinding.")

with tab_check:
    st.subheader("Both finders, every n")
    st.dataframe(check, use_container_width=True)

with tab_export:
    st.subheader("Export")
    st.download_button(
        "Download cross-check CSV",
        check.to_csv(index=False).encode("utf-8"),
        file_name=f"nth_from_back_{int(size)}.csv",
        mime="text/csv",
        use_container_width=True,
    )

    st.markdown("Two-pointer steps")
    st.dataframe(out["steps_it"], use_container_width=True)
    st.markdown("Recursive frame events")
    st.dataframe(out["steps_rec"], use_container_width=True)

with tab_debug:
    st.subheader("Debug")
    st.json(out["audit"])
