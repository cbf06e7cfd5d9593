# app.py
from typing import Dict, Optional

import streamlit as st

from archery_teams.config import DEFAULT_CONFIG, DEFAULT_SAMPLE_ROSTERS, build_config
from archery_teams.constants import CATEGORIES
from archery_teams.export_pdf import render_pdf
from archery_teams.io import parse_roster_bytes, report_lines, save_teams_csv_bytes, teams_dataframe
from archery_teams.models import Roster
from archery_teams.scheduler import schedule_teams
from archery_teams.validation import PreconditionError, RosterInputError


st.set_page_config(page_title="Mixed Archery Team Builder", layout="wide")


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("result", None)     # SearchResult of the last run
    ss.setdefault("progress", [])     # (trial, score) per improvement in the last run

_init_state()


# ---------- Sidebar ----------
with st.sidebar:
    st.header("Search settings")
    patience = st.number_input(
        "Patience (non-improving trials)",
        min_value=1, max_value=int(DEFAULT_CONFIG["patience"]) * 5,
        value=200_000, step=10_000,
        help="The search stops after this many trials in a row without a better mapping.",
    )
    use_seed = st.checkbox("Fixed random seed", value=False)
    seed = st.number_input("Seed", min_value=0, value=42, step=1, disabled=not use_seed)
    use_samples = st.checkbox("Use sample rosters", value=False)


# ---------- Rosters ----------
st.title("Mixed Archery Team Builder")
st.caption("One compound, one recurve and one barebow archer per team, balanced on qualification score.")

cols = st.columns(len(CATEGORIES))
rosters: Dict[str, Roster] = {}
for col, cat in zip(cols, CATEGORIES):
    with col:
        st.subheader(cat)
        data: Optional[bytes] = None
        if use_samples:
            data = DEFAULT_SAMPLE_ROSTERS[cat].encode("utf-8")
        else:
            upload = st.file_uploader(f"{cat} roster (name, score per line)", type=["txt", "csv"], key=f"upload_{cat}")
            if upload is not None:
                data = upload.getvalue()
        if data is None:
            st.info("No roster loaded.")
            continue
        try:
            roster = parse_roster_bytes(data, cat, source=f"{cat} roster")
        except RosterInputError as e:
            st.error(str(e))
            continue
        rosters[cat] = roster
        st.dataframe(
            [{"Archer": n, "Score": s} for n, s in roster.items()],
            hide_index=True, use_container_width=True,
        )


# ---------- Search ----------
ready = len(rosters) == len(CATEGORIES)
if st.button("Build teams", type="primary", disabled=not ready):
    config = build_config(overrides={"patience": int(patience), "random_seed": int(seed) if use_seed else None})
    progress = []
    try:
        with st.spinner("Searching for balanced teams..."):
            result = schedule_teams(rosters, config, on_improvement=lambda score, trial: progress.append((trial, score)))
    except PreconditionError as e:
        st.error(str(e))
    else:
        st.session_state.result = result
        st.session_state.progress = progress

result = st.session_state.result
if result is not None:
    st.subheader(f"Teams (balance score {result.score})")
    st.write(f"{result.trials} trials, {result.improvements} improvement(s).")
    df = teams_dataframe(result.teams)
    st.dataframe(df, hide_index=True, use_container_width=True)
    if st.session_state.progress:
        st.line_chart({"best score": [s for _, s in st.session_state.progress]})

    c1, c2, c3 = st.columns(3)
    c1.download_button("Download report", data="\n".join(report_lines(result.teams)) + "\n",
                       file_name="generated_teams.txt")
    c2.download_button("Download CSV", data=save_teams_csv_bytes(result.teams), file_name="generated_teams.csv")
    c3.download_button("Download PDF", data=render_pdf("Mixed Team Draw", df, score=result.score),
                       file_name="generated_teams.pdf", mime="application/pdf")
