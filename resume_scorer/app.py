"""
Resume Scorer – Streamlit frontend.
No scoring logic in layout; extraction in cv_pipeline, scoring in scoring, exports in services.
"""

from typing import Optional

import streamlit as st

from resume_scorer.config import MAX_UPLOAD_BYTES, MIN_RESUME_CHARS, SUPPORTED_EXTENSIONS
from resume_scorer.cv_pipeline import ExtractionError, parse_file
from resume_scorer.schemas.score_result import ScoreResult
from resume_scorer.scoring import score
from resume_scorer.services.report_service import (
    CATEGORY_LABELS,
    export_json,
    generate_report,
    report_filename,
)
from resume_scorer.utils.helpers import format_file_size

# Session state keys owned by this page
TEXT_KEY = "resume_text"
RESULT_KEY = "result"
ERROR_KEY = "error"
UPLOAD_NAME_KEY = "uploaded_name"


def _init_state() -> None:
    defaults = {TEXT_KEY: "", RESULT_KEY: None, ERROR_KEY: None, UPLOAD_NAME_KEY: None}
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _reset() -> None:
    """Clear text and results (the 'Analyze again' action)."""
    st.session_state[TEXT_KEY] = ""
    st.session_state[RESULT_KEY] = None
    st.session_state[ERROR_KEY] = None
    st.session_state[UPLOAD_NAME_KEY] = None


def _load_upload(uploaded) -> None:
    """Extract text from a newly uploaded file into the text area state."""
    if uploaded is None or uploaded.name == st.session_state[UPLOAD_NAME_KEY]:
        return
    st.session_state[UPLOAD_NAME_KEY] = uploaded.name
    try:
        st.session_state[TEXT_KEY] = parse_file(uploaded.getvalue(), uploaded.name)
        st.session_state[ERROR_KEY] = None
    except ExtractionError as e:
        st.session_state[ERROR_KEY] = e.message


def _render_result(result: ScoreResult) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Total score", f"{result.total_score:g}")
    col2.metric("Base score", f"{result.base_score:g} / 100")
    col3.metric("Specialization bonus", f"+{result.specialization_bonus}")

    st.subheader("Category scores")
    for category, cat_score in result.category_scores.items():
        label = CATEGORY_LABELS.get(category, category.value)
        bonus = f" (+{cat_score.bonus:g} bonus)" if cat_score.bonus else ""
        st.markdown(f"**{label}:** {cat_score.total:g} / {cat_score.maximum:g}{bonus}")
        st.progress(min(cat_score.percentage / 100.0, 1.0))

    if result.specializations:
        st.subheader("Specializations")
        for specialization in result.specializations:
            st.markdown(f"- **{specialization.type.value.title()}** (level {specialization.level}): +{specialization.bonus}")

    st.subheader("Recommended jobs")
    for job in result.job_recommendations:
        with st.container():
            st.markdown(f"**{job.category}** · {job.match}% match")
            if job.reasons:
                st.caption("; ".join(job.reasons))

    st.subheader("Suggestions")
    for text in result.suggestions:
        st.markdown(f"- {text}")

    dcol1, dcol2 = st.columns(2)
    with dcol1:
        st.download_button(
            "Download report",
            data=generate_report(result).encode("utf-8"),
            file_name=report_filename(),
            mime="text/plain",
            key="export_report",
        )
    with dcol2:
        st.download_button(
            "Export JSON",
            data=export_json(result).encode("utf-8"),
            file_name=report_filename(extension="json"),
            mime="application/json",
            key="export_json",
        )
    st.button("Analyze again", on_click=_reset, key="analyze_again_btn")


def render_layout() -> None:
    """Streamlit page layout."""
    st.set_page_config(page_title="Resume Scorer", layout="wide")
    st.title("Resume Scorer")
    st.markdown("*Upload or paste a résumé to get a 100-point score, job matches and suggestions.*")
    st.divider()
    _init_state()

    # ----- Input section -----
    uploaded = st.file_uploader(
        "Upload résumé",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
        key="upload",
        help=f"PDF or Word (.docx), up to {format_file_size(MAX_UPLOAD_BYTES)}.",
    )
    _load_upload(uploaded)

    text = st.text_area("Résumé text", key=TEXT_KEY, height=300, placeholder="Paste your résumé here…")
    st.caption(f"{len(text)} characters")

    analyze_clicked = st.button("Analyze", type="primary", key="analyze_btn")
    if analyze_clicked:
        if len(text.strip()) < MIN_RESUME_CHARS:
            st.session_state[ERROR_KEY] = f"Please provide at least {MIN_RESUME_CHARS} characters of résumé text."
            st.session_state[RESULT_KEY] = None
        else:
            st.session_state[ERROR_KEY] = None
            with st.spinner("Analyzing résumé…"):
                st.session_state[RESULT_KEY] = score(text)

    if st.session_state.get(ERROR_KEY):
        st.error(st.session_state[ERROR_KEY])

    st.divider()
    result: Optional[ScoreResult] = st.session_state.get(RESULT_KEY)
    if result is None:
        if not st.session_state.get(ERROR_KEY):
            st.info("Upload a file or paste text, then click **Analyze**.")
        return
    _render_result(result)


if __name__ == "__main__":
    render_layout()
