"""
HR Automation Dashboard — Streamlit Application Entry Point
Run with: streamlit run app.py
"""

from __future__ import annotations

import logging
from pathlib import Path as _Path
from typing import List

import streamlit as st
from dotenv import load_dotenv

# Bootstrap
_env_file = _Path(".env") if _Path(".env").exists() else _Path(".env.example")
load_dotenv(dotenv_path=_env_file)

from core.config import DashboardConfig  # noqa: E402

_config = DashboardConfig.from_env()

logging.basicConfig(
    level=getattr(logging, _config.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

from core import messages as msg  # noqa: E402
from core.api_client import (  # noqa: E402
    BackendConfigurationError,
    BaseBackendClient,
    create_backend_client,
)
from core.auth import sign_in, sign_out  # noqa: E402
from core.dashboard import DashboardController, ProcessOutcome  # noqa: E402
from core.report import REPORT_FILENAME, build_summary_report  # noqa: E402
from core.render import candidate_table_html  # noqa: E402
from core.router import Route, resolve_route  # noqa: E402
from core.session import CONTROLLER_KEY, current_session, is_authenticated  # noqa: E402
from core.validators import SHEETS_HOST  # noqa: E402
from models.candidate import Candidate, ProcessingStats  # noqa: E402

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=msg.APP_NAME,
    page_icon="H",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown(
    """
    <style>
    .block-container { padding-top: 1.5rem; }
    div[data-testid="stMetricValue"] { font-size: 2rem; font-weight: 700; }
    table.shortlist { width: 100%; border-collapse: collapse; }
    table.shortlist th, table.shortlist td { padding: 0.5rem 0.75rem; text-align: left;
        border-bottom: 1px solid #e5e7eb; }
    .score { padding: 0.15rem 0.5rem; border-radius: 6px; font-weight: 600; }
    .score-excellent { color: #16a34a; background: #f0fdf4; }
    .score-strong    { color: #0d9488; background: #f0fdfa; }
    .score-fair      { color: #d97706; background: #fffbeb; }
    </style>
    """,
    unsafe_allow_html=True,
)


# ---------------------------------------------------------------------------
# Shared resources
# ---------------------------------------------------------------------------

@st.cache_resource
def _get_client() -> BaseBackendClient:
    return create_backend_client(_config)


def _notify(toast: msg.Toast) -> None:
    icon = ":material/error:" if toast.is_error else ":material/check_circle:"
    body = f"**{toast.title}**"
    if toast.description:
        body += f"\n\n{toast.description}"
    st.toast(body, icon=icon)


def _get_controller(client: BaseBackendClient) -> DashboardController:
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None:
        controller = DashboardController(
            client,
            notify=_notify,
            shortlist_attempts=_config.shortlist_attempts,
        )
        st.session_state[CONTROLLER_KEY] = controller
    controller.set_notifier(_notify)
    controller.activate()
    return controller


def _go(route: Route) -> None:
    st.query_params["page"] = route.value
    st.rerun()


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------

def _render_login(client: BaseBackendClient) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.title(msg.APP_NAME)
        st.caption(msg.TAGLINE)
        st.divider()

        with st.form("login_form"):
            st.subheader("Sign in")
            email = st.text_input("Email", placeholder="you@company.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign in", type="primary", width="stretch")

        if submitted:
            with st.spinner("Signing in..."):
                session = sign_in(st.session_state, client, email, password, notify=_notify)
            if session is not None:
                _go(Route.DASHBOARD)

        st.caption(f"© {msg.APP_NAME}. All rights reserved.")


# ---------------------------------------------------------------------------
# Dashboard: Process tab
# ---------------------------------------------------------------------------

def _render_status(placeholder, controller: DashboardController) -> None:
    with placeholder.container(border=True):
        st.markdown("#### Processing Status")
        st.caption("Real-time status of your resume processing")
        if controller.is_processing:
            st.info("Processing resumes...\n\n" + msg.status_processing())
        elif controller.results_enabled:
            st.success("Processing Complete\n\n" + msg.status_complete())
        else:
            st.write(msg.status_idle())


def _render_process_tab(controller: DashboardController) -> None:
    col_form, col_status = st.columns([1, 2])
    status_box = col_status.empty()

    with col_form:
        with st.form("sheet_form"):
            st.markdown("#### Process Resumes")
            st.caption("Enter a Google Sheets URL containing candidate information")
            sheet_url = st.text_input(
                "Google Sheets URL",
                placeholder=f"https://{SHEETS_HOST}/d/...",
            )
            submitted = st.form_submit_button(
                "Process Resumes",
                type="primary",
                width="stretch",
                disabled=controller.is_processing,
            )
            st.caption(
                "The sheet should contain candidate names, email, phone numbers, "
                "and resume links."
            )

    if submitted:
        def _on_start() -> None:
            _render_status(status_box, controller)

        def _on_complete(outcome: ProcessOutcome) -> None:
            logger.debug("Submission finished: %s", outcome)

        with st.spinner("Processing resumes..."):
            controller.submit_sheet(sheet_url, on_start=_on_start, on_complete=_on_complete)

    _render_status(status_box, controller)


# ---------------------------------------------------------------------------
# Dashboard: Results tab
# ---------------------------------------------------------------------------

def _render_stats(stats: ProcessingStats) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Candidates Processed", stats.candidates_processed)
    col2.metric("Candidates Shortlisted", stats.candidates_shortlisted)
    col3.metric("Calls Scheduled", stats.calls_scheduled)


def _render_candidates(controller: DashboardController) -> List[Candidate]:
    listing = controller.shortlist()
    st.subheader("Shortlisted Candidates")
    st.caption(msg.shortlist_caption(len(listing)))
    if listing.is_demo:
        st.caption("_Demo candidates shown; the live shortlist is unavailable._")
    st.markdown(candidate_table_html(listing.candidates), unsafe_allow_html=True)
    return listing.candidates


def _render_summary(controller: DashboardController, candidates: List[Candidate]) -> None:
    outcome = controller.outcome
    from_backend = outcome is not None and not outcome.is_fallback

    with st.container(border=True):
        st.markdown("#### Process Summary")
        st.caption("Overview of the resume processing results")
        st.markdown(f"**{msg.summary_heading(from_backend)}**")
        st.write(msg.summary_body(from_backend))

        st.markdown("**Next Steps**")
        st.markdown("\n".join(f"- {step}" for step in msg.next_steps()))

        st.download_button(
            "Download Summary Report",
            data=build_summary_report(controller.stats, candidates),
            file_name=REPORT_FILENAME,
            mime="text/csv",
            type="primary",
        )


def _render_results_tab(controller: DashboardController) -> None:
    if not controller.results_enabled:
        st.info("Results become available once a sheet has been processed.")
        return

    _render_stats(controller.stats)
    st.divider()
    candidates = _render_candidates(controller)
    st.divider()
    _render_summary(controller, candidates)


# ---------------------------------------------------------------------------
# Dashboard shell
# ---------------------------------------------------------------------------

def _render_dashboard(client: BaseBackendClient) -> None:
    session = current_session(st.session_state)
    controller = _get_controller(client)

    head_left, head_right = st.columns([6, 1])
    with head_left:
        st.title("Dashboard")
        st.caption("Manage and automate your recruitment process")
    with head_right:
        st.caption(f"Signed in as {session.email}" if session else "")
        if st.button("Logout", width="stretch"):
            sign_out(st.session_state, notify=_notify)
            _go(Route.LOGIN)

    tab_process, tab_results = st.tabs(["Process Resumes", "Results"])
    with tab_process:
        _render_process_tab(controller)
    with tab_results:
        _render_results_tab(controller)


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------

def _render_not_found() -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.title("404")
        st.subheader("Oops! Page not found")
        st.write("The page you're looking for doesn't exist or has been moved.")
        if st.button("Return to Home", type="primary"):
            st.query_params.clear()
            st.rerun()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    try:
        client = _get_client()
    except BackendConfigurationError as exc:
        st.error(f"Configuration error: {exc}")
        return

    requested = st.query_params.get("page", "")
    route = resolve_route(requested, is_authenticated(st.session_state))

    if route is Route.LOGIN:
        if requested and requested != Route.LOGIN.value:
            st.query_params["page"] = Route.LOGIN.value
        _render_login(client)
    elif route is Route.DASHBOARD:
        if requested != Route.DASHBOARD.value:
            st.query_params["page"] = Route.DASHBOARD.value
        _render_dashboard(client)
    else:
        _render_not_found()


if __name__ == "__main__":
    main()
