"""
Streamlit UI for the recruitment tracker.

Dashboard with totals; the pages in ui/pages manage vacancies, candidates
and interviews.

Run with: streamlit run ui/app.py
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import from the root
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import streamlit as st
from services import EntrevistaService, ProspectoService, VacanteService
from ui.db import get_db_session, ui_context
from ui.page_adapter import render_view
from utils.logging_config import configure_logging

configure_logging()

# Page configuration
st.set_page_config(
    page_title="Recruitment",
    page_icon="",
    layout="wide"
)


def load_totals():
    """Fetch the listings the dashboard counts. Returns (totals, error message)."""
    with get_db_session() as db:
        context = ui_context()
        outcomes = {
            "vacantes": render_view(VacanteService(db).get_all(context), "dashboard", "rows"),
            "activas": render_view(VacanteService(db).get_active(context), "dashboard", "rows"),
            "prospectos": render_view(ProspectoService(db).get_all(context), "dashboard", "rows"),
            "entrevistas": render_view(EntrevistaService(db).get_all(context), "dashboard", "rows"),
        }

    for outcome in outcomes.values():
        if outcome.redirect:
            return None, outcome.flash

    return {name: outcome.props["rows"] for name, outcome in outcomes.items()}, None


def main():
    """Main Streamlit app."""
    st.sidebar.title("Recruitment")
    st.sidebar.markdown("---")
    st.sidebar.markdown("Use the pages above to manage vacancies, candidates and interviews.")

    st.title("Recruitment Dashboard")

    totals, error = load_totals()
    if error:
        st.error(error)
        return

    hired = [e for e in totals["entrevistas"] if e["reclutado"]]

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Vacancies", len(totals["vacantes"]), help=f"{len(totals['activas'])} active")
    with col2:
        st.metric("Candidates", len(totals["prospectos"]))
    with col3:
        st.metric("Interviews", len(totals["entrevistas"]))
    with col4:
        st.metric("Hired", len(hired))

    st.divider()
    st.markdown("### Latest interviews")
    latest = sorted(totals["entrevistas"], key=lambda e: e["fecha_entrevista"], reverse=True)[:10]
    if latest:
        st.dataframe(
            [
                {
                    "Vacancy": e["vacante_detalle"]["area"],
                    "Candidate": e["prospecto_detalle"]["nombre"],
                    "Date": e["fecha_entrevista"],
                    "Hired": e["reclutado"],
                }
                for e in latest
            ],
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.info("No interviews scheduled yet.")


if __name__ == "__main__":
    main()
