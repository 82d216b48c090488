"""
Vacancies UI.

Lists, searches, creates, edits and deletes vacancies through VacanteService.
Uses direct database access instead of REST API calls.
"""

import sys
from pathlib import Path

# Add parent directory to path
root_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(root_dir))

import streamlit as st
from services.entrevista_service import EntrevistaService
from services.vacante_service import VacanteService
from ui.components import back_button, go, init_page_state, show_field_errors, show_flash
from ui.db import get_db_session, ui_context
from ui.page_adapter import INDEX_VIEW, apply_outcome, old_value, render_view, submit_form

PAGE = "vacantes"

# Page configuration
st.set_page_config(
    page_title="Vacancies",
    page_icon="",
    layout="wide"
)


def load(call, view, prop):
    """Run a read against VacanteService and render it as `view`."""
    with get_db_session() as db:
        return render_view(call(VacanteService(db)), view, prop)


def submit(call, form_view, old_input=None):
    """Run a write against VacanteService and navigate to the outcome."""
    with get_db_session() as db:
        outcome = submit_form(call(VacanteService(db)), form_view, old_input=old_input)
    apply_outcome(st.session_state, PAGE, outcome)
    st.rerun()


def open_detail(view, prop):
    """Load the selected vacancy or fall back to the list with a flash error."""
    vacante_id = st.session_state[f"{PAGE}_selected"]
    outcome = load(lambda service: service.get(vacante_id, ui_context()), view, prop)
    if outcome.redirect:
        apply_outcome(st.session_state, PAGE, outcome)
        st.rerun()
    return outcome.props[prop]


def render_index():
    col1, col2 = st.columns([3, 1])
    with col1:
        query = st.text_input("Search by area", key=f"{PAGE}_query")
    with col2:
        only_active = st.toggle("Only active", key=f"{PAGE}_only_active")

    if query.strip():
        outcome = load(lambda service: service.search(query, ui_context()), INDEX_VIEW, "vacantes")
    elif only_active:
        outcome = load(lambda service: service.get_active(ui_context()), INDEX_VIEW, "vacantes")
    else:
        outcome = load(lambda service: service.get_all(ui_context()), INDEX_VIEW, "vacantes")

    if outcome.redirect:
        st.error(outcome.flash)
        return

    if st.button("New Vacancy", type="primary"):
        go(PAGE, "create")

    vacantes = outcome.props["vacantes"]
    if not vacantes:
        st.info("No vacancies found.")
        return

    st.dataframe(
        [
            {"ID": v["id"], "Area": v["area"], "Salary": v["sueldo"], "Active": v["activo"]}
            for v in vacantes
        ],
        use_container_width=True,
        hide_index=True,
    )

    options = {f"#{v['id']} - {v['area']}": v["id"] for v in vacantes}
    selected = st.selectbox("Vacancy", options=list(options.keys()))
    vacante_id = options[selected]

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("View", use_container_width=True):
            go(PAGE, "show", vacante_id)
    with col2:
        if st.button("Edit", use_container_width=True):
            go(PAGE, "edit", vacante_id)
    with col3:
        confirm = st.checkbox("Confirm delete", key=f"{PAGE}_confirm_delete")
        if st.button("Delete", use_container_width=True, disabled=not confirm):
            submit(lambda service: service.delete(vacante_id, ui_context()), INDEX_VIEW)


def render_form(vacante=None):
    """Create form, or edit form when `vacante` is given."""
    vacante = vacante or {}
    with st.form(f"{PAGE}_form"):
        area = st.text_input("Area", value=old_value(st.session_state, PAGE, "area", vacante.get("area", "")))
        show_field_errors(PAGE, "area")

        sueldo = st.number_input(
            "Salary",
            min_value=0.0,
            step=500.0,
            value=float(old_value(st.session_state, PAGE, "sueldo", vacante.get("sueldo") or 0)),
        )
        show_field_errors(PAGE, "sueldo")

        activo = st.checkbox("Active", value=bool(old_value(st.session_state, PAGE, "activo", vacante.get("activo", True))))
        show_field_errors(PAGE, "activo")

        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        data = {"area": area, "sueldo": sueldo, "activo": activo}
        if vacante:
            vacante_id = vacante["id"]
            submit(lambda service: service.update(vacante_id, data, ui_context()), "edit", old_input=data)
        else:
            submit(lambda service: service.create(data, ui_context()), "create", old_input=data)


def render_show():
    vacante = open_detail("show", "vacante")

    st.subheader(vacante["area"])
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("ID", vacante["id"])
    with col2:
        st.metric("Salary", f"{float(vacante['sueldo']):,.2f}")
    with col3:
        st.metric("Status", "Active" if vacante["activo"] else "Inactive")

    st.divider()
    st.markdown("### Interviews")
    with get_db_session() as db:
        outcome = render_view(
            EntrevistaService(db).get_by_vacante(vacante["id"], ui_context()), "show", "entrevistas"
        )
    if outcome.redirect:
        st.error(outcome.flash)
    elif outcome.props["entrevistas"]:
        st.dataframe(
            [
                {
                    "Candidate": e["prospecto_detalle"]["nombre"],
                    "Date": e["fecha_entrevista"],
                    "Hired": e["reclutado"],
                    "Notes": e["notas"],
                }
                for e in outcome.props["entrevistas"]
            ],
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.info("No interviews for this vacancy yet.")


def main():
    init_page_state(PAGE)

    st.title("Vacancies")
    show_flash(PAGE)

    view = st.session_state[f"{PAGE}_view"]
    if view == "create":
        back_button(PAGE)
        st.subheader("New Vacancy")
        render_form()
    elif view == "edit":
        back_button(PAGE)
        st.subheader("Edit Vacancy")
        render_form(open_detail("edit", "vacante"))
    elif view == "show":
        back_button(PAGE)
        render_show()
    else:
        render_index()


main()
