"""
Candidates UI.

Lists, searches, creates, edits and deletes candidates through ProspectoService.
"""

import sys
from datetime import date
from pathlib import Path

# Add parent directory to path
root_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(root_dir))

import streamlit as st
from services.entrevista_service import EntrevistaService
from services.prospecto_service import ProspectoService
from ui.components import back_button, go, init_page_state, show_field_errors, show_flash
from ui.db import get_db_session, ui_context
from ui.page_adapter import INDEX_VIEW, apply_outcome, old_value, render_view, submit_form

PAGE = "prospectos"

# Page configuration
st.set_page_config(
    page_title="Candidates",
    page_icon="",
    layout="wide"
)


def load(call, view, prop):
    with get_db_session() as db:
        return render_view(call(ProspectoService(db)), view, prop)


def submit(call, form_view, old_input=None):
    with get_db_session() as db:
        outcome = submit_form(call(ProspectoService(db)), form_view, old_input=old_input)
    apply_outcome(st.session_state, PAGE, outcome)
    st.rerun()


def open_detail(view, prop):
    prospecto_id = st.session_state[f"{PAGE}_selected"]
    outcome = load(lambda service: service.get(prospecto_id, ui_context()), view, prop)
    if outcome.redirect:
        apply_outcome(st.session_state, PAGE, outcome)
        st.rerun()
    return outcome.props[prop]


def render_index():
    col1, col2 = st.columns([3, 1])
    with col1:
        query = st.text_input("Search by name or email", key=f"{PAGE}_query")
    with col2:
        only_active = st.toggle("Not hired only", key=f"{PAGE}_only_active")

    if query.strip():
        outcome = load(lambda service: service.search(query, ui_context()), INDEX_VIEW, "prospectos")
    elif only_active:
        outcome = load(lambda service: service.get_active(ui_context()), INDEX_VIEW, "prospectos")
    else:
        outcome = load(lambda service: service.get_all(ui_context()), INDEX_VIEW, "prospectos")

    if outcome.redirect:
        st.error(outcome.flash)
        return

    if st.button("New Candidate", type="primary"):
        go(PAGE, "create")

    prospectos = outcome.props["prospectos"]
    if not prospectos:
        st.info("No candidates found.")
        return

    st.dataframe(
        [
            {"ID": p["id"], "Name": p["nombre"], "Email": p["correo"], "Registered": p["fecha_registro"]}
            for p in prospectos
        ],
        use_container_width=True,
        hide_index=True,
    )

    options = {f"#{p['id']} - {p['nombre']}": p["id"] for p in prospectos}
    selected = st.selectbox("Candidate", options=list(options.keys()))
    prospecto_id = options[selected]

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("View", use_container_width=True):
            go(PAGE, "show", prospecto_id)
    with col2:
        if st.button("Edit", use_container_width=True):
            go(PAGE, "edit", prospecto_id)
    with col3:
        confirm = st.checkbox("Confirm delete", key=f"{PAGE}_confirm_delete")
        if st.button("Delete", use_container_width=True, disabled=not confirm):
            submit(lambda service: service.delete(prospecto_id, ui_context()), INDEX_VIEW)


def render_form(prospecto=None):
    prospecto = prospecto or {}
    registered = prospecto.get("fecha_registro")
    with st.form(f"{PAGE}_form"):
        nombre = st.text_input("Name", value=old_value(st.session_state, PAGE, "nombre", prospecto.get("nombre", "")))
        show_field_errors(PAGE, "nombre")

        correo = st.text_input("Email", value=old_value(st.session_state, PAGE, "correo", prospecto.get("correo", "")))
        show_field_errors(PAGE, "correo")

        fecha_registro = st.date_input(
            "Registration date",
            value=old_value(
                st.session_state,
                PAGE,
                "fecha_registro",
                date.fromisoformat(registered) if registered else date.today(),
            ),
        )
        show_field_errors(PAGE, "fecha_registro")

        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        data = {"nombre": nombre, "correo": correo, "fecha_registro": fecha_registro}
        if prospecto:
            prospecto_id = prospecto["id"]
            submit(lambda service: service.update(prospecto_id, data, ui_context()), "edit", old_input=data)
        else:
            submit(lambda service: service.create(data, ui_context()), "create", old_input=data)


def render_show():
    prospecto = open_detail("show", "prospecto")

    st.subheader(prospecto["nombre"])
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Email:** {prospecto['correo']}")
    with col2:
        st.markdown(f"**Registered:** {prospecto['fecha_registro']}")

    st.divider()
    st.markdown("### Interviews")
    with get_db_session() as db:
        outcome = render_view(
            EntrevistaService(db).get_by_prospecto(prospecto["id"], ui_context()), "show", "entrevistas"
        )
    if outcome.redirect:
        st.error(outcome.flash)
    elif outcome.props["entrevistas"]:
        for e in outcome.props["entrevistas"]:
            status_label = "Hired" if e["reclutado"] else "Pending"
            with st.expander(f"{e['vacante_detalle']['area']} - {e['fecha_entrevista']} ({status_label})"):
                st.markdown(e["notas"])
    else:
        st.info("No interviews for this candidate yet.")


def main():
    init_page_state(PAGE)

    st.title("Candidates")
    show_flash(PAGE)

    view = st.session_state[f"{PAGE}_view"]
    if view == "create":
        back_button(PAGE)
        st.subheader("New Candidate")
        render_form()
    elif view == "edit":
        back_button(PAGE)
        st.subheader("Edit Candidate")
        render_form(open_detail("edit", "prospecto"))
    elif view == "show":
        back_button(PAGE)
        render_show()
    else:
        render_index()


main()
