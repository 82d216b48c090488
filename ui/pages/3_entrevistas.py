"""
Interviews UI.

Schedules interviews between a vacancy and a candidate, filters them by
either side, and edits or deletes them by their (vacante, prospecto) pair.
"""

import sys
from datetime import date
from pathlib import Path

# Add parent directory to path
root_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(root_dir))

import streamlit as st
from services.entrevista_service import EntrevistaService
from ui.components import back_button, go, init_page_state, show_field_errors, show_flash
from ui.db import get_db_session, ui_context
from ui.page_adapter import INDEX_VIEW, apply_outcome, old_value, render_view, submit_form

PAGE = "entrevistas"
ALL = "All"

# Page configuration
st.set_page_config(
    page_title="Interviews",
    page_icon="",
    layout="wide"
)


def load(call, view, prop):
    with get_db_session() as db:
        return render_view(call(EntrevistaService(db)), view, prop)


def submit(call, form_view, old_input=None):
    with get_db_session() as db:
        outcome = submit_form(call(EntrevistaService(db)), form_view, old_input=old_input)
    apply_outcome(st.session_state, PAGE, outcome)
    st.rerun()


def open_detail(view):
    vacante_id, prospecto_id = st.session_state[f"{PAGE}_selected"]
    outcome = load(lambda service: service.get(vacante_id, prospecto_id, ui_context()), view, "entrevista")
    if outcome.redirect:
        apply_outcome(st.session_state, PAGE, outcome)
        st.rerun()
    return outcome.props["entrevista"]


def get_form_data():
    """Vacancies and candidates for the selection inputs, or None on failure."""
    outcome = load(lambda service: service.get_form_data(ui_context()), INDEX_VIEW, "form_data")
    if outcome.redirect:
        st.error(outcome.flash)
        return None
    return outcome.props["form_data"]


def render_index(form_data):
    vacante_options = {ALL: None, **{f"#{v['id']} - {v['area']}": v["id"] for v in form_data["vacantes"]}}
    prospecto_options = {ALL: None, **{f"#{p['id']} - {p['nombre']}": p["id"] for p in form_data["prospectos"]}}

    col1, col2 = st.columns(2)
    with col1:
        vacante_filter = vacante_options[st.selectbox("Vacancy", options=list(vacante_options.keys()))]
    with col2:
        prospecto_filter = prospecto_options[st.selectbox("Candidate", options=list(prospecto_options.keys()))]

    if vacante_filter is not None:
        outcome = load(lambda service: service.get_by_vacante(vacante_filter, ui_context()), INDEX_VIEW, "entrevistas")
    elif prospecto_filter is not None:
        outcome = load(
            lambda service: service.get_by_prospecto(prospecto_filter, ui_context()), INDEX_VIEW, "entrevistas"
        )
    else:
        outcome = load(lambda service: service.get_all(ui_context()), INDEX_VIEW, "entrevistas")

    if outcome.redirect:
        st.error(outcome.flash)
        return

    entrevistas = outcome.props["entrevistas"]
    # Both filters set: narrow the vacancy listing to the chosen candidate
    if vacante_filter is not None and prospecto_filter is not None:
        entrevistas = [e for e in entrevistas if e["prospecto"] == prospecto_filter]

    if st.button("Schedule Interview", type="primary"):
        go(PAGE, "create")

    if not entrevistas:
        st.info("No interviews found.")
        return

    st.dataframe(
        [
            {
                "Vacancy": e["vacante_detalle"]["area"],
                "Candidate": e["prospecto_detalle"]["nombre"],
                "Date": e["fecha_entrevista"],
                "Hired": e["reclutado"],
            }
            for e in entrevistas
        ],
        use_container_width=True,
        hide_index=True,
    )

    options = {
        f"{e['vacante_detalle']['area']} / {e['prospecto_detalle']['nombre']}": (e["vacante"], e["prospecto"])
        for e in entrevistas
    }
    selected = st.selectbox("Interview", options=list(options.keys()))
    pair = options[selected]

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("View", use_container_width=True):
            go(PAGE, "show", pair)
    with col2:
        if st.button("Edit", use_container_width=True):
            go(PAGE, "edit", pair)
    with col3:
        confirm = st.checkbox("Confirm delete", key=f"{PAGE}_confirm_delete")
        if st.button("Delete", use_container_width=True, disabled=not confirm):
            submit(lambda service: service.delete(pair[0], pair[1], ui_context()), INDEX_VIEW)


def _index_of(options, current):
    values = list(options.values())
    return values.index(current) if current in values else 0


def render_form(form_data, entrevista=None):
    entrevista = entrevista or {}
    vacante_options = {f"#{v['id']} - {v['area']}": v["id"] for v in form_data["vacantes"]}
    prospecto_options = {f"#{p['id']} - {p['nombre']}": p["id"] for p in form_data["prospectos"]}

    if not vacante_options or not prospecto_options:
        st.warning("Create at least one vacancy and one candidate first.")
        return

    scheduled = entrevista.get("fecha_entrevista")
    with st.form(f"{PAGE}_form"):
        vacante_label = st.selectbox(
            "Vacancy",
            options=list(vacante_options.keys()),
            index=_index_of(vacante_options, old_value(st.session_state, PAGE, "vacante", entrevista.get("vacante"))),
        )
        show_field_errors(PAGE, "vacante")

        prospecto_label = st.selectbox(
            "Candidate",
            options=list(prospecto_options.keys()),
            index=_index_of(
                prospecto_options, old_value(st.session_state, PAGE, "prospecto", entrevista.get("prospecto"))
            ),
        )
        show_field_errors(PAGE, "prospecto")

        fecha_entrevista = st.date_input(
            "Interview date",
            value=old_value(
                st.session_state,
                PAGE,
                "fecha_entrevista",
                date.fromisoformat(scheduled) if scheduled else date.today(),
            ),
        )
        show_field_errors(PAGE, "fecha_entrevista")

        notas = st.text_area("Notes", value=old_value(st.session_state, PAGE, "notas", entrevista.get("notas", "")))
        show_field_errors(PAGE, "notas")

        reclutado = st.checkbox(
            "Hired", value=bool(old_value(st.session_state, PAGE, "reclutado", entrevista.get("reclutado", False)))
        )
        show_field_errors(PAGE, "reclutado")

        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        data = {
            "vacante": vacante_options[vacante_label],
            "prospecto": prospecto_options[prospecto_label],
            "fecha_entrevista": fecha_entrevista,
            "notas": notas,
            "reclutado": reclutado,
        }
        if entrevista:
            vacante_id, prospecto_id = entrevista["vacante"], entrevista["prospecto"]
            submit(
                lambda service: service.update(vacante_id, prospecto_id, data, ui_context()),
                "edit",
                old_input=data,
            )
        else:
            submit(lambda service: service.create(data, ui_context()), "create", old_input=data)


def render_show():
    entrevista = open_detail("show")
    vacante = entrevista["vacante_detalle"]
    prospecto = entrevista["prospecto_detalle"]

    st.subheader(f"{vacante['area']} / {prospecto['nombre']}")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Date", entrevista["fecha_entrevista"])
    with col2:
        st.metric("Status", "Hired" if entrevista["reclutado"] else "Pending")
    with col3:
        st.metric("Salary", f"{float(vacante['sueldo']):,.2f}")

    st.markdown(f"**Candidate email:** {prospecto['correo']}")
    st.markdown("**Notes:**")
    st.markdown(entrevista["notas"])


def main():
    init_page_state(PAGE)

    st.title("Interviews")
    show_flash(PAGE)

    form_data = get_form_data()
    if form_data is None:
        return

    view = st.session_state[f"{PAGE}_view"]
    if view == "create":
        back_button(PAGE)
        st.subheader("Schedule Interview")
        render_form(form_data)
    elif view == "edit":
        back_button(PAGE)
        st.subheader("Edit Interview")
        render_form(form_data, open_detail("edit"))
    elif view == "show":
        back_button(PAGE)
        render_show()
    else:
        render_index(form_data)


main()
