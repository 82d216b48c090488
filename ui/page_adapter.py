"""
Page adapter for the Streamlit frontend.

Turns service results into navigation decisions:

- success renders the named view with the data under one prop
- a validation failure goes back to the originating form with the errors
  and the submitted input
- any other failure goes to the listing view with a flash error

The functions here are pure; `apply_outcome` writes an outcome into a
mapping (``st.session_state`` in the pages) using per-page keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

from services.result import Ok, ServiceResult, ValidationFailed
from utils.serialization import serialize

INDEX_VIEW = "index"


@dataclass
class PageOutcome:
    view: str
    props: Dict[str, Any] = field(default_factory=dict)
    redirect: bool = False
    errors: Dict[str, List[str]] = field(default_factory=dict)
    old_input: Dict[str, Any] = field(default_factory=dict)
    flash: Optional[str] = None
    flash_level: str = "error"


def render_view(result: ServiceResult, view: str, prop: str, index_view: str = INDEX_VIEW) -> PageOutcome:
    """
    Outcome of a read.

    Data is serialized immediately so it stays usable after the session closes.
    """
    if isinstance(result, Ok):
        return PageOutcome(view=view, props={prop: serialize(result.data)})
    return PageOutcome(view=index_view, redirect=True, flash=result.message)


def submit_form(
    result: ServiceResult,
    form_view: str,
    index_view: str = INDEX_VIEW,
    old_input: Optional[Mapping[str, Any]] = None
) -> PageOutcome:
    """Outcome of a create, update or delete submitted from `form_view`."""
    if isinstance(result, Ok):
        return PageOutcome(view=index_view, redirect=True, flash=result.message, flash_level="success")
    if isinstance(result, ValidationFailed):
        return PageOutcome(
            view=form_view,
            redirect=True,
            errors=dict(result.errors),
            old_input=dict(old_input or {}),
        )
    return PageOutcome(view=index_view, redirect=True, flash=result.message)


def apply_outcome(state: MutableMapping[str, Any], page: str, outcome: PageOutcome) -> None:
    """Store an outcome under `<page>_view`, `<page>_errors`, `<page>_old` and `<page>_flash`."""
    state[f"{page}_view"] = outcome.view
    state[f"{page}_errors"] = outcome.errors
    state[f"{page}_old"] = outcome.old_input
    state[f"{page}_flash"] = (outcome.flash_level, outcome.flash) if outcome.flash else None


def field_errors(state: Mapping[str, Any], page: str, name: str) -> List[str]:
    return (state.get(f"{page}_errors") or {}).get(name, [])


def old_value(state: Mapping[str, Any], page: str, name: str, default: Any = None) -> Any:
    return (state.get(f"{page}_old") or {}).get(name, default)
