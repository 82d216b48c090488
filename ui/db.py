"""
Database utilities for Streamlit UI.

Provides cached database engine and session management for direct database access.
"""

from contextlib import contextmanager
import streamlit as st
from sqlmodel import Session

from config.settings import settings
from services.context import RequestContext
from utils.database import get_engine, init_db


@st.cache_resource
def get_database_engine():
    """
    Create and cache database engine.

    Uses Streamlit's cache_resource to ensure a single engine instance
    is shared across all sessions and reruns.
    """
    engine = get_engine()
    init_db(engine)
    return engine


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.

    Usage:
        with get_db_session() as db:
            outcome = render_view(VacanteService(db).get_all(ui_context()), "index", "vacantes")

    Results must be rendered before the block exits; rows are detached afterwards.
    """
    engine = get_database_engine()
    with Session(engine) as session:
        yield session


def ui_context() -> RequestContext:
    """Context passed to services for operations started from the pages."""
    return RequestContext(actor=settings.UI_ACTOR_NAME)
