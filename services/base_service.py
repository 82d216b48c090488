"""
Shared plumbing for the domain services.

`service_operation` is the single place where unexpected exceptions are turned
into a `SystemFailure`: the error is logged with its traceback, the session is
rolled back, and the caller receives a result instead of an exception.
"""

import functools
import logging
from typing import Callable, Optional

from sqlmodel import Session

from services.context import ANONYMOUS, RequestContext
from services.result import ServiceResult, SystemFailure

logger = logging.getLogger(__name__)


def service_operation(failure_message: str) -> Callable:
    """Wrap a service method so storage errors come back as SystemFailure(failure_message)."""

    def decorator(method: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
        @functools.wraps(method)
        def wrapper(self: "BaseService", *args, **kwargs) -> ServiceResult:
            try:
                return method(self, *args, **kwargs)
            except Exception as exc:
                logger.exception(f"{failure_message} ({type(self).__name__}.{method.__name__}): {exc}")
                self.rollback()
                return SystemFailure(message=failure_message, detail=str(exc))

        return wrapper

    return decorator


class BaseService:
    """Holds the session shared by a service and its repositories."""

    def __init__(self, db_session: Session):
        self.db = db_session

    @staticmethod
    def actor(context: Optional[RequestContext]) -> RequestContext:
        return context or ANONYMOUS

    def rollback(self) -> None:
        try:
            self.db.rollback()
        except Exception as exc:
            logger.warning(f"Rollback failed: {exc}")
