"""
Service results.

Every service operation returns exactly one of the variants below instead of
raising. Adapters dispatch on the variant type; `to_envelope()` renders the
uniform `{success, data, message, errors}` mapping the JSON API sends back.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union

from utils.serialization import serialize

FieldErrors = Dict[str, List[str]]


@dataclass(frozen=True)
class Ok:
    data: Any = None
    message: str = ""

    success: ClassVar[bool] = True

    def to_envelope(self, expose_details: bool = False) -> Dict[str, Any]:
        envelope = {"success": True, "message": self.message}
        if self.data is not None:
            envelope["data"] = serialize(self.data)
        return envelope


@dataclass(frozen=True)
class ValidationFailed:
    errors: FieldErrors = field(default_factory=dict)
    message: str = "Invalid input data"

    success: ClassVar[bool] = False

    def to_envelope(self, expose_details: bool = False) -> Dict[str, Any]:
        return {"success": False, "message": self.message, "errors": self.errors}


@dataclass(frozen=True)
class NotFound:
    message: str

    success: ClassVar[bool] = False

    def to_envelope(self, expose_details: bool = False) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


@dataclass(frozen=True)
class Conflict:
    message: str

    success: ClassVar[bool] = False

    def to_envelope(self, expose_details: bool = False) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


@dataclass(frozen=True)
class SystemFailure:
    message: str
    detail: Optional[str] = None

    success: ClassVar[bool] = False

    def to_envelope(self, expose_details: bool = False) -> Dict[str, Any]:
        envelope = {"success": False, "message": self.message}
        if expose_details and self.detail:
            envelope["error"] = self.detail
        return envelope


ServiceResult = Union[Ok, ValidationFailed, NotFound, Conflict, SystemFailure]
