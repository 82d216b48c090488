from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    """Who is calling a service operation. Only used for logging."""

    actor: str = "anonymous"
    api_key_id: Optional[int] = None

    def __str__(self) -> str:
        if self.api_key_id is not None:
            return f"{self.actor}#{self.api_key_id}"
        return self.actor


ANONYMOUS = RequestContext()
