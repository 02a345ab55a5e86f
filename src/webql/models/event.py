"""Events produced by vendor modules."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class EventKind(str, Enum):
    """Kind of item a vendor fetched."""

    PR = "pr"
    PR_COMMENT = "pr_comment"
    PR_EVENT = "pr_event"


class Event(BaseModel):
    """A fetched item together with the raw document it came from."""

    kind: EventKind
    id: str
    parent_event_id: Optional[str] = None
    name: str
    link: Optional[str] = None
    date: Optional[datetime] = None
    priority: int = 0
    raw_data: Any = None


__all__ = ["Event", "EventKind"]
