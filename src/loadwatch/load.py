"""Daily training load (session duration x perceived intensity)."""

import math
from typing import Any, Iterable, Mapping, Optional, Union

from .models import Session

SessionLike = Union[Session, Mapping[str, Any]]


def session_load(session: SessionLike) -> float:
    """
    Load of a single session: duration (min) x perceived intensity.

    Accepts a Session or a plain mapping with ``duration``/``intensity``
    keys. Missing or non-numeric values count as 0, and so does a product
    too large for a float.
    """
    if isinstance(session, Mapping):
        session = Session(
            duration=session.get("duration"),
            intensity=session.get("intensity"),
        )
    return session.load


def daily_load(sessions: Optional[Iterable[SessionLike]]) -> float:
    """
    Reduce a day's sessions to a single load scalar.

    Args:
        sessions: The day's sessions, possibly empty or None

    Returns:
        Sum of duration x intensity over all sessions (0.0 for an empty day
        or when the sum overflows)
    """
    total = float(sum(session_load(s) for s in sessions or ()))
    return total if math.isfinite(total) else 0.0
