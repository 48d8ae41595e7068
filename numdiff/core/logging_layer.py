# numdiff/core/logging_layer.py
# Run Log -- in-memory event log of one comparison run.
#
# Scope: Event-sourced logging of what the driver did (files opened, comment
# lines skipped, differing lines, run summary). No file IO. No global
# mutable state. Each RunLog instance is independent; the driver owns one
# per run. The log is never written to the comparison output sink.
#
# Canonical import:
#   from numdiff.core.logging_layer import RunLog, RunEvent, EventFilter

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

# ===========================================================================
# SECTION 2 -- CONSTANTS
# ===========================================================================

# Event types emitted by the driver.
FILE_OPENED:       str = "FILE_OPENED"
COMMENT_SKIPPED:   str = "COMMENT_SKIPPED"
LINE_DIFFERS:      str = "LINE_DIFFERS"
ORPHAN_BLANK_LINE: str = "ORPHAN_BLANK_LINE"
RUN_COMPLETE:      str = "RUN_COMPLETE"

# Logged in place of non-finite floats; the event is never dropped.
_NAN_SENTINEL: str = "NaN_DETECTED"
_INF_SENTINEL: str = "Inf_DETECTED"

# ===========================================================================
# SECTION 3 -- DATACLASSES: RunEvent, EventFilter
# ===========================================================================

@dataclass(frozen=True)
class RunEvent:
    """
    Record of a single run event.

    Fields
    ------
    id   : Deterministic identifier derived from the instance counter.
    type : Category string (FILE_OPENED, LINE_DIFFERS, ...).
    data : Sanitized key-value payload. NaN/Inf floats replaced with
           sentinel strings before storage.
    """
    id: str
    type: str
    data: Dict[str, Any]


@dataclass(frozen=True)
class EventFilter:
    """
    Filter criteria for RunLog.query_events().

    event_type : If set, only events of this type are returned.
    limit      : If set, at most this many events (oldest first).
    """
    event_type: Optional[str] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 4 -- INTERNAL HELPERS
# ===========================================================================

def _sanitize_numeric(value: Any) -> Any:
    if isinstance(value, float):
        if math.isnan(value):
            return _NAN_SENTINEL
        if math.isinf(value):
            return _INF_SENTINEL
    return value


def _make_event_id(counter: int) -> str:
    """Format: "EVT-{counter:016d}", zero-padded for sort stability."""
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 5 -- RunLog
# ===========================================================================

class RunLog:
    """
    Append-only event log for one comparison run.

    log_event() raises LoggingError on an invalid event instead of silently
    discarding it.
    """

    def __init__(self) -> None:
        self._store: List[RunEvent] = []
        self._counter: int = 0

    def log_event(self, event_type: str, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Record one event. Return the assigned event ID.

        Raises
        ------
        LoggingError : If event_type is empty.
        """
        if not event_type:
            raise LoggingError("event_type must be a non-empty string")

        self._counter += 1
        event_id = _make_event_id(self._counter)
        payload = {k: _sanitize_numeric(v) for k, v in (data or {}).items()}
        self._store.append(RunEvent(id=event_id, type=event_type, data=payload))
        return event_id

    def query_events(self, filter: EventFilter) -> List[RunEvent]:
        """
        Return events matching the filter, in insertion order.

        The type filter is applied first, then the limit.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results = [
            event for event in self._store
            if filter.event_type is None or event.type == filter.event_type
        ]
        if filter.limit is not None:
            results = results[: filter.limit]
        return results

    def __iter__(self) -> Iterator[RunEvent]:
        return iter(list(self._store))

    def event_count(self) -> int:
        return len(self._store)

    def format_events(self) -> str:
        """
        Render the log as text, one event per line:

            EVT-0000000000000001 FILE_OPENED path='a.dat' role='file1'
        """
        lines = []
        for event in self._store:
            fields = " ".join(
                "{}={!r}".format(key, value) for key, value in event.data.items()
            )
            lines.append((event.id + " " + event.type + " " + fields).rstrip())
        return "\n".join(lines)


# ===========================================================================
# SECTION 6 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by RunLog when an invariant is violated. Never silently swallowed.
    """
