import pytest

from numdiff.core.logging_layer import (
    FILE_OPENED,
    LINE_DIFFERS,
    EventFilter,
    LoggingError,
    RunLog,
)


class TestRunLog:

    def test_event_ids_are_sequential(self):
        log = RunLog()
        assert log.log_event(FILE_OPENED, {"path": "a"}) == "EVT-0000000000000001"
        assert log.log_event(FILE_OPENED, {"path": "b"}) == "EVT-0000000000000002"
        assert log.event_count() == 2

    def test_empty_event_type_raises(self):
        with pytest.raises(LoggingError):
            RunLog().log_event("", {})

    def test_non_finite_floats_are_sanitized(self):
        log = RunLog()
        log.log_event(LINE_DIFFERS, {"a": float("nan"), "b": float("inf"), "c": 1.5})
        event = next(iter(log))
        assert event.data == {"a": "NaN_DETECTED", "b": "Inf_DETECTED", "c": 1.5}

    def test_query_by_type_and_limit(self):
        log = RunLog()
        for i in range(3):
            log.log_event(LINE_DIFFERS, {"line1": i})
        log.log_event(FILE_OPENED)
        assert len(log.query_events(EventFilter(event_type=LINE_DIFFERS))) == 3
        limited = log.query_events(EventFilter(event_type=LINE_DIFFERS, limit=2))
        assert [e.data["line1"] for e in limited] == [0, 1]
        assert len(log.query_events(EventFilter())) == 4

    def test_query_with_none_filter_raises(self):
        with pytest.raises(LoggingError):
            RunLog().query_events(None)

    def test_format_events(self):
        log = RunLog()
        log.log_event(FILE_OPENED, {"path": "a.dat", "role": "file1"})
        log.log_event("RUN_COMPLETE")
        assert log.format_events() == (
            "EVT-0000000000000001 FILE_OPENED path='a.dat' role='file1'\n"
            "EVT-0000000000000002 RUN_COMPLETE"
        )

    def test_payload_is_copied(self):
        log = RunLog()
        payload = {"path": "a"}
        log.log_event(FILE_OPENED, payload)
        payload["path"] = "changed"
        assert next(iter(log)).data["path"] == "a"
