import logging

from radbuilder.logs import LogBuffer, log_event


def test_buffer_is_bounded_and_ordered():
    buffer = LogBuffer(max_events=3)
    for i in range(5):
        buffer.append(f"event-{i}")
    history = buffer.history()
    assert [e["event"] for e in history] == ["event-2", "event-3", "event-4"]
    assert [e["id"] for e in history] == [3, 4, 5]
    assert buffer.history(limit=1)[0]["event"] == "event-4"
    assert buffer.latest()["event"] == "event-4"


def test_snapshot_after():
    buffer = LogBuffer()
    buffer.append("a")
    buffer.append("b", level="warning", path="x.json")
    events, latest = buffer.snapshot_after(1)
    assert latest == 2
    assert [e["event"] for e in events] == ["b"]
    assert events[0]["details"] == {"path": "x.json"}


def test_log_event_forwards_to_status_logger(caplog):
    buffer = LogBuffer()
    with caplog.at_level(logging.INFO, logger="radbuilder.status"):
        payload = log_event(buffer, "saved", path="a.json")
        log_event(buffer, "save_failed", level="error")
    assert payload["id"] == 1
    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING]
    assert "saved" in caplog.records[0].getMessage()


def test_empty_buffer_has_no_latest():
    assert LogBuffer().latest() is None
