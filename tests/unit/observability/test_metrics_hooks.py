import logging

import pytest

from ldoc_gen.observability import names
from ldoc_gen.observability.base import LoggingMetricsHook, NoOpMetricsHook


def test_noop_hook_accepts_every_call() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency(names.CONVERSION_FILE_DURATION, 1.5)
    hook.increment(names.CONVERSION_FILES_TOTAL, labels={"status": "converted"})
    hook.record_gauge(names.CONVERSION_CHUNKS_PER_FILE, 3)


def test_logging_hook_writes_debug_records(caplog: pytest.LogCaptureFixture) -> None:
    hook = LoggingMetricsHook()

    with caplog.at_level(logging.DEBUG, logger="ldoc_gen.metrics"):
        hook.record_latency(names.CONVERSION_FILE_DURATION, 12.5)
        hook.increment(
            names.CONVERSION_FILES_TOTAL, labels={"status": "converted", "a": "b"}
        )
        hook.record_gauge(names.CONVERSION_CHUNKS_PER_FILE, 4)

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        f"{names.CONVERSION_FILE_DURATION}=12.50ms ",
        f"{names.CONVERSION_FILES_TOTAL}+=1 a=b,status=converted",
        f"{names.CONVERSION_CHUNKS_PER_FILE}=4 ",
    ]


def test_logging_hook_uses_given_logger(caplog: pytest.LogCaptureFixture) -> None:
    hook = LoggingMetricsHook(logging.getLogger("custom.metrics"))

    with caplog.at_level(logging.DEBUG, logger="custom.metrics"):
        hook.increment("x", 2)

    assert caplog.records[0].name == "custom.metrics"
