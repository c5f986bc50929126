import io
import re

import alexandria.config as cfg
from alexandria import logging as alog


def test_logger_writes_timestamped_lines():
    out = io.StringIO()
    logger = alog.Logger(stream=out)
    logger("[TEST] hello")
    logger.log("[TEST] again")
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\[\s*\d+\.\d{3}s\] \[TEST\] hello", lines[0])
    assert logger.count == 2


def test_logger_respects_log_enabled(monkeypatch):
    monkeypatch.setattr(cfg, "LOG_ENABLED", False)
    out = io.StringIO()
    logger = alog.Logger(stream=out)
    logger("quiet")
    assert out.getvalue() == ""
    assert logger.count == 0


def test_global_logger_can_be_replaced():
    out = io.StringIO()
    alog.set_logger(alog.Logger(stream=out))
    try:
        alog.log("[POD] routed")
        assert "[POD] routed" in out.getvalue()
        assert alog.get_logger() is alog.get_logger()
    finally:
        alog.set_logger(None)


def test_module_writers_log_through_global_logger(tmp_path):
    import ctypes

    from alexandria.serialization import write_pod_vector

    out = io.StringIO()
    alog.set_logger(alog.Logger(stream=out))
    try:
        with open(tmp_path / "v.bin", "wb") as f:
            write_pod_vector(f, [1, 2], ctypes.c_int32)
        assert "[POD] Wrote 2 x c_int" in out.getvalue()
    finally:
        alog.set_logger(None)
