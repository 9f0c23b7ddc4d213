from loguru import logger

import maybe_functors
from maybe_functors.laws.pipeline import LawResult


def test_main_success():
    assert maybe_functors.main() == 0


def test_main_logs_report():
    messages = []
    sink_id = logger.add(messages.append, level="INFO", format="{message}")
    try:
        maybe_functors.main()
    finally:
        logger.remove(sink_id)
    text = "".join(messages)
    assert "law check invoked" in text
    assert "Law Report: Maybe" in text


def test_main_failure(monkeypatch):
    monkeypatch.setattr(maybe_functors, "check_laws", lambda: LawResult(success=False, diagnostics=[]))
    assert maybe_functors.main() == 1
