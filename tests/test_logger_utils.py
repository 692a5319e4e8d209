# tests/test_logger_utils.py
import logging

from word_suggester.utils.logger_utils import Log, setup_logging


def test_file_logging_and_time_block(tmp_path):
    p = tmp_path / "suggester.log"
    setup_logging("debug", str(p))
    try:
        logging.getLogger("word_suggester.core.engine").info("hello log")
        with Log.time_block("unit") as t:
            sum(range(100))
        assert t.elapsed >= 0
    finally:
        setup_logging("WARNING")

    text = p.read_text(encoding="utf-8")
    assert "INFO    | hello log" in text
    assert "unit done:" in text


def test_unknown_level_falls_back_to_warning():
    logger = setup_logging("chatty")
    assert logger.level == logging.WARNING
