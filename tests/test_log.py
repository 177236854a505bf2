import logging

from toputil import md5
from toputil.log import setup_logging


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "toputil.log"
    setup_logging(log_file=log_file, level=logging.DEBUG)
    try:
        md5("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Hashing 5 bytes with MD5" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logging.getLogger().handlers):
            handler.close()
            logging.getLogger().removeHandler(handler)


def test_library_is_silent_by_default(caplog) -> None:
    with caplog.at_level(logging.INFO):
        md5("hello")
    assert caplog.records == []
