"""
Unit tests for HashkitLogger and NullLogger.
"""

import uuid

from hashkit.services.hashing import Hasher
from hashkit.services.logging import HashkitLogger, NullLogger


def _logger_name() -> str:
    return f"hashkit.test.{uuid.uuid4().hex}"


class TestHashkitLogger:
    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "hashkit.log"
        logger = HashkitLogger(name=_logger_name(), level="info", log_file=log_file)

        logger.info("configured %s", "sha256")

        assert "configured sha256" in log_file.read_text(encoding="utf-8")

    def test_level_filters_messages(self, tmp_path):
        log_file = tmp_path / "hashkit.log"
        logger = HashkitLogger(name=_logger_name(), level="warning", log_file=log_file)

        logger.debug("hidden")
        logger.warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content

    def test_set_level(self, tmp_path):
        log_file = tmp_path / "hashkit.log"
        logger = HashkitLogger(name=_logger_name(), level="error", log_file=log_file)

        logger.set_level("debug")
        logger.debug("now visible")

        assert "now visible" in log_file.read_text(encoding="utf-8")

    def test_console_output(self, capsys):
        logger = HashkitLogger(name=_logger_name(), level="info", console_enabled=True)

        logger.error("boom")

        assert "boom" in capsys.readouterr().err

    def test_silent_without_handlers(self, capsys):
        logger = HashkitLogger(name=_logger_name())

        logger.error("nobody listens")

        assert "nobody listens" not in capsys.readouterr().err

    def test_salt_material_not_logged(self, tmp_path):
        log_file = tmp_path / "hashkit.log"
        logger = HashkitLogger(name=_logger_name(), level="debug", log_file=log_file)
        hasher = Hasher(logger=logger)

        salt = hasher.generate_salt(8)

        content = log_file.read_text(encoding="utf-8")
        assert "Generating 8 byte salt" in content
        assert salt.hex() not in content

    def test_replacing_logger_closes_previous_file(self, tmp_path):
        name = _logger_name()
        first = HashkitLogger(name=name, log_file=tmp_path / "first.log")
        handler = first._file_handler
        assert handler.stream is not None

        HashkitLogger(name=name, log_file=tmp_path / "second.log")

        assert handler.stream is None


class TestNullLogger:
    def test_accepts_all_calls(self):
        logger = NullLogger()
        logger.debug("a")
        logger.info("b")
        logger.warning("c")
        logger.error("d")
        logger.set_level("debug")
