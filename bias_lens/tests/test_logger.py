"""로깅 설정 테스트"""

import logging
import sys

import yaml

from bias_lens.utils.logger import LOG_LEVEL_ENV, get_logger, setup_logging


def _write_config(tmp_path) -> str:
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": "%(levelname)s %(name)s: %(message)s"}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "bias_lens_test": {"level": "DEBUG", "handlers": ["console"], "propagate": False},
        },
    }
    path = tmp_path / "logging_config.yaml"
    path.write_text(yaml.dump(config), encoding="utf-8")
    return str(path)


class TestSetupLogging:

    def test_config_levels(self, tmp_path, monkeypatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        setup_logging(_write_config(tmp_path))

        handler = logging.getLogger("bias_lens_test").handlers[0]
        assert handler.level == logging.INFO
        assert handler.stream is sys.stdout

    def test_level_and_stream_override(self, tmp_path) -> None:
        setup_logging(_write_config(tmp_path), level="warning", stream="stderr")

        handler = logging.getLogger("bias_lens_test").handlers[0]
        assert handler.level == logging.WARNING
        assert handler.stream is sys.stderr

    def test_env_level(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        setup_logging(_write_config(tmp_path))

        handler = logging.getLogger("bias_lens_test").handlers[0]
        assert handler.level == logging.ERROR

    def test_unknown_stream_ignored(self, tmp_path) -> None:
        setup_logging(_write_config(tmp_path), stream="printer")
        assert logging.getLogger("bias_lens_test").handlers[0].stream is sys.stdout

    def test_missing_config_file(self, tmp_path) -> None:
        setup_logging(str(tmp_path / "missing.yaml"))
        assert get_logger("bias_lens.anything").name == "bias_lens.anything"
