"""로깅 설정"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

LOG_LEVEL_ENV = "BIAS_LENS_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_STREAMS = {
    "stdout": "ext://sys.stdout",
    "stderr": "ext://sys.stderr",
}


def setup_logging(
    config_path: Optional[str] = None,
    level: Optional[str] = None,
    stream: Optional[str] = None,
) -> None:
    """
    logging_config.yaml 기반 로깅 초기화.

    Args:
        config_path: 설정 파일 경로. None이면 패키지 config/logging_config.yaml
        level: 콘솔 핸들러 레벨 ("DEBUG", "WARNING" ...). None이면 BIAS_LENS_LOG_LEVEL 또는 설정값
        stream: 콘솔 출력 대상 ("stdout" 또는 "stderr"). JSON 출력 시 stderr로 분리
    """
    if config_path is None:
        config_path = str(Path(__file__).parent.parent / "config" / "logging_config.yaml")

    level = (level or os.environ.get(LOG_LEVEL_ENV) or "").upper() or None

    if not os.path.exists(config_path):
        logging.basicConfig(level=level or logging.INFO, format=DEFAULT_FORMAT)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        log_config = yaml.safe_load(f) or {}

    _apply_console_overrides(log_config, level, stream)

    # 파일 핸들러용 디렉토리 생성
    for handler in log_config.get("handlers", {}).values():
        if "filename" in handler:
            log_dir = os.path.dirname(handler["filename"])
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(log_config)


def _apply_console_overrides(log_config: Dict[str, Any], level: Optional[str], stream: Optional[str]) -> None:
    console = log_config.get("handlers", {}).get("console")
    if console is None:
        return
    if level:
        console["level"] = level
    if stream in _STREAMS:
        console["stream"] = _STREAMS[stream]


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 (예: "bias_lens.scoring.bias_scorer")."""
    return logging.getLogger(name)
