"""파이프라인 예외 정의"""

from typing import Optional


class BiasLensError(Exception):
    """모든 bias_lens 예외의 베이스."""

    user_message: str = "An error occurred during analysis"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class InvalidInputError(BiasLensError):
    """비어있거나 파싱 불가한 URL. 파이프라인 실행 전에 사용자에게 노출."""

    user_message = "Please enter a valid article URL"


class AnalysisFailedError(BiasLensError):
    """예상하지 못한 오류. 상세는 로그에만 남기고 일반 메시지로 노출."""

    user_message = "Unable to analyze this article. Please try again later."


class StrategyFailed(BiasLensError):
    """단일 fetch 전략 실패. 체인 내부에서만 사용."""


class ExtractionInsufficientError(BiasLensError):
    """마크업은 받았지만 제목/본문이 최소 품질에 못 미침."""
