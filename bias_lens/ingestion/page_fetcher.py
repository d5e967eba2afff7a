"""기사 URL에서 원문 마크업 수집

설정된 전략(직접 요청, 릴레이 A, 릴레이 B ...)을 순서대로 시도하고
충분한 길이의 마크업을 처음 돌려준 전략을 채택한다.
모든 전략이 실패해도 예외를 던지지 않고 FetchFailure를 반환한다.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from bias_lens.errors import StrategyFailed
from bias_lens.ingestion.fetch_strategies import (
    DEFAULT_USER_AGENT,
    AllOriginsStrategy,
    CorsProxyStrategy,
    DirectFetchStrategy,
    FetchStrategy,
    build_strategies,
)
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)


MIN_MARKUP_LENGTH = 500  # 이 길이 이하 응답은 실패로 간주
CACHE_TTL_SECONDS = 3600


@dataclass
class FetchedPage:
    """수집 성공 결과."""
    url: str
    markup: str
    strategy: str
    response_time_ms: int = 0


@dataclass
class FetchFailure:
    """모든 전략 실패. errors는 {전략명: 실패 사유}."""
    url: str
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def reason(self) -> str:
        if not self.errors:
            return "수집 전략 없음"
        return "; ".join(f"{name}: {err}" for name, err in self.errors.items())


FetchOutcome = Union[FetchedPage, FetchFailure]


@dataclass
class PageFetcherConfig:
    """수집기 설정"""
    min_markup_length: int = MIN_MARKUP_LENGTH
    enable_cache: bool = True
    cache_ttl_seconds: int = CACHE_TTL_SECONDS


class PageFetcher:
    """
    전략 체인 기반 마크업 수집기.

    주요 기능:
    - 전략 순서대로 시도, 전략별 타임아웃
    - 네트워크 오류/타임아웃/짧은 응답은 다음 전략으로 넘어감
    - 성공 결과 캐싱 (인스턴스 소유)

    사용법:
        fetcher = PageFetcher.from_config(ConfigManager())
        outcome = fetcher.fetch("https://news.example.com/article/123")
        if isinstance(outcome, FetchedPage):
            print(outcome.markup[:100])
    """

    def __init__(
        self,
        strategies: Optional[List[FetchStrategy]] = None,
        config: Optional[PageFetcherConfig] = None,
    ) -> None:
        if strategies is None:
            strategies = [DirectFetchStrategy(), AllOriginsStrategy(), CorsProxyStrategy()]
        self.strategies = strategies
        self.config = config or PageFetcherConfig()
        self._cache: Dict[str, Tuple[FetchedPage, float]] = {}

    @classmethod
    def from_config(cls, config: ConfigManager) -> "PageFetcher":
        """config.yaml의 fetcher 섹션으로 생성."""
        section = config.get_section("fetcher")
        strategies = build_strategies(
            section.get("strategies") or [{"name": "direct"}],
            user_agent=section.get("user_agent") or DEFAULT_USER_AGENT,
        )
        fetcher_config = PageFetcherConfig(
            min_markup_length=int(config.get("fetcher.min_markup_length", MIN_MARKUP_LENGTH)),
            enable_cache=bool(config.get("fetcher.enable_cache", True)),
            cache_ttl_seconds=int(config.get("fetcher.cache_ttl_seconds", CACHE_TTL_SECONDS)),
        )
        return cls(strategies=strategies, config=fetcher_config)

    def fetch(self, url: str) -> FetchOutcome:
        """
        URL 마크업 수집 (동기).

        Args:
            url: 수집할 기사 URL

        Returns:
            FetchedPage 또는 FetchFailure
        """
        cached = self._lookup(url)
        if cached:
            return cached

        failure = FetchFailure(url=url)
        for strategy in self.strategies:
            start_time = time.time()
            try:
                markup = strategy.attempt(url)
            except StrategyFailed as e:
                self._record_failure(failure, strategy, str(e))
                continue
            page = self._accept(url, strategy, markup, start_time, failure)
            if page:
                return page

        logger.warning("모든 수집 전략 실패: %s (%s)", url[:80], failure.reason)
        return failure

    async def fetch_async(self, url: str) -> FetchOutcome:
        """
        URL 마크업 수집 (비동기).

        전략 호출마다 스레드로 넘겨 이벤트 루프를 막지 않으며,
        전략 사이에서 취소될 수 있다.
        """
        cached = self._lookup(url)
        if cached:
            return cached

        failure = FetchFailure(url=url)
        for strategy in self.strategies:
            start_time = time.time()
            try:
                markup = await asyncio.to_thread(strategy.attempt, url)
            except StrategyFailed as e:
                self._record_failure(failure, strategy, str(e))
                continue
            page = self._accept(url, strategy, markup, start_time, failure)
            if page:
                return page

        logger.warning("모든 수집 전략 실패: %s (%s)", url[:80], failure.reason)
        return failure

    def is_usable(self, markup: Optional[str]) -> bool:
        """마크업이 최소 길이를 넘는지."""
        return bool(markup) and len(markup) > self.config.min_markup_length

    def _accept(
        self,
        url: str,
        strategy: FetchStrategy,
        markup: str,
        start_time: float,
        failure: FetchFailure,
    ) -> Optional[FetchedPage]:
        """응답 길이 확인 후 FetchedPage 생성 및 캐시 저장."""
        if not self.is_usable(markup):
            self._record_failure(
                failure, strategy, f"응답이 너무 짧음 ({len(markup or '')}자)"
            )
            return None

        page = FetchedPage(
            url=url,
            markup=markup,
            strategy=strategy.name,
            response_time_ms=int((time.time() - start_time) * 1000),
        )
        logger.info(
            "마크업 수집 성공: %s (전략=%s, %d자, %dms)",
            url[:80], strategy.name, len(markup), page.response_time_ms,
        )
        if self.config.enable_cache:
            self._save_to_cache(url, page)
        return page

    @staticmethod
    def _record_failure(failure: FetchFailure, strategy: FetchStrategy, error: str) -> None:
        failure.errors[strategy.name] = error
        logger.debug("수집 전략 실패, 다음 전략 시도: %s - %s", strategy.name, error)

    def _lookup(self, url: str) -> Optional[FetchedPage]:
        if not self.config.enable_cache:
            return None
        cached = self._get_from_cache(url)
        if cached:
            logger.debug("캐시 히트: %s", url[:50])
        return cached

    def _get_from_cache(self, url: str) -> Optional[FetchedPage]:
        """캐시에서 조회"""
        if url not in self._cache:
            return None

        page, timestamp = self._cache[url]
        if time.time() - timestamp > self.config.cache_ttl_seconds:
            del self._cache[url]
            return None

        return page

    def _save_to_cache(self, url: str, page: FetchedPage) -> None:
        """캐시에 저장"""
        self._cache[url] = (page, time.time())

    def clear_cache(self) -> None:
        """캐시 비우기"""
        self._cache.clear()
