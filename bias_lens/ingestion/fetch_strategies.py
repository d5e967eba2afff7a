"""기사 마크업 수집 전략

각 전략은 attempt(url) -> markup 을 구현하고, 실패 시 StrategyFailed를 던진다.
PageFetcher가 설정된 순서대로 시도한다.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type
from urllib.parse import quote

import requests

from bias_lens.errors import StrategyFailed
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/127.0.0.0 Safari/537.36"
)


class FetchStrategy(ABC):
    """모든 수집 전략의 추상 베이스."""

    name: str = ""
    default_timeout: int = 10

    def __init__(
        self,
        timeout: Optional[int] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout or self.default_timeout
        self.user_agent = user_agent
        self._session = session or requests.Session()

    @abstractmethod
    def attempt(self, url: str) -> str:
        """URL의 마크업 반환. 실패 시 StrategyFailed."""
        ...

    def _get(self, url: str, params: Optional[Dict[str, str]] = None) -> requests.Response:
        """공통 GET. 네트워크 오류/타임아웃/4xx·5xx는 StrategyFailed로 변환."""
        try:
            resp = self._session.get(
                url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise StrategyFailed(f"{self.name}: 타임아웃 ({self.timeout}s)") from e
        except requests.RequestException as e:
            raise StrategyFailed(f"{self.name}: 요청 실패 - {e}") from e

        if resp.status_code >= 400:
            raise StrategyFailed(f"{self.name}: HTTP {resp.status_code}")
        return resp

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout})"


class DirectFetchStrategy(FetchStrategy):
    """원본 URL 직접 요청."""

    name = "direct"
    default_timeout = 10

    def attempt(self, url: str) -> str:
        return self._get(url).text


class AllOriginsStrategy(FetchStrategy):
    """AllOrigins 릴레이. JSON 응답의 contents 필드에 마크업이 들어있다."""

    name = "allorigins"
    default_timeout = 15
    endpoint = "https://api.allorigins.win/get"

    def __init__(self, endpoint: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if endpoint:
            self.endpoint = endpoint

    def attempt(self, url: str) -> str:
        resp = self._get(self.endpoint, params={"url": url})
        try:
            payload = resp.json()
        except ValueError as e:
            raise StrategyFailed(f"{self.name}: JSON 파싱 실패") from e

        contents = payload.get("contents") if isinstance(payload, dict) else None
        if not isinstance(contents, str):
            raise StrategyFailed(f"{self.name}: contents 필드 없음")
        return contents


class CorsProxyStrategy(FetchStrategy):
    """corsproxy.io 형식 릴레이. 인코딩된 URL을 쿼리로 붙여 원문 마크업을 받는다."""

    name = "corsproxy"
    default_timeout = 15
    endpoint = "https://corsproxy.io/"

    def __init__(self, endpoint: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if endpoint:
            self.endpoint = endpoint

    def attempt(self, url: str) -> str:
        return self._get(f"{self.endpoint}?{quote(url, safe='')}").text


STRATEGY_TYPES: Dict[str, Type[FetchStrategy]] = {
    DirectFetchStrategy.name: DirectFetchStrategy,
    AllOriginsStrategy.name: AllOriginsStrategy,
    CorsProxyStrategy.name: CorsProxyStrategy,
}


def build_strategies(
    strategy_configs: List[Dict[str, Any]],
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[requests.Session] = None,
) -> List[FetchStrategy]:
    """
    config.yaml의 fetcher.strategies 목록으로 전략 객체 생성.

    Args:
        strategy_configs: [{"name": "direct", "timeout": 10}, ...]
        user_agent: 요청 User-Agent.
        session: 공유 requests 세션 (None이면 전략별 생성).

    Returns:
        설정 순서를 유지한 전략 리스트. 알 수 없는 이름은 건너뛴다.
    """
    strategies: List[FetchStrategy] = []
    for item in strategy_configs:
        name = item.get("name", "")
        strategy_cls = STRATEGY_TYPES.get(name)
        if strategy_cls is None:
            logger.warning("알 수 없는 수집 전략: %s", name)
            continue

        kwargs: Dict[str, Any] = {
            "timeout": item.get("timeout"),
            "user_agent": user_agent,
            "session": session,
        }
        if item.get("endpoint") and strategy_cls is not DirectFetchStrategy:
            kwargs["endpoint"] = item["endpoint"]
        strategies.append(strategy_cls(**kwargs))

    return strategies
