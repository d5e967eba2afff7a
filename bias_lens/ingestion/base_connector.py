"""관련 기사 검색 커넥터 베이스 클래스"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from bias_lens.models.related import RelatedArticle

DEFAULT_TIMEOUT = 10


class RelatedArticleConnector(ABC):
    """모든 관련 기사 검색 커넥터의 추상 베이스."""

    name: str = ""

    # 인증이 필요하면 ApiCredentials의 제공자 이름
    credential: Optional[str] = None

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self._session = session or requests.Session()

    @abstractmethod
    def search_sync(self, query: str, limit: int = 10) -> List[RelatedArticle]:
        """검색 (블로킹). 실패 시 requests/ValueError 계열 예외를 그대로 던진다."""
        ...

    async def search(self, query: str, limit: int = 10) -> List[RelatedArticle]:
        """검색 (비동기). 블로킹 호출을 스레드로 넘긴다."""
        return await asyncio.to_thread(self.search_sync, query, limit)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET 후 JSON 본문. 4xx/5xx는 HTTPError."""
        resp = self._session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"{self.name}: 예상하지 못한 응답 형식")
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout})"
