"""관련 기사 검색 체인

설정된 제공자를 순서대로 시도하고, 비어있지 않은 결과를 처음 돌려준 제공자를 채택한다.
키가 없는 제공자는 건너뛰고, 실패는 로그만 남긴 뒤 다음 제공자로 넘어간다.
"""

from typing import List, Optional

import requests

from bias_lens.ingestion.base_connector import DEFAULT_TIMEOUT, RelatedArticleConnector
from bias_lens.ingestion.gnews_connector import GNewsConnector
from bias_lens.ingestion.google_news_connector import GoogleNewsConnector
from bias_lens.ingestion.newsapi_connector import DEFAULT_NEWSAPI_DOMAINS, NewsApiConnector
from bias_lens.models.related import RelatedArticle
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.credentials import ApiCredentials
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PROVIDERS = ["gnews", "newsapi", "google_news"]


class RelatedArticleSearch:
    """
    관련 기사 검색 제공자 체인.

    사용법:
        search = RelatedArticleSearch.from_config(config, credentials)
        candidates = await search.search("climate summit agreement")
    """

    def __init__(
        self,
        connectors: List[RelatedArticleConnector],
        credentials: Optional[ApiCredentials] = None,
        max_results: int = 10,
    ) -> None:
        self.connectors = connectors
        self.credentials = credentials or ApiCredentials()
        self.max_results = max_results

    @classmethod
    def from_config(cls, config: ConfigManager, credentials: ApiCredentials) -> "RelatedArticleSearch":
        """config.yaml의 related_search 섹션으로 생성. 키가 없는 제공자는 만들지 않는다."""
        section = config.get_section("related_search")
        timeout = int(section.get("timeout", DEFAULT_TIMEOUT))
        language = section.get("language", "en")
        session = requests.Session()

        connectors: List[RelatedArticleConnector] = []
        for name in section.get("providers") or DEFAULT_PROVIDERS:
            if name == "gnews" and credentials.has("gnews"):
                connectors.append(GNewsConnector(
                    api_key=credentials.get("gnews"),
                    language=language,
                    timeout=timeout,
                    session=session,
                ))
            elif name == "newsapi" and credentials.has("newsapi"):
                connectors.append(NewsApiConnector(
                    api_key=credentials.get("newsapi"),
                    language=language,
                    domains=section.get("newsapi_domains") or DEFAULT_NEWSAPI_DOMAINS,
                    timeout=timeout,
                    session=session,
                ))
            elif name == "google_news":
                connectors.append(GoogleNewsConnector(
                    language=language,
                    country=section.get("country", "US"),
                    timeout=timeout,
                    session=session,
                ))
            elif name not in ("gnews", "newsapi"):
                logger.warning("알 수 없는 검색 제공자: %s", name)

        logger.debug("관련 기사 검색 제공자: %s", [c.name for c in connectors])
        return cls(connectors, credentials, max_results=int(section.get("max_results", 10)))

    async def search(self, query: str) -> List[RelatedArticle]:
        """
        관련 기사 후보 검색.

        Args:
            query: 핵심어 질의 (빈 문자열이면 검색하지 않음)

        Returns:
            첫 성공 제공자의 결과. 모두 실패하면 빈 리스트.
        """
        if not query or not query.strip():
            return []

        for connector in self.connectors:
            if connector.credential and not self.credentials.has(connector.credential):
                logger.debug("인증 정보 없음, 건너뜀: %s", connector.name)
                continue
            try:
                articles = await connector.search(query, self.max_results)
            except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
                logger.warning("관련 기사 검색 실패, 다음 제공자 시도: %s - %s", connector.name, e)
                continue
            if articles:
                return articles
            logger.debug("검색 결과 없음: %s", connector.name)

        logger.info("모든 검색 제공자에서 결과 없음: query='%s'", query)
        return []
