"""GNews API 커넥터"""

from typing import List, Optional

import requests

from bias_lens.ingestion.base_connector import DEFAULT_TIMEOUT, RelatedArticleConnector
from bias_lens.models.related import RelatedArticle
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

GNEWS_SEARCH_URL = "https://gnews.io/api/v4/search"
GNEWS_MAX_RESULTS = 10


class GNewsConnector(RelatedArticleConnector):
    """
    GNews 검색 커넥터 (토큰 필요).

    사용법:
        connector = GNewsConnector(api_key="...")
        articles = await connector.search("climate summit agreement", limit=10)
    """

    name = "gnews"
    credential = "gnews"

    def __init__(
        self,
        api_key: str,
        language: str = "en",
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(timeout=timeout, session=session)
        self._api_key = api_key
        self._language = language

    def search_sync(self, query: str, limit: int = GNEWS_MAX_RESULTS) -> List[RelatedArticle]:
        data = self._get_json(GNEWS_SEARCH_URL, {
            "q": query,
            "token": self._api_key,
            "lang": self._language,
            "max": min(limit, GNEWS_MAX_RESULTS),
            "sortby": "publishedAt",
        })

        if "articles" not in data:
            raise ValueError("GNews 응답에 articles 없음")

        articles = RelatedArticle.from_api_items(data["articles"], self.name)
        logger.info("GNews 검색 완료: query='%s', %d건", query, len(articles))
        return articles
