"""NewsAPI 커넥터"""

from typing import List, Optional

import requests

from bias_lens.ingestion.base_connector import DEFAULT_TIMEOUT, RelatedArticleConnector
from bias_lens.models.related import RelatedArticle
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

NEWSAPI_EVERYTHING_URL = "https://newsapi.org/v2/everything"

# 주요 언론사로 검색 범위 제한
DEFAULT_NEWSAPI_DOMAINS = (
    "reuters.com,bbc.com,cnn.com,foxnews.com,nytimes.com,"
    "washingtonpost.com,theguardian.com,wsj.com,npr.org,apnews.com"
)


class NewsApiConnector(RelatedArticleConnector):
    """
    NewsAPI /v2/everything 검색 커넥터 (API 키 필요).

    응답 status가 "ok"가 아니면 실패로 본다.
    """

    name = "newsapi"
    credential = "newsapi"

    def __init__(
        self,
        api_key: str,
        language: str = "en",
        domains: str = DEFAULT_NEWSAPI_DOMAINS,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(timeout=timeout, session=session)
        self._api_key = api_key
        self._language = language
        self._domains = domains

    def search_sync(self, query: str, limit: int = 10) -> List[RelatedArticle]:
        data = self._get_json(NEWSAPI_EVERYTHING_URL, {
            "q": query,
            "apiKey": self._api_key,
            "pageSize": limit,
            "sortBy": "publishedAt",
            "language": self._language,
            "domains": self._domains,
        })

        if data.get("status") != "ok":
            raise ValueError(data.get("message") or "NewsAPI 요청 실패")

        articles = RelatedArticle.from_api_items(data.get("articles"), self.name)
        logger.info("NewsAPI 검색 완료: query='%s', %d건", query, len(articles))
        return articles
