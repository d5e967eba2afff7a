from bias_lens.ingestion.fetch_strategies import (
    AllOriginsStrategy,
    CorsProxyStrategy,
    DirectFetchStrategy,
    FetchStrategy,
    build_strategies,
)
from bias_lens.ingestion.page_fetcher import (
    FetchedPage,
    FetchFailure,
    PageFetcher,
    PageFetcherConfig,
)
from bias_lens.ingestion.base_connector import RelatedArticleConnector
from bias_lens.ingestion.gnews_connector import GNewsConnector
from bias_lens.ingestion.newsapi_connector import NewsApiConnector
from bias_lens.ingestion.google_news_connector import GoogleNewsConnector
from bias_lens.ingestion.related_search import RelatedArticleSearch

__all__ = [
    "AllOriginsStrategy",
    "CorsProxyStrategy",
    "DirectFetchStrategy",
    "FetchStrategy",
    "build_strategies",
    "FetchedPage",
    "FetchFailure",
    "PageFetcher",
    "PageFetcherConfig",
    "RelatedArticleConnector",
    "GNewsConnector",
    "NewsApiConnector",
    "GoogleNewsConnector",
    "RelatedArticleSearch",
]
