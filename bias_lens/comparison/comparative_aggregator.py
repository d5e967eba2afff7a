"""비교 보도 집계 - 같은 이슈를 다룬 다른 언론사 기사"""

import re
from typing import List, Optional

from bias_lens.ingestion.related_search import RelatedArticleSearch
from bias_lens.models.analysis import ComparativeCoverageItem
from bias_lens.models.related import RelatedArticle
from bias_lens.models.source import UNKNOWN_BIAS
from bias_lens.registry.source_registry import SourceRegistry
from bias_lens.scoring.sentiment_analyzer import SentimentAnalyzer
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

STOP_WORDS = {
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should",
}

MAX_COVERAGE_ITEMS = 6
MAX_QUERY_TERMS = 4
DEFAULT_COVERAGE_FACTUALITY = 5.0
REMOVED_TITLE = "[Removed]"

_NON_WORD_RE = re.compile(r"[^\w\s]")


def extract_key_terms(title: str, max_terms: int = MAX_QUERY_TERMS) -> str:
    """
    제목에서 검색 핵심어 추출.

    소문자화, 문장부호 제거, 3자 이하/불용어 제거 후 앞에서부터 max_terms개.
    """
    words = _NON_WORD_RE.sub(" ", (title or "").lower()).split()
    terms = [w for w in words if len(w) > 3 and w not in STOP_WORDS]
    return " ".join(terms[:max_terms])


class ComparativeAggregator:
    """
    관련 기사 검색 결과를 언론사 평가와 묶어 비교 보도 목록 생성.

    사용법:
        aggregator = ComparativeAggregator(search, registry)
        items = await aggregator.compare(article.title)
    """

    def __init__(
        self,
        search: RelatedArticleSearch,
        registry: SourceRegistry,
        sentiment: Optional[SentimentAnalyzer] = None,
        max_items: int = MAX_COVERAGE_ITEMS,
        max_query_terms: int = MAX_QUERY_TERMS,
        default_factuality: float = DEFAULT_COVERAGE_FACTUALITY,
    ) -> None:
        self._search = search
        self._registry = registry
        self._sentiment = sentiment or SentimentAnalyzer()
        self.max_items = max_items
        self.max_query_terms = max_query_terms
        self.default_factuality = default_factuality

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        search: RelatedArticleSearch,
        registry: SourceRegistry,
        sentiment: Optional[SentimentAnalyzer] = None,
    ) -> "ComparativeAggregator":
        section = config.get_section("comparison")
        return cls(
            search,
            registry,
            sentiment=sentiment,
            max_items=int(section.get("max_items", MAX_COVERAGE_ITEMS)),
            max_query_terms=int(section.get("max_query_terms", MAX_QUERY_TERMS)),
            default_factuality=float(section.get("default_factuality", DEFAULT_COVERAGE_FACTUALITY)),
        )

    async def compare(self, title: str) -> List[ComparativeCoverageItem]:
        """
        원 기사 제목으로 비교 보도 목록 생성.

        Args:
            title: 원 기사 제목

        Returns:
            최대 max_items개의 ComparativeCoverageItem. 후보가 없으면 빈 리스트.
        """
        query = extract_key_terms(title, self.max_query_terms)
        if not query:
            logger.info("검색 핵심어 없음, 비교 보도 생략: %s", (title or "")[:50])
            return []

        candidates = await self._search.search(query)
        items = [
            self._to_item(candidate)
            for candidate in candidates
            if self._is_eligible(candidate, title)
        ][: self.max_items]

        logger.info("비교 보도 집계: query='%s', 후보 %d건 → %d건", query, len(candidates), len(items))
        return items

    @staticmethod
    def _is_eligible(candidate: RelatedArticle, original_title: str) -> bool:
        if not candidate.is_complete:
            return False
        if REMOVED_TITLE in candidate.title:
            return False
        return candidate.title.lower() != (original_title or "").lower()

    def _to_item(self, candidate: RelatedArticle) -> ComparativeCoverageItem:
        rating = self._registry.get_source_bias_rating(candidate.source_name)
        return ComparativeCoverageItem(
            source_name=candidate.source_name,
            bias=rating.bias if rating else UNKNOWN_BIAS,
            headline=candidate.title,
            factuality=rating.factuality if rating else self.default_factuality,
            sentiment=self._sentiment.analyze(candidate.description).sentiment,
            url=candidate.url,
            published_at=candidate.published_at,
        )
