"""기사 편향 분석 파이프라인

URL 검증 → 수집 → 추출 → 점수 → (감정 모델) → 비교 보도 → 소셜 반응 → 결과 조립.
수집/추출 실패는 대체 기사로 복구하고, 그 밖의 예상하지 못한 오류는
AnalysisFailedError로 감싸서 던진다.
"""

import asyncio
import concurrent.futures
import random
from typing import List, Optional
from urllib.parse import urlparse

from bias_lens.comparison.comparative_aggregator import ComparativeAggregator
from bias_lens.errors import (
    AnalysisFailedError,
    ExtractionInsufficientError,
    InvalidInputError,
)
from bias_lens.extraction.article_extractor import ArticleExtractor
from bias_lens.extraction.placeholder import build_placeholder_article
from bias_lens.ingestion.page_fetcher import FetchFailure, PageFetcher
from bias_lens.ingestion.related_search import RelatedArticleSearch
from bias_lens.models.analysis import AnalysisResult, BiasScore, Emotion
from bias_lens.models.article import ExtractedArticle
from bias_lens.models.source import UNKNOWN_BIAS
from bias_lens.registry.source_registry import SourceRegistry
from bias_lens.scoring.bias_scorer import BiasScorer
from bias_lens.scoring.emotion_api import EmotionApiClient, calculate_weighted_emotional_score
from bias_lens.social.social_reactions import SocialReactionGenerator
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.credentials import ApiCredentials
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: Optional[str]) -> str:
    """
    분석 요청 URL 검증.

    Returns:
        앞뒤 공백을 제거한 URL

    Raises:
        InvalidInputError: 비어있음, http/https 아님, 호스트 없음
    """
    candidate = (url or "").strip()
    if not candidate:
        raise InvalidInputError()

    try:
        parsed = urlparse(candidate)
    except ValueError as e:
        raise InvalidInputError() from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
        raise InvalidInputError()
    return candidate


class BiasAnalyzer:
    """
    분석 오케스트레이터.

    협력 객체는 모두 생성자로 주입한다. 모듈 수준 싱글턴은 없다.

    사용법:
        analyzer = BiasAnalyzer.from_config(ConfigManager())
        result = analyzer.analyze_sync("https://www.reuters.com/world/...")
        print(result.bias_score.political, result.sentiment)
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: ArticleExtractor,
        scorer: BiasScorer,
        registry: SourceRegistry,
        aggregator: ComparativeAggregator,
        social: SocialReactionGenerator,
        emotion_client: Optional[EmotionApiClient] = None,
        placeholder_settings: Optional[dict] = None,
    ) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.scorer = scorer
        self.registry = registry
        self.aggregator = aggregator
        self.social = social
        self.emotion_client = emotion_client
        self.placeholder_settings = placeholder_settings or {}

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigManager] = None,
        rng: Optional[random.Random] = None,
    ) -> "BiasAnalyzer":
        """
        설정으로 전체 파이프라인 구성.

        Args:
            config: ConfigManager (None이면 기본 설정 디렉토리)
            rng: 소셜 반응용 난수 생성기 (테스트에서 시드 고정용)
        """
        config = config or ConfigManager()
        credentials = ApiCredentials.from_config(config)
        registry = SourceRegistry(config)
        scorer = BiasScorer.from_config(config, registry)
        search = RelatedArticleSearch.from_config(config, credentials)

        emotion_client = None
        if credentials.has("huggingface"):
            emotion_client = EmotionApiClient.from_config(config, credentials)

        return cls(
            fetcher=PageFetcher.from_config(config),
            extractor=ArticleExtractor.from_config(config),
            scorer=scorer,
            registry=registry,
            aggregator=ComparativeAggregator.from_config(
                config, search, registry, sentiment=scorer.sentiment
            ),
            social=SocialReactionGenerator(
                rng=rng, platforms=config.get("social.platforms", None)
            ),
            emotion_client=emotion_client,
            placeholder_settings=config.get_section("placeholders"),
        )

    async def analyze(self, url: str) -> AnalysisResult:
        """
        기사 URL 분석.

        Args:
            url: 분석할 기사 URL

        Returns:
            AnalysisResult

        Raises:
            InvalidInputError: URL이 잘못됨 (파이프라인 실행 전)
            AnalysisFailedError: 예상하지 못한 내부 오류
        """
        url = validate_url(url)
        logger.info("분석 시작: %s", url)

        try:
            return await self._run(url)
        except Exception as e:
            logger.exception("분석 실패: %s", url)
            raise AnalysisFailedError() from e

    def analyze_sync(self, url: str) -> AnalysisResult:
        """analyze 동기 호출. 이미 이벤트 루프 안이면 별도 스레드에서 실행."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, self.analyze(url)).result()
        return asyncio.run(self.analyze(url))

    async def _run(self, url: str) -> AnalysisResult:
        article = await self._load_article(url)

        analysis = self.scorer.score(article.body, article.source_name)
        rating = self.registry.get_source_bias_rating(article.source_name)

        emotions = await self._model_emotions(article.body)
        emotional = analysis.emotional_language
        if emotions:
            emotional = calculate_weighted_emotional_score(emotions)

        coverage = await self.aggregator.compare(article.title)
        reactions = self.social.generate(article.title, article.url)

        result = AnalysisResult(
            article=article,
            bias_score=BiasScore(
                political=analysis.political_bias,
                factual=analysis.factuality,
                emotional=emotional,
            ),
            sentiment=analysis.sentiment,
            article_bias=rating.bias if rating else UNKNOWN_BIAS,
            source_rating=rating,
            highlights=analysis.highlights,
            comparative_coverage=coverage,
            social_reactions=reactions,
            emotions=emotions,
        )
        logger.info(
            "분석 완료: %s (대체=%s, 비교 보도 %d건)",
            article.title[:50], article.is_placeholder, len(coverage),
        )
        return result

    async def _load_article(self, url: str) -> ExtractedArticle:
        """수집 + 추출. 실패하면 대체 기사."""
        outcome = await self.fetcher.fetch_async(url)
        if isinstance(outcome, FetchFailure):
            logger.warning("수집 실패, 대체 기사 사용: %s", outcome.reason)
            return build_placeholder_article(url, self.placeholder_settings)

        try:
            return self.extractor.extract(outcome.markup, url)
        except ExtractionInsufficientError as e:
            logger.warning("추출 결과 부족, 대체 기사 사용: %s", e)
            return build_placeholder_article(url, self.placeholder_settings)

    async def _model_emotions(self, body: str) -> List[Emotion]:
        if self.emotion_client is None or not self.emotion_client.is_configured:
            return []
        result = await asyncio.to_thread(self.emotion_client.analyze, body)
        if result.error:
            logger.info("감정 모델 결과 없음, 휴리스틱 점수 사용: %s", result.error)
        return result.emotions


class AnalysisSession:
    """
    요청 단위 취소를 지원하는 분석 세션.

    새 요청을 제출하면 진행 중인 이전 분석을 취소한다.

    사용법:
        session = AnalysisSession(analyzer)
        task = session.submit(url)
        result = await task
    """

    def __init__(self, analyzer: BiasAnalyzer) -> None:
        self._analyzer = analyzer
        self._current: Optional[asyncio.Task] = None

    @property
    def current(self) -> Optional[asyncio.Task]:
        return self._current

    def submit(self, url: str) -> "asyncio.Task[AnalysisResult]":
        """분석 시작. 실행 중인 이벤트 루프 안에서 호출해야 한다."""
        self.cancel()
        self._current = asyncio.get_running_loop().create_task(self._analyzer.analyze(url))
        return self._current

    def cancel(self) -> bool:
        """진행 중인 분석 취소. 취소했으면 True."""
        if self._current is not None and not self._current.done():
            logger.info("이전 분석 취소")
            self._current.cancel()
            return True
        return False
