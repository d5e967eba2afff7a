"""종합 편향 분석 - 하위 분석기 조합"""

from typing import Optional

from bias_lens.models.analysis import BiasAnalysis
from bias_lens.registry.source_registry import DEFAULT_FACTUALITY_BASELINE, SourceRegistry
from bias_lens.scoring.emotion_scorer import EmotionScorer
from bias_lens.scoring.factuality_scorer import FactualityScorer
from bias_lens.scoring.highlight_detector import HighlightDetector
from bias_lens.scoring.political_bias_scorer import (
    CONTENT_WEIGHT,
    POLITICAL_SCALE,
    SOURCE_PRIOR_WEIGHT,
    PoliticalBiasScorer,
)
from bias_lens.scoring.sentiment_analyzer import (
    INTENSIFIER_MULTIPLIER,
    NEGATIVE_RATIO_THRESHOLD,
    POSITIVE_RATIO_THRESHOLD,
    SentimentAnalyzer,
)
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)


class BiasScorer:
    """
    본문 + 언론사명 → BiasAnalysis.

    - 감성 (SentimentAnalyzer)
    - 감정적 언어 (EmotionScorer)
    - 하이라이트 (HighlightDetector)
    - 정치 성향 (PoliticalBiasScorer, 언론사 사전값 반영)
    - 사실성 (FactualityScorer, 언론사 기준점 반영)

    각 단계는 서로 독립적이고 난수를 쓰지 않는다. 같은 입력이면 같은 결과.

    사용법:
        scorer = BiasScorer.from_config(config, registry)
        analysis = scorer.score(article.body, article.source_name)
    """

    def __init__(
        self,
        registry: Optional[SourceRegistry] = None,
        sentiment: Optional[SentimentAnalyzer] = None,
        emotion: Optional[EmotionScorer] = None,
        highlights: Optional[HighlightDetector] = None,
        political: Optional[PoliticalBiasScorer] = None,
        factuality: Optional[FactualityScorer] = None,
    ) -> None:
        self.sentiment = sentiment or SentimentAnalyzer()
        self.emotion = emotion or EmotionScorer()
        self.highlights = highlights or HighlightDetector()
        self.political = political or PoliticalBiasScorer(registry)
        self.factuality = factuality or FactualityScorer(registry)

    @classmethod
    def from_config(cls, config: ConfigManager, registry: SourceRegistry) -> "BiasScorer":
        """config.yaml의 scoring 섹션으로 생성."""
        return cls(
            registry=registry,
            sentiment=SentimentAnalyzer(
                intensifier_multiplier=float(
                    config.get("scoring.intensifier_multiplier", INTENSIFIER_MULTIPLIER)
                ),
                positive_threshold=float(
                    config.get("scoring.positive_ratio_threshold", POSITIVE_RATIO_THRESHOLD)
                ),
                negative_threshold=float(
                    config.get("scoring.negative_ratio_threshold", NEGATIVE_RATIO_THRESHOLD)
                ),
            ),
            political=PoliticalBiasScorer(
                registry,
                source_prior_weight=float(config.get("scoring.source_prior_weight", SOURCE_PRIOR_WEIGHT)),
                content_weight=float(config.get("scoring.content_weight", CONTENT_WEIGHT)),
                scale=float(config.get("scoring.political_scale", POLITICAL_SCALE)),
            ),
            factuality=FactualityScorer(
                registry,
                default_baseline=float(
                    config.get("scoring.default_factuality", DEFAULT_FACTUALITY_BASELINE)
                ),
            ),
        )

    def score(self, body: str, source_name: str) -> BiasAnalysis:
        """
        본문 분석.

        Args:
            body: 정제된 기사 본문
            source_name: 언론사명 (사전값 조회용)

        Returns:
            BiasAnalysis (모든 수치는 범위 내로 고정)
        """
        body = body or ""
        sentiment = self.sentiment.analyze(body)
        analysis = BiasAnalysis(
            political_bias=self.political.score(body, source_name),
            emotional_language=self.emotion.score(body),
            factuality=self.factuality.score(body, source_name),
            sentiment=sentiment.sentiment,
            highlights=self.highlights.detect(body),
            sentiment_detail=sentiment,
        )

        logger.info(
            "편향 분석 완료: %s (정치=%.1f, 감정=%.1f, 사실성=%.1f, 감성=%s, 하이라이트=%d)",
            source_name or "unknown",
            analysis.political_bias,
            analysis.emotional_language,
            analysis.factuality,
            analysis.sentiment,
            len(analysis.highlights),
        )
        return analysis
