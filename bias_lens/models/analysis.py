"""분석 결과 데이터 모델"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bias_lens.models.article import ExtractedArticle
from bias_lens.models.source import SourceRating

SENTIMENT_LABELS = ("positive", "negative", "neutral")
HIGHLIGHT_CATEGORIES = ("emotional", "bias", "factual")


@dataclass(frozen=True)
class Highlight:
    """본문에서 규칙에 매칭된 구간."""

    text: str
    category: str  # "emotional", "bias", "factual"
    explanation: str
    start_index: int
    end_index: int

    # 매칭된 규칙 그룹 (emotional, left_bias, right_bias, factual)
    rule_group: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "type": self.category,
            "explanation": self.explanation,
            "start_index": self.start_index,
            "end_index": self.end_index,
        }


@dataclass(frozen=True)
class SentimentResult:
    """감성 분석 결과."""

    sentiment: str = "neutral"
    confidence: float = 0.5
    score: float = 0.0  # -5 ~ 5


@dataclass
class BiasAnalysis:
    """Scorer 출력."""

    political_bias: float = 0.0  # -5 (좌) ~ 5 (우)
    emotional_language: float = 0.0  # 0 ~ 10
    factuality: float = 6.0  # 1 ~ 10
    sentiment: str = "neutral"
    highlights: List[Highlight] = field(default_factory=list)

    # 진단용 세부 감성 결과
    sentiment_detail: SentimentResult = field(default_factory=SentimentResult)


@dataclass
class BiasScore:
    """화면 표시용 세 가지 점수 묶음."""

    political: float = 0.0
    factual: float = 6.0
    emotional: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "political": self.political,
            "factual": self.factual,
            "emotional": self.emotional,
        }


@dataclass
class ComparativeCoverageItem:
    """다른 언론사의 같은 이슈 보도."""

    source_name: str = ""
    bias: str = "unknown"
    headline: str = ""
    factuality: float = 5.0
    sentiment: str = "neutral"
    url: str = ""
    published_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source_name,
            "bias": self.bias,
            "headline": self.headline,
            "factuality": self.factuality,
            "sentiment": self.sentiment,
            "url": self.url,
            "published_at": self.published_at,
        }


@dataclass
class SocialReaction:
    """소셜 미디어 반응 (모의 데이터)."""

    platform: str = ""
    sentiment: str = "neutral"
    engagement: int = 0
    top_comments: List[str] = field(default_factory=list)
    url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "sentiment": self.sentiment,
            "engagement": self.engagement,
            "top_comments": list(self.top_comments),
            "url": self.url,
        }


@dataclass
class Emotion:
    """감정 분류 모델 라벨/점수."""

    label: str = ""
    score: float = 0.0


@dataclass
class AnalysisResult:
    """Orchestrator 최종 출력."""

    article: ExtractedArticle
    bias_score: BiasScore
    sentiment: str = "neutral"
    article_bias: str = "unknown"
    source_rating: Optional[SourceRating] = None
    highlights: List[Highlight] = field(default_factory=list)
    comparative_coverage: List[ComparativeCoverageItem] = field(default_factory=list)
    social_reactions: List[SocialReaction] = field(default_factory=list)
    emotions: List[Emotion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리."""
        article = self.article.to_dict()
        article.update({
            "bias": self.article_bias,
            "factuality": self.bias_score.factual,
            "sentiment": self.sentiment,
        })
        return {
            "article": article,
            "bias_score": self.bias_score.to_dict(),
            "source_rating": self.source_rating.to_dict() if self.source_rating else None,
            "highlights": [h.to_dict() for h in self.highlights],
            "comparative_coverage": [c.to_dict() for c in self.comparative_coverage],
            "social_reactions": [r.to_dict() for r in self.social_reactions],
            "emotions": [{"label": e.label, "score": e.score} for e in self.emotions],
        }
