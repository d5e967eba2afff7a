"""사실성 점수 - 언론사 기준점 + 본문 품질 지표"""

import re
from typing import Dict, List, Optional, Tuple

from bias_lens.registry.source_registry import DEFAULT_FACTUALITY_BASELINE, SourceRegistry
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

# (이름, 패턴, 매칭당 가중치, 상한). 대소문자 플래그는 패턴마다 다르다.
QUALITY_INDICATORS: List[Tuple[str, str, int, float, float]] = [
    ("citations",
     r"according to|sources say|reported by|officials said|spokesperson|statement from"
     r"|data shows|study finds|research indicates",
     re.IGNORECASE, 0.5, 1.5),
    ("direct_quotes", r'"[^"]{20,}"', 0, 0.3, 1.0),
    ("statistics", r"\d+(?:\.\d+)?%|\d+\s*(?:million|billion|thousand|percent)", 0, 0.4, 1.0),
    ("date_references",
     r"yesterday|today|this week|last month|january|february|march|april|may|june|july"
     r"|august|september|october|november|december|\d{4}|\d{1,2}/\d{1,2}/\d{2,4}",
     re.IGNORECASE, 0.2, 0.5),
    ("expert_sources",
     r"professor|doctor|researcher|analyst|expert|specialist|director|chief|president|ceo",
     re.IGNORECASE, 0.3, 0.8),
    ("evidence_language",
     r"data|evidence|research|study|analysis|investigation|report|survey|poll",
     re.IGNORECASE, 0.2, 0.5),
    ("verification_language",
     r"confirmed|verified|documented|established|proven|fact-checked",
     re.IGNORECASE, 0.4, 0.8),
]

PENALTY_INDICATORS: List[Tuple[str, str, int, float, float]] = [
    ("opinion",
     r"i think|i believe|in my opinion|it seems|arguably|presumably|supposedly|clearly|obviously",
     re.IGNORECASE, 0.3, 1.0),
    ("sensational",
     r"shocking|outrageous|unbelievable|incredible|devastating|explosive|bombshell",
     re.IGNORECASE, 0.4, 1.5),
    ("unsourced",
     r"many people say|it is said|rumors suggest|sources claim|allegedly without attribution",
     re.IGNORECASE, 0.5, 1.2),
    ("clickbait",
     r"you won't believe|this will shock you|amazing|incredible|must see",
     re.IGNORECASE, 0.3, 0.8),
]

DENSITY_UNIT = 1000  # 본문 1000자 기준으로 정규화
MIN_FACTUALITY = 1.0
MAX_FACTUALITY = 10.0


def _compile(indicators):
    return [(name, re.compile(pattern, flags), weight, cap)
            for name, pattern, flags, weight, cap in indicators]


class FactualityScorer:
    """
    사실성 점수 산출.

    - 언론사 기준점 (레지스트리, 모르면 6.0)
    - 인용/통계/전문가/검증 표현 가점
    - 의견/선정/무출처/낚시 표현 감점
    """

    def __init__(
        self,
        registry: Optional[SourceRegistry] = None,
        default_baseline: float = DEFAULT_FACTUALITY_BASELINE,
    ) -> None:
        self._registry = registry
        self.default_baseline = default_baseline
        self._quality = _compile(QUALITY_INDICATORS)
        self._penalties = _compile(PENALTY_INDICATORS)

    def score(self, text: str, source_name: str) -> float:
        """
        사실성 점수.

        Returns:
            1~10, 소수점 한 자리.
        """
        text = text or ""
        baseline = self._baseline(source_name)
        breakdown = self.breakdown(text)

        final = baseline + breakdown["quality"] - breakdown["penalty"]
        return round(max(MIN_FACTUALITY, min(MAX_FACTUALITY, final)), 1)

    def breakdown(self, text: str) -> Dict[str, float]:
        """가점/감점 합계 (진단용)."""
        density = DENSITY_UNIT / max(len(text or ""), DENSITY_UNIT)
        return {
            "quality": self._indicator_score(self._quality, text or "", density),
            "penalty": self._indicator_score(self._penalties, text or "", density),
        }

    def _baseline(self, source_name: str) -> float:
        if self._registry is None:
            return self.default_baseline
        return self._registry.factuality_baseline(source_name, self.default_baseline)

    @staticmethod
    def _indicator_score(indicators, text: str, density: float) -> float:
        total = 0.0
        for _name, pattern, weight, cap in indicators:
            count = len(pattern.findall(text))
            total += min(count * density * weight, cap)
        return total
