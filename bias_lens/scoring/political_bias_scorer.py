"""정치 성향 점수 (-5 좌 ~ 5 우)"""

import re
from typing import List, Optional, Pattern

from bias_lens.registry.source_registry import SourceRegistry

LEFT_KEYWORDS = [
    "progressive", "social justice", "climate change", "climate crisis", "inequality", "diversity",
    "inclusion", "environmental", "renewable", "sustainable", "universal healthcare",
    "minimum wage", "living wage", "gun control", "reproductive rights", "immigration reform",
    "wealth tax", "medicare for all", "green new deal", "systemic racism", "police reform",
    "lgbtq rights", "affordable housing", "workers rights", "union", "collective bargaining",
    "public option", "student debt relief", "corporate accountability", "tax the wealthy",
    "social programs", "public education funding",
]

RIGHT_KEYWORDS = [
    "conservative", "traditional values", "free market", "law and order", "border security",
    "fiscal responsibility", "deregulation", "second amendment", "pro-life", "family values",
    "small government", "tax cuts", "military strength", "national security", "religious freedom",
    "school choice", "constitutional rights", "individual liberty", "free enterprise", "patriotism",
    "states rights", "personal responsibility", "limited government", "free speech", "capitalism",
    "business friendly", "job creators", "economic growth", "defense spending",
]

# 상대 진영을 부정적으로 묘사하는 표현. 사용하는 쪽 점수에 1.5배로 더한다.
LEFT_NEGATIVE_FRAMING = [
    "corporate greed", "tax breaks for the wealthy", "climate denial", "voter suppression",
    "authoritarian", "fascist", "far-right", "extremist", "white supremacist", "racist",
    "bigoted", "discriminatory", "oppressive", "regressive",
]

RIGHT_NEGATIVE_FRAMING = [
    "socialist", "communist", "radical left", "liberal elite", "mainstream media",
    "deep state", "fake news", "cancel culture", "woke agenda", "virtue signaling",
    "anti-american", "unpatriotic", "godless", "immoral",
]

FRAMING_WEIGHT = 1.5
POLITICAL_SCALE = 5.0
SOURCE_PRIOR_WEIGHT = 0.3
CONTENT_WEIGHT = 0.7


def _compile(phrases: List[str]) -> List[Pattern[str]]:
    return [
        re.compile(r"\b" + r"\s+".join(re.escape(word) for word in phrase.split()) + r"\b")
        for phrase in phrases
    ]


class PoliticalBiasScorer:
    """
    좌/우 키워드 빈도와 언론사 사전값을 섞어 정치 성향 산출.

    사용법:
        scorer = PoliticalBiasScorer(registry)
        scorer.score(body, "Fox News")
    """

    def __init__(
        self,
        registry: Optional[SourceRegistry] = None,
        source_prior_weight: float = SOURCE_PRIOR_WEIGHT,
        content_weight: float = CONTENT_WEIGHT,
        scale: float = POLITICAL_SCALE,
    ) -> None:
        self._registry = registry
        self.source_prior_weight = source_prior_weight
        self.content_weight = content_weight
        self.scale = scale
        self._left = _compile(LEFT_KEYWORDS)
        self._right = _compile(RIGHT_KEYWORDS)
        self._left_framing = _compile(LEFT_NEGATIVE_FRAMING)
        self._right_framing = _compile(RIGHT_NEGATIVE_FRAMING)

    def score(self, text: str, source_name: str) -> float:
        """
        정치 성향 점수.

        키워드가 하나도 없으면 언론사 사전값을 그대로 쓴다.

        Returns:
            -5~5, 소수점 한 자리.
        """
        left, right = self.keyword_weights(text)
        prior = self.source_prior(source_name)

        total = left + right
        if total == 0:
            return self._clamp(prior)

        content_bias = ((right - left) / total) * self.scale
        final = prior * self.source_prior_weight + content_bias * self.content_weight
        return self._clamp(final)

    def keyword_weights(self, text: str) -> tuple:
        """(좌 가중 합, 우 가중 합)."""
        lowered = (text or "").lower()
        left = self._count(self._left, lowered) + self._count(self._left_framing, lowered) * FRAMING_WEIGHT
        right = self._count(self._right, lowered) + self._count(self._right_framing, lowered) * FRAMING_WEIGHT
        return left, right

    def source_prior(self, source_name: str) -> float:
        if self._registry is None:
            return 0.0
        return self._registry.political_prior(source_name)

    @staticmethod
    def _count(patterns: List[Pattern[str]], text: str) -> int:
        return sum(len(p.findall(text)) for p in patterns)

    def _clamp(self, value: float) -> float:
        return round(max(-self.scale, min(self.scale, value)), 1)
