"""감성 분석 - 긍정/부정 어휘 가중 합"""

import re
from typing import List, Optional

from bias_lens.models.analysis import SentimentResult

POSITIVE_WORDS = [
    "good", "great", "excellent", "amazing", "wonderful", "fantastic", "positive", "success",
    "achievement", "progress", "improvement", "beneficial", "effective", "outstanding",
    "remarkable", "brilliant", "superb", "magnificent", "exceptional", "impressive",
    "breakthrough", "victory", "triumph", "prosperity", "flourishing", "thriving",
    "celebrate", "win", "accomplish", "advance", "boost", "enhance", "upgrade",
    "approve", "support", "endorse", "praise", "commend", "applaud", "welcome",
]

NEGATIVE_WORDS = [
    "bad", "terrible", "awful", "horrible", "disgusting", "outrageous", "negative", "failure",
    "crisis", "disaster", "problem", "issue", "concern", "disappointing", "devastating",
    "catastrophic", "tragic", "alarming", "disturbing", "shocking", "appalling",
    "scandal", "corruption", "fraud", "violence", "conflict", "war", "death",
    "decline", "collapse", "crash", "plummet", "suffer", "struggle", "threat",
    "condemn", "criticize", "oppose", "reject", "deny", "refuse", "attack",
]

INTENSIFIERS = {
    "very", "extremely", "incredibly", "absolutely", "completely",
    "totally", "utterly", "highly", "deeply",
}

INTENSIFIER_MULTIPLIER = 1.8
POSITIVE_RATIO_THRESHOLD = 0.6
NEGATIVE_RATIO_THRESHOLD = 0.4

_NON_WORD_RE = re.compile(r"[^\w]")


def tokenize(text: str) -> List[str]:
    """공백 기준 토큰화, 소문자화 및 비단어 문자 제거. 빈 토큰은 남긴다."""
    return [_NON_WORD_RE.sub("", word) for word in (text or "").lower().split()]


class SentimentAnalyzer:
    """
    어휘 기반 감성 분석.

    토큰이 어휘를 포함하면(부분 문자열) 해당 극성으로 센다.
    바로 앞 토큰이 강조어면 가중치 1.8배.

    사용법:
        result = SentimentAnalyzer().analyze("A remarkable breakthrough for the team")
        result.sentiment  # "positive"
    """

    def __init__(
        self,
        intensifier_multiplier: float = INTENSIFIER_MULTIPLIER,
        positive_threshold: float = POSITIVE_RATIO_THRESHOLD,
        negative_threshold: float = NEGATIVE_RATIO_THRESHOLD,
        positive_words: Optional[List[str]] = None,
        negative_words: Optional[List[str]] = None,
    ) -> None:
        self.intensifier_multiplier = intensifier_multiplier
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold
        self.positive_words = positive_words or POSITIVE_WORDS
        self.negative_words = negative_words or NEGATIVE_WORDS

    def analyze(self, text: str) -> SentimentResult:
        """
        텍스트 감성 라벨/신뢰도/점수 산출.

        Returns:
            SentimentResult. 신호가 없으면 neutral, confidence 0.5, score 0.
        """
        tokens = tokenize(text)
        positive = 0.0
        negative = 0.0

        for i, token in enumerate(tokens):
            if not token:
                continue
            weight = 1.0
            if i > 0 and tokens[i - 1] in INTENSIFIERS:
                weight = self.intensifier_multiplier

            if self._contains_any(token, self.positive_words):
                positive += weight
            if self._contains_any(token, self.negative_words):
                negative += weight

        total = positive + negative
        if total == 0:
            return SentimentResult(sentiment="neutral", confidence=0.5, score=0.0)

        ratio = positive / total
        confidence = min(total / max(len(tokens) / 100, 1), 1.0)

        if ratio > self.positive_threshold:
            return SentimentResult("positive", confidence, (ratio - 0.5) * 10)
        if ratio < self.negative_threshold:
            return SentimentResult("negative", confidence, (ratio - 0.5) * 10)
        return SentimentResult("neutral", confidence, 0.0)

    @staticmethod
    def _contains_any(token: str, words: List[str]) -> bool:
        return any(word in token for word in words)
