"""감정적 언어 점수 (0~10)"""

import re
from typing import Dict, List

from bias_lens.scoring.sentiment_analyzer import tokenize

# 단계별 감정 어휘, 먼저 매칭된 단계의 가중치만 더한다
EMOTIONAL_WORD_TIERS: List[tuple] = [
    (4.0, [
        "outrageous", "shocking", "devastating", "catastrophic", "unprecedented", "explosive",
        "bombshell", "scandalous", "horrific", "terrifying", "incredible", "unbelievable",
        "mind-blowing", "earth-shattering", "jaw-dropping", "breathtaking", "sensational",
        "dramatic", "stunning", "astounding", "phenomenal", "extraordinary", "miraculous",
    ]),
    (3.0, [
        "concerning", "troubling", "worrying", "surprising", "remarkable", "notable",
        "significant", "important", "serious", "major", "critical", "urgent", "alarming",
        "disturbing", "amazing", "fantastic", "wonderful", "terrible", "awful", "brilliant",
    ]),
    (2.0, [
        "interesting", "notable", "relevant", "related", "connected", "associated",
        "considerable", "substantial", "meaningful", "noteworthy", "impressive", "concerning",
    ]),
    (1.0, [
        "some", "certain", "particular", "specific", "general", "basic", "simple", "minor",
    ]),
]

# 표면 표지 패턴 → 매칭당 가중치
SURFACE_MARKERS: Dict[str, float] = {
    r"\b[A-Z]{3,}\b": 3.0,  # 전부 대문자
    r"!+": 2.0,
    r"\?{2,}": 1.5,
    r'"[^"]*"': 1.0,  # 따옴표 인용
}

ELLIPSIS_BONUS = 1.0
DOUBLE_DASH_BONUS = 0.5

# 역방향 포함(어휘가 토큰을 포함) 허용 최소 토큰 길이
# 짧은 토큰("a", "in")이 어휘에 포함되면 중립 문장의 감정 점수가 0보다 커진다
MIN_REVERSE_MATCH_LENGTH = 4

_SURFACE_RES = [(re.compile(p), w) for p, w in SURFACE_MARKERS.items()]


class EmotionScorer:
    """
    감정적 언어 강도 점수.

    사용법:
        EmotionScorer().score("SHOCKING news!!! A devastating blow...")  # 10.0
    """

    def score(self, text: str) -> float:
        """
        어휘 단계 가중치 + 표면 표지 합을 토큰 밀도로 정규화.

        Returns:
            0~10, 소수점 한 자리.
        """
        text = text or ""
        tokens = tokenize(text)

        total = sum(self._token_weight(token) for token in tokens)
        total += self._surface_score(text)

        normalized = min(total / max(len(tokens) / 50, 1) * 2, 10.0)
        return round(normalized, 1)

    @staticmethod
    def _token_weight(token: str) -> float:
        if not token:
            return 0.0
        allow_reverse = len(token) >= MIN_REVERSE_MATCH_LENGTH
        for weight, words in EMOTIONAL_WORD_TIERS:
            for word in words:
                if word in token or (allow_reverse and token in word):
                    return weight
        return 0.0

    @staticmethod
    def _surface_score(text: str) -> float:
        score = sum(len(pattern.findall(text)) * weight for pattern, weight in _SURFACE_RES)
        if "..." in text:
            score += ELLIPSIS_BONUS
        if "--" in text:
            score += DOUBLE_DASH_BONUS
        return score
