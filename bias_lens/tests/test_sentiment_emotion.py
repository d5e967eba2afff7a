"""SentimentAnalyzer / EmotionScorer 테스트"""

import pytest

from bias_lens.scoring.emotion_scorer import EmotionScorer
from bias_lens.scoring.sentiment_analyzer import SentimentAnalyzer, tokenize


NEUTRAL_SENTENCE = "The committee will meet on Tuesday."


# ============================================================
# 감성
# ============================================================

class TestTokenize:

    def test_lowercase_and_strip(self) -> None:
        assert tokenize("Hello, World!") == ["hello", "world"]

    def test_empty(self) -> None:
        assert tokenize("") == []
        assert tokenize(None) == []


class TestSentimentAnalyzer:
    """어휘 기반 감성 분석."""

    def setup_method(self) -> None:
        self.analyzer = SentimentAnalyzer()

    def test_neutral_when_no_signal(self) -> None:
        result = self.analyzer.analyze(NEUTRAL_SENTENCE)
        assert result.sentiment == "neutral"
        assert result.confidence == 0.5
        assert result.score == 0.0

    def test_empty_text(self) -> None:
        result = self.analyzer.analyze("")
        assert result.sentiment == "neutral"
        assert result.score == 0.0

    def test_positive(self) -> None:
        result = self.analyzer.analyze("A remarkable breakthrough and a historic victory for the team.")
        assert result.sentiment == "positive"
        assert result.score == pytest.approx(5.0)
        assert 0.0 < result.confidence <= 1.0

    def test_negative(self) -> None:
        result = self.analyzer.analyze("The crisis deepened into a disaster after the collapse.")
        assert result.sentiment == "negative"
        assert result.score == pytest.approx(-5.0)

    def test_mixed_is_neutral(self) -> None:
        """긍정 1, 부정 1 → 비율 0.5 → neutral."""
        result = self.analyzer.analyze("A success overshadowed by a scandal.")
        assert result.sentiment == "neutral"
        assert result.score == 0.0

    def test_substring_containment(self) -> None:
        """"successful"은 "success"를 포함하므로 긍정."""
        result = self.analyzer.analyze("A successful launch.")
        assert result.sentiment == "positive"

    def test_intensifier_tips_balance(self) -> None:
        """강조어가 붙은 쪽이 1.8배: 1.8 / 2.8 ≈ 0.64 > 0.6."""
        result = self.analyzer.analyze("A very good plan with one problem.")
        assert result.sentiment == "positive"
        assert result.score == pytest.approx((1.8 / 2.8 - 0.5) * 10)

    def test_without_intensifier_neutral(self) -> None:
        result = self.analyzer.analyze("A good plan with one problem.")
        assert result.sentiment == "neutral"

    def test_confidence_capped(self) -> None:
        result = self.analyzer.analyze("great " * 20)
        assert result.confidence == 1.0

    def test_confidence_scales_with_length(self) -> None:
        """토큰 200개 중 신호 1개 → 1 / 2 = 0.5."""
        text = "great " + "plain " * 199
        result = self.analyzer.analyze(text)
        assert result.confidence == pytest.approx(0.5)

    def test_custom_thresholds(self) -> None:
        analyzer = SentimentAnalyzer(positive_threshold=0.4)
        result = analyzer.analyze("A success overshadowed by a scandal.")
        assert result.sentiment == "positive"

    def test_deterministic(self) -> None:
        text = "Officials praised the progress despite a troubling decline."
        assert self.analyzer.analyze(text) == self.analyzer.analyze(text)


# ============================================================
# 감정적 언어
# ============================================================

class TestEmotionScorer:
    """감정적 언어 점수."""

    def setup_method(self) -> None:
        self.scorer = EmotionScorer()

    def test_empty_signal_is_zero(self) -> None:
        assert self.scorer.score(NEUTRAL_SENTENCE) == 0.0

    def test_empty_text(self) -> None:
        assert self.scorer.score("") == 0.0

    def test_extreme_word(self) -> None:
        """extreme 4점 → 4 / 1 × 2 = 8.0."""
        assert self.scorer.score("A devastating storm hit the coast.") == 8.0

    def test_tier_order(self) -> None:
        """"concerning"은 high(3)와 medium(2) 모두에 있지만 high가 먼저."""
        assert self.scorer.score("That is concerning.") == 6.0

    def test_low_tier(self) -> None:
        assert self.scorer.score("Some residents left.") == 2.0

    def test_short_token_not_reverse_matched(self) -> None:
        """짧은 토큰("a", "in")은 어휘에 포함되어도 매칭하지 않는다."""
        assert self.scorer.score("a in on at") == 0.0

    def test_reverse_match_long_token(self) -> None:
        """4자 이상 토큰은 어휘의 부분 문자열이어도 매칭 ("simp" ⊂ "simple")."""
        assert self.scorer.score("simp") == 2.0

    def test_caps_marker(self) -> None:
        """대문자 단어 3점 → 6.0."""
        assert self.scorer.score("They said NOPE to that.") == 6.0

    def test_exclamation_runs(self) -> None:
        """느낌표 연속은 한 번으로 센다: 2점 → 4.0."""
        assert self.scorer.score("They won the match!!!") == 4.0

    def test_question_runs(self) -> None:
        assert self.scorer.score("Who did this??") == 3.0

    def test_ellipsis_and_dash(self) -> None:
        assert self.scorer.score("Then he left... and -- well") == 3.0

    def test_capped_at_ten(self) -> None:
        assert self.scorer.score("SHOCKING!!! DEVASTATING!!! OUTRAGEOUS!!!") == 10.0

    def test_length_normalization(self) -> None:
        """토큰 100개 → 나눗수 2: 4 / 2 × 2 = 4.0."""
        text = "devastating " + "plain " * 99
        assert self.scorer.score(text) == 4.0

    @pytest.mark.parametrize("text", [
        NEUTRAL_SENTENCE,
        "An unprecedented, shocking, catastrophic bombshell!!!",
        "word " * 500,
        "",
    ])
    def test_range(self, text: str) -> None:
        assert 0.0 <= self.scorer.score(text) <= 10.0
