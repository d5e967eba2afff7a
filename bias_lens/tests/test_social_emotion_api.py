"""소셜 반응 생성기 / 감정 분류 API 클라이언트 테스트"""

import random
from unittest.mock import MagicMock

import pytest
import requests

from bias_lens.models.analysis import Emotion
from bias_lens.scoring.emotion_api import (
    EmotionApiClient,
    calculate_weighted_emotional_score,
    derive_overall_emotional_score,
    parse_emotions,
)
from bias_lens.social.social_reactions import (
    COMMENT_POOLS,
    SocialReactionGenerator,
    title_sentiment,
)
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.credentials import ApiCredentials


# ============================================================
# 소셜 반응
# ============================================================

class TestTitleSentiment:

    @pytest.mark.parametrize("title,expected", [
        ("Budget scandal rocks city hall", "negative"),
        ("Health Crisis Deepens", "negative"),
        ("Debate over transit plan continues", "negative"),
        ("Vaccine trial marks major breakthrough", "positive"),
        ("Steady progress on bridge repairs", "positive"),
        ("Council meets on Tuesday", "neutral"),
        ("", "neutral"),
    ])
    def test_cues(self, title: str, expected: str) -> None:
        assert title_sentiment(title) == expected

    def test_controversy_beats_positive(self) -> None:
        assert title_sentiment("Success of program sparks controversy") == "negative"


class TestSocialReactionGenerator:
    """주입된 난수 생성기로 모의 반응 생성."""

    def test_platforms(self) -> None:
        reactions = SocialReactionGenerator(random.Random(1)).generate("Council meets", "https://x.com/a")
        assert [r.platform for r in reactions] == ["Reddit", "Twitter"]

    def test_seeded_is_deterministic(self) -> None:
        title = "Budget scandal rocks city hall"
        first = SocialReactionGenerator(random.Random(42)).generate(title, "https://x.com/a")
        second = SocialReactionGenerator(random.Random(42)).generate(title, "https://x.com/a")
        assert first == second

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("title,sentiment,low,high", [
        ("Budget scandal rocks city hall", "negative", 200, 700),
        ("Major breakthrough announced", "positive", 100, 400),
        ("Council meets on Tuesday", "neutral", 50, 200),
    ])
    def test_reddit_engagement_ranges(self, seed: int, title: str, sentiment: str, low: int, high: int) -> None:
        reddit = SocialReactionGenerator(random.Random(seed)).generate(title, "")[0]
        assert reddit.sentiment == sentiment
        assert low <= reddit.engagement < high

    @pytest.mark.parametrize("seed", range(10))
    def test_comments(self, seed: int) -> None:
        for reaction in SocialReactionGenerator(random.Random(seed)).generate("Council meets", ""):
            assert 3 <= len(reaction.top_comments) <= 5
            assert len(set(reaction.top_comments)) == len(reaction.top_comments)
            assert set(reaction.top_comments) <= set(COMMENT_POOLS["neutral"])

    @pytest.mark.parametrize("seed", range(5))
    def test_twitter(self, seed: int) -> None:
        twitter = SocialReactionGenerator(random.Random(seed)).generate("Rates & taxes", "")[1]
        assert 100 <= twitter.engagement < 1100
        assert twitter.url == "https://twitter.com/search?q=Rates%20%26%20taxes"

    def test_reddit_mock_url(self) -> None:
        reddit = SocialReactionGenerator(random.Random(3)).generate("Council meets", "")[0]
        assert reddit.url.startswith("https://reddit.com/r/news/comments/mock_")

    def test_custom_platforms(self) -> None:
        generator = SocialReactionGenerator(random.Random(0), platforms=["Twitter", "mastodon"])
        reactions = generator.generate("Council meets", "")
        assert [r.platform for r in reactions] == ["Twitter"]


# ============================================================
# 감정 분류 API
# ============================================================

def _response(status: int = 200, payload=None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


class TestEmotionApiClient:

    def test_not_configured(self) -> None:
        session = MagicMock()
        result = EmotionApiClient(api_key="", session=session).analyze("text")

        assert result.success is False
        assert result.emotions == []
        assert "not configured" in result.error
        session.post.assert_not_called()

    def test_success_nested_list(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(payload=[[
            {"label": "anger", "score": 0.7},
            {"label": "neutral", "score": 0.2},
        ]])
        client = EmotionApiClient(api_key="hf_token", session=session, max_input_chars=10)

        result = client.analyze("x" * 50)

        assert result.success is True
        assert result.emotions == [Emotion("anger", 0.7), Emotion("neutral", 0.2)]
        args, kwargs = session.post.call_args
        assert args[0] == "https://api-inference.huggingface.co/models/SamLowe/roberta-base-go_emotions"
        assert kwargs["headers"]["Authorization"] == "Bearer hf_token"
        assert kwargs["json"] == {"inputs": "x" * 10}

    def test_unauthorized(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(status=401)
        result = EmotionApiClient(api_key="bad", session=session).analyze("text")
        assert result.error == "Hugging Face API Error: Unauthorized. Check your API token."

    def test_error_detail(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(status=503, payload={"error": "Model is loading"})
        result = EmotionApiClient(api_key="key", session=session).analyze("text")
        assert result.error == "Hugging Face API Error: Model is loading"

    def test_unexpected_format(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(payload={"unexpected": True})
        result = EmotionApiClient(api_key="key", session=session).analyze("text")
        assert result.success is False
        assert "Unexpected response format" in result.error

    def test_request_exception(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("down")
        result = EmotionApiClient(api_key="key", session=session).analyze("text")
        assert result.success is False
        assert result.error.startswith("Failed to analyze emotional intensity")

    def test_from_config(self, config_manager: ConfigManager) -> None:
        client = EmotionApiClient.from_config(config_manager, ApiCredentials({"huggingface": "hf"}))
        assert client.is_configured
        assert client.max_input_chars == 2000
        assert client.timeout == 15


class TestEmotionScores:

    def test_parse_flat_list(self) -> None:
        assert parse_emotions([{"label": "joy", "score": 0.9}]) == [Emotion("joy", 0.9)]

    @pytest.mark.parametrize("payload", [None, [], {}, "text", [{"no": "label"}]])
    def test_parse_invalid(self, payload) -> None:
        assert parse_emotions(payload) == []

    def test_overall_top_significant(self) -> None:
        emotions = [Emotion("neutral", 0.9), Emotion("fear", 0.45), Emotion("joy", 0.1)]
        assert derive_overall_emotional_score(emotions) == 5

    def test_overall_only_low_impact(self) -> None:
        assert derive_overall_emotional_score([Emotion("neutral", 0.8)]) == 0
        assert derive_overall_emotional_score([Emotion("neutral", 0.3), Emotion("optimism", 0.6)]) == 1

    def test_overall_empty(self) -> None:
        assert derive_overall_emotional_score([]) == 0

    def test_weighted(self) -> None:
        """(0.5 × 1.5 + 0.2 × 1.0) × 2 = 1.9."""
        emotions = [Emotion("anger", 0.5), Emotion("joy", 0.2)]
        assert calculate_weighted_emotional_score(emotions) == 1.9

    def test_weighted_unknown_label_weight_one(self) -> None:
        assert calculate_weighted_emotional_score([Emotion("curiosity", 0.5)]) == 1.0

    def test_weighted_all_weak(self) -> None:
        assert calculate_weighted_emotional_score([Emotion("anger", 0.1), Emotion("fear", 0.05)]) == 0.0

    def test_weighted_capped(self) -> None:
        emotions = [Emotion("anger", 0.99), Emotion("fear", 0.98), Emotion("disgust", 0.97)]
        assert calculate_weighted_emotional_score(emotions) == 10.0

    def test_custom_weights(self) -> None:
        assert calculate_weighted_emotional_score([Emotion("anger", 0.5)], {"anger": 2.0}) == 2.0
