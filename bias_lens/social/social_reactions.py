"""소셜 미디어 반응 (모의 데이터)

실제 플랫폼 API는 호출하지 않는다. 제목의 논쟁/긍정 단서로 분위기를 정하고
참여 수와 댓글은 주입된 난수 생성기로 만든다.
"""

import random
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

from bias_lens.models.analysis import SocialReaction
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

CONTROVERSIAL_CUES = ("scandal", "crisis", "controversy", "debate")
POSITIVE_CUES = ("success", "achievement", "progress", "breakthrough")

# 감성별 (최소, 범위) 참여 수
REDDIT_ENGAGEMENT: Dict[str, Tuple[int, int]] = {
    "negative": (200, 500),
    "positive": (100, 300),
    "neutral": (50, 150),
}
TWITTER_ENGAGEMENT: Tuple[int, int] = (100, 1000)

COMMENT_POOLS: Dict[str, List[str]] = {
    "positive": [
        "This is really encouraging news! Great to see progress being made.",
        "Finally some good news for a change. Thanks for sharing this.",
        "Excellent reporting. This gives me hope for the future.",
        "Well written article with solid facts. Appreciate the balanced perspective.",
        "This is exactly what we needed to hear. Great work by everyone involved.",
    ],
    "negative": [
        "This is deeply concerning. We need to pay more attention to these issues.",
        "The situation is more complex than this article suggests.",
        "I'm worried about the long-term implications of this development.",
        "This raises serious questions that need to be addressed immediately.",
        "The article misses some important context that changes everything.",
    ],
    "neutral": [
        "Interesting perspective. Would like to see more data on this topic.",
        "Thanks for the update. Will be following this story closely.",
        "Good to stay informed about these developments.",
        "Appreciate the coverage. Looking forward to more details.",
        "This is worth keeping an eye on as it develops further.",
    ],
}

MIN_COMMENTS = 3
MAX_COMMENTS = 5


def title_sentiment(title: str) -> str:
    """제목 단서로 반응 분위기 결정. 논쟁 단서가 긍정 단서보다 우선."""
    lowered = (title or "").lower()
    if any(cue in lowered for cue in CONTROVERSIAL_CUES):
        return "negative"
    if any(cue in lowered for cue in POSITIVE_CUES):
        return "positive"
    return "neutral"


class SocialReactionGenerator:
    """
    Reddit/Twitter 모의 반응 생성기.

    사용법:
        generator = SocialReactionGenerator(random.Random(42))
        reactions = generator.generate(article.title, article.url)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        platforms: Optional[List[str]] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self.platforms = [p.lower() for p in (platforms or ["reddit", "twitter"])]

    def generate(self, title: str, url: str) -> List[SocialReaction]:
        """플랫폼별 모의 반응 목록."""
        sentiment = title_sentiment(title)
        reactions: List[SocialReaction] = []

        for platform in self.platforms:
            if platform == "reddit":
                reactions.append(self._reddit(sentiment))
            elif platform == "twitter":
                reactions.append(self._twitter(sentiment, title))
            else:
                logger.warning("지원하지 않는 소셜 플랫폼: %s", platform)

        logger.debug("소셜 반응 생성: %s (%s)", sentiment, [r.platform for r in reactions])
        return reactions

    def _reddit(self, sentiment: str) -> SocialReaction:
        base, spread = REDDIT_ENGAGEMENT[sentiment]
        return SocialReaction(
            platform="Reddit",
            sentiment=sentiment,
            engagement=base + self._rng.randrange(spread),
            top_comments=self._comments(sentiment),
            url=f"https://reddit.com/r/news/comments/mock_{self._rng.randrange(10 ** 9)}",
        )

    def _twitter(self, sentiment: str, title: str) -> SocialReaction:
        base, spread = TWITTER_ENGAGEMENT
        return SocialReaction(
            platform="Twitter",
            sentiment=sentiment,
            engagement=base + self._rng.randrange(spread),
            top_comments=self._comments(sentiment),
            url=f"https://twitter.com/search?q={quote(title or '', safe='')}",
        )

    def _comments(self, sentiment: str) -> List[str]:
        pool = COMMENT_POOLS[sentiment]
        count = self._rng.randint(MIN_COMMENTS, MAX_COMMENTS)
        return self._rng.sample(pool, count)
