"""수집/추출 실패 시 사용할 대체 기사 레코드"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bias_lens.extraction.article_extractor import hostname_of
from bias_lens.models.article import ExtractedArticle
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PLACEHOLDER_AUTHOR = "Unknown"
DEFAULT_PLACEHOLDER_BODY = (
    "Unable to extract full content from this article. This may be due to the "
    "website's security settings or paywall restrictions. Please visit the "
    "original article for complete content."
)


def build_placeholder_article(
    url: str,
    settings: Optional[Dict[str, Any]] = None,
    now: Optional[datetime] = None,
) -> ExtractedArticle:
    """
    호스트명 기반 대체 기사 생성.

    canned_articles에 등록된 호스트면 고정 기사 본문을, 아니면 안내 문구를 쓴다.
    같은 URL과 설정이면 항상 같은 내용이 나온다 (게시일 제외).

    Args:
        url: 원래 요청한 기사 URL
        settings: config.yaml의 placeholders 섹션
        now: 게시일로 쓸 시각 (None이면 현재 UTC)

    Returns:
        is_placeholder=True인 ExtractedArticle
    """
    settings = settings or {}
    host = hostname_of(url)
    canned = (settings.get("canned_articles") or {}).get(host) or {}

    title = canned.get("title") or (f"Article from {host}" if host else "Unknown Article")
    body = canned.get("body") or settings.get("body") or DEFAULT_PLACEHOLDER_BODY

    logger.info("대체 기사 사용: %s (고정 기사=%s)", host or url[:50], bool(canned))
    return ExtractedArticle(
        title=title,
        body=" ".join(body.split()),
        author=settings.get("author") or DEFAULT_PLACEHOLDER_AUTHOR,
        publish_date=now or datetime.now(timezone.utc),
        source_name=host or "Unknown Source",
        url=url,
        image_url=None,
        is_placeholder=True,
    )
