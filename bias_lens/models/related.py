"""관련 기사 검색 결과 데이터 모델"""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class RelatedArticle:
    """관련 기사 검색 제공자가 반환한 후보 기사."""

    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = ""
    published_at: str = ""  # 제공자 응답 그대로 (ISO-8601 또는 RFC-822)
    source_name: str = "Unknown"
    content: str = ""

    # 어느 제공자에서 왔는지 (gnews, newsapi, google_news)
    provider: str = ""

    @property
    def is_complete(self) -> bool:
        """비교 보도에 필요한 필드가 모두 있는지."""
        return bool(self.title and self.description and self.url)

    @classmethod
    def from_api_dict(cls, data: Dict[str, Any], provider: str) -> "RelatedArticle":
        """
        GNews/NewsAPI 응답 항목에서 생성.

        두 API의 필드명이 조금씩 다르다 (image vs urlToImage).
        """
        source = data.get("source") or {}
        source_name = _text(source.get("name")) if isinstance(source, dict) else _text(source)
        return cls(
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            url=_text(data.get("url")),
            image_url=_text(data.get("image")) or _text(data.get("urlToImage")),
            published_at=_text(data.get("publishedAt")),
            source_name=source_name or "Unknown",
            content=_text(data.get("content")),
            provider=provider,
        )

    @classmethod
    def from_api_items(cls, items: Any, provider: str) -> List["RelatedArticle"]:
        """
        응답의 articles 배열 변환. 딕셔너리가 아닌 항목은 건너뛴다.

        Raises:
            ValueError: articles가 리스트가 아님
        """
        if items is None:
            return []
        if not isinstance(items, list):
            raise ValueError(f"{provider}: articles 형식 오류 ({type(items).__name__})")
        return [cls.from_api_dict(item, provider) for item in items if isinstance(item, dict)]


def _text(value: Any) -> str:
    """문자열/숫자 필드를 앞뒤 공백 없는 문자열로. None, 리스트, 딕셔너리는 빈 문자열."""
    if value is None or isinstance(value, (dict, list, tuple, bool)):
        return ""
    return str(value).strip()
