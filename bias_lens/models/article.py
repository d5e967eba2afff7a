"""추출된 기사 데이터 모델"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class ExtractedArticle:
    """Extractor 출력: 정규화된 기사 레코드. 요청 단위로 생성되고 변경되지 않는다."""

    title: str
    body: str
    author: str
    publish_date: datetime
    source_name: str
    url: str
    image_url: Optional[str] = None

    # 추출 실패로 대체 레코드가 사용되었는지
    is_placeholder: bool = False

    @property
    def hostname(self) -> str:
        """URL의 호스트명 ("www." 제거)."""
        host = urlparse(self.url).hostname or ""
        return host[4:] if host.startswith("www.") else host

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리."""
        return {
            "title": self.title,
            "body": self.body,
            "author": self.author,
            "publish_date": self.publish_date.isoformat(),
            "source_name": self.source_name,
            "url": self.url,
            "image_url": self.image_url,
            "is_placeholder": self.is_placeholder,
        }
