"""언론사 평가 데이터 모델"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

VALID_BIAS_LABELS = ("left", "center-left", "center", "center-right", "right")
UNKNOWN_BIAS = "unknown"


@dataclass(frozen=True)
class SourceRating:
    """언론사 정치 성향/사실성 평가."""

    # 식별자
    key: str = ""
    name: str = ""

    # 평가
    bias: str = "center"  # VALID_BIAS_LABELS 중 하나
    factuality: float = 5.0  # 0~10

    # 메타데이터
    country: str = ""
    media_type: str = ""
    domains: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """레지스트리 불변식 충족 여부."""
        return self.bias in VALID_BIAS_LABELS and 0.0 <= self.factuality <= 10.0

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any]) -> "SourceRating":
        """딕셔너리에서 SourceRating 생성."""
        return cls(
            key=key,
            name=data.get("name", key),
            bias=str(data.get("bias", "center")).lower(),
            factuality=float(data.get("factuality", 5.0)),
            country=data.get("country", ""),
            media_type=data.get("media_type", ""),
            domains=[d.lower() for d in data.get("domains", [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bias": self.bias,
            "factuality": self.factuality,
            "country": self.country,
            "media_type": self.media_type,
        }
