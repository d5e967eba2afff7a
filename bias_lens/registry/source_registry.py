"""Source Registry - 언론사 편향/사실성 평가 중앙 관리"""

import re
from typing import Any, Dict, List, Optional

from bias_lens.models.source import VALID_BIAS_LABELS, SourceRating
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

# 이름 정규화 시 제거할 조직 접미어
ORGANIZATION_SUFFIXES = ("news", "media", "network", "times", "post", "journal", "herald", "tribune")

_PREFIX_RE = re.compile(r"^the\s+")
_SUFFIX_RE = re.compile(r"\s+(?:" + "|".join(ORGANIZATION_SUFFIXES) + r")$")

DEFAULT_POLITICAL_PRIOR = 0.0
DEFAULT_FACTUALITY_BASELINE = 6.0


class SourceRegistry:
    """
    언론사 평가 레지스트리.

    - sources_registry.yaml에서 평가/사전값 로드 (생성 시 1회)
    - 이름/도메인 기반 퍼지 조회 (정확 → 부분 문자열 → 도메인)
    - Scorer용 정치 성향 사전값 / 사실성 기준점 조회

    로드 이후에는 읽기 전용이므로 여러 요청에서 공유해도 된다.

    사용법:
        config = ConfigManager()
        registry = SourceRegistry(config)
        rating = registry.get_source_bias_rating("The New York Times")
        prior = registry.political_prior("Fox News")
    """

    def __init__(self, config: ConfigManager) -> None:
        self._config = config
        self._sources: Dict[str, SourceRating] = {}
        self._political_priors: Dict[str, float] = {}
        self._factuality_baselines: Dict[str, float] = {}
        self._load()

    def _load(self) -> None:
        """sources_registry.yaml에서 평가 테이블 로드."""
        registry_data = self._config.get_file_config("sources_registry")
        if not registry_data:
            logger.warning("sources_registry.yaml을 찾을 수 없습니다")
            return

        for key, source_data in (registry_data.get("sources") or {}).items():
            rating = SourceRating.from_dict(str(key).lower(), source_data or {})
            if not rating.is_valid:
                logger.warning(
                    "잘못된 평가 항목 제외: %s (bias=%s, factuality=%s)",
                    key, rating.bias, rating.factuality,
                )
                continue
            self._sources[rating.key] = rating
            logger.debug("소스 평가 로드: %s (bias=%s)", rating.key, rating.bias)

        for key, value in (registry_data.get("political_bias_priors") or {}).items():
            self._political_priors[str(key).lower()] = max(-5.0, min(5.0, float(value)))

        for key, value in (registry_data.get("factuality_baselines") or {}).items():
            self._factuality_baselines[str(key).lower()] = max(0.0, min(10.0, float(value)))

        logger.info(
            "소스 레지스트리 로드 완료: 평가 %d개, 성향 사전값 %d개, 사실성 기준 %d개",
            len(self._sources), len(self._political_priors), len(self._factuality_baselines),
        )

    # ===== 평가 조회 =====

    def get_source_bias_rating(self, source_name: str) -> Optional[SourceRating]:
        """
        언론사 이름 또는 URL로 평가 조회.

        Args:
            source_name: "The New York Times", "foxnews.com", "https://www.bbc.com/news/..." 등.

        Returns:
            SourceRating. 매칭 없으면 None (호출자는 "unknown"으로 취급).
        """
        if not source_name or not source_name.strip():
            return None

        full_name = _PREFIX_RE.sub("", source_name.lower().strip()).strip()
        normalized = self.normalize_name(source_name)

        # 1. 정확 매칭 (접미어 포함 이름 먼저: "new york post" ≠ "new york times")
        for candidate in (full_name, normalized):
            if candidate in self._sources:
                return self._sources[candidate]

        # 2. 양방향 부분 문자열 매칭
        if normalized:
            for key, rating in self._sources.items():
                if self._is_sibling(key, full_name, normalized):
                    continue
                if key in normalized or normalized in key:
                    return rating

        # 3. 도메인 매칭
        if self._looks_like_domain(source_name):
            return self._match_domain(source_name)

        return None

    def rate(self, source_name: str) -> Optional[SourceRating]:
        """get_source_bias_rating 별칭."""
        return self.get_source_bias_rating(source_name)

    def get(self, key: str) -> Optional[SourceRating]:
        """정규화된 키로 직접 조회."""
        return self._sources.get(key)

    def get_all(self) -> List[SourceRating]:
        """전체 평가 목록 (레지스트리 순서)."""
        return list(self._sources.values())

    def get_by_bias(self, bias: str) -> List[SourceRating]:
        """특정 성향 라벨의 언론사."""
        return [s for s in self._sources.values() if s.bias == bias]

    # ===== Scorer 사전값 =====

    def political_prior(self, source_name: str) -> float:
        """
        정치 성향 사전값 (-5~5). 모르는 언론사는 0.

        이름으로 못 찾으면 평가 레지스트리의 정식 명칭으로 한 번 더 찾는다
        ("foxnews.com" → "Fox News").
        """
        value = self._match_table(self._political_priors, source_name)
        if value is None:
            value = self._match_via_rating(self._political_priors, source_name)
        return DEFAULT_POLITICAL_PRIOR if value is None else value

    def factuality_baseline(self, source_name: str, default: float = DEFAULT_FACTUALITY_BASELINE) -> float:
        """사실성 기준점 (0~10). 모르는 언론사는 default."""
        value = self._match_table(self._factuality_baselines, source_name)
        if value is None:
            value = self._match_via_rating(self._factuality_baselines, source_name)
        return default if value is None else value

    # ===== 정규화/매칭 =====

    @staticmethod
    def normalize_name(source_name: str) -> str:
        """소문자화, "the " 접두어 및 조직 접미어 하나 제거."""
        name = source_name.lower().strip()
        name = _PREFIX_RE.sub("", name)
        name = _SUFFIX_RE.sub("", name)
        return name.strip()

    @classmethod
    def _is_sibling(cls, key: str, full_name: str, normalized: str) -> bool:
        """
        같은 기본 이름에 다른 접미어가 붙은 별개 언론사인지.

        "washington times"와 "washington post"는 둘 다 "washington"으로 정규화되지만
        다른 언론사다. 입력에 접미어가 없으면 형제로 보지 않는다.
        """
        if full_name == normalized:
            return False
        return key != full_name and key != normalized and cls.normalize_name(key) == normalized

    @staticmethod
    def _looks_like_domain(value: str) -> bool:
        return "://" in value or ("." in value and " " not in value.strip())

    @staticmethod
    def _domain_of(value: str) -> str:
        """스킴, "www.", 경로 제거 후 호스트."""
        domain = value.lower().strip()
        domain = re.sub(r"^https?://", "", domain)
        domain = re.sub(r"^www\.", "", domain)
        return domain.split("/")[0]

    def _match_domain(self, source_name: str) -> Optional[SourceRating]:
        """도메인 기반 매칭. 등록 도메인 우선, 그 다음 첫 레이블 부분 매칭."""
        host = self._domain_of(source_name)
        if not host:
            return None

        for rating in self._sources.values():
            if any(host == d or host.endswith("." + d) for d in rating.domains):
                return rating

        token = host.split(".")[0]
        if not token:
            return None
        for key, rating in self._sources.items():
            if token in key or key.split(" ")[0] in token:
                return rating
        return None

    @staticmethod
    def _match_table(table: Dict[str, float], source_name: str) -> Optional[float]:
        """부분 문자열 양방향 매칭, 테이블 순서상 첫 항목."""
        name = (source_name or "").lower().strip()
        if not name:
            return None
        for key, value in table.items():
            if key in name or name in key:
                return value
        return None

    def _match_via_rating(self, table: Dict[str, float], source_name: str) -> Optional[float]:
        rating = self.get_source_bias_rating(source_name)
        if rating is None:
            return None
        return self._match_table(table, rating.key)

    # ===== 통계 =====

    @property
    def total_count(self) -> int:
        """전체 평가 수."""
        return len(self._sources)

    def get_stats(self) -> Dict[str, Any]:
        """레지스트리 통계."""
        bias_counts: Dict[str, int] = {label: 0 for label in VALID_BIAS_LABELS}
        for rating in self._sources.values():
            bias_counts[rating.bias] += 1

        return {
            "total": self.total_count,
            "by_bias": bias_counts,
            "political_priors": len(self._political_priors),
            "factuality_baselines": len(self._factuality_baselines),
        }
