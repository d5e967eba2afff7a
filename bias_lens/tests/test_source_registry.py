"""SourceRegistry 테스트"""

import pytest

from bias_lens.models.source import VALID_BIAS_LABELS
from bias_lens.registry.source_registry import SourceRegistry
from bias_lens.utils.config_manager import ConfigManager


# ===== 로드 테스트 =====

class TestRegistryLoad:
    """레지스트리 로드 테스트."""

    def test_sources_loaded(self, registry: SourceRegistry) -> None:
        assert registry.total_count >= 25

    def test_all_ratings_valid(self, registry: SourceRegistry) -> None:
        """모든 항목이 라벨/범위 불변식을 만족."""
        for rating in registry.get_all():
            assert rating.bias in VALID_BIAS_LABELS
            assert 0.0 <= rating.factuality <= 10.0

    def test_invalid_entries_rejected(self, tmp_config_dir: str) -> None:
        """잘못된 라벨/범위 항목은 로드 시 제외."""
        registry = SourceRegistry(ConfigManager(config_dir=tmp_config_dir))
        assert registry.total_count == 1
        assert registry.get("reuters") is not None
        assert registry.get("broken") is None
        assert registry.get("overrated") is None

    def test_missing_registry_file(self) -> None:
        registry = SourceRegistry(ConfigManager(config_dir="/nonexistent/path"))
        assert registry.total_count == 0
        assert registry.get_source_bias_rating("Reuters") is None

    def test_stats(self, registry: SourceRegistry) -> None:
        stats = registry.get_stats()
        assert stats["total"] == registry.total_count
        assert sum(stats["by_bias"].values()) == registry.total_count
        assert stats["political_priors"] > 0


# ===== 이름 조회 테스트 =====

class TestNameLookup:
    """이름 기반 퍼지 조회."""

    def test_new_york_times(self, registry: SourceRegistry) -> None:
        """"The New York Times" → 접두어/접미어 제거 후 부분 매칭."""
        rating = registry.get_source_bias_rating("The New York Times")
        assert rating is not None
        assert rating.name == "New York Times"
        assert rating.bias == "center-left"
        assert rating.factuality == 8.1

    def test_exact_match(self, registry: SourceRegistry) -> None:
        rating = registry.get_source_bias_rating("Reuters")
        assert rating.name == "Reuters"
        assert rating.bias == "center"

    def test_suffix_stripped(self, registry: SourceRegistry) -> None:
        rating = registry.get_source_bias_rating("Fox News")
        assert rating.bias == "right"

    def test_case_insensitive(self, registry: SourceRegistry) -> None:
        assert registry.get_source_bias_rating("BBC").name == "BBC News"

    def test_unknown_source(self, registry: SourceRegistry) -> None:
        assert registry.get_source_bias_rating("Totally Obscure Gazette Online") is None

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_input(self, registry: SourceRegistry, name: str) -> None:
        assert registry.get_source_bias_rating(name) is None

    @pytest.mark.parametrize("name", ["New York Post", "The New York Post", "NEW YORK POST"])
    def test_suffix_distinguishes_outlets(self, registry: SourceRegistry, name: str) -> None:
        """접미어만 다른 언론사는 서로의 평가를 가져가지 않는다."""
        rating = registry.get_source_bias_rating(name)
        assert rating.key == "new york post"
        assert rating.bias == "right"
        assert rating.factuality == 6.5

    def test_new_york_times_still_resolves(self, registry: SourceRegistry) -> None:
        assert registry.get_source_bias_rating("New York Times").key == "new york times"

    def test_unrated_sibling_not_matched(self, registry: SourceRegistry) -> None:
        """"Washington Times"는 평가 항목이 없으므로 "washington post"로 가지 않는다."""
        assert registry.get_source_bias_rating("Washington Times") is None
        assert registry.get_source_bias_rating("Washington Post").key == "washington post"

    def test_rating_and_prior_agree(self, registry: SourceRegistry) -> None:
        assert registry.political_prior("New York Post") == 2.2
        assert registry.political_prior("Washington Times") == 2.8

    def test_rate_alias(self, registry: SourceRegistry) -> None:
        assert registry.rate("Reuters") == registry.get_source_bias_rating("Reuters")


class TestDomainLookup:
    """도메인/URL 기반 조회."""

    def test_registered_domain(self, registry: SourceRegistry) -> None:
        rating = registry.get_source_bias_rating("nytimes.com")
        assert rating.name == "New York Times"

    def test_full_url(self, registry: SourceRegistry) -> None:
        rating = registry.get_source_bias_rating("https://www.foxnews.com/politics/story")
        assert rating.name == "Fox News"

    def test_subdomain(self, registry: SourceRegistry) -> None:
        rating = registry.get_source_bias_rating("edition.cnn.com")
        assert rating.name == "CNN"

    def test_domain_token_fallback(self, registry: SourceRegistry) -> None:
        """등록 도메인이 아니면 첫 레이블과 키 첫 단어로 매칭."""
        rating = registry.get_source_bias_rating("foxbusiness.com")
        assert rating.name == "Fox News"

    def test_registered_domain_beats_token(self, registry: SourceRegistry) -> None:
        """nbcnews.com은 키 첫 단어("new")보다 등록 도메인이 우선."""
        rating = registry.get_source_bias_rating("https://www.nbcnews.com/politics")
        assert rating.name == "NBC News"


class TestNormalizeName:
    """이름 정규화."""

    @pytest.mark.parametrize("raw,expected", [
        ("The New York Times", "new york"),
        ("Fox News", "fox"),
        ("The Guardian", "guardian"),
        ("Chicago Tribune", "chicago"),
        ("Reuters", "reuters"),
        ("  BBC  ", "bbc"),
    ])
    def test_normalize(self, raw: str, expected: str) -> None:
        assert SourceRegistry.normalize_name(raw) == expected


# ===== Scorer 사전값 테스트 =====

class TestPriors:
    """정치 성향 사전값 / 사실성 기준점."""

    def test_political_prior_known(self, registry: SourceRegistry) -> None:
        assert registry.political_prior("Fox News") == 3.5
        assert registry.political_prior("The New York Times") == -1.8

    def test_political_prior_unknown(self, registry: SourceRegistry) -> None:
        assert registry.political_prior("Totally Obscure Gazette Online") == 0.0

    def test_political_prior_empty(self, registry: SourceRegistry) -> None:
        """빈 이름은 첫 항목에 매칭되지 않고 0."""
        assert registry.political_prior("") == 0.0

    def test_political_prior_via_domain(self, registry: SourceRegistry) -> None:
        """도메인은 정식 명칭으로 다시 찾는다."""
        assert registry.political_prior("foxnews.com") == 3.5

    def test_factuality_baseline_known(self, registry: SourceRegistry) -> None:
        assert registry.factuality_baseline("Reuters") == 9.2

    def test_factuality_baseline_unknown(self, registry: SourceRegistry) -> None:
        assert registry.factuality_baseline("Totally Obscure Gazette Online") == 6.0
        assert registry.factuality_baseline("Totally Obscure Gazette Online", 5.0) == 5.0
