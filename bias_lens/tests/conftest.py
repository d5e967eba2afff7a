"""공유 테스트 fixture"""

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from bias_lens.registry.source_registry import SourceRegistry
from bias_lens.utils.config_manager import ConfigManager


# 테스트 기준 시각 (결정론적 테스트용)
REFERENCE_TIME = datetime(2026, 2, 5, 14, 0, 0, tzinfo=timezone.utc)

ARTICLE_PARAGRAPHS = [
    "The city council approved a new transit budget on Tuesday after a debate that "
    "stretched late into the evening and drew dozens of residents to the chamber.",
    "According to officials, the plan increases funding for bus routes by 12 percent "
    "and sets aside 4 million dollars for road repairs across the eastern districts.",
    "Council members said the vote followed months of public hearings in which "
    "residents described long commutes, unreliable service and crowded stations.",
    "The mayor is expected to sign the measure next week, and the transit agency said "
    "new schedules would take effect at the start of the next fiscal year.",
]

ARTICLE_MARKUP = """<!DOCTYPE html>
<html>
<head>
  <title>Council Approves Transit Budget | Example Daily</title>
  <meta property="og:title" content="Council Approves Transit Budget After Long Debate">
  <meta property="og:site_name" content="Example Daily">
  <meta property="og:image" content="https://cdn.example.com/images/council.jpg">
  <meta name="author" content="By Jane Doe">
  <meta property="article:published_time" content="2026-02-03T09:30:00Z">
</head>
<body>
  <header><nav>Home | World | Politics</nav></header>
  <main>
    <article>
      <h1 class="article-title">Council Approves Transit Budget After Long Debate</h1>
      <div class="article-body">
        {paragraphs}
        <div class="social-share">Share on social media</div>
        <script>trackPageView();</script>
      </div>
    </article>
  </main>
  <aside class="sidebar">Most read stories</aside>
  <footer>Copyright Example Daily</footer>
</body>
</html>
""".replace("{paragraphs}", "\n        ".join(f"<p>{p}</p>" for p in ARTICLE_PARAGRAPHS))


@pytest.fixture
def reference_time() -> datetime:
    """고정된 기준 시각."""
    return REFERENCE_TIME


@pytest.fixture
def config_dir() -> str:
    """실제 config 디렉토리 경로."""
    return str(Path(__file__).parent.parent / "config")


@pytest.fixture
def config_manager(config_dir: str) -> ConfigManager:
    """실제 설정 파일 기반 ConfigManager."""
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def registry(config_manager: ConfigManager) -> SourceRegistry:
    """실제 sources_registry.yaml 기반 SourceRegistry."""
    return SourceRegistry(config_manager)


@pytest.fixture
def article_markup() -> str:
    """본문이 충분히 긴 기사 마크업."""
    return ARTICLE_MARKUP


@pytest.fixture
def tmp_config_dir():
    """임시 config 디렉토리 (단위 테스트용)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_data = {
            "fetcher": {
                "strategies": [{"name": "direct", "timeout": 5}],
                "min_markup_length": 200,
                "enable_cache": False,
            },
            "scoring": {"default_factuality": 6.0},
        }
        registry_data = {
            "sources": {
                "reuters": {"name": "Reuters", "bias": "center", "factuality": 9.2},
                "broken": {"name": "Broken", "bias": "sideways", "factuality": 5.0},
                "overrated": {"name": "Overrated", "bias": "left", "factuality": 12.0},
            },
            "political_bias_priors": {"reuters": 0.0},
            "factuality_baselines": {"reuters": 9.2},
        }
        with open(os.path.join(tmpdir, "config.yaml"), "w", encoding="utf-8") as f:
            yaml.dump(config_data, f, allow_unicode=True)
        with open(os.path.join(tmpdir, "sources_registry.yaml"), "w", encoding="utf-8") as f:
            yaml.dump(registry_data, f, allow_unicode=True)

        yield tmpdir
