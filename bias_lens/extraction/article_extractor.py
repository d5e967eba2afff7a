"""마크업에서 기사 레코드 추출

필드별로 우선순위 셀렉터 목록을 순서대로 시도하고, 조건을 통과한 첫 후보를 채택한다.
본문은 보일러플레이트 제거 후 콘텐츠 컨테이너 → 가독성 추출(trafilatura) → 문서 전체 순.
"""

import copy
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence
from urllib.parse import urlparse

import trafilatura
from bs4 import BeautifulSoup, Tag
from dateutil import parser as dateutil_parser

from bias_lens.errors import ExtractionInsufficientError
from bias_lens.models.article import ExtractedArticle
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)


TITLE_SELECTORS = [
    'h1[class*="title"]',
    'h1[class*="headline"]',
    'h1[id*="title"]',
    'h1[id*="headline"]',
    ".article-title h1",
    ".post-title h1",
    ".entry-title h1",
    "article h1",
    "main h1",
    "h1",
    'meta[property="og:title"]',
    'meta[name="twitter:title"]',
    "title",
]

# 본문 탐색 전에 문서에서 제거
BOILERPLATE_SELECTORS = [
    "script", "style", "noscript", "nav", "header", "footer", "aside",
    ".advertisement", ".ad", ".ads", ".social-share", ".comments",
    ".related-articles", ".newsletter", ".subscription", ".paywall",
    ".cookie-notice", ".cookie-banner", ".popup", ".modal", ".sidebar", ".menu",
    '[class*="ad-"]', '[id*="ad-"]', '[class*="advertisement"]',
]

# 후보 요소 내부에서 한 번 더 제거
INNER_BOILERPLATE_SELECTORS = (
    "script, style, nav, header, footer, aside, .ad, .advertisement, "
    ".social-share, .comments, .related, .newsletter, .subscription"
)

CONTENT_SELECTORS = [
    'article[role="main"]',
    "main article",
    '[role="main"] article',
    "article .article-body",
    "article .post-content",
    "article .entry-content",
    "article .content",
    ".article-content",
    ".post-content",
    ".entry-content",
    ".story-body",
    ".article-body",
    ".post-body",
    ".content-body",
    "main .content",
    "article",
    "main",
    ".content",
]

AUTHOR_SELECTORS = [
    '[rel="author"]',
    'meta[property="article:author"]',
    'meta[name="author"]',
    ".author-name",
    ".byline-author",
    ".article-author",
    ".post-author",
    ".by-author",
    ".author",
    ".byline",
]

DATE_SELECTORS = [
    'meta[property="article:published_time"]',
    'meta[property="article:published"]',
    'meta[name="publish_date"]',
    'meta[name="date"]',
    "time[datetime]",
    ".publish-date",
    ".article-date",
    ".post-date",
    ".date",
]

SOURCE_SELECTORS = [
    'meta[property="og:site_name"]',
    'meta[name="application-name"]',
    ".site-name",
    ".source-name",
    ".publication-name",
]

IMAGE_SELECTORS = [
    'meta[property="og:image"]',
    'meta[name="twitter:image"]',
    'meta[name="twitter:image:src"]',
    ".article-image img",
    ".post-image img",
    "article img",
    "main img",
]

_AUTHOR_PREFIX_RE = re.compile(r"^(?:by|author)\b:?\s*", re.IGNORECASE)
_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s.,!?;:()\-\"']")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class ExtractorConfig:
    """추출기 설정"""
    min_body_length: int = 100
    substantial_body_length: int = 500
    title_min_length: int = 10
    title_max_length: int = 200
    author_min_length: int = 2
    author_max_length: int = 100
    default_author: str = "Unknown Author"


class ArticleExtractor:
    """
    마크업 → ExtractedArticle 변환기.

    사용법:
        extractor = ArticleExtractor()
        article = extractor.extract(markup, "https://news.example.com/a/1")

    제목/본문이 최소 품질에 못 미치면 ExtractionInsufficientError를 던진다.
    호출자(Orchestrator)가 대체 레코드로 바꾼다.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()

    @classmethod
    def from_config(cls, config: ConfigManager) -> "ArticleExtractor":
        section = config.get_section("extraction")
        defaults = ExtractorConfig()
        return cls(ExtractorConfig(
            min_body_length=int(section.get("min_body_length", defaults.min_body_length)),
            substantial_body_length=int(
                section.get("substantial_body_length", defaults.substantial_body_length)
            ),
            title_min_length=int(section.get("title_min_length", defaults.title_min_length)),
            title_max_length=int(section.get("title_max_length", defaults.title_max_length)),
            author_min_length=int(section.get("author_min_length", defaults.author_min_length)),
            author_max_length=int(section.get("author_max_length", defaults.author_max_length)),
            default_author=section.get("default_author", defaults.default_author),
        ))

    def extract(self, markup: str, url: str) -> ExtractedArticle:
        """
        마크업에서 기사 추출.

        Args:
            markup: 원문 HTML
            url: 기사 URL (호스트명 폴백에 사용)

        Returns:
            ExtractedArticle

        Raises:
            ExtractionInsufficientError: 제목/본문이 없거나 본문이 너무 짧음
        """
        soup = BeautifulSoup(markup or "", "html.parser")

        # 메타데이터는 원본 문서에서, 본문은 보일러플레이트를 걷어낸 사본에서
        title = self.extract_title(soup, url)
        author = self.extract_author(soup)
        publish_date = self.extract_publish_date(soup)
        source_name = self.extract_source(soup, url)
        image_url = self.extract_image_url(soup)
        body = self.extract_body(markup or "")

        if not title or not body or len(body) < self.config.min_body_length:
            raise ExtractionInsufficientError(
                f"본문 부족: title={bool(title)}, body={len(body)}자 (최소 {self.config.min_body_length}자)"
            )

        logger.info("기사 추출 성공: %s... (%d자)", title[:50], len(body))
        return ExtractedArticle(
            title=title.strip(),
            body=body.strip(),
            author=author.strip(),
            publish_date=publish_date,
            source_name=source_name,
            url=url,
            image_url=image_url,
        )

    # ===== 필드별 추출 =====

    def extract_title(self, soup: BeautifulSoup, url: str) -> str:
        """제목: 길이 조건을 통과한 첫 후보, 없으면 "Article from {hostname}"."""
        cfg = self.config
        title = self._first_match(
            soup,
            TITLE_SELECTORS,
            lambda v: cfg.title_min_length < len(v) < cfg.title_max_length,
        )
        if title:
            return title

        hostname = urlparse(url).hostname
        return f"Article from {hostname}" if hostname else "Unknown Article"

    def extract_body(self, markup: str) -> str:
        """본문: 콘텐츠 컨테이너 → 가독성 추출 → 문서 전체."""
        soup = BeautifulSoup(markup, "html.parser")
        for selector in BOILERPLATE_SELECTORS:
            for element in soup.select(selector):
                element.decompose()

        threshold = self.config.substantial_body_length
        for selector in CONTENT_SELECTORS:
            element = soup.select_one(selector)
            if element is None:
                continue
            text = self.extract_text_from_element(element)
            if len(text) > threshold:
                logger.debug("본문 셀렉터 매칭: %s (%d자)", selector, len(text))
                return text

        readable = self.extract_readable_content(markup)
        if len(readable) > threshold:
            logger.debug("가독성 추출 사용 (%d자)", len(readable))
            return readable

        root = soup.body or soup
        return self.extract_text_from_element(root)

    def extract_author(self, soup: BeautifulSoup) -> str:
        """저자: "By"/"Author:" 접두어 제거, 없으면 기본값."""
        cfg = self.config
        for selector in AUTHOR_SELECTORS:
            for element in soup.select(selector):
                value = self._element_value(element)
                if not (cfg.author_min_length < len(value) < cfg.author_max_length):
                    continue
                author = _AUTHOR_PREFIX_RE.sub("", value).strip()
                if author:
                    return author
        return cfg.default_author

    def extract_publish_date(self, soup: BeautifulSoup) -> datetime:
        """게시일: 파싱 가능한 첫 후보, 없으면 현재 시각 (UTC)."""
        for selector in DATE_SELECTORS:
            for element in soup.select(selector):
                raw = (
                    element.get("content")
                    or element.get("datetime")
                    or element.get_text(" ", strip=True)
                )
                parsed = self._parse_datetime(raw)
                if parsed:
                    return parsed
        return datetime.now(timezone.utc)

    def extract_source(self, soup: BeautifulSoup, url: str) -> str:
        """언론사명: 메타/클래스 후보, 없으면 호스트명 ("www." 제거)."""
        source = self._first_match(soup, SOURCE_SELECTORS, lambda v: len(v) > 2)
        if source:
            return source

        hostname = urlparse(url).hostname or ""
        if not hostname:
            return "Unknown Source"
        return hostname[4:] if hostname.startswith("www.") else hostname

    def extract_image_url(self, soup: BeautifulSoup) -> Optional[str]:
        """대표 이미지: http로 시작하는 첫 URL."""
        for selector in IMAGE_SELECTORS:
            for element in soup.select(selector):
                value = element.get("content") or element.get("src") or element.get("data-src")
                if isinstance(value, str) and value.startswith("http"):
                    return value
        return None

    # ===== 텍스트 정제 =====

    @staticmethod
    def extract_text_from_element(element: Tag) -> str:
        """요소 사본에서 잔여 보일러플레이트 제거 후 정제된 텍스트."""
        clone = copy.copy(element)
        for child in clone.select(INNER_BOILERPLATE_SELECTORS):
            child.decompose()
        return clean_text(clone.get_text(" "))

    @staticmethod
    def extract_readable_content(markup: str) -> str:
        """trafilatura 가독성 추출. 결과가 없으면 빈 문자열."""
        if not markup:
            return ""
        extracted = trafilatura.extract(
            markup,
            include_comments=False,
            include_tables=False,
            include_links=False,
            favor_precision=True,
        )
        return clean_text(extracted) if extracted else ""

    # ===== 내부 헬퍼 =====

    def _first_match(
        self,
        soup: BeautifulSoup,
        selectors: Iterable[str],
        accept: Callable[[str], bool],
    ) -> Optional[str]:
        """셀렉터 순서대로 첫 요소 값을 검사, 조건 통과 시 반환."""
        for selector in selectors:
            element = soup.select_one(selector)
            if element is None:
                continue
            value = self._element_value(element)
            if value and accept(value):
                return value
        return None

    @staticmethod
    def _element_value(element: Tag) -> str:
        """content 속성 우선, 없으면 텍스트."""
        content = element.get("content")
        if isinstance(content, str) and content.strip():
            return _WHITESPACE_RE.sub(" ", content).strip()
        return _WHITESPACE_RE.sub(" ", element.get_text(" ")).strip()

    @staticmethod
    def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
        """날짜 문자열 파싱. 타임존 없으면 UTC로 간주."""
        if not value or not value.strip():
            return None
        try:
            parsed = dateutil_parser.parse(value.strip())
        except (ValueError, OverflowError):
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


def clean_text(text: Optional[str]) -> str:
    """공백 정규화 및 허용 문장부호 외 문자 제거."""
    if not text:
        return ""
    text = _WHITESPACE_RE.sub(" ", text)
    text = _DISALLOWED_CHARS_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def hostname_of(url: str) -> str:
    """URL 호스트명, "www." 제거."""
    host = urlparse(url).hostname or ""
    return host[4:] if host.startswith("www.") else host


__all__: Sequence[str] = ["ArticleExtractor", "ExtractorConfig", "clean_text", "hostname_of"]
