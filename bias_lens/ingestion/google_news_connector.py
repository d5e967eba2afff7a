"""Google News RSS 커넥터 - 키 없이 쓰는 관련 기사 검색"""

import html
import re
from typing import Dict, List, Optional
from urllib.parse import quote, urlencode
from xml.etree import ElementTree

import requests

from bias_lens.ingestion.base_connector import DEFAULT_TIMEOUT, RelatedArticleConnector
from bias_lens.ingestion.fetch_strategies import DEFAULT_USER_AGENT
from bias_lens.models.related import RelatedArticle
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

# Google News RSS 정책
# - 최대 100건 반환
# - 언어/지역: hl, gl, ceid 파라미터
GOOGLE_NEWS_BASE_URL = "https://news.google.com/rss/search"
GOOGLE_NEWS_MAX_RESULTS = 100


class GoogleNewsConnector(RelatedArticleConnector):
    """
    Google News RSS 검색 커넥터.

    특징:
    - API 키 불필요 (체인의 마지막 대안)
    - 제목 "Headline - Source" 형식에서 언론사명 분리
    - description의 HTML 제거

    사용법:
        connector = GoogleNewsConnector(language="en", country="US")
        articles = await connector.search("climate summit agreement", limit=10)
    """

    name = "google_news"

    def __init__(
        self,
        language: str = "en",
        country: str = "US",
        timeout: int = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            language: 언어 코드 (en, ko, ja 등)
            country: 국가 코드 (US, KR, JP 등)
            timeout: 요청 타임아웃 (초)
            user_agent: 요청 User-Agent
            session: 공유 requests 세션
        """
        super().__init__(timeout=timeout, session=session)
        self._language = language
        self._country = country
        self._user_agent = user_agent

    def search_sync(self, query: str, limit: int = 10) -> List[RelatedArticle]:
        xml_text = self._fetch_feed(self._build_url(query))
        entries = self._parse_feed(xml_text)

        articles: List[RelatedArticle] = []
        for entry in entries[:min(limit, GOOGLE_NEWS_MAX_RESULTS)]:
            headline, source_name = self._split_title(
                self._clean_html(entry["title"]), entry["source"]
            )
            articles.append(RelatedArticle(
                title=headline,
                description=self._clean_html(entry["description"]),
                url=entry["link"],
                published_at=entry["pubDate"],
                source_name=source_name,
                provider=self.name,
            ))

        logger.info("Google News 검색 완료: query='%s', %d건", query, len(articles))
        return articles

    def _build_url(self, query: str) -> str:
        """RSS URL 생성."""
        params = {
            "q": query,
            "hl": self._language,
            "gl": self._country,
            "ceid": f"{self._country}:{self._language}",
        }
        return f"{GOOGLE_NEWS_BASE_URL}?{urlencode(params, quote_via=quote)}"

    def _fetch_feed(self, url: str) -> str:
        """HTTP로 RSS 피드 XML 가져오기."""
        resp = self._session.get(url, headers={"User-Agent": self._user_agent}, timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    def _parse_feed(self, xml_text: str) -> List[Dict[str, str]]:
        """RSS XML 파싱."""
        try:
            root = ElementTree.fromstring(xml_text)
        except ElementTree.ParseError as e:
            logger.warning("XML 파싱 실패: %s", e)
            return []

        entries = []
        for item in root.iter("item"):
            # Google News RSS는 source 태그에 원본 출처 포함
            source_el = item.find("source")
            source_name = source_el.text if source_el is not None and source_el.text else ""

            entries.append({
                "title": self._text(item, "title"),
                "link": self._text(item, "link"),
                "description": self._text(item, "description"),
                "pubDate": self._text(item, "pubDate"),
                "source": source_name.strip(),
            })
        return entries

    @staticmethod
    def _split_title(title: str, source_name: str) -> tuple:
        """"Headline - Source" → (Headline, Source). source 태그가 있으면 그것을 우선."""
        headline, sep, suffix = title.rpartition(" - ")
        if not sep:
            return title, source_name or "Unknown"
        return headline.strip(), source_name or suffix.strip() or "Unknown"

    @staticmethod
    def _text(element, tag: str) -> str:
        """XML 요소에서 텍스트 추출."""
        el = element.find(tag)
        return el.text.strip() if el is not None and el.text else ""

    @staticmethod
    def _clean_html(text: str) -> str:
        """HTML 엔티티 디코딩 및 태그 제거."""
        if not text:
            return ""
        text = html.unescape(text)
        text = re.sub(r"<[^>]+>", "", text)
        return re.sub(r"\s+", " ", text).strip()
