"""본문 하이라이트 탐지 - 규칙 카탈로그 기반 정규식 매칭"""

import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from bias_lens.models.analysis import Highlight


@dataclass(frozen=True)
class HighlightRule:
    """정규식 한 개와 설명."""
    pattern: Pattern[str]
    explanation: str


def _rule(terms: str, explanation: str) -> HighlightRule:
    return HighlightRule(re.compile(rf"\b(?:{terms})\b", re.IGNORECASE), explanation)


# (규칙 그룹, 하이라이트 카테고리, 규칙 목록). 이 순서대로 출력된다.
RULE_CATALOGUE: List[Tuple[str, str, List[HighlightRule]]] = [
    ("emotional", "emotional", [
        _rule("devastating|catastrophic|shocking|outrageous|unprecedented",
              "Emotionally charged language that may exaggerate impact"),
        _rule("explosive|bombshell|stunning|mind-blowing|earth-shattering",
              "Sensationalized language designed to provoke reaction"),
        _rule("miraculous|incredible|unbelievable|phenomenal|extraordinary",
              "Hyperbolic language that may overstate significance"),
        _rule("horrific|terrifying|appalling|disgusting|revolting",
              "Extreme emotional descriptors that may bias perception"),
    ]),
    ("left_bias", "bias", [
        _rule("progressive|social justice|climate crisis|systemic racism|wealth inequality",
              "Language commonly associated with left-leaning perspectives"),
        _rule("corporate greed|tax the rich|medicare for all|green new deal|reproductive rights",
              "Terminology often used in progressive political discourse"),
        _rule("fascist|authoritarian|far-right|extremist|white supremacist",
              "Strong negative characterizations often used by left-leaning sources"),
        _rule("universal healthcare|living wage|workers rights|union organizing|collective bargaining",
              "Progressive policy terminology"),
    ]),
    ("right_bias", "bias", [
        _rule("traditional values|law and order|border security|fiscal responsibility|free market",
              "Language commonly associated with right-leaning perspectives"),
        _rule("socialist|communist|radical left|liberal elite|mainstream media",
              "Terminology often used in conservative political discourse"),
        _rule("deep state|fake news|cancel culture|woke agenda|virtue signaling",
              "Phrases commonly used to dismiss opposing viewpoints"),
        _rule("second amendment|pro-life|family values|religious freedom|states rights",
              "Conservative policy terminology"),
    ]),
    ("factual", "factual", [
        _rule("according to|sources say|data shows|study finds|research indicates",
              "Proper source attribution - sign of factual reporting"),
        _rule("allegedly|reportedly|appears to|seems to|may have",
              "Cautious language indicating unverified claims - good journalism"),
        _rule("confirmed|verified|documented|established|proven",
              "Language indicating fact-checking and verification"),
    ]),
]


class HighlightDetector:
    """
    규칙 카탈로그의 모든 매칭을 Highlight로 변환.

    겹치거나 중복된 매칭도 그대로 남긴다.
    """

    def __init__(self, catalogue: List[Tuple[str, str, List[HighlightRule]]] = None) -> None:
        self.catalogue = catalogue or RULE_CATALOGUE

    def detect(self, text: str) -> List[Highlight]:
        """
        본문에서 하이라이트 추출.

        Returns:
            그룹 → 규칙 → 위치 순서의 Highlight 리스트.
            text[h.start_index:h.end_index] == h.text
        """
        highlights: List[Highlight] = []
        if not text:
            return highlights

        for group, category, rules in self.catalogue:
            for rule in rules:
                for match in rule.pattern.finditer(text):
                    highlights.append(Highlight(
                        text=match.group(0),
                        category=category,
                        explanation=rule.explanation,
                        start_index=match.start(),
                        end_index=match.end(),
                        rule_group=group,
                    ))
        return highlights
