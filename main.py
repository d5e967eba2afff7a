"""bias_lens - 기사 편향 분석 진입점

사용법:
    python main.py <기사 URL> [--json]
"""

import json
import sys

from bias_lens.errors import BiasLensError
from bias_lens.models.analysis import AnalysisResult
from bias_lens.pipeline.bias_analyzer import BiasAnalyzer
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.logger import get_logger, setup_logging


def print_summary(result: AnalysisResult) -> None:
    article = result.article
    score = result.bias_score

    print("=" * 60)
    print(f" {article.title}")
    print("=" * 60)
    print(f"  언론사: {article.source_name} (성향: {result.article_bias})")
    print(f"  저자: {article.author} / 게시일: {article.publish_date:%Y-%m-%d}")
    if article.is_placeholder:
        print("  [!] 본문 추출 실패 - 대체 기사로 분석")

    print(f"\n  정치 성향: {score.political:+.1f}  (-5 좌 ~ +5 우)")
    print(f"  감정적 언어: {score.emotional:.1f} / 10")
    print(f"  사실성: {score.factual:.1f} / 10")
    print(f"  감성: {result.sentiment}")

    if result.highlights:
        print(f"\n  하이라이트 {len(result.highlights)}건:")
        for h in result.highlights[:10]:
            print(f"    [{h.category}] \"{h.text}\" - {h.explanation}")

    if result.comparative_coverage:
        print(f"\n  비교 보도 {len(result.comparative_coverage)}건:")
        for item in result.comparative_coverage:
            print(f"    {item.source_name} ({item.bias}, {item.factuality:.1f}): {item.headline}")

    for reaction in result.social_reactions:
        print(f"\n  {reaction.platform}: {reaction.sentiment}, 참여 {reaction.engagement}")


def main() -> int:
    as_json = "--json" in sys.argv[1:]
    setup_logging(stream="stderr" if as_json else None)
    logger = get_logger(__name__)

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not args:
        print(__doc__)
        return 2

    analyzer = BiasAnalyzer.from_config(ConfigManager())
    try:
        result = analyzer.analyze_sync(args[0])
    except BiasLensError as e:
        logger.error("분석 중단: %s", e)
        print(e.user_message, file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
