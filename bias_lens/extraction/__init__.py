from bias_lens.extraction.article_extractor import ArticleExtractor, ExtractorConfig, clean_text
from bias_lens.extraction.placeholder import build_placeholder_article

__all__ = [
    "ArticleExtractor",
    "ExtractorConfig",
    "clean_text",
    "build_placeholder_article",
]
