from bias_lens.comparison.comparative_aggregator import ComparativeAggregator, extract_key_terms

__all__ = ["ComparativeAggregator", "extract_key_terms"]
