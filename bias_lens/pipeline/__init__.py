from bias_lens.pipeline.bias_analyzer import AnalysisSession, BiasAnalyzer, validate_url

__all__ = ["AnalysisSession", "BiasAnalyzer", "validate_url"]
