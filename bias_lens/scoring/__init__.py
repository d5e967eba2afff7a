from bias_lens.scoring.bias_scorer import BiasScorer
from bias_lens.scoring.emotion_api import (
    EmotionAnalysisResult,
    EmotionApiClient,
    calculate_weighted_emotional_score,
    derive_overall_emotional_score,
)
from bias_lens.scoring.emotion_scorer import EmotionScorer
from bias_lens.scoring.factuality_scorer import FactualityScorer
from bias_lens.scoring.highlight_detector import HighlightDetector
from bias_lens.scoring.political_bias_scorer import PoliticalBiasScorer
from bias_lens.scoring.sentiment_analyzer import SentimentAnalyzer

__all__ = [
    "BiasScorer",
    "EmotionAnalysisResult",
    "EmotionApiClient",
    "EmotionScorer",
    "FactualityScorer",
    "HighlightDetector",
    "PoliticalBiasScorer",
    "SentimentAnalyzer",
    "calculate_weighted_emotional_score",
    "derive_overall_emotional_score",
]
