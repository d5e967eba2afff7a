"""감정 분류 모델 (Hugging Face Inference API) 연동

키가 없거나 호출이 실패하면 빈 감정 목록과 에러 메시지를 돌려준다. 예외는 던지지 않는다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from bias_lens.models.analysis import Emotion
from bias_lens.utils.config_manager import ConfigManager
from bias_lens.utils.credentials import ApiCredentials
from bias_lens.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_EMOTION_MODEL = "SamLowe/roberta-base-go_emotions"
DEFAULT_ENDPOINT = "https://api-inference.huggingface.co/models/"
DEFAULT_TIMEOUT = 15
MAX_INPUT_CHARS = 2000

# 전체 강도 계산에서 제외하는 저강도 라벨
LOW_IMPACT_LABELS = {"neutral", "realization", "optimism"}

DEFAULT_EMOTION_WEIGHTS: Dict[str, float] = {
    "anger": 1.5,
    "fear": 1.3,
    "sadness": 1.2,
    "disgust": 1.4,
    "joy": 1.0,
    "surprise": 0.8,
}


@dataclass
class EmotionAnalysisResult:
    """감정 분류 결과."""
    emotions: List[Emotion] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None and bool(self.emotions)


class EmotionApiClient:
    """
    Hugging Face 감정 분류 모델 클라이언트.

    사용법:
        client = EmotionApiClient.from_config(config, credentials)
        result = client.analyze(article.body)
        if result.success:
            score = calculate_weighted_emotional_score(result.emotions)
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_EMOTION_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: int = DEFAULT_TIMEOUT,
        max_input_chars: int = MAX_INPUT_CHARS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_input_chars = max_input_chars
        self._session = session or requests.Session()

    @classmethod
    def from_config(cls, config: ConfigManager, credentials: ApiCredentials) -> "EmotionApiClient":
        section = config.get_section("emotion_model")
        return cls(
            api_key=credentials.get("huggingface"),
            model=section.get("model", DEFAULT_EMOTION_MODEL),
            endpoint=section.get("endpoint", DEFAULT_ENDPOINT),
            timeout=int(section.get("timeout", DEFAULT_TIMEOUT)),
            max_input_chars=int(section.get("max_input_chars", MAX_INPUT_CHARS)),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def analyze(self, text: str) -> EmotionAnalysisResult:
        """
        텍스트 감정 분류.

        Args:
            text: 분석할 본문 (max_input_chars로 자름)

        Returns:
            EmotionAnalysisResult (실패 시 emotions=[], error 설정)
        """
        if not self.is_configured:
            return EmotionAnalysisResult(error="Hugging Face API key not configured")

        url = f"{self.endpoint.rstrip('/')}/{self.model}"
        try:
            resp = self._session.post(
                url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={"inputs": (text or "")[: self.max_input_chars]},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("감정 분류 API 요청 실패: %s", e)
            return EmotionAnalysisResult(error=f"Failed to analyze emotional intensity. Details: {e}")

        if resp.status_code == 401:
            logger.error("감정 분류 API 인증 실패")
            return EmotionAnalysisResult(error="Hugging Face API Error: Unauthorized. Check your API token.")
        if resp.status_code >= 400:
            detail = self._error_detail(resp)
            logger.error("감정 분류 API 오류: HTTP %d - %s", resp.status_code, detail)
            return EmotionAnalysisResult(error=f"Hugging Face API Error: {detail}")

        try:
            payload = resp.json()
        except ValueError:
            logger.warning("감정 분류 API 응답 JSON 파싱 실패")
            return EmotionAnalysisResult(error="Unexpected response format from emotional analysis API.")

        emotions = parse_emotions(payload)
        if not emotions:
            logger.warning("감정 분류 API 응답 형식이 예상과 다름: %s", str(payload)[:200])
            return EmotionAnalysisResult(error="Unexpected response format from emotional analysis API.")

        logger.info("감정 분류 완료: %d개 라벨 (최상위=%s)", len(emotions), emotions[0].label)
        return EmotionAnalysisResult(emotions=emotions)

    @staticmethod
    def _error_detail(resp: requests.Response) -> str:
        try:
            data = resp.json()
        except ValueError:
            return f"HTTP {resp.status_code}"
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"HTTP {resp.status_code}"


def parse_emotions(payload: Any) -> List[Emotion]:
    """[{label, score}, ...] 또는 [[{label, score}, ...]] 응답을 Emotion 리스트로."""
    if not isinstance(payload, list) or not payload:
        return []
    items = payload[0] if isinstance(payload[0], list) else payload

    emotions = []
    for item in items:
        if isinstance(item, dict) and "label" in item and "score" in item:
            emotions.append(Emotion(label=str(item["label"]), score=float(item["score"])))
    return emotions


def derive_overall_emotional_score(emotions: List[Emotion]) -> int:
    """
    가장 강한 비중립 감정 점수 × 10 (0~10 정수).

    저강도 라벨만 있으면 neutral이 0.5를 넘을 때 0, 아니면 1.
    """
    if not emotions:
        return 0

    significant = [e for e in emotions if e.label.lower() not in LOW_IMPACT_LABELS]
    if not significant:
        neutral = next((e for e in emotions if e.label.lower() == "neutral"), None)
        if neutral and neutral.score > 0.5:
            return 0
        return 1

    top = max(e.score for e in significant)
    return min(int(top * 10 + 0.5), 10)


def calculate_weighted_emotional_score(
    emotions: List[Emotion], weights: Optional[Dict[str, float]] = None
) -> float:
    """
    감정별 가중 합 × 2 (0~10, 소수점 한 자리).

    점수 0.1 이하 감정만 있으면 0.
    """
    if not emotions:
        return 0.0

    emotion_weights = dict(DEFAULT_EMOTION_WEIGHTS)
    emotion_weights.update(weights or {})

    if not any(e.score > 0.1 for e in emotions):
        return 0.0

    raw = sum(e.score * emotion_weights.get(e.label.lower(), 1.0) for e in emotions)
    return round(min(raw * 2, 10.0), 1)
