"""외부 API 인증 정보 조회"""

from typing import Dict, Optional

from bias_lens.utils.config_manager import ConfigManager

KNOWN_PROVIDERS = ("gnews", "newsapi", "huggingface")


class ApiCredentials:
    """
    제공자별 API 키 조회.

    config.yaml의 api_keys 섹션과 BIAS_LENS_API_KEYS_<PROVIDER> 환경변수를 읽는다.
    파이프라인은 키를 저장하지 않고 "키가 있는가"만 확인한다.

    사용법:
        creds = ApiCredentials.from_config(ConfigManager())
        if creds.has("gnews"):
            token = creds.get("gnews")
    """

    def __init__(self, keys: Optional[Dict[str, str]] = None) -> None:
        self._keys = {k: v for k, v in (keys or {}).items() if v}

    @classmethod
    def from_config(cls, config: ConfigManager) -> "ApiCredentials":
        """ConfigManager에서 알려진 제공자의 키 로드."""
        keys: Dict[str, str] = {}
        for provider in KNOWN_PROVIDERS:
            value = config.get(f"api_keys.{provider}", "")
            if value:
                keys[provider] = str(value).strip()
        return cls(keys)

    def has(self, provider: str) -> bool:
        """제공자 키 존재 여부."""
        return bool(self._keys.get(provider))

    def get(self, provider: str) -> str:
        """제공자 키 반환. 없으면 빈 문자열."""
        return self._keys.get(provider, "")
