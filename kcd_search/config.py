"""KCD search configuration — loaded from environment variables / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Upstream KSSC mobile proxy
    kcd_proxy_url: str = "https://kssc.mods.go.kr:8443/ksscNew_web/mobileProxy.do"
    request_timeout_seconds: float = 8.0
    upstream_last_index: int = 150

    # Query / result bounds
    max_query_length: int = 80
    max_result_count: int = 24

    # Service
    service_port: int = 8000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
