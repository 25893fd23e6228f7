from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "demo"


class Settings(BaseSettings):
    # ---- Provider ----
    fmp_api_key: str = PLACEHOLDER_API_KEY
    fmp_base_url: str = "https://financialmodelingprep.com/api/v3"
    request_timeout_s: float = 5.0
    news_limit: int = 5

    # ---- Chart ----
    chart_days: int = 30

    # ---- Server ----
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def uses_mock_data(self) -> bool:
        key = (self.fmp_api_key or "").strip()
        return not key or key == PLACEHOLDER_API_KEY


settings = Settings()
