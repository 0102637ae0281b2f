from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    STUDIO_NAME: str = "Artpresso"
    PDF_FOOTER: str = "(c) 2026 Westside Union Crop. All Rights Reserved. - Artpresso"

    # Exchange rate source (USD base). 1 hour freshness window, fixed fallback.
    EXCHANGE_RATE_URL: str = "https://api.exchangerate-api.com/v4/latest/USD"
    EXCHANGE_RATE_TIMEOUT: float = 10.0
    EXCHANGE_RATE_MAX_AGE_SECONDS: int = 3600
    DEFAULT_USD_CAD_RATE: float = 1.36

    class Config:
        env_file = ".env"


settings = Settings()
