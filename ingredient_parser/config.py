from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    google_api_key: str = ""

    gemini_model: str = "gemini-1.5-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"

    # Gemini API timeout settings (seconds)
    gemini_timeout: int = 60  # Whole request, image upload included
    gemini_connect_timeout: int = 10  # Connection establishment

    # Upload limits
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB

    # Reported by /health
    deployment_id: str = "dev"

    class Config:
        env_file = ".env"


settings = Settings()
