from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Editorial Admin"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./editorial.db"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Languages: the primary language is the fallback for untagged legacy rows
    primary_language: str = "ar"
    supported_languages: list[str] = ["ar", "en", "fr"]

    # AI summary (DeepSeek chat completions)
    deepseek_api_key: Optional[str] = None
    deepseek_api_url: str = "https://api.deepseek.com/v1/chat/completions"
    deepseek_model: str = "deepseek-chat"
    summary_timeout_seconds: float = 30.0

    # AI image generation (generation function + image host upload)
    image_generation_url: Optional[str] = None
    image_generation_api_key: Optional[str] = None
    image_generation_timeout_seconds: float = 120.0
    image_upload_url: Optional[str] = None
    image_upload_preset: str = "editorial"
    image_upload_folder: str = "image-generator"

    # Public website cache revalidation
    frontend_revalidate_url: Optional[str] = None
    frontend_revalidate_token: Optional[str] = None
    revalidate_timeout_seconds: float = 10.0

    # Calligraphy SVGs for honorifics
    honorifics_dir: str = "static/calligraphy"

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
