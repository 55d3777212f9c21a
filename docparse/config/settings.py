from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    working_directory: str = "uploads"
    keep_working_files: bool = True

    pdf_engine: str = "pdfplumber"
    render_scale: float = 1.0

    default_language: str = "eng"

    ocr_max_workers: int = 4
    ocr_timeout_seconds: int = 0
    tesseract_cmd: str = ""
    tesseract_config: str = ""
