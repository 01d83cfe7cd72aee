from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RULES_PATH = Path(__file__).resolve().parents[1] / "rules" / "rules.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_env: str = "dev"
    log_level: str = "info"
    log_dir: Path = Path("logs")
    rules_path: Path = DEFAULT_RULES_PATH
    default_vendor_label: str = "Google Cloud"

    @field_validator("default_vendor_label")
    @classmethod
    def _ensure_label_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("DEFAULT_VENDOR_LABEL must not be blank")
        return value


settings = Settings()
