from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from CLAUDENV_* environment variables.

    scan_ignore_dirs is a JSON list when set from the environment, e.g.
    CLAUDENV_SCAN_IGNORE_DIRS='["node_modules", ".git", "dist"]'.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLAUDENV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scanner: depth counts path segments below the project root.
    scan_max_depth: int = 3
    scan_ignore_dirs: list[str] = [
        "node_modules",
        ".git",
        "vendor",
        "__pycache__",
        "target",
    ]

    @field_validator("scan_max_depth")
    @classmethod
    def check_scan_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("scan_max_depth must be at least 1")
        return v

    # Logging
    debug: bool = False
    log_json: bool = False


def get_settings() -> Settings:
    return Settings()
