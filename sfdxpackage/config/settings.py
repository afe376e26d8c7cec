from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SFDXPACKAGE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    source_dir: str = "force-app/main/default"
    api_version: str = "46.0"

    repo_path: Path | None = None
    type_map_file: Path | None = None  # YAML, folder -> metadata type name

    git_timeout: int = 60
    log_level: str = "INFO"

    @property
    def source_prefix(self) -> str:
        return self.source_dir.strip("/") + "/"


settings = Settings()
