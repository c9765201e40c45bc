# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from pathlib import Path

from pydantic import PostgresDsn, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fieldcamp.core.types import IsolationLevel


class Settings(BaseSettings):
	db_url: PostgresDsn
	db_ssl: bool = False
	db_echo: bool = False
	db_isolation_level: IsolationLevel = IsolationLevel.READ_COMMITTED
	log_config: Path | None = Path("/etc/fieldcamp/logging.yaml")

	default_page_size: int = Field(gt=0, default=25)
	max_page_size: int = Field(gt=0, default=500)

	@computed_field
	@property
	def async_db_url(self) -> str:
		url = str(self.db_url)
		if "postgresql+psycopg://" in url:
			return url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
		elif "postgresql://" in url:
			return url.replace("postgresql://", "postgresql+asyncpg://", 1)
		return url

	model_config = SettingsConfigDict(
		env_prefix='fc_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
