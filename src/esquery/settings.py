"""Settings for esquery."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class EsQuerySettings(BaseSettings):
    """esquery configuration settings."""

    # Elasticsearch connection
    ELASTICSEARCH_HOSTS: Optional[str] = "http://localhost:9200"  # comma separated
    ELASTICSEARCH_API_KEY: Optional[str] = None
    ELASTICSEARCH_USERNAME: Optional[str] = None
    ELASTICSEARCH_PASSWORD: Optional[str] = None
    ELASTICSEARCH_REQUEST_TIMEOUT: float = 10.0

    # Query defaults
    ELASTICSEARCH_INDEX: Optional[str] = None
    DEFAULT_PER_PAGE: int = 15
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def hosts(self) -> List[str]:
        """Configured hosts as a list, empty when unset."""
        if not self.ELASTICSEARCH_HOSTS:
            return []
        return [h.strip() for h in self.ELASTICSEARCH_HOSTS.split(",") if h.strip()]


settings = EsQuerySettings()
