"""
Configuration and environment handling for the list providers.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models.exclusion import ExcludedUserProviders

# Load environment variables
load_dotenv()


class SearchIndexConfig(BaseModel):
    """Elasticsearch connection configuration."""
    url: str = Field(default_factory=lambda: os.getenv("SEARCH_INDEX_URL", "http://localhost:9200"))
    index_name: str = Field(default_factory=lambda: os.getenv("SEARCH_INDEX_NAME", "opencast"))
    timeout: float = Field(default_factory=lambda: float(os.getenv("SEARCH_INDEX_TIMEOUT", "10")))
    max_result_window: int = Field(
        default_factory=lambda: int(os.getenv("SEARCH_INDEX_MAX_RESULT_WINDOW", "10000")),
        description="Largest from+size window the index accepts",
    )


class ContributorsConfig(BaseModel):
    """Contributors list configuration."""
    exclude_user_provider: str = Field(
        default_factory=lambda: os.getenv("EXCLUDE_USER_PROVIDER", ""),
        description="Comma separated provider tags to hide, '*' hides all directory users",
    )

    def excluded_user_providers(self) -> ExcludedUserProviders:
        return ExcludedUserProviders.parse(self.exclude_user_provider)


class Config(BaseModel):
    """Main configuration."""
    search_index: SearchIndexConfig = Field(default_factory=SearchIndexConfig)
    contributors: ContributorsConfig = Field(default_factory=ContributorsConfig)

    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Rebuild the singleton from the current environment."""
    global _config
    _config = Config()
    return _config


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for applications embedding the providers."""
    level_name = (level or get_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
