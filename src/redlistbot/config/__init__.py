"""Application configuration helpers."""

from __future__ import annotations

from .bot import BotConfig, get_bot_config
from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .mediawiki import MediaWikiConfig, get_mediawiki_config
from .redlist import RedListConfig, get_redlist_config
from .storage import DatabaseConfig, get_data_dir, get_database_config, get_http_cache_path

__all__ = [
    "BotConfig",
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidConfigurationError",
    "MediaWikiConfig",
    "MissingConfigurationError",
    "RateLimit",
    "RedListConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_bot_config",
    "get_data_dir",
    "get_database_config",
    "get_http_cache_path",
    "get_mediawiki_config",
    "get_redlist_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
