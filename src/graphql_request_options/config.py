"""Configuration module for GraphQL request options.

This module provides the RequestOptionsConfig class holding client-wide
defaults that new request options start from: the HTTP method, headers sent
with every request, and the cache a request is routed to.

Example:
    Basic usage with defaults:

        >>> config = RequestOptionsConfig()
        >>> config.default_http_method
        'POST'

    Loading from environment:

        >>> import os
        >>> os.environ['GRAPHQL_OPTIONS_DEFAULT_HTTP_METHOD'] = 'get'
        >>> os.environ['GRAPHQL_OPTIONS_DEFAULT_HEADERS'] = '[["Store", "default"]]'
        >>> config = RequestOptionsConfig.from_env()
        >>> config.default_headers
        [('Store', 'default')]

    Building request options from it:

        >>> from graphql_request_options import RequestOptions
        >>> options = RequestOptions.from_config(config)
"""

import json
import os
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from graphql_request_options.models import CachingStrategy, DataFetchingPolicy
from graphql_request_options.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class RequestOptionsConfig(BaseModel):
    """Client-wide defaults for GraphQL request options.

    Attributes:
        default_http_method: Method new options start with, "GET" or "POST".
            Accepted case-insensitively. Default is "POST".
        default_headers: Header pairs attached to every request. From the
            environment this is a JSON array of [name, value] arrays.
        cache_name: Cache the responses are stored in. None disables caching.
        data_fetching_policy: Whether the cache may serve requests.
        log_level: Level passed to configure_logging.
        json_logs: Emit JSON logs rather than console output.

    Note:
        This class is immutable (frozen=True). Create a new instance if you
        need different settings.
    """

    default_http_method: Literal["GET", "POST"] = Field(
        default="POST",
        description="HTTP method new request options start with",
    )
    default_headers: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Header pairs attached to every request",
    )
    cache_name: str | None = Field(
        default=None,
        description="Name of the cache responses are stored in",
    )
    data_fetching_policy: DataFetchingPolicy = Field(
        default=DataFetchingPolicy.CACHE_FIRST,
        description="Whether the cache may serve requests",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for structured logging",
    )
    json_logs: bool = Field(
        default=True,
        description="Emit JSON logs instead of console output",
    )

    model_config = {"frozen": True}

    @field_validator("default_http_method", mode="before")
    @classmethod
    def validate_default_http_method(cls, v: Any) -> Any:
        """Normalize the method name to uppercase.

        Example:
            >>> RequestOptionsConfig(default_http_method="get").default_http_method
            'GET'
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("default_headers", mode="before")
    @classmethod
    def validate_default_headers(cls, v: Any) -> Any:
        """Parse headers given as a JSON string (from environment variables).

        Raises:
            ValueError: If the string is not valid JSON.
        """
        if isinstance(v, str):
            if not v.strip():
                return []
            try:
                v = json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"default_headers must be a JSON array of pairs: {e}") from e
        if isinstance(v, dict):
            return list(v.items())
        return v

    @field_validator("cache_name", mode="before")
    @classmethod
    def validate_cache_name(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate the log level against the standard level names.

        Raises:
            ValueError: If the level is unknown.
        """
        level = str(v).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level

    def configure_logging(self) -> None:
        """Set up structlog with this configuration's level and renderer."""
        configure_logging(level=self.log_level, json_output=self.json_logs)

    def caching_strategy(self) -> CachingStrategy | None:
        """Caching strategy for new request options, None when no cache is named."""
        if self.cache_name is None:
            return None
        return CachingStrategy(
            cache_name=self.cache_name,
            data_fetching_policy=self.data_fetching_policy,
        )

    @classmethod
    def from_env(cls, prefix: str = "GRAPHQL_OPTIONS_") -> "RequestOptionsConfig":
        """Create configuration from environment variables.

        Variable names are uppercase field names with the prefix. Values are
        passed through as strings and coerced by the field validators.

        Args:
            prefix: Prefix for environment variable names.

        Returns:
            RequestOptionsConfig populated from environment variables.
        """
        config_dict: dict[str, Any] = {}

        for field_name in cls.model_fields:
            env_value = os.environ.get(f"{prefix}{field_name.upper()}")
            if env_value is not None:
                config_dict[field_name] = env_value

        config = cls(**config_dict)
        logger.debug("request_options.config_loaded", source="env", fields=sorted(config_dict))
        return config

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RequestOptionsConfig":
        """Create configuration from a dictionary.

        Raises:
            ValidationError: If the dictionary contains invalid values.
        """
        return cls(**config_dict)
