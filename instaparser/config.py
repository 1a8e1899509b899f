"""
Configuration management for the Instaparser SDK.

Supports both programmatic configuration and environment variable-based configuration
following the 12-factor app pattern.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .version import __version__

DEFAULT_BASE_URL = "https://www.instaparser.com"


@dataclass
class InstaparserConfig:
    """
    Configuration for the Instaparser SDK.

    All parameters can be set programmatically or via environment variables.
    Environment variables take precedence over default values but not over
    explicit programmatic configuration.
    """

    # ========== Required Configuration ==========
    api_key: str
    """Instaparser API key (required)"""

    # ========== Connection Configuration ==========
    base_url: str = DEFAULT_BASE_URL
    """Instaparser API base URL"""

    timeout: float = 30.0
    """HTTP request timeout in seconds"""

    debug: bool = False
    """Enable debug logging"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self):
        """
        Validate configuration parameters.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.api_key:
            raise ValueError("api_key is required")

        if not self.base_url:
            raise ValueError("base_url is required")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls, **overrides) -> "InstaparserConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            INSTAPARSER_API_KEY - API key (required)
            INSTAPARSER_BASE_URL - Base URL (default: https://www.instaparser.com)
            INSTAPARSER_TIMEOUT - HTTP timeout in seconds (default: 30)
            INSTAPARSER_DEBUG - Enable debug logging (default: false)

        Args:
            **overrides: Override specific configuration values

        Returns:
            InstaparserConfig instance

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        api_key = overrides.get("api_key") or os.getenv("INSTAPARSER_API_KEY")
        if not api_key:
            raise ValueError(
                "INSTAPARSER_API_KEY environment variable is required. "
                "Get your API key from https://www.instaparser.com"
            )

        base_url = overrides.get("base_url") or os.getenv(
            "INSTAPARSER_BASE_URL", DEFAULT_BASE_URL
        )
        timeout = float(
            overrides.get("timeout") or os.getenv("INSTAPARSER_TIMEOUT", "30")
        )
        debug = cls._parse_bool(
            overrides.get("debug"),
            os.getenv("INSTAPARSER_DEBUG", "false")
        )

        return cls(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            debug=debug,
        )

    @staticmethod
    def _parse_bool(override_value: Optional[bool], env_value: str) -> bool:
        """
        Parse boolean value from override or environment variable.

        Args:
            override_value: Explicit override value (takes precedence)
            env_value: Environment variable string value

        Returns:
            Boolean value
        """
        if override_value is not None:
            return bool(override_value)

        env_lower = env_value.lower().strip()
        return env_lower in ("true", "1", "yes", "on", "enabled")

    def get_headers(self) -> dict:
        """Get default HTTP headers for API requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "User-Agent": f"instaparser-python/{__version__}",
        }

    def __repr__(self) -> str:
        """Safe string representation (masks API key)."""
        masked_key = f"{self.api_key[:4]}...{self.api_key[-4:]}" if len(self.api_key) > 11 else "***"
        return (
            f"InstaparserConfig("
            f"api_key='{masked_key}', "
            f"base_url='{self.base_url}', "
            f"timeout={self.timeout}, "
            f"debug={self.debug})"
        )
