"""
Configuration for the LinkedIn client.

``LinkedInConfig`` is the single typed configuration object the client reads.
``LinkedInConfig.from_options`` normalizes whatever the caller hands in
(None, a config, or a loosely keyed mapping) before the client sees it.

``ConfigManager`` persists the configuration used by the CLI as JSON and
overlays environment variables on load.
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Dict, Any, Mapping

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.linkedin.com"

DEFAULT_REQUEST_TOKEN_URL = "https://api.linkedin.com/uas/oauth/requestToken"
DEFAULT_AUTHORIZE_URL = "https://www.linkedin.com/uas/oauth/authorize"
DEFAULT_ACCESS_TOKEN_URL = "https://api.linkedin.com/uas/oauth/accessToken"
DEFAULT_TIMEOUT = 30

CONFIG_DIR_ENV = "LINKEDIN_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"

# Legacy option names accepted by from_options
_OPTION_ALIASES = {
    "consumerKey": "consumer_key",
    "consumerSecret": "consumer_secret",
    "callbackUrl": "callback_url",
    "accessToken": "access_token",
    "requestTokenUrl": "request_token_url",
    "authorizeUrl": "authorize_url",
    "userAuthorizationUrl": "authorize_url",
    "accessTokenUrl": "access_token_url",
    "verifySsl": "verify_ssl",
}

_ENV_OVERRIDES = {
    "LINKEDIN_CONSUMER_KEY": "consumer_key",
    "LINKEDIN_CONSUMER_SECRET": "consumer_secret",
    "LINKEDIN_CALLBACK_URL": "callback_url",
}


@dataclass(frozen=True)
class LinkedInConfig:
    """Client configuration."""

    consumer_key: str = ""
    consumer_secret: str = ""
    callback_url: str = "oob"
    access_token: Optional[Any] = field(default=None, repr=False)
    timeout: int = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    request_token_url: str = DEFAULT_REQUEST_TOKEN_URL
    authorize_url: str = DEFAULT_AUTHORIZE_URL
    access_token_url: str = DEFAULT_ACCESS_TOKEN_URL

    @classmethod
    def from_options(cls, options: Any = None) -> "LinkedInConfig":
        """
        Build a configuration from any accepted representation.

        Args:
            options: None, a LinkedInConfig, or a mapping keyed by field
                names or their camelCase aliases. Anything else yields
                the defaults.

        Returns:
            Normalized configuration
        """
        if isinstance(options, cls):
            return options

        if not isinstance(options, Mapping):
            if options is not None:
                logger.debug(f"Ignoring options of type {type(options).__name__}")
            return cls()

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                logger.debug(f"Ignoring unknown option: {key}")

        return cls(**values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LinkedInConfig":
        """Load a configuration from its persisted JSON form."""
        from .auth import AccessToken

        values = dict(data)
        token = values.pop("token", "")
        token_secret = values.pop("token_secret", "")
        if token:
            values["access_token"] = AccessToken(token, token_secret)

        return cls.from_options(values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, flattening the access token."""
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "access_token"
        }
        data["token"] = getattr(self.access_token, "token", "") or ""
        data["token_secret"] = getattr(self.access_token, "token_secret", "") or ""
        return data

    def is_configured(self) -> bool:
        """Check if consumer credentials are present."""
        return bool(self.consumer_key and self.consumer_secret)

    def is_authenticated(self) -> bool:
        """Check if an access token is present."""
        return self.access_token is not None


class ConfigManager:
    """Loads and stores the CLI configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory holding config.json. Defaults to
                $LINKEDIN_CONFIG_DIR or ~/.linkedin-cli.
        """
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else Path.home() / ".linkedin-cli"
        self.config_dir = Path(config_dir)
        self._config: Optional[LinkedInConfig] = None

    def get_config_path(self) -> Path:
        """Get the path of the configuration file."""
        return self.config_dir / CONFIG_FILE_NAME

    def _read_file(self) -> Dict[str, Any]:
        path = self.get_config_path()
        data: Dict[str, Any] = {}

        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid configuration file: {path}", details=str(e))
            except OSError as e:
                raise ConfigurationError(f"Cannot read configuration file: {path}", details=str(e))
            logger.debug(f"Loaded configuration from {path}")

        return data

    def load_stored(self) -> LinkedInConfig:
        """Load the configuration as stored on disk, without environment overrides."""
        return LinkedInConfig.from_dict(self._read_file())

    def load(self) -> LinkedInConfig:
        """Load configuration from disk, then apply environment overrides."""
        data = self._read_file()

        for env_name, key in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                data[key] = value

        if os.environ.get("LINKEDIN_TOKEN"):
            data["token"] = os.environ["LINKEDIN_TOKEN"]
            data["token_secret"] = os.environ.get("LINKEDIN_TOKEN_SECRET", "")

        return LinkedInConfig.from_dict(data)

    def get(self) -> LinkedInConfig:
        """Get the current configuration (cached after first load)."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def save(self, config: LinkedInConfig) -> None:
        """Write configuration to disk."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.get_config_path()

        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)

        try:
            path.chmod(0o600)
        except OSError:
            logger.debug(f"Could not restrict permissions on {path}")

        self._config = config
        logger.debug(f"Saved configuration to {path}")

    def update(self, **kwargs: Any) -> LinkedInConfig:
        """
        Update selected fields of the stored configuration and persist it.

        Environment overrides are never written to disk; the returned
        configuration has them applied again.
        """
        self.save(replace(self.load_stored(), **kwargs))
        self._config = None
        return self.get()

    def clear(self) -> None:
        """Remove the stored configuration."""
        path = self.get_config_path()
        if path.exists():
            path.unlink()
        self._config = None


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the configuration manager, creating it on first use or for a new directory."""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config() -> LinkedInConfig:
    """Get the current configuration."""
    return get_config_manager().get()
