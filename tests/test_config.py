"""
Tests for configuration handling.
"""

import json

import pytest

from linkedin_cli.auth import AccessToken
from linkedin_cli.config import (
    ConfigManager,
    LinkedInConfig,
    DEFAULT_REQUEST_TOKEN_URL,
    get_config_manager,
)
from linkedin_cli.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides out of the tests."""
    for name in (
        "LINKEDIN_CONSUMER_KEY",
        "LINKEDIN_CONSUMER_SECRET",
        "LINKEDIN_CALLBACK_URL",
        "LINKEDIN_TOKEN",
        "LINKEDIN_TOKEN_SECRET",
        "LINKEDIN_CONFIG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


class TestFromOptions:
    """Tests for LinkedInConfig.from_options."""

    def test_none(self):
        """Test None yields defaults."""
        config = LinkedInConfig.from_options(None)
        assert config == LinkedInConfig()
        assert config.request_token_url == DEFAULT_REQUEST_TOKEN_URL

    def test_non_mapping(self):
        """Test unusable values yield defaults."""
        assert LinkedInConfig.from_options(["a", "b"]) == LinkedInConfig()
        assert LinkedInConfig.from_options(42) == LinkedInConfig()

    def test_config_passthrough(self):
        """Test an existing config is returned as is."""
        config = LinkedInConfig(consumer_key="k")
        assert LinkedInConfig.from_options(config) is config

    def test_camel_case_keys(self):
        """Test legacy option names."""
        token = AccessToken("t", "s")
        config = LinkedInConfig.from_options({
            "consumerKey": "k",
            "consumerSecret": "s",
            "callbackUrl": "https://example.com/cb",
            "accessToken": token,
        })
        assert config.consumer_key == "k"
        assert config.consumer_secret == "s"
        assert config.callback_url == "https://example.com/cb"
        assert config.access_token is token

    def test_snake_case_keys(self):
        """Test field names."""
        config = LinkedInConfig.from_options({"consumer_key": "k", "timeout": 5})
        assert config.consumer_key == "k"
        assert config.timeout == 5

    def test_unknown_keys_ignored(self):
        """Test unknown keys are dropped."""
        config = LinkedInConfig.from_options({"siteUrl": "x", "consumerKey": "k"})
        assert config == LinkedInConfig(consumer_key="k")

    def test_immutable(self):
        """Test configs cannot be modified."""
        config = LinkedInConfig()
        with pytest.raises(AttributeError):
            config.consumer_key = "x"

    def test_status_checks(self):
        """Test is_configured and is_authenticated."""
        assert LinkedInConfig().is_configured() is False
        assert LinkedInConfig(consumer_key="k", consumer_secret="s").is_configured() is True
        assert LinkedInConfig().is_authenticated() is False
        assert LinkedInConfig(access_token=AccessToken("t")).is_authenticated() is True


class TestSerialization:
    """Tests for to_dict/from_dict."""

    def test_access_token_flattened(self):
        """Test the access token is stored as token strings."""
        data = LinkedInConfig(consumer_key="k", access_token=AccessToken("t", "s")).to_dict()

        assert data["token"] == "t"
        assert data["token_secret"] == "s"
        assert "access_token" not in data
        json.dumps(data)

    def test_from_dict_restores_token(self):
        """Test token strings become an AccessToken."""
        config = LinkedInConfig.from_dict({"consumer_key": "k", "token": "t", "token_secret": "s"})
        assert config.access_token == AccessToken("t", "s")

    def test_from_dict_without_token(self):
        """Test empty token strings mean no access token."""
        config = LinkedInConfig.from_dict({"token": "", "token_secret": ""})
        assert config.access_token is None


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file(self, tmp_path):
        """Test defaults when nothing is stored."""
        assert ConfigManager(tmp_path).get() == LinkedInConfig()

    def test_save_and_load(self, tmp_path):
        """Test persisted configuration is loaded back."""
        ConfigManager(tmp_path).save(
            LinkedInConfig(consumer_key="k", consumer_secret="s", access_token=AccessToken("t", "ts"))
        )

        config = ConfigManager(tmp_path).get()
        assert config.consumer_key == "k"
        assert config.access_token == AccessToken("t", "ts")

    def test_update(self, tmp_path):
        """Test updating selected fields."""
        manager = ConfigManager(tmp_path)
        manager.update(consumer_key="k")
        manager.update(timeout=10)

        config = ConfigManager(tmp_path).get()
        assert config.consumer_key == "k"
        assert config.timeout == 10

    def test_clear(self, tmp_path):
        """Test clearing the stored configuration."""
        manager = ConfigManager(tmp_path)
        manager.update(consumer_key="k")
        manager.clear()

        assert not manager.get_config_path().exists()
        assert manager.get() == LinkedInConfig()

    def test_environment_overrides(self, tmp_path, monkeypatch):
        """Test environment variables override the file."""
        ConfigManager(tmp_path).update(consumer_key="file-key")
        monkeypatch.setenv("LINKEDIN_CONSUMER_KEY", "env-key")
        monkeypatch.setenv("LINKEDIN_TOKEN", "env-token")
        monkeypatch.setenv("LINKEDIN_TOKEN_SECRET", "env-secret")

        config = ConfigManager(tmp_path).get()
        assert config.consumer_key == "env-key"
        assert config.access_token == AccessToken("env-token", "env-secret")

    def test_update_does_not_persist_environment(self, tmp_path, monkeypatch):
        """Test environment secrets stay out of the config file on update."""
        ConfigManager(tmp_path).update(consumer_key="file-key")
        monkeypatch.setenv("LINKEDIN_CONSUMER_SECRET", "env-secret")
        monkeypatch.setenv("LINKEDIN_TOKEN", "env-token")

        manager = ConfigManager(tmp_path)
        config = manager.update(timeout=5)

        stored = json.loads(manager.get_config_path().read_text())
        assert stored["consumer_key"] == "file-key"
        assert stored["consumer_secret"] == ""
        assert stored["token"] == ""
        assert stored["timeout"] == 5
        assert config.consumer_secret == "env-secret"
        assert config.access_token == AccessToken("env-token")

    def test_load_stored_ignores_environment(self, tmp_path, monkeypatch):
        """Test load_stored returns the file contents only."""
        ConfigManager(tmp_path).update(consumer_key="file-key")
        monkeypatch.setenv("LINKEDIN_CONSUMER_KEY", "env-key")

        assert ConfigManager(tmp_path).load_stored().consumer_key == "file-key"

    def test_invalid_file(self, tmp_path):
        """Test an unreadable file raises ConfigurationError."""
        (tmp_path / "config.json").write_text("not json")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(tmp_path).get()

        assert "Invalid configuration file" in str(exc_info.value)

    def test_config_dir_from_environment(self, tmp_path, monkeypatch):
        """Test LINKEDIN_CONFIG_DIR."""
        monkeypatch.setenv("LINKEDIN_CONFIG_DIR", str(tmp_path))
        assert ConfigManager().get_config_path() == tmp_path / "config.json"

    def test_get_config_manager(self, tmp_path):
        """Test the module-level manager follows the requested directory."""
        assert get_config_manager(tmp_path).config_dir == tmp_path
