"""Tests for connector defaults and environment-backed settings."""

from ims_connector import Connector
from ims_connector.settings import DEFAULTS, ConnectorSettings


class TestDefaults:
    """Tests for DEFAULTS."""

    def test_protocol_constants(self):
        assert DEFAULTS["api_path"] == "/api/"
        assert DEFAULTS["default_scheme"] == "http://"
        assert DEFAULTS["login_resource"] == "auth/login"
        assert DEFAULTS["assets_resource"] == "assets"

    def test_default_timeout_positive(self):
        assert DEFAULTS["timeout_seconds"] > 0


class TestConnectorSettings:
    """Tests for ConnectorSettings."""

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("IMS_USERNAME", "env_user")
        monkeypatch.setenv("IMS_PASSWORD", "env_pass")
        monkeypatch.setenv("IMS_BASE_URL", "ims.internal:8000")
        monkeypatch.setenv("IMS_TIMEOUT", "9")

        settings = ConnectorSettings()
        assert settings.username == "env_user"
        assert settings.password == "env_pass"
        assert settings.base_url == "ims.internal:8000"
        assert settings.timeout == 9

    def test_defaults_without_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("IMS_USERNAME", "IMS_PASSWORD", "IMS_BASE_URL", "IMS_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = ConnectorSettings()
        assert settings.username == ""
        assert settings.timeout == DEFAULTS["timeout_seconds"]

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("IMS_BASE_URL", raising=False)
        (tmp_path / ".env").write_text("IMS_BASE_URL=https://ims.example.com\nOTHER_SETTING=1\n")

        settings = ConnectorSettings()
        assert settings.base_url == "https://ims.example.com"

    def test_connector_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("IMS_USERNAME", "env_user")
        monkeypatch.setenv("IMS_BASE_URL", "10.0.0.5:8000")

        with Connector.from_settings() as connector:
            assert connector.username == "env_user"
            assert connector.base_url == "http://10.0.0.5:8000/api/"
