"""
Settings - Connector defaults and environment-backed configuration.

Usage:
    settings = ConnectorSettings()          # reads IMS_* variables and .env
    connector = Connector.from_settings(settings)
    timeout = DEFAULTS["timeout_seconds"]
"""

from pydantic_settings import BaseSettings

# Fixed protocol values shared by the connector and its helpers
DEFAULTS = {
    # Every base URL is normalized to end with this segment
    "api_path": "/api/",
    # Scheme prepended to base URLs given as bare host[:port]
    "default_scheme": "http://",
    # Resources, relative to the API root
    "login_resource": "auth/login",
    "assets_resource": "assets",
    # Transport timeout (seconds)
    "timeout_seconds": 5,
}


class ConnectorSettings(BaseSettings):
    """Connector configuration loaded from environment."""

    username: str = ""
    password: str = ""
    base_url: str = "localhost:8000"
    timeout: int = DEFAULTS["timeout_seconds"]

    class Config:
        env_prefix = "IMS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
