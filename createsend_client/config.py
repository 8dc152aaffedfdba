from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import urlparse

DEFAULT_BASE_URL = "https://api.createsend.com/api/v3"
DEFAULT_OAUTH_BASE_URL = "https://api.createsend.com"
DEFAULT_TIMEOUT_SECONDS = 30


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AppSettings:
    base_url: str = DEFAULT_BASE_URL
    oauth_base_url: str = DEFAULT_OAUTH_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    api_key: str = ""
    access_token: str = ""
    refresh_token: str = ""
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> "AppSettings":
        _load_dotenv_if_present()

        base_url = os.getenv("CREATESEND_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")
        oauth_base_url = os.getenv("CREATESEND_OAUTH_BASE_URL", DEFAULT_OAUTH_BASE_URL).strip().rstrip("/")

        raw_timeout = os.getenv("CREATESEND_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)).strip()
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError as error:
            raise ConfigurationError(
                f"CREATESEND_TIMEOUT_SECONDS must be an integer, got {raw_timeout!r}"
            ) from error

        settings = AppSettings(
            base_url=base_url,
            oauth_base_url=oauth_base_url,
            timeout_seconds=timeout_seconds,
            api_key=os.getenv("CREATESEND_API_KEY", "").strip(),
            access_token=os.getenv("CREATESEND_ACCESS_TOKEN", "").strip(),
            refresh_token=os.getenv("CREATESEND_REFRESH_TOKEN", "").strip(),
            log_level=os.getenv("CREATESEND_LOG_LEVEL", "WARNING").strip().upper(),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        url_fields = {
            "CREATESEND_BASE_URL": self.base_url,
            "CREATESEND_OAUTH_BASE_URL": self.oauth_base_url,
        }
        invalid_urls = [
            name for name, value in url_fields.items()
            if urlparse(value).scheme not in ("http", "https") or not urlparse(value).netloc
        ]
        if invalid_urls:
            raise ConfigurationError(
                "Base URLs must be absolute http(s) URLs: " + ", ".join(invalid_urls)
            )

        if self.timeout_seconds <= 0:
            raise ConfigurationError("CREATESEND_TIMEOUT_SECONDS must be greater than 0")

        if self.api_key and self.access_token:
            raise ConfigurationError(
                "Set either CREATESEND_API_KEY or CREATESEND_ACCESS_TOKEN, not both"
            )

        if self.refresh_token and not self.access_token:
            raise ConfigurationError(
                "CREATESEND_REFRESH_TOKEN requires CREATESEND_ACCESS_TOKEN"
            )


def _load_dotenv_if_present(file_name: str = ".env") -> None:
    """Copy ``KEY=value`` pairs from the dotenv file into the environment.

    ``CREATESEND_ENV_FILE`` points at the file, otherwise ``file_name`` in
    the working directory is used. Variables already set are left alone.
    """
    explicit = os.getenv("CREATESEND_ENV_FILE", "").strip()
    path = Path(explicit).expanduser() if explicit else Path.cwd() / file_name
    if not path.is_file():
        return

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return

    for line in lines:
        key, separator, value = line.strip().partition("=")
        key = key.removeprefix("export ").strip()
        if not separator or not key.startswith("CREATESEND_"):
            continue
        os.environ.setdefault(key, value.strip().strip("\"'"))
