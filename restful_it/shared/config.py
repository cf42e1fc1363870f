"""Centralized runtime configuration helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from restful_it.infra.config import Settings, settings
from restful_it.shared.retry import RetryPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Expose what the HTTP client needs to reach the objects API."""

    base_url: str
    timeout_seconds: float
    target: str

    @property
    def uses_stub(self) -> bool:
        return self.target == "stub"

    @classmethod
    def from_settings(cls, source: Settings) -> "ClientConfig":
        base_url = source.BASE_URL.rstrip("/")
        if source.TARGET == "stub":
            logger.debug("Alvo 'stub' configurado; %s não será contatado", base_url)
        return cls(
            base_url=base_url,
            timeout_seconds=source.REQUEST_TIMEOUT_SECONDS,
            target=source.TARGET,
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Expose logging related configuration."""

    directory: str
    filename: str
    level: str

    @cached_property
    def directory_path(self) -> Path:
        return Path(self.directory)

    @cached_property
    def file_path(self) -> Path:
        return self.directory_path / self.filename


def retry_policy_from_settings(source: Settings) -> RetryPolicy:
    """Build the default :class:`RetryPolicy` from ``source``."""

    return RetryPolicy(max_retries=source.RETRY_MAX_RETRIES, delay_ms=source.RETRY_DELAY_MS)


client_config = ClientConfig.from_settings(settings)

CLIENT_CONFIG = client_config
BASE_URL: str = client_config.base_url
REQUEST_TIMEOUT_SECONDS: float = client_config.timeout_seconds


DEFAULT_RETRY_POLICY: RetryPolicy = retry_policy_from_settings(settings)


logging_config = LoggingConfig(
    directory=settings.LOG_DIR,
    filename=settings.LOG_FILENAME,
    level=settings.LOG_LEVEL,
)


LOGGING_CONFIG = logging_config
LOG_DIRECTORY: str = logging_config.directory
LOG_DIRECTORY_PATH: Path = logging_config.directory_path
LOG_FILE_NAME: str = logging_config.filename
LOG_FILE_PATH: Path = logging_config.file_path
LOG_LEVEL: str = logging_config.level
