#!/usr/bin/env python3
"""
Centralized Configuration for the Nightly Release Pruner
Holds the fixed retention constants and reads the invocation context
(token and repository) from the environment
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load from the same directory as config.py
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)

# Retention policy
NIGHTLY_MARKER = "nightly"
LATEST_NIGHTLY_TAG = "nightly"
KEEP_RECENT = 3
MONTH_KEY_LENGTH = 7  # "YYYY-MM"

# GitHub API
DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
REQUEST_TIMEOUT = 30  # seconds
USER_AGENT = "NightlyReleasePruner/1.0"


class ConfigError(ValueError):
    """Raised when the invocation context is missing or malformed"""


class Config:
    """Invocation context for a pruning run"""

    def __init__(self, token: Optional[str] = None, repository: Optional[str] = None,
                 api_url: Optional[str] = None):
        self.GITHUB_TOKEN = token if token is not None else os.getenv("GITHUB_TOKEN")
        self.GITHUB_REPOSITORY = (
            repository if repository is not None else os.getenv("GITHUB_REPOSITORY")
        )
        self.GITHUB_API_URL = (
            api_url or os.getenv("GITHUB_API_URL") or DEFAULT_API_URL
        ).rstrip("/")

    @property
    def repo_owner(self) -> str:
        return self._split_repository()[0]

    @property
    def repo_name(self) -> str:
        return self._split_repository()[1]

    def _split_repository(self):
        parts = (self.GITHUB_REPOSITORY or "").split("/")
        if len(parts) != 2 or not all(parts):
            raise ConfigError(
                f"GITHUB_REPOSITORY must be 'owner/name', got {self.GITHUB_REPOSITORY!r}"
            )
        return parts[0], parts[1]

    def validate(self) -> None:
        """
        Check that the run has everything it needs.

        Raises:
            ConfigError: If the token is unset or the repository is malformed
        """
        if not self.GITHUB_TOKEN:
            raise ConfigError("GITHUB_TOKEN not set - cannot reach the releases API")

        self._split_repository()
        logger.debug(
            f"✅ Configuration valid: repo={self.GITHUB_REPOSITORY} api={self.GITHUB_API_URL}"
        )
