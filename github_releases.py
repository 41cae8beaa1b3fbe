#!/usr/bin/env python3
"""
GitHub Releases Client
List releases and delete releases and their tags through the REST API
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from config import Config
from utils.network import api_request, create_session

logger = logging.getLogger(__name__)


class GitHubReleasesClient:
    """Release operations for a single repository"""

    def __init__(self, owner: str, repo: str, token: str, api_url: str,
                 session: Optional[requests.Session] = None):
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.session = session or create_session(token)

    @classmethod
    def from_config(cls, config: Config) -> "GitHubReleasesClient":
        return cls(
            owner=config.repo_owner,
            repo=config.repo_name,
            token=config.GITHUB_TOKEN,
            api_url=config.GITHUB_API_URL,
        )

    @property
    def repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}"

    def list_releases(self) -> List[Dict[str, Any]]:
        """
        Get the first page of releases, newest first as the API returns them

        Returns:
            List of release records
        """
        response = api_request(self.session, "GET", f"{self.repo_url}/releases")
        releases = response.json()
        logger.debug(f"📋 Listed {len(releases)} releases for {self.owner}/{self.repo}")
        return releases

    def delete_release(self, release_id: int) -> None:
        """Delete a release by id; the tag is left in place"""
        api_request(
            self.session,
            "DELETE",
            f"{self.repo_url}/releases/{release_id}",
            expected_status=(204,),
        )

    def delete_tag(self, tag_name: str) -> None:
        """Delete the tags/<tag_name> git reference"""
        api_request(
            self.session,
            "DELETE",
            f"{self.repo_url}/git/refs/tags/{tag_name}",
            expected_status=(204,),
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
