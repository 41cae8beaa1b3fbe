#!/usr/bin/env python3
"""
Network Utilities for the GitHub REST API
Session construction and single-attempt requests with status checking
"""

import logging
from typing import Dict, Iterable

import requests

from config import API_VERSION, REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API answers with an unexpected status code"""

    def __init__(self, method: str, url: str, status_code: int, message: str = ""):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.message = message
        super().__init__(f"{method} {url} failed with HTTP {status_code}: {message}")


def github_headers(token: str) -> Dict[str, str]:
    """
    Build the standard request headers for the GitHub REST API

    Args:
        token: GitHub token used as a bearer credential

    Returns:
        Header dictionary
    """
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
        "User-Agent": USER_AGENT,
    }


def create_session(token: str) -> requests.Session:
    """Create a requests session carrying the GitHub headers"""
    session = requests.Session()
    session.headers.update(github_headers(token))
    return session


def api_request(
    session: requests.Session,
    method: str,
    url: str,
    expected_status: Iterable[int] = (200,),
    timeout: int = REQUEST_TIMEOUT,
) -> requests.Response:
    """
    Issue one request and check its status code

    Args:
        session: Session with authentication headers
        method: HTTP method
        url: Absolute URL
        expected_status: Status codes treated as success
        timeout: Request timeout in seconds

    Returns:
        requests.Response object

    Raises:
        GitHubAPIError: If the status code is not expected
        requests.RequestException: On transport failures
    """
    logger.debug(f"{method} {url}")
    response = session.request(method, url, timeout=timeout)

    if response.status_code not in tuple(expected_status):
        raise GitHubAPIError(method, url, response.status_code, _error_message(response))

    return response


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]

    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return str(payload)[:200]
