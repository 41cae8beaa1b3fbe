#!/usr/bin/env python3
"""
Pytest configuration and fixtures for nightly release pruner tests.
Provides release record builders and keeps logging setup out of the way of caplog.
"""

import itertools
import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

_release_ids = itertools.count(1000)


def make_release(tag_name, created_at, release_id=None):
    """Build a release record shaped like the GitHub API response"""
    return {
        "id": release_id if release_id is not None else next(_release_ids),
        "tag_name": tag_name,
        "created_at": created_at,
        "prerelease": True,
    }


def make_month(month, count, prefix="nightly"):
    """Build `count` nightlies in `month` (YYYY-MM), newest first"""
    return [
        make_release(
            f"{prefix}-{month}-{day:02d}", f"{month}-{day:02d}T03:00:00Z"
        )
        for day in range(count, 0, -1)
    ]


@pytest.fixture
def release_factory():
    return make_release


@pytest.fixture
def month_factory():
    return make_month


@pytest.fixture(autouse=True)
def logging_already_configured(monkeypatch):
    """
    Mark the root logger as configured so configure_logging() does not
    replace the handlers pytest uses for log capture.
    """
    monkeypatch.setattr(logging.getLogger(), "_configured", True, raising=False)
    yield


@pytest.fixture(autouse=True)
def clean_github_env(monkeypatch):
    """Keep the CI environment from leaking into tests"""
    for name in ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_API_URL"):
        monkeypatch.delenv(name, raising=False)
    yield
