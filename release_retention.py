#!/usr/bin/env python3
"""
Nightly Release Retention Policy
Decides which nightly releases survive a pruning run:
the oldest nightly of every calendar month is always kept,
plus the newest prunable nightlies up to KEEP_RECENT
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from config import KEEP_RECENT, LATEST_NIGHTLY_TAG, MONTH_KEY_LENGTH, NIGHTLY_MARKER

logger = logging.getLogger(__name__)

Release = Mapping[str, Any]


class MalformedReleaseError(ValueError):
    """Raised when a release record has no usable created_at timestamp"""


@dataclass
class PrunePlan:
    """Outcome of applying the retention policy to a release listing"""

    nightlies: List[Release] = field(default_factory=list)
    candidates: List[Release] = field(default_factory=list)
    to_prune: List[Release] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_nightly(release: Release) -> bool:
    """True for nightly builds, excluding the floating latest-nightly tag"""
    tag_name = release.get("tag_name")
    if not isinstance(tag_name, str):
        return False
    return NIGHTLY_MARKER in tag_name and tag_name != LATEST_NIGHTLY_TAG


def filter_nightlies(releases: Iterable[Release]) -> List[Release]:
    return [release for release in releases if is_nightly(release)]


def month_key(release: Release) -> str:
    """
    Get the YYYY-MM bucket key of a release.

    Args:
        release: Release record with a created_at timestamp string

    Returns:
        First seven characters of created_at

    Raises:
        MalformedReleaseError: If created_at is missing or too short
    """
    created_at = release.get("created_at")
    if not isinstance(created_at, str) or len(created_at) < MONTH_KEY_LENGTH:
        raise MalformedReleaseError(
            f"Release {release.get('tag_name')!r} has unusable created_at: {created_at!r}"
        )
    return created_at[:MONTH_KEY_LENGTH]


def group_by_month(releases: Iterable[Release]) -> Dict[str, List[Release]]:
    """
    Partition releases into month buckets in a single pass.
    Buckets follow first-encounter order; records keep their input order.
    """
    buckets: Dict[str, List[Release]] = {}
    for release in releases:
        buckets.setdefault(month_key(release), []).append(release)
    return buckets


def prune_candidates(nightlies: Iterable[Release]) -> List[Release]:
    """Every nightly except the oldest (last) one of each month bucket"""
    candidates: List[Release] = []
    for month, month_releases in group_by_month(nightlies).items():
        logger.debug(
            f"📅 {month}: {len(month_releases)} nightlies, keeping {month_releases[-1].get('tag_name')}"
        )
        candidates.extend(month_releases[:-1])
    return candidates


def select_releases_to_prune(
    nightlies: Iterable[Release], keep_recent: int = KEEP_RECENT
) -> List[Release]:
    """
    Select the nightly releases to delete.

    Input must already be filtered to nightlies and ordered newest first.
    The oldest nightly of each month is kept, then the first keep_recent
    remaining candidates are kept as well.

    Args:
        nightlies: Nightly release records, newest first
        keep_recent: Number of most recent candidates to keep

    Returns:
        Release records to delete, in candidate order
    """
    return prune_candidates(nightlies)[keep_recent:]


def newest_first(releases: Iterable[Release]) -> List[Release]:
    """Order releases by created_at descending, keeping input order on ties"""
    releases = list(releases)
    for release in releases:
        month_key(release)
    return sorted(releases, key=lambda release: release["created_at"], reverse=True)


def plan_pruning(releases: Iterable[Release], keep_recent: int = KEEP_RECENT) -> PrunePlan:
    """
    Apply the retention policy to a raw release listing.

    Never raises for malformed records; the problem is reported in
    PrunePlan.error and nothing is scheduled for deletion.

    Args:
        releases: Release records as returned by the releases API
        keep_recent: Number of most recent candidates to keep

    Returns:
        PrunePlan with the nightlies, candidates and releases to delete
    """
    plan = PrunePlan()
    try:
        plan.nightlies = newest_first(filter_nightlies(releases))
        plan.candidates = prune_candidates(plan.nightlies)
        plan.to_prune = select_releases_to_prune(plan.nightlies, keep_recent)
    except MalformedReleaseError as e:
        plan.error = str(e)
        plan.candidates = []
        plan.to_prune = []

    return plan
