#!/usr/bin/env python3
"""
Prune Old Nightly Releases
Keeps the oldest nightly of every month plus the newest prunable ones,
and deletes the remaining nightly releases and their tags
"""

import logging
from typing import Any, Dict, List, Optional

from config import Config
from github_releases import GitHubReleasesClient
from release_retention import plan_pruning
from utils.logging_setup import configure_logging
from utils.redact import redact_secrets

logger = logging.getLogger(__name__)


def delete_nightlies(client: GitHubReleasesClient, nightlies: List[Dict[str, Any]]) -> int:
    """
    Delete each nightly release followed by its tag, one request at a time

    Args:
        client: Releases client for the target repository
        nightlies: Releases selected for pruning

    Returns:
        Number of nightlies whose release and tag were deleted
    """
    deleted_count = 0
    for nightly in nightlies:
        tag_name = nightly["tag_name"]

        logger.info(f"🗑️ Deleting nightly: {tag_name}")
        client.delete_release(nightly["id"])

        logger.info(f"🏷️ Deleting nightly tag: {tag_name}")
        client.delete_tag(tag_name)

        deleted_count += 1

    return deleted_count


def prune_releases(client: GitHubReleasesClient) -> int:
    """
    List the repository releases, apply the retention policy and delete

    Returns:
        Number of nightlies deleted
    """
    releases = client.list_releases()
    plan = plan_pruning(releases)

    if not plan.ok:
        logger.error(f"❌ Cannot apply retention policy: {plan.error}")
        return 0

    logger.info(
        f"📋 {len(plan.nightlies)} nightlies, {len(plan.candidates)} prune candidates, "
        f"{len(plan.to_prune)} to delete"
    )

    return delete_nightlies(client, plan.to_prune)


def main(config: Optional[Config] = None) -> int:
    """Run one pruning pass; failures are logged and never re-raised"""
    try:
        configure_logging()
        logger.info("🧹 Pruning old prereleases")

        config = config or Config()
        config.validate()

        with GitHubReleasesClient.from_config(config) as client:
            deleted_count = prune_releases(client)

        logger.info(f"✅ Done. Deleted {deleted_count} nightlies")
    except Exception as e:
        logger.error(f"❌ Error during pruning: {redact_secrets(str(e))}")

    return 0


if __name__ == "__main__":
    exit(main())
