"""Dominant-language inference from a user's recently pushed repositories."""

from __future__ import annotations

from collections import Counter
import logging
from typing import Optional

from models import REPO_SAMPLE_SIZE
from providers.base import RepositoryLister


logger = logging.getLogger(__name__)


async def infer_dominant_language(
    username: str,
    repository_lister: RepositoryLister,
    limit: int = REPO_SAMPLE_SIZE,
) -> Optional[str]:
    """
    Return the most common primary language among the user's most recently
    pushed repositories, or None when none is known or the lookup fails.

    Ties go to the language seen first in recency order.
    """
    try:
        repos = await repository_lister.list_recent_repositories(username, limit=limit)
    except Exception as exc:
        logger.debug(f"Language lookup failed for {username}: {exc}")
        return None

    languages = [repo.language for repo in list(repos)[:limit] if repo.language]
    if not languages:
        return None

    # most_common keeps first-encountered order among equal counts
    return Counter(languages).most_common(1)[0][0]
