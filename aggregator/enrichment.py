"""Per-hit profile enrichment with a degraded fallback."""

from __future__ import annotations

import asyncio
import logging

from models import EnrichedProfile, SearchHit
from providers.base import ProfileProvider, RepositoryLister

from .language import infer_dominant_language


logger = logging.getLogger(__name__)


def degraded_profile(hit: SearchHit) -> EnrichedProfile:
    """Stub carrying only the hit's identity fields."""
    return EnrichedProfile.degraded(hit)


async def enrich_profile(
    hit: SearchHit,
    profile_provider: ProfileProvider,
    repository_lister: RepositoryLister,
) -> EnrichedProfile:
    """
    Fetch the full profile and the dominant language for *hit* concurrently.

    Never raises: any failure of either lookup yields ``degraded_profile(hit)``.
    """
    # return_exceptions keeps the join open until both lookups have settled
    results = await asyncio.gather(
        profile_provider.get_profile(hit.login),
        infer_dominant_language(hit.login, repository_lister),
        return_exceptions=True,
    )

    for res in results:
        if isinstance(res, Exception):
            logger.warning(f"Enrichment failed for {hit.login}, using search data only: {res}")
            return degraded_profile(hit)

    profile, language = results
    return EnrichedProfile.from_profile(hit, profile, language)
