"""
Concurrent image resolution for a brand page.

Every image reference on the page (two hero backgrounds and one image per
product item) is resolved at the same time. One failing or slow lookup only
blanks its own key.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Protocol, Tuple

from brand_cms.domain.schema import BrandPage

logger = logging.getLogger(__name__)

# References starting with these are already displayable
DIRECT_URL_PREFIXES = ("data:", "http://", "https://", "/")

AssetMap = Dict[str, Optional[str]]


class AssetResolver(Protocol):
    async def resolve(self, ref: str) -> Optional[str]:
        ...


def is_direct_url(ref: Optional[str]) -> bool:
    return isinstance(ref, str) and ref.startswith(DIRECT_URL_PREFIXES)


def collect_image_refs(page: BrandPage) -> List[Tuple[str, str]]:
    """Stable (key, reference) pairs for every non-empty image slot."""
    refs: List[Tuple[str, str]] = []

    if page.hero is not None:
        if page.hero.background_image1:
            refs.append(("hero-bg1", page.hero.background_image1))
        if page.hero.background_image2:
            refs.append(("hero-bg2", page.hero.background_image2))

    if page.products is not None:
        for index, item in enumerate(page.products.items):
            if item.image:
                refs.append((f"product-{index}", item.image))

    return refs


async def _resolve_one(
    resolver: AssetResolver,
    key: str,
    ref: str,
    timeout: Optional[float],
) -> Tuple[str, Optional[str]]:
    if is_direct_url(ref):
        return key, ref

    try:
        url = await asyncio.wait_for(resolver.resolve(ref), timeout)
    except asyncio.TimeoutError:
        logger.warning("Timed out resolving %s (%s)", key, ref)
        return key, None
    except Exception as exc:
        logger.warning("Error resolving %s (%s): %s", key, ref, exc)
        return key, None

    return key, url or None


async def resolve_page_assets(
    page: BrandPage,
    resolver: AssetResolver,
    *,
    timeout: Optional[float] = None,
) -> AssetMap:
    refs = collect_image_refs(page)
    if not refs:
        return {}

    results = await asyncio.gather(
        *(_resolve_one(resolver, key, ref, timeout) for key, ref in refs)
    )
    return dict(results)


class PageAssetSession:
    """
    Holds the asset map for whichever page is currently shown.

    Starting a resolution for a new page supersedes any in flight; a
    superseded run's results are discarded, never merged.
    """

    def __init__(self, resolver: AssetResolver, *, timeout: Optional[float] = None):
        self.resolver = resolver
        self.timeout = timeout
        self.page: Optional[BrandPage] = None
        self.assets: AssetMap = {}
        self._generation = 0

    async def show(self, page: BrandPage) -> Optional[AssetMap]:
        """Resolve assets for page; returns None when superseded meanwhile."""
        self._generation += 1
        generation = self._generation
        self.page = page
        self.assets = {}

        snapshot = page.copy()
        assets = await resolve_page_assets(snapshot, self.resolver, timeout=self.timeout)

        if generation != self._generation:
            logger.debug("Discarding asset results for superseded page %s", snapshot.brand_id)
            return None

        self.assets = assets
        return assets
