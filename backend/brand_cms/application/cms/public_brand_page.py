from typing import Optional, Tuple

from brand_cms.application.assets.resolve_page_assets import (
    AssetMap,
    AssetResolver,
    resolve_page_assets,
)
from brand_cms.domain.exceptions import PageDisabled, PageNotFound
from brand_cms.domain.schema import BrandPage
from brand_cms.repositories.brand_pages import BrandPageStore


async def get_public_brand_page(
    *,
    brand_id: str,
    resolver: AssetResolver,
    timeout: Optional[float] = None,
    store: Optional[BrandPageStore] = None,
) -> Tuple[BrandPage, AssetMap]:
    """Enabled page for a brand routing key, with its resolved images."""
    store = store or BrandPageStore()

    page = await store.find_by_brand(brand_id, enabled_only=True)
    if page is None:
        if await store.find_by_brand(brand_id) is not None:
            raise PageDisabled("This brand page is currently disabled.")
        raise PageNotFound(f'Brand page not found for "{brand_id}"')

    assets = await resolve_page_assets(page, resolver, timeout=timeout)
    return page, assets
