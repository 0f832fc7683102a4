from typing import Optional

from brand_cms.domain.access import Actor
from brand_cms.domain.schema import BrandPage
from brand_cms.domain.exceptions import PageNotFound
from brand_cms.repositories.brand_pages import BrandPageStore
from brand_cms.utils.audit import log_action
from brand_cms.utils.transaction import transactional


async def toggle_brand_page(
    *,
    actor: Actor,
    page_id: str,
    enabled: Optional[bool] = None,
    store: Optional[BrandPageStore] = None,
) -> BrandPage:
    """
    Flip (or set) a page's public visibility and persist it immediately.

    Independent of content completeness and of delete permission.
    """
    store = store or BrandPageStore()

    page = await store.load_page(page_id)
    if page is None:
        raise PageNotFound(f"Brand page {page_id} not found")

    target = (not page.enabled) if enabled is None else bool(enabled)

    with transactional():
        updated = await store.update_page(page_id, {"enabled": target})

        log_action(
            actor=actor,
            action="brand_page.enable" if target else "brand_page.disable",
            entity_type="brand_page",
            entity_id=page_id,
            payload={"brand_id": page.brand_id},
        )

    return updated
