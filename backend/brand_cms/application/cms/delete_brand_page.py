from typing import Optional

from brand_cms.domain.access import Actor, can_delete
from brand_cms.domain.exceptions import PageNotFound, PermissionDenied
from brand_cms.repositories.brand_pages import BrandPageStore
from brand_cms.utils.audit import log_action
from brand_cms.utils.transaction import transactional


async def delete_brand_page(
    *,
    actor: Actor,
    page_id: str,
    store: Optional[BrandPageStore] = None,
) -> None:
    """
    Hard-delete a brand page.

    Refused before any storage call when the role cannot delete.
    """
    if not can_delete(actor.role):
        raise PermissionDenied("You don't have permission to delete items.")

    store = store or BrandPageStore()

    page = await store.load_page(page_id)
    if page is None:
        raise PageNotFound(f"Brand page {page_id} not found")

    with transactional():
        await store.delete_page(page_id)

        log_action(
            actor=actor,
            action="brand_page.delete",
            entity_type="brand_page",
            entity_id=page_id,
            payload={"brand_id": page.brand_id},
        )
