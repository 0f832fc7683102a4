from typing import Optional

from brand_cms.domain.access import Actor, Module, can_create, resolve_module_access
from brand_cms.domain.exceptions import DuplicateBrandPage, PageNotFound, PermissionDenied
from brand_cms.domain.invariants.page import assert_brand_page
from brand_cms.domain.schema import BrandPage
from brand_cms.repositories.brand_pages import BrandPageStore
from brand_cms.utils.audit import log_action
from brand_cms.utils.transaction import transactional


async def save_brand_page(
    *,
    actor: Actor,
    visibility: dict,
    page: BrandPage,
    store: Optional[BrandPageStore] = None,
) -> BrandPage:
    """
    Persist a brand page being edited.

    Responsibilities:
    - a page without id is created, otherwise the stored page is replaced
    - one brand page per brand id on creation
    - invariants checked before anything is staged
    - exactly one store write plus its audit row, in one transaction
    """
    store = store or BrandPageStore()
    creating = page.id is None

    if creating:
        allowed = can_create(actor.role, visibility)
    else:
        allowed = resolve_module_access(actor.role, Module.BRAND_PAGES, visibility)
    if not allowed:
        raise PermissionDenied(
            f"You don't have permission to {'create' if creating else 'edit'} brand pages."
        )

    assert_brand_page(page)

    if creating:
        existing = await store.find_by_brand(page.brand_id)
        if existing is not None:
            raise DuplicateBrandPage(
                "A brand page already exists for this brand. "
                "Please edit the existing page instead."
            )
    elif await store.load_page(page.id) is None:
        raise PageNotFound(f"Brand page {page.id} not found")

    with transactional():
        page_id = await store.save_page(page)

        log_action(
            actor=actor,
            action="brand_page.create" if creating else "brand_page.update",
            entity_type="brand_page",
            entity_id=page_id,
            payload={
                "brand_id": page.brand_id,
                "sections": [name for name, _ in page.sections()],
            },
        )

    return await store.load_page(page_id)
