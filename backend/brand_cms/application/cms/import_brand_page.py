from dataclasses import dataclass
from typing import Optional

from brand_cms.domain.access import Actor, can_create
from brand_cms.domain.exceptions import PermissionDenied
from brand_cms.domain.static_import import convert_static_page
from brand_cms.repositories.brand_pages import BrandPageStore
from .save_brand_page import save_brand_page


@dataclass
class ImportResult:
    success: bool
    message: str
    page_id: Optional[str] = None


async def import_static_brand_page(
    *,
    actor: Actor,
    visibility: dict,
    brand_id: str,
    store: Optional[BrandPageStore] = None,
) -> ImportResult:
    """
    Import a legacy static brand page into the page schema.

    Never overwrites: an existing page for the brand is reported, not replaced.
    Raises SourceNotFound when no legacy page exists for the brand.
    """
    if not can_create(actor.role, visibility):
        raise PermissionDenied("You don't have permission to create brand pages.")

    store = store or BrandPageStore()

    existing = await store.find_by_brand(brand_id)
    if existing is not None:
        return ImportResult(
            success=False,
            message=f"A brand page for '{brand_id}' already exists and was not overwritten.",
            page_id=existing.id,
        )

    page = convert_static_page(brand_id)
    saved = await save_brand_page(actor=actor, visibility=visibility, page=page, store=store)

    return ImportResult(
        success=True,
        message=f"Brand page for '{brand_id}' imported successfully.",
        page_id=saved.id,
    )
