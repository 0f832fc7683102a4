from typing import List, Mapping, Optional

from brand_cms.domain.access import Actor
from brand_cms.domain.brand import Brand
from brand_cms.domain.exceptions import InvalidTransition, InvariantViolation, PageNotFound
from brand_cms.domain.lifecycle.page import EDITING, PageWorkflow
from brand_cms.domain.schema import BrandPage
from brand_cms.domain.templates import TEMPLATE_LEVELS
from brand_cms.repositories.brand_pages import BrandPageStore
from .delete_brand_page import delete_brand_page
from .import_brand_page import ImportResult, import_static_brand_page
from .save_brand_page import save_brand_page
from .toggle_brand_page import toggle_brand_page


class BrandPageLifecycle:
    """
    Sequences brand page operations for one actor.

    Drafting (template, clone, edit) goes through the PageWorkflow state
    machine; listing operations (delete, toggle) act on storage directly.
    """

    def __init__(
        self,
        actor: Actor,
        visibility: Mapping[str, bool],
        store: Optional[BrandPageStore] = None,
    ):
        self.actor = actor
        self.visibility = dict(visibility)
        self.store = store or BrandPageStore()
        self.workflow = PageWorkflow(actor.role, self.visibility)

    async def list_pages(self) -> List[BrandPage]:
        return await self.store.list_pages()

    async def get_page(self, page_id: str) -> BrandPage:
        page = await self.store.load_page(page_id)
        if page is None:
            raise PageNotFound(f"Brand page {page_id} not found")
        return page

    def draft_from_template(self, brand: Brand, level: str) -> BrandPage:
        if level not in TEMPLATE_LEVELS:
            raise InvariantViolation(f"Unknown template level: {level}")
        self.workflow.create_new()
        self.workflow.choose_brand(brand)
        return self.workflow.choose_level(level)

    async def draft_clone(self, source_id: str, brand: Brand) -> BrandPage:
        self.workflow.start_clone()
        self.workflow.choose_clone_source(await self.store.load_page(source_id))
        return self.workflow.choose_brand(brand)

    def open_draft(self, page: BrandPage) -> BrandPage:
        """Start editing a document supplied from outside (e.g. a submitted draft)."""
        return self.workflow.edit_existing(page)

    async def edit(self, page_id: str) -> BrandPage:
        return self.workflow.edit_existing(await self.get_page(page_id))

    async def save(self, page: Optional[BrandPage] = None) -> BrandPage:
        """Persist the document being edited (optionally replaced first)."""
        if self.workflow.state != EDITING or self.workflow.document is None:
            raise InvalidTransition(f"Nothing to save while {self.workflow.state}")

        if page is not None:
            self.workflow.update_document(page)

        saved = await save_brand_page(
            actor=self.actor,
            visibility=self.visibility,
            page=self.workflow.document,
            store=self.store,
        )
        self.workflow.saved()
        return saved

    def cancel(self) -> None:
        self.workflow.cancel()

    async def delete(self, page_id: str) -> None:
        await delete_brand_page(actor=self.actor, page_id=page_id, store=self.store)

    async def toggle_enabled(self, page_id: str, enabled: Optional[bool] = None) -> BrandPage:
        return await toggle_brand_page(
            actor=self.actor,
            page_id=page_id,
            enabled=enabled,
            store=self.store,
        )

    async def import_static(self, brand_id: str) -> ImportResult:
        return await import_static_brand_page(
            actor=self.actor,
            visibility=self.visibility,
            brand_id=brand_id,
            store=self.store,
        )
