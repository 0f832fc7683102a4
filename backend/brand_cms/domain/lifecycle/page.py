from typing import Mapping, Optional, Set

from ..access import can_create
from ..brand import Brand
from ..clone import clone
from ..exceptions import InvalidTransition, PermissionDenied, SourceNotFound
from ..schema import BrandPage
from ..templates import generate

IDLE = "idle"
BRAND_SELECTION = "brand_selection"
TEMPLATE_SELECTION = "template_selection"
CLONE_SOURCE_SELECTION = "clone_source_selection"
EDITING = "editing"

# Explicit allowed workflow transitions; cancel (-> idle) is handled separately
ALLOWED_WORKFLOW_TRANSITIONS: dict[str, Set[str]] = {
    IDLE: {BRAND_SELECTION, CLONE_SOURCE_SELECTION, EDITING},
    CLONE_SOURCE_SELECTION: {BRAND_SELECTION},
    BRAND_SELECTION: {TEMPLATE_SELECTION, EDITING},
    TEMPLATE_SELECTION: {EDITING},
    EDITING: {IDLE},
}


def assert_workflow_transition(*, from_state: str, to_state: str) -> None:
    """
    Guards editing workflow transitions.
    Single source of truth for where a session may go next.
    """
    allowed = ALLOWED_WORKFLOW_TRANSITIONS.get(from_state, set())

    if to_state not in allowed:
        raise InvalidTransition(
            f"Illegal workflow transition: {from_state} → {to_state}"
        )


class PageWorkflow:
    """
    One operator's create / clone / edit session.

    The pending clone source travels with the session from
    choose_clone_source() to choose_brand(); nothing outside the workflow can
    see it. The document is only ever set together with the move to EDITING.
    """

    def __init__(self, role: str, visibility: Mapping[str, bool]):
        self.role = role
        self.visibility = visibility
        self.state = IDLE
        self.brand: Optional[Brand] = None
        self.document: Optional[BrandPage] = None
        self._clone_source: Optional[BrandPage] = None

    @property
    def cloning(self) -> bool:
        return self._clone_source is not None

    def _move(self, to_state: str) -> None:
        assert_workflow_transition(from_state=self.state, to_state=to_state)
        self.state = to_state

    def _require_create(self) -> None:
        if not can_create(self.role, self.visibility):
            raise PermissionDenied("You don't have permission to create brand pages.")

    def _enter_editing(self, document: BrandPage) -> BrandPage:
        self._move(EDITING)
        self.document = document
        self._clone_source = None
        return document

    def create_new(self) -> None:
        self._require_create()
        self._move(BRAND_SELECTION)

    def start_clone(self) -> None:
        self._require_create()
        self._move(CLONE_SOURCE_SELECTION)

    def choose_clone_source(self, source: Optional[BrandPage]) -> None:
        if source is None:
            raise SourceNotFound("Source page not found")
        self._move(BRAND_SELECTION)
        self._clone_source = source

    def choose_brand(self, brand: Brand) -> Optional[BrandPage]:
        """Pick the target brand; on the clone path this yields the document."""
        if self.state != BRAND_SELECTION:
            raise InvalidTransition(f"Cannot choose a brand while {self.state}")

        if self.cloning:
            document = clone(self._clone_source, brand)
            self.brand = brand
            return self._enter_editing(document)

        self._move(TEMPLATE_SELECTION)
        self.brand = brand
        return None

    def choose_level(self, level: str) -> BrandPage:
        if self.state != TEMPLATE_SELECTION or self.brand is None:
            raise InvalidTransition(f"Cannot choose a template while {self.state}")
        return self._enter_editing(generate(self.brand, level))

    def edit_existing(self, page: Optional[BrandPage]) -> BrandPage:
        if page is None:
            raise SourceNotFound("Page to edit was not loaded")
        return self._enter_editing(page.copy())

    def update_document(self, page: BrandPage) -> None:
        if self.state != EDITING:
            raise InvalidTransition(f"No document is being edited ({self.state})")
        self.document = page

    def saved(self) -> None:
        self._move(IDLE)
        self._reset()

    def cancel(self) -> None:
        self.state = IDLE
        self._reset()

    def _reset(self) -> None:
        self.brand = None
        self.document = None
        self._clone_source = None
