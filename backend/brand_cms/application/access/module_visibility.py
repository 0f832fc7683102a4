import logging
from typing import Dict, Optional

from brand_cms.domain.access import Actor, Module, can_manage_visibility
from brand_cms.domain.exceptions import InvariantViolation, PermissionDenied, TransientIOFailure
from brand_cms.extensions import db
from brand_cms.repositories.module_visibility import VisibilityStore
from brand_cms.utils.audit import log_action
from brand_cms.utils.transaction import transactional
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def default_visibility() -> Dict[str, bool]:
    """Every module visible; the dashboard is never part of the map."""
    return {
        module_id: True
        for module_id in Module.ALL
        if module_id != Module.DASHBOARD
    }


async def get_module_visibility(store: Optional[VisibilityStore] = None) -> Dict[str, bool]:
    """
    Read the shared visibility map for gating.

    An absent document means "all defaults". A failed read is logged and
    also falls back to defaults so navigation keeps working.
    """
    store = store or VisibilityStore()
    try:
        visibility = await store.load_visibility_map()
    except (SQLAlchemyError, TransientIOFailure) as exc:
        db.session.rollback()
        logger.warning("Error fetching module visibility, using defaults: %s", exc)
        return default_visibility()

    if visibility is None:
        return default_visibility()
    return visibility


def _assert_manageable(actor: Actor, module_id: str) -> None:
    if not can_manage_visibility(actor.role):
        raise PermissionDenied("Only super admins can change module visibility")

    if module_id not in Module.ALL:
        raise InvariantViolation(f"Unknown module: {module_id}")

    if module_id == Module.DASHBOARD:
        raise InvariantViolation("The dashboard is always visible")


async def _load_for_write(store: VisibilityStore) -> Dict[str, bool]:
    # A failed read aborts the write; defaults are never written over the stored map
    try:
        current = await store.load_visibility_map()
    except SQLAlchemyError as exc:
        raise TransientIOFailure("Module visibility is unavailable, please retry.") from exc
    return default_visibility() if current is None else current


async def set_module_visibility(
    *,
    actor: Actor,
    module_id: str,
    visible: bool,
    store: Optional[VisibilityStore] = None,
) -> Dict[str, bool]:
    """
    Change one module's visibility.

    Read-modify-write: the current map is read, the single key merged, and
    the full document written back in one call.
    """
    _assert_manageable(actor, module_id)
    store = store or VisibilityStore()

    with transactional():
        current = await _load_for_write(store)
        updated = {**current, module_id: bool(visible)}
        await store.save_visibility_map(updated)

        log_action(
            actor=actor,
            action="module_visibility.set",
            entity_type="module",
            entity_id=module_id,
            payload={"visible": bool(visible)},
        )

    return updated


async def reset_module_visibility(
    *,
    actor: Actor,
    module_id: str,
    store: Optional[VisibilityStore] = None,
) -> Dict[str, bool]:
    """Drop a module's override so every role falls back to its static default."""
    _assert_manageable(actor, module_id)
    store = store or VisibilityStore()

    with transactional():
        current = await _load_for_write(store)
        updated = {key: value for key, value in current.items() if key != module_id}
        await store.save_visibility_map(updated)

        log_action(
            actor=actor,
            action="module_visibility.reset",
            entity_type="module",
            entity_id=module_id,
        )

    return updated
