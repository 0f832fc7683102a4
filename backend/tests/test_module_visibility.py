import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from brand_cms.application.access.module_visibility import (
    default_visibility,
    get_module_visibility,
    reset_module_visibility,
    set_module_visibility,
)
from brand_cms.domain.access import Module
from brand_cms.domain.exceptions import InvariantViolation, PermissionDenied, TransientIOFailure
from brand_cms.extensions import db
from brand_cms.models.audit_log import AuditLog
from brand_cms.repositories.module_visibility import VisibilityStore


class BrokenStore(VisibilityStore):
    async def load_visibility_map(self):
        raise OperationalError("SELECT", {}, Exception("database is locked"))


def test_absent_document_means_defaults(app):
    visibility = asyncio.run(get_module_visibility())

    assert visibility == default_visibility()
    assert Module.DASHBOARD not in visibility
    assert all(visibility.values())


def test_read_failure_falls_back_to_defaults(app):
    assert asyncio.run(get_module_visibility(BrokenStore())) == default_visibility()


def test_set_merges_single_key(app, super_admin):
    asyncio.run(set_module_visibility(actor=super_admin, module_id=Module.CAREERS, visible=False))
    asyncio.run(set_module_visibility(actor=super_admin, module_id=Module.CONTACT, visible=False))

    visibility = asyncio.run(get_module_visibility())

    assert visibility[Module.CAREERS] is False
    assert visibility[Module.CONTACT] is False
    assert visibility[Module.PRODUCTS] is True


def test_set_writes_audit_row(app, super_admin):
    asyncio.run(set_module_visibility(actor=super_admin, module_id=Module.CAREERS, visible=False))

    log = AuditLog.query.filter_by(action="module_visibility.set").one()
    assert log.entity_id == Module.CAREERS
    assert log.actor_id == super_admin.id
    assert log.payload == {"visible": False}


def test_reset_removes_override(app, super_admin):
    asyncio.run(set_module_visibility(actor=super_admin, module_id=Module.CAREERS, visible=False))

    visibility = asyncio.run(reset_module_visibility(actor=super_admin, module_id=Module.CAREERS))

    assert Module.CAREERS not in visibility
    assert Module.CAREERS not in asyncio.run(VisibilityStore().load_visibility_map())


def test_only_elevated_role_may_write(app, admin):
    with pytest.raises(PermissionDenied):
        asyncio.run(set_module_visibility(actor=admin, module_id=Module.CAREERS, visible=False))


@pytest.mark.parametrize("module_id", [Module.DASHBOARD, "not-a-module"])
def test_dashboard_and_unknown_modules_are_rejected(app, super_admin, module_id):
    with pytest.raises(InvariantViolation):
        asyncio.run(set_module_visibility(actor=super_admin, module_id=module_id, visible=False))


def test_write_after_failed_read_does_not_clobber(app, super_admin):
    with pytest.raises(TransientIOFailure):
        asyncio.run(set_module_visibility(
            actor=super_admin,
            module_id=Module.CAREERS,
            visible=False,
            store=BrokenStore(),
        ))

    assert asyncio.run(VisibilityStore().load_visibility_map()) is None


def test_read_failure_rolls_back_session(app, monkeypatch):
    rollbacks = []
    monkeypatch.setattr(db.session, "rollback", lambda: rollbacks.append(True))

    asyncio.run(get_module_visibility(BrokenStore()))

    assert rollbacks == [True]
