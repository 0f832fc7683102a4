from typing import Optional
from brand_cms.extensions import db
from brand_cms.domain.access import Actor
from brand_cms.models.audit_log import AuditLog

def log_action(
    *,
    actor: Optional[Actor],
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    log = AuditLog()

    log.actor_id = actor.id if actor else None
    log.actor_role = actor.role if actor else None
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
