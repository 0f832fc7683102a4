from typing import Any, Dict, Mapping

from brand_cms.domain.access import (
    Actor,
    base_path_for_role,
    can_create,
    can_delete,
    can_manage_users,
    can_manage_visibility,
    quick_actions,
    visible_modules,
)


def access_summary(actor: Actor, visibility: Mapping[str, bool]) -> Dict[str, Any]:
    """What the admin shell needs to draw navigation for this actor."""
    return {
        "role": actor.role,
        "basePath": base_path_for_role(actor.role),
        "modules": visible_modules(actor.role, visibility),
        "quickActions": quick_actions(actor.role, visibility),
        "capabilities": {
            "canCreate": can_create(actor.role, visibility),
            "canDelete": can_delete(actor.role),
            "canManageUsers": can_manage_users(actor.role),
            "canManageVisibility": can_manage_visibility(actor.role),
        },
    }
