from functools import wraps

from brand_cms.application.access.module_visibility import get_module_visibility
from brand_cms.domain.access import resolve_module_access
from brand_cms.domain.exceptions import PermissionDenied
from .identity import current_actor


# Both decorators wrap async views and must sit below @jwt_required()
def actor_required(fn):
    @wraps(fn)
    async def wrapper(*args, **kwargs):
        current_actor()
        return await fn(*args, **kwargs)
    return wrapper


def module_required(module_id):
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            actor = current_actor()
            visibility = await get_module_visibility()

            if not resolve_module_access(actor.role, module_id, visibility):
                raise PermissionDenied(f"Module '{module_id}' is not available for your role")

            return await fn(*args, **kwargs)
        return wrapper
    return decorator
