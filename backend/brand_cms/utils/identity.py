from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from brand_cms.domain.access import Actor, normalize_role
from brand_cms.domain.exceptions import Unauthenticated


def current_actor() -> Actor:
    """
    Resolve the actor behind the current request.

    Missing, expired or invalid tokens surface as Unauthenticated, never as
    a permission problem.
    """
    try:
        verify_jwt_in_request()
    except (JWTExtendedException, PyJWTError) as exc:
        raise Unauthenticated("Authentication required") from exc

    return Actor(id=get_jwt_identity(), role=normalize_role(get_jwt().get("role")))
