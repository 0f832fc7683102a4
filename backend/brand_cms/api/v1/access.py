from flask import jsonify
from flask_jwt_extended import jwt_required

from brand_cms.application.access.module_visibility import get_module_visibility
from brand_cms.application.access.summary import access_summary
from brand_cms.utils.decorators import actor_required
from brand_cms.utils.identity import current_actor
from . import v1_bp


@v1_bp.route("/access/me", methods=["GET"])
@jwt_required()
@actor_required
async def access_me():
    actor = current_actor()
    visibility = await get_module_visibility()

    summary = access_summary(actor, visibility)
    summary["id"] = actor.id
    return jsonify(summary)
