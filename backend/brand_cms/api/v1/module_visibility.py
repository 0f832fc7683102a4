from flask import jsonify, request
from flask_jwt_extended import jwt_required

from brand_cms.application.access.module_visibility import (
    get_module_visibility,
    reset_module_visibility,
    set_module_visibility,
)
from brand_cms.domain.exceptions import InvariantViolation
from brand_cms.utils.decorators import actor_required
from brand_cms.utils.identity import current_actor
from . import v1_bp


@v1_bp.route("/module-visibility", methods=["GET"])
@jwt_required()
@actor_required
async def get_visibility():
    visibility = await get_module_visibility()
    return jsonify({"visibility": visibility})


@v1_bp.route("/module-visibility/<module_id>", methods=["PUT"])
@jwt_required()
@actor_required
async def put_visibility(module_id):
    data = request.get_json(silent=True) or {}

    visible = data.get("visible")
    if not isinstance(visible, bool):
        raise InvariantViolation("'visible' must be true or false")

    visibility = await set_module_visibility(
        actor=current_actor(),
        module_id=module_id,
        visible=visible,
    )
    return jsonify({"visibility": visibility})


@v1_bp.route("/module-visibility/<module_id>", methods=["DELETE"])
@jwt_required()
@actor_required
async def delete_visibility(module_id):
    visibility = await reset_module_visibility(
        actor=current_actor(),
        module_id=module_id,
    )
    return jsonify({"visibility": visibility})
