# brand_cms/api/v1/brand_pages.py
from flask import jsonify, request
from flask_jwt_extended import jwt_required

from brand_cms.application.access.module_visibility import get_module_visibility
from brand_cms.application.cms.lifecycle import BrandPageLifecycle
from brand_cms.domain.access import Module
from brand_cms.domain.brand import Brand
from brand_cms.domain.exceptions import InvariantViolation
from brand_cms.domain.schema import BrandPage
from brand_cms.domain.templates import STANDARD
from brand_cms.normalizers.brand_page import (
    normalize_brand_page,
    normalize_brand_page_summary,
)
from brand_cms.utils.decorators import module_required
from brand_cms.utils.identity import current_actor
from . import v1_bp


async def _lifecycle() -> BrandPageLifecycle:
    return BrandPageLifecycle(current_actor(), await get_module_visibility())


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")
    return data


# ------------------------
# Listing
# ------------------------

@v1_bp.route("/brand-pages", methods=["GET"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def list_brand_pages():
    lifecycle = await _lifecycle()
    pages = await lifecycle.list_pages()

    return jsonify({
        "items": [normalize_brand_page_summary(page) for page in pages]
    })


@v1_bp.route("/brand-pages/<page_id>", methods=["GET"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def get_brand_page(page_id):
    lifecycle = await _lifecycle()
    page = await lifecycle.get_page(page_id)

    return jsonify(normalize_brand_page(page, admin=True))


# ------------------------
# Drafts (nothing is persisted)
# ------------------------

@v1_bp.route("/brand-pages/templates", methods=["POST"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def draft_from_template():
    data = _json_body()
    brand = Brand.from_dict(data.get("brand"))
    level = data.get("level") or STANDARD

    lifecycle = await _lifecycle()
    draft = lifecycle.draft_from_template(brand, level)

    return jsonify(normalize_brand_page(draft, admin=True))


@v1_bp.route("/brand-pages/<page_id>/clone", methods=["POST"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def draft_clone(page_id):
    data = _json_body()
    brand = Brand.from_dict(data.get("brand"))

    lifecycle = await _lifecycle()
    draft = await lifecycle.draft_clone(page_id, brand)

    return jsonify(normalize_brand_page(draft, admin=True))


# ------------------------
# Persisting
# ------------------------

@v1_bp.route("/brand-pages", methods=["POST"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def create_brand_page():
    page = BrandPage.from_dict(_json_body())
    if page.id is not None:
        raise InvariantViolation("A new brand page must not carry an id")

    lifecycle = await _lifecycle()
    lifecycle.open_draft(page)
    saved = await lifecycle.save()

    return jsonify({
        "id": saved.id,
        "message": "Brand page created successfully",
        **normalize_brand_page(saved, admin=True),
    }), 201


@v1_bp.route("/brand-pages/<page_id>", methods=["PUT"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def update_brand_page(page_id):
    page = BrandPage.from_dict(_json_body())
    page.id = page_id

    lifecycle = await _lifecycle()
    await lifecycle.edit(page_id)
    saved = await lifecycle.save(page)

    return jsonify({
        "id": saved.id,
        "message": "Brand page updated successfully",
        **normalize_brand_page(saved, admin=True),
    })


@v1_bp.route("/brand-pages/<page_id>/enabled", methods=["PATCH"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def toggle_brand_page(page_id):
    data = request.get_json(silent=True) or {}

    enabled = data.get("enabled")
    if enabled is not None and not isinstance(enabled, bool):
        raise InvariantViolation("'enabled' must be true or false")

    lifecycle = await _lifecycle()
    page = await lifecycle.toggle_enabled(page_id, enabled)

    return jsonify(normalize_brand_page_summary(page))


@v1_bp.route("/brand-pages/<page_id>", methods=["DELETE"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def delete_brand_page(page_id):
    lifecycle = await _lifecycle()
    await lifecycle.delete(page_id)

    return jsonify({"message": "Brand page deleted successfully"})


@v1_bp.route("/brand-pages/import", methods=["POST"])
@jwt_required()
@module_required(Module.BRAND_PAGES)
async def import_brand_page():
    data = _json_body()
    brand_id = data.get("brandId")
    if not brand_id or not isinstance(brand_id, str):
        raise InvariantViolation("brandId is required")

    lifecycle = await _lifecycle()
    result = await lifecycle.import_static(brand_id.strip())

    return jsonify({
        "success": result.success,
        "message": result.message,
        "id": result.page_id,
    }), 201 if result.success else 200
