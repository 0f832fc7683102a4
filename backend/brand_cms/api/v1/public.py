from flask import current_app, jsonify

from brand_cms.application.cms.public_brand_page import get_public_brand_page
from brand_cms.normalizers.brand_page import normalize_public_brand_page
from brand_cms.utils.media import MediaAssetResolver
from . import v1_bp


@v1_bp.route("/public/brands/<brand_id>", methods=["GET"])
async def public_brand_page(brand_id):
    page, assets = await get_public_brand_page(
        brand_id=brand_id,
        resolver=MediaAssetResolver(),
        timeout=current_app.config.get("ASSET_RESOLVE_TIMEOUT"),
    )
    return jsonify(normalize_public_brand_page(page, assets))
