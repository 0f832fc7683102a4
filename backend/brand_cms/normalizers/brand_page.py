# brand_cms/normalizers/brand_page.py
from typing import Any, Dict, Mapping, Optional

from brand_cms.domain.schema import BrandPage, SECTION_NAMES

DEFAULT_HERO_TITLE = "Brand Title"
DEFAULT_PRODUCTS_CTA = "Know More"
DEFAULT_LINK = "#"


def _is_empty(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _fallback(value: Optional[str], default: str) -> str:
    return default if _is_empty(value) else value


def products_title_fallback(brand_name: Optional[str]) -> str:
    if _is_empty(brand_name):
        return "Explore Products"
    return f"Explore {brand_name} Products"


def normalize_brand_page_summary(page: BrandPage) -> Dict[str, Any]:
    """Listing row: identity and status only, no section content."""
    return {
        "id": page.id,
        "brandId": page.brand_id,
        "brandName": page.brand_name,
        "enabled": page.enabled,
        "order": page.order,
        "createdAt": page.created_at,
        "updatedAt": page.updated_at,
    }


def normalize_brand_page(page: BrandPage, admin: bool = False) -> Dict[str, Any]:
    """
    Serialize a brand page together with its effective styles.

    The stored document is returned untouched under "page"; "styles" carries
    every section's styles with defaults filled in, which is what a renderer
    must use. Admin payloads keep authoring values as-is, public payloads also
    fill content fallbacks.
    """
    data = page.to_dict()

    if not admin:
        _fill_content_fallbacks(data, page.brand_name)

    return {
        "page": data,
        "styles": {
            name: section.effective_styles()
            for name, section in page.sections()
        },
    }


def normalize_public_brand_page(
    page: BrandPage,
    assets: Mapping[str, Optional[str]],
) -> Dict[str, Any]:
    payload = normalize_brand_page(page, admin=False)
    payload["assets"] = dict(assets)
    payload["sections"] = [name for name in SECTION_NAMES if page.section(name) is not None]
    return payload


def _fill_content_fallbacks(data: Dict[str, Any], brand_name: str) -> None:
    hero = data.get("hero")
    if hero is not None:
        hero["title"] = _fallback(hero.get("title"), DEFAULT_HERO_TITLE)
        hero["ctaLink"] = _fallback(hero.get("ctaLink"), DEFAULT_LINK)

    for name in ("about", "standFor", "why"):
        section = data.get(name)
        if section is not None and not _is_empty(section.get("ctaText")):
            section["ctaLink"] = _fallback(section.get("ctaLink"), DEFAULT_LINK)

    products = data.get("products")
    if products is not None:
        products["title"] = _fallback(products.get("title"), products_title_fallback(brand_name))
        products["cta"] = _fallback(products.get("cta"), DEFAULT_PRODUCTS_CTA)
        for item in products.get("items", []):
            item["href"] = _fallback(item.get("href"), DEFAULT_LINK)
            item["cta"] = _fallback(item.get("cta"), products["cta"])
