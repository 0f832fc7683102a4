"""
Best-effort conversion of the legacy hand-coded brand pages.

The legacy pages were markup with inline <br/> and <span> emphasis. Their copy
is kept here in that raw form and converted one way into the section schema:
markup is stripped, a title line break splits into title / titleLine2, and
paragraph line breaks collapse into spaces.
"""
import html
import re
from typing import Any, Dict, List, Tuple

from .exceptions import SourceNotFound
from .schema import (
    AboutSection,
    BrandPage,
    HeroSection,
    ProductsSection,
    StandForSection,
    WhySection,
)

_BREAK = re.compile(r"<br\s*[^>]*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_SPACES = re.compile(r"\s+")

LEGACY_STATIC_PAGES: Dict[str, Dict[str, Any]] = {
    "soil-king": {
        "brandName": "Soil King",
        "hero": {
            "backgrounds": ["/static/brands/sk1.png", "/static/brands/sk2.png"],
            "titleHtml": 'Rooted in <span class="brand-hero__italic">Goodness</span>,<br />Grown with <span class="brand-hero__italic">Care</span>',
            "leadHtml": "Soil King brings you staples grown close to the soil,<br/>processed with care and packed for everyday kitchens.",
            "cta": {"label": "Explore Products", "href": "/products?brand=soil-king"},
        },
        "about": {
            "eyebrow": "★ About Soil King",
            "titleHtml": "Rooted in Goodness.",
            "paragraphsHtml": [
                "Soil King is more than a brand, it is a promise of purity.",
                "Built on UBC's dedication to quality, Soil King products<br/>bring farm-fresh goodness to every home.",
            ],
        },
        "standFor": {
            "eyebrow": "★ What We Stand For",
            "titleHtml": 'From Soil to Shelf, <br className="hide-sm" />With Care.',
            "paragraphsHtml": [
                "Every Soil King product begins with a promise: honest sourcing, careful processing, and lasting freshness.",
                "From rice and pulses to spices and flours, every pack<br/>reflects our respect for the land.",
            ],
        },
        "why": {
            "eyebrow": "★ Why Soil King",
            "titleHtml": 'Because Goodness, <br className="hide-sm" />Starts at the Root.',
            "paragraphsHtml": [
                "We focus on what matters. No compromises, no shortcuts, only<br/>authentic quality you can trust.",
            ],
            "cta": {"label": "Explore Our Products", "href": "/products?brand=soil-king"},
        },
        "products": {"titleHtml": "Explore Soil King<br /> Products"},
    },
    "wellness": {
        "brandName": "Wellness",
        "hero": {
            "backgrounds": ["/static/brands/br1.png", "/static/brands/br2.png"],
            "titleHtml": 'Nurturing <span class="brand-hero__italic">Wellness</span>,<br />One Product <span class="brand-hero__italic">at a Time</span>',
            "leadHtml": "Wellness by UBC brings you products designed for your health and vitality,<br/>crafted with care, quality, and your well-being in mind.",
            "cta": {"label": "Explore Products", "href": "/products?brand=wellness"},
        },
        "about": {
            "eyebrow": "★ About Wellness",
            "titleHtml": "Nurturing Wellness.",
            "paragraphsHtml": [
                "Wellness is more than a brand, it's a commitment to your health.",
                "Created with UBC's dedication to quality and purity, Wellness products are thoughtfully designed to support your active lifestyle and nutritional needs.",
            ],
        },
        "standFor": {
            "eyebrow": "★ What We Stand For",
            "titleHtml": 'From Nature to Nutrition, <br className="hide-sm" />With Care.',
            "paragraphsHtml": [
                "Every Wellness product begins with a promise: natural ingredients, careful processing, and nutritional value.",
                "From wholesome grains and premium spices to health-focused kitchen essentials, every pack<br/>reflects our commitment to your wellness and<br/>vitality.",
            ],
        },
        "why": {
            "eyebrow": "★ Why Wellness",
            "titleHtml": 'Because Your Health, <br className="hide-sm" />Matters Most.',
            "paragraphsHtml": [
                "We focus on what nourishes you. No compromises, no shortcuts, only products that support your wellness journey with natural goodness and<br/>authentic quality. Carefully crafted, trusted for health.",
            ],
            "cta": {"label": "Explore Our Products", "href": "/products?brand=wellness"},
        },
        "products": {"titleHtml": "Explore Wellness<br /> Products"},
    },
}


def _text(fragment: str) -> str:
    text = _TAG.sub("", _BREAK.sub(" ", fragment or ""))
    return _SPACES.sub(" ", html.unescape(text)).strip()


def _split_title(fragment: str) -> Tuple[str, str]:
    parts = _BREAK.split(fragment or "", maxsplit=1)
    first = _text(parts[0])
    second = _text(parts[1]) if len(parts) > 1 else ""
    return first, second


def _paragraphs(fragments: List[str]) -> List[str]:
    return [text for text in (_text(f) for f in fragments) if text]


def legacy_source_for(brand_id: str) -> Tuple[str, Dict[str, Any]]:
    """Find the legacy page for a brand id; any *wellness* id maps to Wellness."""
    key = (brand_id or "").strip().lower()
    if key in LEGACY_STATIC_PAGES:
        return key, LEGACY_STATIC_PAGES[key]
    if "wellness" in key:
        return "wellness", LEGACY_STATIC_PAGES["wellness"]
    raise SourceNotFound(f"No static page exists for brand '{brand_id}'")


def convert_static_page(brand_id: str) -> BrandPage:
    _, legacy = legacy_source_for(brand_id)

    hero = legacy["hero"]
    hero_title, hero_title2 = _split_title(hero["titleHtml"])
    backgrounds = list(hero.get("backgrounds", [])) + ["", ""]

    def text_section(section_type, raw: Dict[str, Any]):
        title, title2 = _split_title(raw.get("titleHtml", ""))
        cta = raw.get("cta") or {}
        return section_type(
            eyebrow=raw.get("eyebrow", ""),
            title=title,
            title_line2=title2,
            paragraphs=_paragraphs(raw.get("paragraphsHtml", [])),
            cta_text=cta.get("label", ""),
            cta_link=cta.get("href", ""),
        )

    return BrandPage(
        brand_id=brand_id,
        brand_name=legacy["brandName"],
        hero=HeroSection(
            title=hero_title,
            title_line2=hero_title2,
            lead_text=_text(hero.get("leadHtml", "")),
            cta_text=hero["cta"]["label"],
            cta_link=hero["cta"]["href"],
            background_image1=backgrounds[0],
            background_image2=backgrounds[1],
        ),
        about=text_section(AboutSection, legacy["about"]),
        stand_for=text_section(StandForSection, legacy["standFor"]),
        why=text_section(WhySection, legacy["why"]),
        products=ProductsSection(
            title=_text(legacy["products"]["titleHtml"]),
            cta="Know More",
            items=[],
        ),
    )
