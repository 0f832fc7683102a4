from typing import Callable, Dict

from .brand import Brand
from .schema import (
    AboutSection,
    BrandPage,
    HeroSection,
    ProductsSection,
    StandForSection,
    WhySection,
)

STANDARD = "standard"
MINIMAL = "minimal"
BLANK = "blank"

TEMPLATE_LEVELS = (STANDARD, MINIMAL, BLANK)

EYEBROW_MARK = "★"


def products_link(brand_id: str) -> str:
    return f"/products?brand={brand_id}"


def about_eyebrow(brand_name: str) -> str:
    return f"{EYEBROW_MARK} About {brand_name}"


def why_eyebrow(brand_name: str) -> str:
    return f"{EYEBROW_MARK} Why {brand_name}"


def products_title(brand_name: str) -> str:
    return f"Explore {brand_name} Products"


def _hero(brand: Brand) -> HeroSection:
    return HeroSection(
        title=f"{brand.name} - Rooted in Goodness",
        lead_text=(
            f"{brand.name} brings you products crafted with care, quality, "
            "and purity in every pack."
        ),
        cta_text="Explore Products",
        cta_link=products_link(brand.id),
    )


def _about(brand: Brand) -> AboutSection:
    return AboutSection(
        eyebrow=about_eyebrow(brand.name),
        title=f"Nurturing {brand.name}.",
        paragraphs=[
            f"{brand.name} is more than a brand, it is a commitment to quality.",
            (
                f"Created with a dedication to quality and purity, {brand.name} "
                "products are thoughtfully designed for everyday kitchens."
            ),
        ],
    )


def _stand_for(brand: Brand) -> StandForSection:
    return StandForSection(
        eyebrow=f"{EYEBROW_MARK} What We Stand For",
        title="From Nature to Nutrition,",
        title_line2="With Care.",
        paragraphs=[
            (
                f"Every {brand.name} product begins with a promise: natural "
                "ingredients, careful processing, and nutritional value."
            ),
            "Every pack reflects our commitment to your health and vitality.",
        ],
    )


def _why(brand: Brand) -> WhySection:
    return WhySection(
        eyebrow=why_eyebrow(brand.name),
        title="Because Quality,",
        title_line2="Matters Most.",
        paragraphs=[
            (
                f"{brand.name} focuses on what nourishes you. No compromises, "
                "no shortcuts, only products made with authentic quality."
            ),
        ],
        cta_text="Explore Our Products",
        cta_link=products_link(brand.id),
    )


def _products(brand: Brand) -> ProductsSection:
    # Items are curated by hand after generation
    return ProductsSection(title=products_title(brand.name), cta="Know More", items=[])


def _standard(brand: Brand) -> BrandPage:
    return BrandPage(
        brand_id=brand.id,
        brand_name=brand.name,
        hero=_hero(brand),
        about=_about(brand),
        stand_for=_stand_for(brand),
        why=_why(brand),
        products=_products(brand),
    )


def _minimal(brand: Brand) -> BrandPage:
    return BrandPage(
        brand_id=brand.id,
        brand_name=brand.name,
        hero=_hero(brand),
        about=_about(brand),
    )


def _blank(brand: Brand) -> BrandPage:
    return BrandPage(
        brand_id=brand.id,
        brand_name=brand.name,
        hero=HeroSection(),
        about=AboutSection(),
        stand_for=StandForSection(),
        why=WhySection(),
        products=ProductsSection(),
    )


_GENERATORS: Dict[str, Callable[[Brand], BrandPage]] = {
    STANDARD: _standard,
    MINIMAL: _minimal,
    BLANK: _blank,
}


def generate(brand: Brand, level: str) -> BrandPage:
    """
    Build a fresh, unsaved page for a brand.

    - standard: every section with placeholder copy
    - minimal: hero and about only
    - blank: every section present with empty content
    """
    generator = _GENERATORS.get(level)
    if generator is None:
        raise ValueError(f"Unknown template level: {level}")

    page = generator(brand)
    page.id = None
    page.enabled = True
    return page
