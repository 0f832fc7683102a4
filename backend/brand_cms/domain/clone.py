"""
Derive a new brand page from an existing one.

The clone is built on a deep copy of the source and returned whole; the
source is never mutated and a failure never yields a half-substituted page.
"""
from typing import Any, Mapping, Union

from .brand import Brand
from .exceptions import MalformedSource, SourceNotFound
from .schema import BrandPage, ProductsSection, TextSection
from .templates import about_eyebrow, products_link, products_title, why_eyebrow

# Used when the source page does not record its own brand
FALLBACK_BRAND_NAME = "Soil King"
FALLBACK_BRAND_ID = "soil-king"

SourcePage = Union[BrandPage, Mapping[str, Any], None]


def _coerce_source(source: SourcePage) -> BrandPage:
    if source is None:
        raise SourceNotFound("Source page not found")
    if isinstance(source, BrandPage):
        return source
    if isinstance(source, Mapping):
        return BrandPage.from_dict(source)
    raise MalformedSource(f"Cannot clone from {type(source).__name__}")


def _replace_text(text: str, old: str, new: str) -> str:
    if not text or not old:
        return text
    return text.replace(old, new)


def _relink(link: str, old_id: str, new_id: str) -> str:
    if link and old_id and old_id in link:
        return link.replace(old_id, new_id)
    return products_link(new_id)


def clone(source: SourcePage, target: Brand) -> BrandPage:
    """
    Clone a page for another brand.

    - identity and storage timestamps are dropped
    - brand name occurrences in free text become the target name
    - links pointing at the source brand are retargeted, others are replaced
      with the target's product listing link
    - brand-bearing eyebrows and the products title are regenerated
    """
    page = _coerce_source(source).copy()

    old_name = page.brand_name or FALLBACK_BRAND_NAME
    old_id = page.brand_id or FALLBACK_BRAND_ID

    page.id = None
    page.created_at = None
    page.updated_at = None
    page.brand_id = target.id
    page.brand_name = target.name

    def swap(text: str) -> str:
        return _replace_text(text, old_name, target.name)

    if page.hero is not None:
        hero = page.hero
        hero.title = swap(hero.title)
        hero.title_line2 = swap(hero.title_line2)
        hero.lead_text = swap(hero.lead_text)
        hero.cta_text = swap(hero.cta_text)
        hero.cta_link = _relink(hero.cta_link, old_id, target.id)

    for section in (page.about, page.stand_for, page.why):
        if section is not None:
            _clone_text_section(section, swap, old_id, target)

    if page.about is not None and page.about.eyebrow:
        page.about.eyebrow = about_eyebrow(target.name)
    if page.why is not None and page.why.eyebrow:
        page.why.eyebrow = why_eyebrow(target.name)

    if page.products is not None:
        _clone_products(page.products, swap, old_id, target)

    return page


def _clone_text_section(section: TextSection, swap, old_id: str, target: Brand) -> None:
    section.eyebrow = swap(section.eyebrow)
    section.title = swap(section.title)
    section.title_line2 = swap(section.title_line2)
    section.paragraphs = [swap(paragraph) for paragraph in section.paragraphs]
    section.cta_text = swap(section.cta_text)
    section.cta_link = _relink(section.cta_link, old_id, target.id)


def _clone_products(products: ProductsSection, swap, old_id: str, target: Brand) -> None:
    if products.title:
        products.title = products_title(target.name)
    products.cta = swap(products.cta)

    for item in products.items:
        item.title = swap(item.title)
        item.blurb = swap(item.blurb)
        item.cta = swap(item.cta)
        item.href = _relink(item.href, old_id, target.id)

