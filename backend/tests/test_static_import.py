import asyncio

import pytest

from brand_cms.application.cms.lifecycle import BrandPageLifecycle
from brand_cms.domain.exceptions import SourceNotFound
from brand_cms.domain.static_import import convert_static_page, legacy_source_for


def test_convert_soil_king_strips_markup():
    page = convert_static_page("soil-king")

    assert page.id is None
    assert page.brand_name == "Soil King"
    assert page.hero.title == "Rooted in Goodness,"
    assert page.hero.title_line2 == "Grown with Care"
    assert "<" not in page.hero.lead_text
    assert page.hero.background_image1 == "/static/brands/sk1.png"
    assert page.stand_for.title == "From Soil to Shelf,"
    assert page.stand_for.title_line2 == "With Care."
    assert page.why.cta_link == "/products?brand=soil-king"
    assert page.products.title == "Explore Soil King Products"
    assert page.products.items == []


def test_paragraph_line_breaks_collapse_to_spaces():
    page = convert_static_page("wellness")

    paragraph = page.stand_for.paragraphs[1]
    assert "<br" not in paragraph
    assert "  " not in paragraph
    assert paragraph.endswith("commitment to your wellness and vitality.")


def test_any_wellness_id_maps_to_wellness():
    key, legacy = legacy_source_for("wellness-plus")

    assert key == "wellness"
    assert convert_static_page("wellness-plus").brand_id == "wellness-plus"


def test_unknown_brand_has_no_static_source():
    with pytest.raises(SourceNotFound):
        convert_static_page("acme")


def test_import_refuses_to_overwrite(app, admin):
    lifecycle = BrandPageLifecycle(admin, {})

    first = asyncio.run(lifecycle.import_static("soil-king"))
    second = asyncio.run(lifecycle.import_static("soil-king"))

    assert first.success is True
    assert first.page_id is not None
    assert second.success is False
    assert second.page_id == first.page_id
    assert "already exists" in second.message
