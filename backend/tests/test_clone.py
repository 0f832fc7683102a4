import pytest

from brand_cms.domain.brand import Brand
from brand_cms.domain.clone import clone
from brand_cms.domain.exceptions import MalformedSource, SourceNotFound
from brand_cms.domain.schema import ProductItem
from brand_cms.domain.templates import BLANK, STANDARD, generate

SOIL_KING = Brand(id="soil-king", name="Soil King")
WELLNESS_CO = Brand(id="wellness-co", name="Wellness Co")


def _saved_soil_king_page():
    page = generate(SOIL_KING, STANDARD)
    page.id = "page-1"
    page.created_at = "2024-01-01T00:00:00+00:00"
    page.products.items = [
        ProductItem(
            id="p1",
            title="Soil King Rice",
            blurb="Soil King rice, grown with care.",
            image="asset-1",
            cta="Buy Soil King",
            href="/products/rice?brand=soil-king",
        ),
        ProductItem(id="p2", title="Flour", href=""),
    ]
    return page


def test_soil_king_standard_clone_to_wellness_co():
    source = _saved_soil_king_page()

    page = clone(source, WELLNESS_CO)

    assert page.id is None
    assert page.created_at is None
    assert page.brand_id == "wellness-co"
    assert page.brand_name == "Wellness Co"
    assert page.hero.title == "Wellness Co - Rooted in Goodness"
    assert page.hero.cta_link == "/products?brand=wellness-co"
    assert page.about.eyebrow == "★ About Wellness Co"
    assert page.why.eyebrow == "★ Why Wellness Co"
    assert page.why.cta_link == "/products?brand=wellness-co"
    assert page.products.title == "Explore Wellness Co Products"

    for _, section in page.sections():
        for paragraph in getattr(section, "paragraphs", []):
            assert "Soil King" not in paragraph

    first, second = page.products.items
    assert first.title == "Wellness Co Rice"
    assert first.blurb == "Wellness Co rice, grown with care."
    assert first.cta == "Buy Wellness Co"
    assert first.href == "/products/rice?brand=wellness-co"
    assert first.image == "asset-1"
    assert second.href == "/products?brand=wellness-co"


def test_clone_never_mutates_source():
    source = _saved_soil_king_page()
    before = source.to_dict()

    clone(source, WELLNESS_CO)

    assert source.to_dict() == before


def test_blank_clone_makes_no_spurious_text():
    page = clone(generate(SOIL_KING, BLANK), WELLNESS_CO)

    assert page.id is None
    assert page.brand_id == "wellness-co"
    assert page.hero.title == ""
    assert page.about.eyebrow == ""
    assert page.why.eyebrow == ""
    assert page.products.title == ""
    assert page.about.paragraphs == []


def test_source_without_brand_uses_fallback_name():
    source = {
        "about": {"paragraphs": ["Soil King is more than a brand."]},
        "hero": {"ctaLink": "/products?brand=soil-king"},
    }

    page = clone(source, WELLNESS_CO)

    assert page.about.paragraphs == ["Wellness Co is more than a brand."]
    assert page.hero.cta_link == "/products?brand=wellness-co"


def test_missing_source():
    with pytest.raises(SourceNotFound):
        clone(None, WELLNESS_CO)


def test_malformed_source():
    with pytest.raises(MalformedSource):
        clone(["not", "a", "page"], WELLNESS_CO)

    with pytest.raises(MalformedSource):
        clone({"brandId": "x", "about": {"paragraphs": 3}}, WELLNESS_CO)
