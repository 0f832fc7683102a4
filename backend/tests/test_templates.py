import pytest

from brand_cms.domain.brand import Brand
from brand_cms.domain.templates import BLANK, MINIMAL, STANDARD, generate

SOIL_KING = Brand(id="soil-king", name="Soil King")


def test_standard_template_has_every_section():
    page = generate(SOIL_KING, STANDARD)

    assert page.id is None
    assert page.enabled is True
    assert page.brand_id == "soil-king"
    assert page.hero.title == "Soil King - Rooted in Goodness"
    assert page.hero.cta_link == "/products?brand=soil-king"
    assert page.about.eyebrow == "★ About Soil King"
    assert page.why.eyebrow == "★ Why Soil King"
    assert page.products.title == "Explore Soil King Products"
    assert page.products.cta == "Know More"
    assert page.products.items == []
    assert all("Soil King" in paragraph for paragraph in page.about.paragraphs)


def test_minimal_template_has_hero_and_about_only():
    page = generate(SOIL_KING, MINIMAL)

    assert [name for name, _ in page.sections()] == ["hero", "about"]


def test_blank_template_has_empty_sections():
    page = generate(SOIL_KING, BLANK)

    assert [name for name, _ in page.sections()] == ["hero", "about", "standFor", "why", "products"]
    assert page.hero.title == ""
    assert page.about.paragraphs == []
    assert page.products.items == []


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        generate(SOIL_KING, "fancy")
