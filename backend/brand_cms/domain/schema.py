"""
Brand page document shape and style defaulting.

A brand page is a sparse document: every section is optional and every style
property may be missing. STYLE_DEFAULTS is the one place where the visual
contract for "operator supplied nothing" lives; everything that renders a page
goes through effective_style() / fill_style_defaults().

Documents are stored and exchanged with camelCase keys (brandId, leadText,
backgroundImage1, ...). The dataclasses below carry snake_case attributes and
map to the stored keys through field metadata.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple

from .exceptions import MalformedSource

HERO = "hero"
ABOUT = "about"
STAND_FOR = "standFor"
WHY = "why"
PRODUCTS = "products"

SECTION_NAMES: Tuple[str, ...] = (HERO, ABOUT, STAND_FOR, WHY, PRODUCTS)

_TEXT_SECTION_DEFAULTS: Dict[str, Any] = {
    "backgroundColor": "#f5f6f8",
    "titleAlign": "left",
    "paragraphAlign": "left",
    "backgroundSize": "cover",
    "backgroundRepeat": "no-repeat",
    "backgroundPosition": "center center",
    "paddingTop": "140px",
    "paddingBottom": "140px",
    "eyebrowPadding": None,
    "paragraphLineHeight": None,
    "titleFontSize": None,
    "titleWidth": None,
}

# None means "no inline value, the stylesheet decides"
STYLE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    HERO: {
        "backgroundColor": "#f5f6f8",
        "titleAlign": "center",
        "leadTextAlign": "center",
        "ctaButtonAlign": "center",
        "bgImage1Size": "cover",
        "bgImage1Repeat": "no-repeat",
        "bgImage1Position": "center center",
        "bgImage2Size": "cover",
        "bgImage2Repeat": "no-repeat",
        "bgImage2Position": "center center",
        "titleMaxWidth": None,
        "titleFontSize": None,
        "leadTextMaxWidth": None,
        "leadTextFontSize": None,
        "buttonPadding": None,
        "buttonFontSize": None,
        "ctaButtonBgColor": None,
        "ctaButtonTextColor": None,
    },
    ABOUT: dict(_TEXT_SECTION_DEFAULTS),
    STAND_FOR: {**_TEXT_SECTION_DEFAULTS, "backgroundColor": "#ffffff"},
    WHY: {
        **_TEXT_SECTION_DEFAULTS,
        "buttonBgColor": "#323790",
        "buttonTextColor": "#FFFFFF",
        "buttonPadding": None,
        "buttonFontSize": None,
    },
    PRODUCTS: {
        "backgroundColor": "#f5f6f8",
        "titleAlign": "left",
        "backgroundSize": "cover",
        "backgroundRepeat": "no-repeat",
        "paddingTop": "140px",
        "paddingBottom": "140px",
        "titleFontSize": None,
        "titleWidth": None,
        "cardWidth": None,
        "cardGap": None,
        "imageWidth": None,
        "imageHeight": None,
        "imageBorderRadius": None,
        "productTitleFontSize": None,
    },
}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def effective_style(section_name: str, styles: Optional[Mapping[str, Any]], prop: str) -> Any:
    """
    Return the authored style value, or the documented default.

    Never fails: unknown sections and unknown properties default to None.
    """
    value = (styles or {}).get(prop)
    if _is_empty(value):
        return STYLE_DEFAULTS.get(section_name, {}).get(prop)
    return value


def fill_style_defaults(section_name: str, styles: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    filled = dict(STYLE_DEFAULTS.get(section_name, {}))
    for prop, value in (styles or {}).items():
        if not _is_empty(value):
            filled[prop] = value
    return filled


# -------------------------------------------------
# Typed records
# -------------------------------------------------

def _key(name: str):
    return {"key": name}


def _expect_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedSource(f"{where} must be a string")
    return value


def _expect_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedSource(f"{where} must be an object")
    return value


class _Record:
    """Shared camelCase <-> attribute mapping for the section dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "items":
                value = [item.to_dict() for item in value]
            elif isinstance(value, (list, dict)):
                value = copy.deepcopy(value)
            data[f.metadata.get("key", f.name)] = value
        return data

    @classmethod
    def from_dict(cls, raw: Any, where: str):
        data = _expect_mapping(raw, where)
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata.get("key", f.name)
            if key not in data:
                continue
            value = data[key]
            if f.name == "paragraphs":
                kwargs[f.name] = _parse_paragraphs(value, f"{where}.{key}")
            elif f.name == "items":
                kwargs[f.name] = _parse_items(value, f"{where}.{key}")
            elif f.name == "styles":
                kwargs[f.name] = dict(_expect_mapping(value or {}, f"{where}.styles"))
            else:
                kwargs[f.name] = _expect_str(value, f"{where}.{key}")
        return cls(**kwargs)


def _parse_paragraphs(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        raise MalformedSource(f"{where} must be a list of strings")
    return list(value)


def _parse_items(value: Any, where: str) -> List["ProductItem"]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedSource(f"{where} must be a list")
    return [ProductItem.from_dict(item, f"{where}[{index}]") for index, item in enumerate(value)]


class _Section(_Record):
    NAME: ClassVar[str] = ""
    styles: Dict[str, Any]

    def style(self, prop: str) -> Any:
        return effective_style(self.NAME, self.styles, prop)

    def effective_styles(self) -> Dict[str, Any]:
        return fill_style_defaults(self.NAME, self.styles)


@dataclass
class HeroSection(_Section):
    NAME: ClassVar[str] = HERO

    title: str = ""
    title_line2: str = field(default="", metadata=_key("titleLine2"))
    lead_text: str = field(default="", metadata=_key("leadText"))
    cta_text: str = field(default="", metadata=_key("ctaText"))
    cta_link: str = field(default="", metadata=_key("ctaLink"))
    background_image1: str = field(default="", metadata=_key("backgroundImage1"))
    background_image2: str = field(default="", metadata=_key("backgroundImage2"))
    styles: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TextSection(_Section):
    eyebrow: str = ""
    title: str = ""
    title_line2: str = field(default="", metadata=_key("titleLine2"))
    paragraphs: List[str] = field(default_factory=list)
    cta_text: str = field(default="", metadata=_key("ctaText"))
    cta_link: str = field(default="", metadata=_key("ctaLink"))
    styles: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AboutSection(TextSection):
    NAME: ClassVar[str] = ABOUT


@dataclass
class StandForSection(TextSection):
    NAME: ClassVar[str] = STAND_FOR


@dataclass
class WhySection(TextSection):
    NAME: ClassVar[str] = WHY


@dataclass
class ProductItem(_Record):
    id: str = ""
    title: str = ""
    blurb: str = ""
    image: str = ""
    cta: str = ""
    href: str = ""


@dataclass
class ProductsSection(_Section):
    NAME: ClassVar[str] = PRODUCTS

    title: str = ""
    cta: str = ""
    items: List[ProductItem] = field(default_factory=list)
    styles: Dict[str, Any] = field(default_factory=dict)


SECTION_TYPES = {
    HERO: HeroSection,
    ABOUT: AboutSection,
    STAND_FOR: StandForSection,
    WHY: WhySection,
    PRODUCTS: ProductsSection,
}

# attribute name on BrandPage for each stored section key
_SECTION_ATTRS = {
    HERO: "hero",
    ABOUT: "about",
    STAND_FOR: "stand_for",
    WHY: "why",
    PRODUCTS: "products",
}

_PAGE_KEYS = {"id", "brandId", "brandName", "enabled", "order", "styles", "createdAt", "updatedAt"}


@dataclass
class BrandPage:
    brand_id: str = ""
    brand_name: str = ""
    id: Optional[str] = None
    enabled: bool = True
    order: int = 0
    hero: Optional[HeroSection] = None
    about: Optional[AboutSection] = None
    stand_for: Optional[StandForSection] = None
    why: Optional[WhySection] = None
    products: Optional[ProductsSection] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # Keys this schema does not model (e.g. per-device dimensions), kept verbatim
    extra: Dict[str, Any] = field(default_factory=dict)

    def section(self, name: str) -> Optional[_Section]:
        return getattr(self, _SECTION_ATTRS[name])

    def set_section(self, name: str, section: Optional[_Section]) -> None:
        setattr(self, _SECTION_ATTRS[name], section)

    def sections(self) -> Iterator[Tuple[str, _Section]]:
        for name in SECTION_NAMES:
            section = self.section(name)
            if section is not None:
                yield name, section

    def copy(self) -> "BrandPage":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = copy.deepcopy(self.extra)
        if self.id is not None:
            data["id"] = self.id
        data.update({
            "brandId": self.brand_id,
            "brandName": self.brand_name,
            "enabled": self.enabled,
            "order": self.order,
        })
        for name, section in self.sections():
            data[name] = section.to_dict()
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, raw: Any) -> "BrandPage":
        """
        Parse a stored or submitted document.

        Raises MalformedSource when a section or its content has the wrong
        shape. Page-level legacy styles (styles.<section>) are folded into the
        section's own styles; section-level keys win.
        """
        data = _expect_mapping(raw, "page")

        legacy_styles = data.get("styles") or {}
        legacy_styles = _expect_mapping(legacy_styles, "page.styles")

        page = cls(
            id=data.get("id") or None,
            brand_id=_expect_str(data.get("brandId"), "page.brandId"),
            brand_name=_expect_str(data.get("brandName"), "page.brandName"),
            enabled=data.get("enabled") is not False,
            order=_parse_order(data.get("order")),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

        for name, section_type in SECTION_TYPES.items():
            section_styles = legacy_styles.get(name)
            if name not in data or data[name] is None:
                if section_styles:
                    section = section_type(styles=dict(_expect_mapping(section_styles, f"page.styles.{name}")))
                    page.set_section(name, section)
                continue

            section = section_type.from_dict(data[name], name)
            if section_styles:
                merged = dict(_expect_mapping(section_styles, f"page.styles.{name}"))
                merged.update(section.styles)
                section.styles = merged
            page.set_section(name, section)

        page.extra = {
            key: copy.deepcopy(value)
            for key, value in data.items()
            if key not in _PAGE_KEYS and key not in SECTION_TYPES
        }
        return page


def _parse_order(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        raise MalformedSource("page.order must be an integer")
