from ..exceptions import InvariantViolation
from ..schema import BrandPage


def assert_brand_page(page: BrandPage) -> None:
    if not page.brand_id:
        raise InvariantViolation("Brand is required.")

    if any(ch.isspace() or ch == "/" for ch in page.brand_id):
        raise InvariantViolation(
            f"Brand id must be a single path segment: {page.brand_id!r}"
        )

    if not page.brand_name:
        raise InvariantViolation("Brand name is required.")

    if page.products is not None:
        ids = [item.id for item in page.products.items if item.id]
        if len(ids) != len(set(ids)):
            raise InvariantViolation(f"Product item ids must be unique: {ids}")
