# brand_cms/repositories/brand_pages.py
from typing import Any, Dict, List, Mapping, Optional

from brand_cms.domain.exceptions import PageNotFound
from brand_cms.domain.schema import BrandPage
from brand_cms.extensions import db
from brand_cms.models.brand_page import BrandPageRecord

# Keys held in dedicated columns rather than in the content document
_COLUMN_KEYS = {"id", "brandId", "brandName", "enabled", "order", "createdAt", "updatedAt"}


def _to_page(record: BrandPageRecord) -> BrandPage:
    data: Dict[str, Any] = dict(record.content or {})
    data.update({
        "id": record.id,
        "brandId": record.brand_id,
        "brandName": record.brand_name,
        "enabled": record.enabled,
        "order": record.order,
        "createdAt": record.created_at.isoformat() if record.created_at else None,
        "updatedAt": record.updated_at.isoformat() if record.updated_at else None,
    })
    return BrandPage.from_dict(data)


def _apply(record: BrandPageRecord, data: Mapping[str, Any]) -> None:
    record.brand_id = data["brandId"]
    record.brand_name = data["brandName"]
    record.enabled = data.get("enabled") is not False
    record.order = int(data.get("order") or 0)
    record.content = {k: v for k, v in data.items() if k not in _COLUMN_KEYS}


class BrandPageStore:
    """
    Document store for brand pages, keyed by page id.

    Writes are staged on the session; the caller owns the transaction.
    """

    async def list_pages(self) -> List[BrandPage]:
        records = (
            BrandPageRecord.query
            .order_by(BrandPageRecord.order.asc(), BrandPageRecord.created_at.asc())
            .all()
        )
        return [_to_page(record) for record in records]

    async def load_page(self, page_id: str) -> Optional[BrandPage]:
        record = db.session.get(BrandPageRecord, page_id)
        return _to_page(record) if record else None

    async def find_by_brand(self, brand_id: str, *, enabled_only: bool = False) -> Optional[BrandPage]:
        query = BrandPageRecord.query.filter_by(brand_id=brand_id)
        if enabled_only:
            query = query.filter_by(enabled=True)
        record = query.order_by(BrandPageRecord.created_at.asc()).first()
        return _to_page(record) if record else None

    async def save_page(self, page: BrandPage) -> str:
        """Insert a new page (no id) or replace an existing one; returns the id."""
        if page.id is None:
            record = BrandPageRecord()
            db.session.add(record)
        else:
            record = db.session.get(BrandPageRecord, page.id)
            if record is None:
                raise PageNotFound(f"Brand page {page.id} not found")

        _apply(record, page.to_dict())
        db.session.flush()  # ensures record.id is available
        return record.id

    async def update_page(self, page_id: str, partial: Mapping[str, Any]) -> BrandPage:
        record = db.session.get(BrandPageRecord, page_id)
        if record is None:
            raise PageNotFound(f"Brand page {page_id} not found")

        data = _to_page(record).to_dict()
        data.update(partial)
        # re-parse so a bad partial is rejected before anything is staged
        page = BrandPage.from_dict(data)

        _apply(record, page.to_dict())
        db.session.flush()
        return _to_page(record)

    async def delete_page(self, page_id: str) -> None:
        record = db.session.get(BrandPageRecord, page_id)
        if record is None:
            raise PageNotFound(f"Brand page {page_id} not found")
        db.session.delete(record)
