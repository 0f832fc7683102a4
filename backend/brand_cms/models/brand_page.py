from brand_cms.extensions import db
from .base import BaseModel


class BrandPageRecord(BaseModel):
    __tablename__ = "brand_pages"

    brand_id = db.Column(db.String(120), nullable=False, index=True)
    brand_name = db.Column(db.String(200), nullable=False)
    enabled = db.Column(db.Boolean, nullable=False, default=True, index=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    # Section documents (hero, about, standFor, why, products) plus unmodelled keys
    content = db.Column(db.JSON, nullable=False, default=dict)
