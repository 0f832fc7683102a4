from brand_cms.extensions import db
from .base import BaseModel


class MediaAsset(BaseModel):
    __tablename__ = "media_assets"

    filename = db.Column(db.String(255), nullable=False)
    content_type = db.Column(db.String(100), nullable=True)
    url = db.Column(db.String(1024), nullable=True)  # None until the upload is finalised
