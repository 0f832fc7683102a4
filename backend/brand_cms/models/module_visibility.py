from brand_cms.extensions import db
from .base import BaseModel

SETTINGS_DOC_ID = "settings"


class ModuleVisibilityRecord(BaseModel):
    """Single shared document: module id -> visible."""

    __tablename__ = "module_visibility"

    visibility = db.Column(db.JSON, nullable=False, default=dict)
