from datetime import datetime, timezone
import uuid
from brand_cms.extensions import db


def local_time_now():
    return datetime.now(timezone.utc).astimezone()


def new_id() -> str:
    return str(uuid.uuid4())


class BaseModel(db.Model):
    """Uuid string primary key plus creation / modification timestamps."""

    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=new_id, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=local_time_now, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=local_time_now, onupdate=local_time_now, index=True)
