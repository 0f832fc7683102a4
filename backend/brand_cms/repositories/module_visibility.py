from datetime import datetime, timezone
from typing import Dict, Mapping, Optional

from brand_cms.extensions import db
from brand_cms.models.module_visibility import SETTINGS_DOC_ID, ModuleVisibilityRecord


class VisibilityStore:
    """The single shared module visibility document."""

    async def load_visibility_map(self) -> Optional[Dict[str, bool]]:
        record = db.session.get(ModuleVisibilityRecord, SETTINGS_DOC_ID)
        if record is None:
            return None
        return {
            module_id: value
            for module_id, value in (record.visibility or {}).items()
            if isinstance(value, bool)
        }

    async def save_visibility_map(self, visibility: Mapping[str, bool]) -> None:
        """Full-document upsert; callers merge unchanged keys beforehand."""
        record = db.session.get(ModuleVisibilityRecord, SETTINGS_DOC_ID)
        if record is None:
            record = ModuleVisibilityRecord()
            record.id = SETTINGS_DOC_ID
            db.session.add(record)

        record.visibility = dict(visibility)
        record.updated_at = datetime.now(timezone.utc)
        db.session.flush()
