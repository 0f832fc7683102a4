import asyncio
from typing import Optional
from flask import Flask, current_app
from brand_cms.extensions import db
from brand_cms.models.media_asset import MediaAsset


class MediaAssetResolver:
    """
    Resolves an opaque media reference (a MediaAsset id) to a displayable URL.

    Each lookup runs in a worker thread under its own app context, so the
    event loop stays free and a caller's timeout can abandon a slow lookup.
    A missing or unfinished asset resolves to None so the renderer shows a
    placeholder.
    """

    def __init__(self, app: Optional[Flask] = None):
        self.app = app or current_app._get_current_object()

    def _lookup(self, ref: str) -> Optional[str]:
        with self.app.app_context():
            asset = db.session.get(MediaAsset, ref)
            if asset is None:
                current_app.logger.info(f"Media asset {ref} not found")
                return None
            return asset.url or None

    async def resolve(self, ref: str) -> Optional[str]:
        if not ref or not isinstance(ref, str):
            return None

        return await asyncio.to_thread(self._lookup, ref)
