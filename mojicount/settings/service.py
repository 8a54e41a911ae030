"""Settings service: persists AppSettings and the last text in the kv_store.

The two values live under independent keys. Reads never fail: a missing,
corrupt, or invalid stored value yields the defaults (or an empty text).
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from mojicount.db.connection import Database
from mojicount.models import AppSettings
from mojicount.utils.json import dump_json, parse_json_object

logger = logging.getLogger(__name__)

SETTINGS_KEY = "text-count-tool-settings"
TEXT_KEY = "text-count-tool-text"
BUNDLE_VERSION = "1.0.0"


class ImportResult(BaseModel):
    success: bool
    error: str | None = None


class SettingsService:
    """Load and store client settings and text."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def load_settings(self) -> AppSettings:
        """Stored settings merged over the defaults."""
        raw = await self._db.get_value(SETTINGS_KEY)
        if raw is None:
            return AppSettings()
        stored = parse_json_object(raw)
        if stored is None:
            logger.warning("Ignoring corrupt settings entry under %r", SETTINGS_KEY)
            return AppSettings()
        merged = {**AppSettings().model_dump(), **stored}
        try:
            return AppSettings.model_validate(merged)
        except ValidationError as e:
            logger.warning("Ignoring invalid settings entry: %s", e.errors()[0]["msg"])
            return AppSettings()

    async def save_settings(self, settings: AppSettings) -> AppSettings:
        await self._db.set_value(SETTINGS_KEY, dump_json(settings.model_dump()))
        return settings

    async def update_settings(self, patch: dict[str, Any]) -> AppSettings:
        """Apply a partial update. Raises ValidationError for bad values."""
        current = await self.load_settings()
        updated = AppSettings.model_validate({**current.model_dump(), **patch})
        return await self.save_settings(updated)

    async def load_text(self) -> str:
        return await self._db.get_value(TEXT_KEY) or ""

    async def save_text(self, text: str) -> None:
        await self._db.set_value(TEXT_KEY, text)

    async def clear_all(self) -> None:
        await self._db.delete_keys(SETTINGS_KEY, TEXT_KEY)

    async def export_bundle(self) -> dict:
        """Settings and text in one JSON-ready document."""
        settings = await self.load_settings()
        return {
            "settings": settings.model_dump(),
            "text": await self.load_text(),
            "export_date": datetime.now(UTC).isoformat(),
            "version": BUNDLE_VERSION,
        }

    async def import_bundle(self, raw: str) -> ImportResult:
        """Restore a document produced by ``export_bundle``.

        Either part may be absent. Nothing is written unless the whole
        document is valid.
        """
        try:
            data = json.loads(raw)
        except ValueError as e:
            return ImportResult(success=False, error=str(e))
        if not isinstance(data, dict):
            return ImportResult(success=False, error="Bundle must be a JSON object")

        settings: AppSettings | None = None
        if data.get("settings"):
            try:
                settings = AppSettings.model_validate(data["settings"])
            except ValidationError as e:
                return ImportResult(success=False, error=str(e))

        text = data.get("text")
        if text is not None and not isinstance(text, str):
            return ImportResult(success=False, error='"text" must be a string')

        if settings is not None:
            await self.save_settings(settings)
        if text:
            await self.save_text(text)
        return ImportResult(success=True)
