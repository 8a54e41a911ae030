"""Tests for SettingsService persistence and corruption fallback."""

import json
import logging

import pytest
from pydantic import ValidationError

from mojicount.models import AppSettings
from mojicount.settings.service import SETTINGS_KEY, TEXT_KEY


class TestLoadSettings:
    async def test_missing_gives_defaults(self, settings_service):
        assert await settings_service.load_settings() == AppSettings()

    async def test_roundtrip(self, settings_service):
        saved = AppSettings(exclude_spaces=True, normalization="NFKC", debounce_delay=500)
        await settings_service.save_settings(saved)
        assert await settings_service.load_settings() == saved

    async def test_partial_entry_merged_over_defaults(self, settings_service, db):
        await db.set_value(SETTINGS_KEY, json.dumps({"exclude_spaces": True}))
        loaded = await settings_service.load_settings()
        assert loaded.exclude_spaces is True
        assert loaded.include_newlines is True
        assert loaded.debounce_delay == 300

    async def test_corrupt_json_gives_defaults(self, settings_service, db, caplog):
        await db.set_value(SETTINGS_KEY, "{not json")
        with caplog.at_level(logging.WARNING, logger="mojicount.settings.service"):
            assert await settings_service.load_settings() == AppSettings()
        assert "corrupt" in caplog.text

    async def test_non_object_json_gives_defaults(self, settings_service, db):
        await db.set_value(SETTINGS_KEY, "[1, 2, 3]")
        assert await settings_service.load_settings() == AppSettings()

    async def test_invalid_field_gives_defaults(self, settings_service, db):
        await db.set_value(SETTINGS_KEY, json.dumps({"normalization": "NFD"}))
        assert await settings_service.load_settings() == AppSettings()

    async def test_unknown_keys_ignored(self, settings_service, db):
        await db.set_value(SETTINGS_KEY, json.dumps({"theme": "dark", "auto_save": False}))
        loaded = await settings_service.load_settings()
        assert loaded.auto_save is False


class TestUpdateSettings:
    async def test_patch_keeps_other_fields(self, settings_service):
        await settings_service.save_settings(AppSettings(exclude_spaces=True))
        updated = await settings_service.update_settings({"normalization": "NFC"})
        assert updated.exclude_spaces is True
        assert updated.normalization == "NFC"
        assert await settings_service.load_settings() == updated

    async def test_invalid_patch_raises_and_writes_nothing(self, settings_service):
        with pytest.raises(ValidationError):
            await settings_service.update_settings({"debounce_delay": -1})
        assert await settings_service.load_settings() == AppSettings()


class TestText:
    async def test_missing_text_is_empty(self, settings_service):
        assert await settings_service.load_text() == ""

    async def test_text_roundtrip(self, settings_service):
        await settings_service.save_text("吾輩は猫である。\n名前はまだ無い。")
        assert await settings_service.load_text() == "吾輩は猫である。\n名前はまだ無い。"

    async def test_keys_independent(self, settings_service, db):
        await settings_service.save_text("keep me")
        await db.set_value(SETTINGS_KEY, "garbage")
        assert await settings_service.load_text() == "keep me"
        assert await db.get_value(TEXT_KEY) == "keep me"

    async def test_clear_all(self, settings_service):
        await settings_service.save_text("gone")
        await settings_service.save_settings(AppSettings(auto_save=False))
        await settings_service.clear_all()
        assert await settings_service.load_text() == ""
        assert await settings_service.load_settings() == AppSettings()


class TestBundle:
    async def test_export_contains_settings_and_text(self, settings_service):
        await settings_service.save_settings(AppSettings(exclude_spaces=True))
        await settings_service.save_text("本文")
        bundle = await settings_service.export_bundle()
        assert bundle["settings"]["exclude_spaces"] is True
        assert bundle["text"] == "本文"
        assert bundle["version"] == "1.0.0"
        assert "export_date" in bundle

    async def test_import_restores_exported_bundle(self, settings_service):
        await settings_service.save_settings(AppSettings(normalization="NFKC"))
        await settings_service.save_text("移動するテキスト")
        bundle = await settings_service.export_bundle()
        await settings_service.clear_all()

        result = await settings_service.import_bundle(json.dumps(bundle))
        assert result.success is True
        assert (await settings_service.load_settings()).normalization == "NFKC"
        assert await settings_service.load_text() == "移動するテキスト"

    async def test_import_malformed_json(self, settings_service):
        result = await settings_service.import_bundle("{oops")
        assert result.success is False
        assert result.error

    async def test_import_invalid_settings_writes_nothing(self, settings_service):
        raw = json.dumps({"settings": {"normalization": "NFD"}, "text": "x"})
        result = await settings_service.import_bundle(raw)
        assert result.success is False
        assert await settings_service.load_text() == ""

    async def test_import_text_only(self, settings_service):
        result = await settings_service.import_bundle(json.dumps({"text": "only text"}))
        assert result.success is True
        assert await settings_service.load_text() == "only text"
        assert await settings_service.load_settings() == AppSettings()
