# tests/test_transfer.py
"""Tests for export and import of the whole store."""

import pytest

from promptvault.exceptions import StorageError
from promptvault.models import VERSION_CLEANUP_THRESHOLD_KEY, Prompt, PromptVersion
from promptvault.schemas.prompts import VersionResponse
from promptvault.schemas.transfer import ExportData, PromptWithVersions
from promptvault.services import prompt_service
from promptvault.services.settings_service import get_setting, list_settings, set_setting
from promptvault.services.transfer_service import export_all, import_all


def _snapshot_rows(db):
    """Comparable view of every prompt and version row."""
    prompts = [
        (p.id, p.name, p.source, p.notes, p.tags, p.pinned, p.created_at, p.updated_at, p.current_version_id)
        for p in db.query(Prompt).order_by(Prompt.id)
    ]
    versions = [
        (v.id, v.prompt_id, v.version, v.content, v.created_at, v.parent_version_id)
        for v in db.query(PromptVersion).order_by(PromptVersion.id)
    ]
    return prompts, versions


@pytest.fixture
def populated(db):
    first = prompt_service.create_prompt(db, name="first", content="v1", source="s", notes="n", tags=["a", "编程"])
    prompt_service.update_prompt(db, first, name="first", content="v2", source="s", notes="n",
                                 tags=["a", "编程"], save_as_version=True)
    second = prompt_service.create_prompt(db, name="second", content="x")
    prompt_service.toggle_pin(db, second)
    set_setting(db, "theme", "dark")
    return first, second


class TestExportAll:
    """Tests for export_all()."""

    def test_exports_prompts_versions_settings(self, db, populated):
        first, second = populated

        data = export_all(db)

        assert [p.id for p in data.prompts] == [first, second]
        assert [v.version for v in data.prompts[0].versions] == ["1.0.1", "1.0.0"]
        assert data.prompts[0].tags == ["a", "编程"]
        assert data.prompts[1].pinned is True
        assert data.settings == {VERSION_CLEANUP_THRESHOLD_KEY: "200", "theme": "dark"}
        assert data.export_time

    def test_empty_store(self, db):
        data = export_all(db)

        assert data.prompts == []
        assert VERSION_CLEANUP_THRESHOLD_KEY in data.settings


class TestImportAll:
    """Tests for import_all()."""

    def test_round_trip_reproduces_store(self, db, populated):
        before = _snapshot_rows(db)
        data = ExportData.model_validate_json(export_all(db).model_dump_json())

        import_all(db, data)

        assert _snapshot_rows(db) == before
        assert list_settings(db)["theme"] == "dark"

    def test_replaces_existing_prompts(self, db, populated):
        first, second = populated
        data = export_all(db)
        extra = prompt_service.create_prompt(db, name="extra", content="gone after import")

        import_all(db, data)

        ids = [p.id for p in prompt_service.list_prompts(db)]
        assert sorted(ids) == [first, second]
        assert extra not in ids
        assert prompt_service.get_prompt_versions(db, extra) == []

    def test_preserves_ids_and_lineage(self, db):
        data = ExportData(
            prompts=[
                PromptWithVersions(
                    id=42,
                    name="imported",
                    tags=["t"],
                    created_at="2024-01-01T00:00:00+00:00",
                    updated_at="2024-01-02T00:00:00+00:00",
                    current_version_id=101,
                    versions=[
                        VersionResponse(id=101, prompt_id=42, version="1.0.1", content="new",
                                        created_at="2024-01-02T00:00:00+00:00", parent_version_id=100),
                        VersionResponse(id=100, prompt_id=42, version="1.0.0", content="old",
                                        created_at="2024-01-01T00:00:00+00:00"),
                    ],
                )
            ],
            settings={},
            export_time="2024-01-03T00:00:00+00:00",
        )

        import_all(db, data)

        prompt = prompt_service.get_prompt(db, 42)
        assert prompt.content == "new"
        assert prompt.version == "1.0.1"
        assert prompt.tags == ["t"]
        assert db.get(PromptVersion, 101).parent_version_id == 100

        # New rows continue after the imported ids
        new_id = prompt_service.create_prompt(db, name="after", content="c")
        assert new_id > 42

    def test_settings_are_upserted(self, db, populated):
        data = export_all(db)
        data.settings = {VERSION_CLEANUP_THRESHOLD_KEY: "5", "locale": "zh"}

        import_all(db, data)

        assert get_setting(db, VERSION_CLEANUP_THRESHOLD_KEY) == "5"
        assert get_setting(db, "locale") == "zh"
        # Settings missing from the snapshot are kept
        assert get_setting(db, "theme") == "dark"

    def test_failure_leaves_store_unchanged(self, db, populated):
        """A version pointing at a prompt absent from the snapshot aborts the import."""
        before = _snapshot_rows(db)
        data = export_all(db)
        data.prompts[0].versions.append(
            VersionResponse(id=999, prompt_id=12345, version="1.0.0", content="orphan",
                            created_at="2024-01-01T00:00:00+00:00")
        )
        data.settings = {"theme": "light"}

        with pytest.raises(StorageError, match="Failed to import data"):
            import_all(db, data)

        assert _snapshot_rows(db) == before
        assert get_setting(db, "theme") == "dark"
