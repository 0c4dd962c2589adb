"""Tests for the snapshot builder and reference data validation."""

import pytest

from etl import build_snapshot, validate_reference_data
from resolver.errors import StoreUnavailableError
from resolver.repositories import db
from resolver.repositories.data_tables import DataTableRepository
from resolver.repositories.db import DuckDBStore
from resolver.repositories.geography import GeographyRepository
from resolver.services.data_tables import DataTableService


class TestBuildSnapshot:
    def test_copies_all_tables(self, duckdb_store, tmp_path):
        counts = build_snapshot(duckdb_store, tmp_path / "census.duckdb")
        assert counts == {
            "summary_levels": 7,
            "geographies": 9,
            "years": 3,
            "datasets": 4,
            "data_tables": 5,
            "data_table_datasets": 8,
        }

    def test_snapshot_answers_like_source(self, duckdb_store, tmp_path):
        path = tmp_path / "census.duckdb"
        build_snapshot(duckdb_store, path)

        snapshot = DuckDBStore(path, read_only=True)
        try:
            assert GeographyRepository(snapshot).search("Philadelphia") == GeographyRepository(duckdb_store).search(
                "Philadelphia"
            )
            tables = DataTableService(DataTableRepository(snapshot)).search(table_id_prefix="B16005")
            assert [t.data_table_id for t in tables] == ["B16005", "B16005D"]
        finally:
            snapshot.close()

    def test_replaces_existing_file(self, duckdb_store, tmp_path):
        path = tmp_path / "census.duckdb"
        build_snapshot(duckdb_store, path)
        assert build_snapshot(duckdb_store, path)["geographies"] == 9

    def test_missing_snapshot(self, tmp_path):
        with pytest.raises(StoreUnavailableError):
            DuckDBStore(tmp_path / "missing.duckdb", read_only=True)


class TestValidation:
    def test_seed_data_is_valid(self, duckdb_store):
        result = validate_reference_data(duckdb_store)
        assert result["valid"], result["issues"]
        assert result["stats"]["geographies"] == 9
        assert result["stats"]["unranked_summary_levels"] == 1

    def test_reports_orphans(self):
        # bare tables without foreign keys, as a hand-loaded database might have
        store = DuckDBStore(":memory:", read_only=False)
        for statement in (
            "CREATE TABLE summary_levels (id INTEGER, code VARCHAR, hierarchy_level INTEGER)",
            "CREATE TABLE geographies (id INTEGER, summary_level_code VARCHAR)",
            "CREATE TABLE datasets (id INTEGER)",
            "CREATE TABLE data_tables (id INTEGER)",
            "CREATE TABLE data_table_datasets (id INTEGER, dataset_id INTEGER, data_table_id INTEGER)",
            "INSERT INTO summary_levels VALUES (1, '040', 2)",
            "INSERT INTO geographies VALUES (1, '040'), (2, '999'), (3, NULL)",
            "INSERT INTO datasets VALUES (1)",
            "INSERT INTO data_tables VALUES (1)",
            "INSERT INTO data_table_datasets VALUES (1, 1, 1), (2, 1, 7), (3, 9, 1)",
        ):
            store.execute(statement)

        result = validate_reference_data(store)
        store.close()

        assert not result["valid"]
        assert result["stats"]["orphan_geographies"] == 1
        assert result["stats"]["orphan_table_links"] == 2
        assert len(result["issues"]) == 2


class TestStore:
    def test_similarity_function_registered(self):
        store = DuckDBStore(":memory:", read_only=False)
        score = store.execute("SELECT similarity('word', 'words')").fetchone()[0]
        store.close()
        assert score == pytest.approx(0.8)

    def test_health_check(self):
        store = DuckDBStore(":memory:", read_only=False)
        assert store.health_check()
        store.close()
        assert not store.health_check()

    def test_closed_store_is_unavailable(self):
        store = DuckDBStore(":memory:", read_only=False)
        store.close()
        with pytest.raises(StoreUnavailableError):
            store.execute("SELECT 1")

    def test_init_tables_is_idempotent(self):
        store = DuckDBStore(":memory:", read_only=False)
        store.init_tables()
        store.init_tables()
        count = store.execute("SELECT COUNT(*) FROM summary_levels").fetchone()[0]
        store.close()
        assert count == 0


class TestProcessStores:
    @pytest.fixture
    def snapshot_settings(self, duckdb_store, tmp_path, monkeypatch):
        db.close_store()
        path = tmp_path / "census.duckdb"
        build_snapshot(duckdb_store, path)
        monkeypatch.setattr(db, "STORE_BACKEND", "duckdb")
        monkeypatch.setattr(db, "SNAPSHOT_PATH", str(path))
        monkeypatch.setattr(db, "CACHE_DB_PATH", str(tmp_path / "cache.duckdb"))
        yield path
        db.close_store()

    def test_get_store_is_shared(self, snapshot_settings):
        assert db.get_store() is db.get_store()
        assert db.get_store().read_only

    def test_reconnect_replaces_store(self, snapshot_settings):
        first = db.get_store()
        second = db.reconnect_store()

        assert second is not first
        assert not first.health_check()
        assert second.health_check()
        assert GeographyRepository(second).search("Pennsylvania")[0].name == "Pennsylvania"

    def test_cache_store_is_writable(self, snapshot_settings):
        cache = db.get_cache_store()
        assert cache is not db.get_store()
        assert cache.execute("SELECT COUNT(*) FROM census_data_cache").fetchone()[0] == 0
