"""
Tests for snapshot persistence and degraded operation
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from lead_intel.core.exceptions import ConfigurationError, StorageError
from lead_intel.core.storage import (
    FileKeyValueStore,
    IKeyValueStore,
    InMemoryKeyValueStore,
    RedisKeyValueStore,
    SnapshotRepository,
    StorageKey,
    create_store,
)
from lead_intel.domains.analytics.models import AnalyticsSnapshot, PageView
from lead_intel.domains.analytics.services import EnhancedAnalyticsEngine
from lead_intel.domains.learning.models import LearningSnapshot
from lead_intel.domains.learning.services import AdaptiveLearningEngine

LEARNING_KEY = "lead_intel:test:adaptive-learning-data"
ANALYTICS_KEY = "lead_intel:test:enhanced-analytics-data"


class BrokenStore(IKeyValueStore):
    """Store whose every operation fails like an unavailable backend"""

    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        raise OSError("disk unavailable")

    def delete(self, key):
        raise OSError("disk unavailable")


class TestStorageKey:
    def test_build(self):
        assert StorageKey("site-a").build("adaptive-learning-data") == (
            "lead_intel:site-a:adaptive-learning-data"
        )


class TestLearningRoundTrip:
    def test_fresh_engine_restores_profile(self, store, unseeded_settings, clock):
        engine = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)
        for _ in range(3):
            engine.track_behavior("search_properties", "/listings", {"beds": 3})
        engine.track_behavior("view_property", "/listings/42")

        restored = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)

        assert restored.behaviors == engine.behaviors
        assert restored.get_user_profile() == engine.get_user_profile()
        assert restored.get_recommendations() == engine.get_recommendations()
        assert restored.patterns.keys() == engine.patterns.keys()

    def test_only_tail_is_persisted(self, store, unseeded_settings, clock):
        engine = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)
        for i in range(150):
            engine.track_behavior(f"action_{i}", "/listings")

        restored = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)

        assert len(restored.behaviors) == 100
        assert restored.behaviors[0].action == "action_50"
        assert restored.behaviors[-1].action == "action_149"

    def test_blob_layout(self, store, unseeded_settings, clock):
        engine = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)
        engine.track_behavior("view_property", "/listings")

        blob = json.loads(store.get(LEARNING_KEY))

        assert set(blob) == {"behaviors", "patterns", "recommendations", "lastUpdated"}
        key, pattern = blob["patterns"][0]
        assert key == "/listings:view_property"
        assert pattern["associatedActions"] == ["view_property"]


class TestAnalyticsRoundTrip:
    def test_session_and_report_restored(self, store, settings, clock):
        engine = EnhancedAnalyticsEngine(store=store, settings=settings, clock=clock)
        engine.set_user_id("lead-77")
        engine.track(PageView())
        engine.track_conversion(250000)

        restored = EnhancedAnalyticsEngine(store=store, settings=settings, clock=clock)

        assert restored.session_id == engine.session_id
        assert restored.user_id == "lead-77"
        assert restored.get_analytics_report() == engine.get_analytics_report()

    def test_blob_layout(self, store, settings, clock):
        engine = EnhancedAnalyticsEngine(store=store, settings=settings, clock=clock)
        engine.track(PageView())

        blob = json.loads(store.get(ANALYTICS_KEY))

        assert set(blob) == {"events", "sessionId", "userId", "lastUpdated"}
        assert blob["events"][0]["eventType"] == "page_view"
        assert blob["events"][0]["source"]["landingPage"] == "/"


class TestDegradedPersistence:
    def test_corrupt_blob_starts_empty(self, unseeded_settings, clock):
        store = InMemoryKeyValueStore({LEARNING_KEY: "{not json"})

        engine = AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)

        assert engine.behaviors == []
        diagnostics = engine.diagnostics()
        assert diagnostics.failures == 1
        assert diagnostics.last_error["error_code"] == "SNAPSHOT_CORRUPTED"
        assert diagnostics.last_error_at == clock()

    def test_schema_mismatch_is_corruption(self, settings, clock):
        store = InMemoryKeyValueStore({ANALYTICS_KEY: json.dumps({"events": [{"id": 1}]})})

        engine = EnhancedAnalyticsEngine(store=store, settings=settings, clock=clock)

        assert engine.events == []
        assert engine.diagnostics().last_error["error_code"] == "SNAPSHOT_CORRUPTED"

    def test_unavailable_store_never_raises(self, unseeded_settings, clock):
        engine = AdaptiveLearningEngine(
            store=BrokenStore(), settings=unseeded_settings, clock=clock
        )
        engine.track_behavior("view_property", "/listings")
        engine.reset()

        diagnostics = engine.diagnostics()
        assert engine.behaviors == []
        assert diagnostics.failures == 3
        assert diagnostics.last_error["error_code"] == "STORAGE_ERROR"
        assert diagnostics.last_error["details"]["operation"] == "delete"

    def test_save_reports_failure(self, settings, clock):
        engine = EnhancedAnalyticsEngine(store=BrokenStore(), settings=settings, clock=clock)

        assert engine.save() is False
        event = engine.track(PageView())
        assert engine.events == [event]


class TestSnapshotRepository:
    def test_missing_key_is_empty_success(self, store):
        result = SnapshotRepository(store, "missing", LearningSnapshot).load()

        assert result.ok
        assert result.value is None

    def test_clear(self, store):
        repository = SnapshotRepository(store, "k", AnalyticsSnapshot)
        repository.save(AnalyticsSnapshot(session_id="session_1"))

        assert repository.load().value.session_id == "session_1"
        assert repository.clear().ok
        assert store.get("k") is None


class TestFileStore:
    def test_set_get_delete(self, tmp_path):
        store = FileKeyValueStore(tmp_path / "snapshots")

        assert store.get(LEARNING_KEY) is None
        store.set(LEARNING_KEY, '{"behaviors": []}')

        assert store.get(LEARNING_KEY) == '{"behaviors": []}'
        assert (tmp_path / "snapshots" / "lead_intel_test_adaptive-learning-data.json").exists()

        store.delete(LEARNING_KEY)
        store.delete(LEARNING_KEY)
        assert store.get(LEARNING_KEY) is None

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        store.set("k", "one")
        store.set("k", "two")

        assert store.get("k") == "two"
        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]

    def test_engine_on_file_store(self, tmp_path, unseeded_settings, clock):
        store = FileKeyValueStore(tmp_path)
        AdaptiveLearningEngine(
            store=store, settings=unseeded_settings, clock=clock
        ).track_behavior("view_property", "/listings")

        restored = AdaptiveLearningEngine(
            store=FileKeyValueStore(tmp_path), settings=unseeded_settings, clock=clock
        )
        assert [b.action for b in restored.behaviors] == ["view_property"]


class TestRedisStore:
    def test_decodes_bytes(self):
        client = MagicMock()
        client.get.return_value = b'{"events": []}'

        assert RedisKeyValueStore(client).get("k") == '{"events": []}'
        client.get.assert_called_once_with("k")

    def test_set_and_delete_delegate(self):
        client = MagicMock()
        store = RedisKeyValueStore(client)

        store.set("k", "v")
        store.delete("k")

        client.set.assert_called_once_with("k", "v")
        client.delete.assert_called_once_with("k")

    def test_redis_errors_become_storage_errors(self):
        client = MagicMock()
        client.set.side_effect = RedisConnectionError("connection refused")

        with pytest.raises(StorageError) as exc_info:
            RedisKeyValueStore(client).set("k", "v")

        assert exc_info.value.details["operation"] == "set"

    def test_engine_degrades_when_redis_is_down(self, settings, clock):
        client = MagicMock()
        client.get.side_effect = RedisConnectionError("connection refused")

        engine = EnhancedAnalyticsEngine(
            store=RedisKeyValueStore(client), settings=settings, clock=clock
        )

        assert engine.events == []
        assert engine.diagnostics().failures == 1


class TestStoreFactory:
    def test_memory_backend(self):
        assert isinstance(create_store(SimpleNamespace(BACKEND="memory")), InMemoryKeyValueStore)

    def test_file_backend(self, tmp_path):
        store = create_store(SimpleNamespace(BACKEND="file", DIRECTORY=str(tmp_path)))

        assert isinstance(store, FileKeyValueStore)

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError):
            create_store(SimpleNamespace(BACKEND="s3"))
