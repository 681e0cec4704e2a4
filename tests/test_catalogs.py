"""Tests for the creature and level catalogs."""

import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from fish_fiesta.game.conditions import ConditionType
from fish_fiesta.game.features import SizeCategory, WaterType
from fish_fiesta.game.level import LevelState
from fish_fiesta.game_data import CreatureCatalog, GameDataFileLoader, LevelCatalog, natural_sort_key
from fish_fiesta.settings import AppSettings

WriteJson = Callable[[Path, Any], Path]


class TestGameDataFileLoader:
    """Test record discovery and field accessors."""

    def test_discover_missing_directory(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert GameDataFileLoader().discover_ids(tmp_path / "missing") is None
        assert "does not exist" in caplog.text

    def test_discover_file_instead_of_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.json"
        file_path.write_text("{}")
        assert GameDataFileLoader().discover_ids(file_path) is None

    def test_read_invalid_json(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        assert GameDataFileLoader().read_json_file(broken) is None

    def test_read_non_object(self, tmp_path: Path, write_json: WriteJson) -> None:
        path = write_json(tmp_path / "list.json", ["a", "b"])
        assert GameDataFileLoader().read_json_file(path) is None

    def test_missing_fields_default(self, caplog: pytest.LogCaptureFixture) -> None:
        loader = GameDataFileLoader()
        with caplog.at_level(logging.WARNING):
            assert loader.get_str({}, "description") == ""
            assert loader.get_int({}, "minSize") == 0
            assert loader.get_list({}, "waterTypes") == []
        assert 'No value "description"' in caplog.text

    def test_non_array_list_field(self) -> None:
        assert GameDataFileLoader().get_list({"waterTypes": "fresh"}, "waterTypes") == []


class TestCreatureCatalog:
    """Test creature discovery and loading."""

    def test_list_ids_discovers_lazily(self, data_dir: Path) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        assert catalog.list_ids() == ("shark", "trout")

    def test_discover_is_idempotent(self, data_dir: Path, write_json: WriteJson) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        catalog.discover()
        write_json(data_dir / "fishes" / "guppy.json", {"minSize": 2, "maxSize": 6})
        catalog.discover()
        assert "guppy" not in catalog.list_ids()

    def test_missing_directory_gives_empty_catalog(self, tmp_path: Path) -> None:
        catalog = CreatureCatalog(tmp_path / "nothing")
        assert catalog.list_ids() == ()
        assert catalog.load_by_id("trout") is None

    def test_load_by_id(self, data_dir: Path) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        trout = catalog.load_by_id("trout")

        assert trout is not None
        assert trout.name == "Trout"
        assert trout.id == "trout"
        assert trout.notable_features == "Dark spots."
        assert trout.size.category is SizeCategory.SMALL
        assert trout.water_types == [WaterType.FRESH]
        assert catalog.current_creature is trout

    def test_load_replaces_current(self, data_dir: Path) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        catalog.load_by_id("trout")
        shark = catalog.load_by_id("shark")
        assert catalog.current_creature is shark

    def test_unknown_id_keeps_current(self, data_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        trout = catalog.load_by_id("trout")

        with caplog.at_level(logging.ERROR):
            assert catalog.load_by_id("kraken") is None

        assert catalog.current_creature is trout
        assert "Fish {kraken} not found" in caplog.text

    def test_each_load_is_fresh(self, data_dir: Path) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        assert catalog.load_by_id("trout") is not catalog.load_by_id("trout")

    def test_invalid_attribute_tokens_dropped(self, data_dir: Path, write_json: WriteJson) -> None:
        write_json(
            data_dir / "fishes" / "eel.json",
            {"minSize": 40, "maxSize": 90, "waterTypes": ["fresh", "brackish"], "waterSubtypes": ["swamp"]},
        )
        catalog = CreatureCatalog(data_dir / "fishes")
        eel = catalog.load_by_id("eel")

        assert eel is not None
        assert eel.water_types == [WaterType.FRESH]
        assert eel.water_subtypes == []
        assert eel.description == ""
        assert eel.water_temperatures == []

    def test_load_all_keeps_current(self, data_dir: Path) -> None:
        catalog = CreatureCatalog(data_dir / "fishes")
        creatures = catalog.load_all()
        assert [creature.id for creature in creatures] == ["shark", "trout"]
        assert catalog.current_creature is None


class TestLevelCatalogLoading:
    """Test level discovery and loading."""

    @pytest.fixture
    def catalog(self, app_settings: AppSettings) -> LevelCatalog:
        return LevelCatalog(app_settings.levels_path, app_settings.progress)

    def test_natural_order(self, data_dir: Path, write_json: WriteJson, app_settings: AppSettings) -> None:
        for level_id in ("level10", "level2"):
            write_json(data_dir / "levels" / f"{level_id}.json", {})
        catalog = LevelCatalog(app_settings.levels_path, app_settings.progress)
        assert catalog.list_level_ids() == ("level1", "level2", "level10")

    def test_natural_sort_key(self) -> None:
        assert sorted(["level10", "level9", "bonus"], key=natural_sort_key) == ["bonus", "level9", "level10"]

    def test_load_level(self, catalog: LevelCatalog) -> None:
        level = catalog.load_level_by_id("level1")

        assert level is not None
        assert dict(level.conditions) == {
            ConditionType.WATER_TYPE: ("FRESH",),
            ConditionType.SIZE: ("SMALL",),
        }
        assert level.fish_ids == ("trout", "shark")
        assert level.state is LevelState.NOT_STARTED
        assert catalog.active_level is level

    def test_unknown_level(self, catalog: LevelCatalog, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert catalog.load_level_by_id("level99") is None
        assert catalog.active_level is None
        assert "Level {level99} not found" in caplog.text

    def test_missing_levels_directory(self, tmp_path: Path, app_settings: AppSettings) -> None:
        catalog = LevelCatalog(tmp_path / "missing", app_settings.progress)
        assert catalog.list_level_ids() == ()

    @pytest.mark.parametrize(
        "record,reason",
        [
            ({"fishIDs": ["trout"]}, "no valid 'conditions' block"),
            ({"conditions": "fresh", "fishIDs": ["trout"]}, "no valid 'conditions' block"),
            ({"conditions": {}, "fishIDs": ["trout"]}, "No conditions were loaded"),
            ({"conditions": {"water_type": ["fresh"]}, "fishIDs": ["trout"]}, "No conditions were loaded"),
            ({"conditions": {"size": "small"}}, "no valid fish array"),
            ({"conditions": {"size": "small"}, "fishIDs": []}, "No fishes were loaded"),
        ],
    )
    def test_invalid_level_records(
        self,
        data_dir: Path,
        write_json: WriteJson,
        app_settings: AppSettings,
        caplog: pytest.LogCaptureFixture,
        record: dict,
        reason: str,
    ) -> None:
        """A broken record never produces a partial level."""
        write_json(data_dir / "levels" / "broken.json", record)
        catalog = LevelCatalog(app_settings.levels_path, app_settings.progress)
        catalog.load_level_by_id("level1")

        with caplog.at_level(logging.ERROR):
            assert catalog.load_level_by_id("broken") is None

        assert reason in caplog.text
        assert catalog.active_level is not None
        assert catalog.active_level.id == "level1"

    def test_close_active_level(self, catalog: LevelCatalog) -> None:
        catalog.load_level_by_id("level1")
        catalog.close_active_level()
        assert catalog.active_level is None


class TestLevelPersistence:
    """Test clear-then-set writes and session restore."""

    @pytest.fixture
    def catalog(self, app_settings: AppSettings) -> LevelCatalog:
        return LevelCatalog(app_settings.levels_path, app_settings.progress)

    def test_defaults_without_stored_state(self, catalog: LevelCatalog) -> None:
        assert not catalog.is_completed("level1")
        assert not catalog.is_failed("level1")
        assert not catalog.is_in_progress("level1")
        assert catalog.get_mistakes("level1") == 0
        assert catalog.get_fish_index("level1") == 0
        assert catalog.get_level_state("level1") is LevelState.NOT_STARTED

    def test_save_progress_round_trip(self, catalog: LevelCatalog) -> None:
        catalog.save_progress("level1", mistakes=2, fish_index=1)
        level = catalog.load_level_by_id("level1")

        assert level is not None
        assert level.in_progress
        assert level.mistakes == 2
        assert level.fish_index == 1
        assert not level.completed
        assert not level.failed
        assert catalog.get_level_state("level1") is LevelState.IN_PROGRESS

    def test_save_progress_survives_restart(self, settings_file: Path, data_dir: Path) -> None:
        first = AppSettings(settings_file=settings_file)
        first.data_path = data_dir
        LevelCatalog(first.levels_path, first.progress).save_progress("level1", 1, 1)

        second = AppSettings(settings_file=settings_file)
        level = LevelCatalog(second.levels_path, second.progress).load_level_by_id("level1")

        assert level is not None
        assert level.in_progress
        assert level.mistakes == 1
        assert level.fish_index == 1

    def test_mark_completed_overwrites_progress(self, catalog: LevelCatalog) -> None:
        catalog.save_progress("level1", mistakes=1, fish_index=1)
        catalog.mark_completed("level1", mistakes=1)

        assert catalog.is_completed("level1")
        assert not catalog.is_in_progress("level1")
        assert not catalog.is_failed("level1")
        assert catalog.get_mistakes("level1") == 1
        assert catalog.get_fish_index("level1") == 0
        assert catalog.get_level_state("level1") is LevelState.COMPLETED

    def test_mark_failed_overwrites_completed(self, catalog: LevelCatalog) -> None:
        catalog.mark_completed("level1", mistakes=0)
        catalog.mark_failed("level1", mistakes=3)

        assert catalog.is_failed("level1")
        assert not catalog.is_completed("level1")
        assert catalog.get_mistakes("level1") == 3
        assert catalog.get_level_state("level1") is LevelState.FAILED

    def test_save_progress_overwrites_failed(self, catalog: LevelCatalog) -> None:
        catalog.mark_failed("level1", mistakes=3)
        catalog.save_progress("level1", mistakes=0, fish_index=1)

        assert not catalog.is_failed("level1")
        assert catalog.is_in_progress("level1")
        assert catalog.get_mistakes("level1") == 0

    def test_clear_resets_everything(self, catalog: LevelCatalog) -> None:
        catalog.save_progress("level1", mistakes=2, fish_index=1)
        catalog.clear("level1")

        assert not catalog.is_in_progress("level1")
        assert not catalog.is_completed("level1")
        assert not catalog.is_failed("level1")
        assert catalog.get_mistakes("level1") == 0
        assert catalog.get_fish_index("level1") == 0

    def test_terminal_state_not_restored(self, catalog: LevelCatalog) -> None:
        """Completed and failed flags reset on every load."""
        catalog.mark_completed("level1", mistakes=2)
        level = catalog.load_level_by_id("level1")

        assert level is not None
        assert not level.completed
        assert not level.in_progress
        assert level.mistakes == 0
        assert level.fish_index == 0

    def test_failed_level_restarts_fresh(self, catalog: LevelCatalog) -> None:
        catalog.mark_failed("level1", mistakes=3)
        level = catalog.load_level_by_id("level1")

        assert level is not None
        assert not level.failed
        assert not level.in_progress
        assert level.mistakes == 0
        assert level.fish_index == 0
        assert level.state is LevelState.NOT_STARTED

    def test_stored_index_is_clamped(self, catalog: LevelCatalog) -> None:
        catalog.save_progress("level1", mistakes=0, fish_index=7)
        level = catalog.load_level_by_id("level1")
        assert level is not None
        assert level.fish_index == 2

    def test_levels_are_independent(self, catalog: LevelCatalog) -> None:
        catalog.save_progress("level1", mistakes=1, fish_index=1)
        catalog.mark_failed("level2", mistakes=3)

        assert catalog.is_in_progress("level1")
        assert not catalog.is_failed("level1")
        assert catalog.is_failed("level2")

    def test_persist_dispatches_by_state(self, catalog: LevelCatalog) -> None:
        level = catalog.load_level_by_id("level1")
        assert level is not None
        level.start()
        catalog.persist(level)
        assert catalog.is_in_progress("level1")

        level.session.completed = True
        catalog.persist(level)
        assert catalog.is_completed("level1")
        assert not catalog.is_in_progress("level1")
