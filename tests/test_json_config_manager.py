"""Tests for JSON configuration persistence.

Author: Michael Economou
Date: 2026-10-06
"""

import json

from dropname.utils.shared.json_config_manager import (
    ConfigCategory,
    JSONConfigManager,
    SequenceConfig,
)


def test_missing_file_keeps_defaults(tmp_path):
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    assert manager.load() is True
    assert manager.get_category("sequence").get("next_value") == 1


def test_save_and_load_roundtrip(tmp_path):
    manager = JSONConfigManager("test", config_dir=tmp_path)
    sequence = SequenceConfig()
    manager.register_category(sequence)
    sequence.set("manual_increment", True)
    sequence.set("next_value", 42)
    assert manager.save() is True

    data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert data["sequence"]["next_value"] == 42
    assert data["_metadata"]["app_name"] == "test"

    other = JSONConfigManager("test", config_dir=tmp_path)
    other.register_category(SequenceConfig())
    assert other.load() is True
    assert other.get_category("sequence").get("next_value") == 42
    assert other.get_category("sequence").get("manual_increment") is True


def test_backup_written_on_second_save(tmp_path):
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    manager.save()
    manager.save()
    assert (tmp_path / "config.json.bak").exists()


def test_corrupt_file_reports_failure(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    assert manager.load() is False
    assert manager.get_category("sequence").get("start") == 1


def test_invalid_sequence_values_fall_back(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"sequence": {"next_value": "soon", "start": "7"}}), encoding="utf-8"
    )
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    manager.load()
    sequence = manager.get_category("sequence")
    assert sequence.get("next_value") == 1
    assert sequence.get("start") == 7


def test_dynamic_category():
    manager = JSONConfigManager("test")
    assert manager.get_category("extra") is None
    category = manager.get_category("extra", create_if_not_exists=True)
    assert isinstance(category, ConfigCategory)
    assert "extra" in manager.list_categories()


def test_category_reset():
    category = ConfigCategory("c", {"a": 1})
    category.update({"a": 2, "b": 3})
    assert category.to_dict() == {"a": 2, "b": 3}
    category.reset()
    assert category.to_dict() == {"a": 1}


def test_corrupt_file_recovered_from_backup(tmp_path):
    manager = JSONConfigManager("test", config_dir=tmp_path)
    sequence = SequenceConfig()
    manager.register_category(sequence)
    sequence.set("next_value", 9)
    manager.save()
    sequence.set("next_value", 10)
    manager.save()
    (tmp_path / "config.json").write_text("", encoding="utf-8")

    other = JSONConfigManager("test", config_dir=tmp_path)
    other.register_category(SequenceConfig())
    assert other.load() is True
    assert other.get_category("sequence").get("next_value") == 9


def test_bool_is_not_accepted_as_number(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"sequence": {"start": True, "manual_increment": 1}}), encoding="utf-8"
    )
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    manager.load()
    sequence = manager.get_category("sequence")
    assert sequence.get("start") == 1
    assert sequence.get("manual_increment") is True


def test_save_leaves_no_temp_files(tmp_path):
    manager = JSONConfigManager("test", config_dir=tmp_path)
    manager.register_category(SequenceConfig())
    manager.save()
    manager.save()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["config.json", "config.json.bak"]
