# tests/test_config.py
import json

import pytest

from word_suggester.utils.config_manager import DEFAULTS, Config


def test_defaults_without_file():
    cfg = Config()
    assert cfg["max_suggestions"] == 10
    assert cfg["max_distance"] == 2


def test_missing_file_is_not_created(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    assert cfg.data == DEFAULTS
    assert not p.exists()


def test_load_and_coerce(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"max_suggestions": "3", "unknown": 1, "max_distance": "x"}))
    cfg = Config(str(p))
    assert cfg["max_suggestions"] == 3
    assert cfg["max_distance"] == 2


def test_malformed_file_ignored(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("{not json")
    assert Config(str(p)).data == DEFAULTS


def test_set_and_save(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.set("max_distance", "1")
    assert json.loads(p.read_text())["max_distance"] == 1
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")


@pytest.mark.parametrize("key,val", [
    ("max_suggestions", 0),
    ("max_distance", -1),
    ("max_word_length", 0),
    ("max_words", 0),
])
def test_out_of_range_values_rejected(key, val):
    cfg = Config()
    with pytest.raises(ValueError):
        cfg.set(key, val, save=False)
    assert cfg[key] == DEFAULTS[key]


def test_out_of_range_values_in_file_ignored(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"max_suggestions": 0, "max_distance": -1, "max_words": 5}))
    cfg = Config(str(p))
    assert cfg["max_suggestions"] == 10
    assert cfg["max_distance"] == 2
    assert cfg["max_words"] == 5
    # zero distance is a valid setting
    cfg.set("max_distance", 0, save=False)
    assert cfg["max_distance"] == 0
