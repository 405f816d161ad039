import json

import pytest

import tetris_config
from tetris_config import load_config


@pytest.fixture
def config(monkeypatch):
    copy = dict(tetris_config.CONFIG)
    monkeypatch.setattr(tetris_config, "CONFIG", copy)
    return copy


def test_defaults():
    c = tetris_config.CONFIG
    assert (c["BOARD_WIDTH"], c["BOARD_HEIGHT"]) == (10, 20)
    assert (c["DAS_MS"], c["ARR_MS"]) == (170, 50)
    assert tetris_config.POINTS["TETRIS"] == 800


def test_load_config_overrides(tmp_path, config):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"DAS_MS": 120, "BAG_SEED": 5}))
    load_config(str(path))
    assert config["DAS_MS"] == 120
    assert config["BAG_SEED"] == 5


def test_load_config_rejects_unknown_keys(tmp_path, config):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"DAS": 1}))
    with pytest.raises(KeyError):
        load_config(str(path))


def test_layout_follows_config(monkeypatch):
    from tetris_layout import compute_dims, next_slots
    monkeypatch.setitem(tetris_config.CONFIG, "CELL_SIZE", 20)
    d = compute_dims(10, 20)
    assert (d.board_w, d.board_h) == (200, 400)
    slots = next_slots(d, 3)
    assert len(slots) == 3
    assert slots[0][1] < slots[1][1] < slots[2][1]
