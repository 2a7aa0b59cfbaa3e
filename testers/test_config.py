# -*- coding: utf-8 -*-
import json
import logging

from raytracer.utils.config import Config, DEFAULT_CONFIG


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(path)
    assert path.is_file()
    assert cfg["tracer"] == DEFAULT_CONFIG["tracer"]
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tracer": {"rays": 2}, "output": "out.png"}), encoding="utf-8")
    cfg = Config(path)
    assert cfg["tracer"]["rays"] == 2
    assert cfg["tracer"]["strategy"] == DEFAULT_CONFIG["tracer"]["strategy"]
    assert cfg["window"] == DEFAULT_CONFIG["window"]
    assert cfg.get("output") == "out.png"


def test_broken_file_falls_back_to_defaults(tmp_path, caplog):
    caplog.set_level(logging.ERROR, logger="raytracer")
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    cfg = Config(path)
    assert cfg["tracer"] == DEFAULT_CONFIG["tracer"]
    assert any("Failed to read config" in r.getMessage() for r in caplog.records)


def test_setitem_persists(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(path)
    cfg["output"] = "frame.png"
    assert Config(path)["output"] == "frame.png"


def test_defaults_are_not_shared(tmp_path):
    cfg = Config(tmp_path / "config.json")
    cfg["tracer"]["rays"] = 99
    assert DEFAULT_CONFIG["tracer"]["rays"] == 10
