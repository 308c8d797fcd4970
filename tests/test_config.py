import json
import unittest

import pytest

from image_fixture_generator.config import ImageGenConfig, load_config, resolve_config


class TestResolveConfig(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(resolve_config({}), ImageGenConfig())

    def test_defaults(self):
        config = ImageGenConfig()
        self.assertEqual(config.filename, "example")
        self.assertEqual(config.width, 1000)
        self.assertEqual(config.height, 300)
        self.assertEqual(config.out_dir, "./output")

    def test_all_fields(self):
        config = resolve_config({"filename": "pic", "width": 64, "height": 32, "outDir": "/tmp/fixtures"})
        self.assertEqual(config, ImageGenConfig("pic", 64, 32, "/tmp/fixtures"))

    def test_partial_override(self):
        config = resolve_config({"width": 500})
        self.assertEqual(config, ImageGenConfig(width=500))

    def test_wrong_type_falls_back_individually(self):
        config = resolve_config({"width": "big", "height": 20, "filename": "ok"})
        self.assertEqual(config.width, 1000)
        self.assertEqual(config.height, 20)
        self.assertEqual(config.filename, "ok")
        self.assertEqual(config.out_dir, "./output")

    def test_unknown_keys_ignored(self):
        self.assertEqual(resolve_config({"colour": "red", "out_dir": "x"}), ImageGenConfig())

    def test_non_positive_sizes_rejected(self):
        config = resolve_config({"width": 0, "height": -5})
        self.assertEqual((config.width, config.height), (1000, 300))

    def test_booleans_are_not_sizes(self):
        self.assertEqual(resolve_config({"width": True}).width, 1000)

    def test_integral_float_accepted(self):
        self.assertEqual(resolve_config({"width": 500.0}).width, 500)
        self.assertIsInstance(resolve_config({"width": 500.0}).width, int)

    def test_fractional_float_rejected(self):
        self.assertEqual(resolve_config({"height": 12.5}).height, 300)

    def test_empty_strings_rejected(self):
        config = resolve_config({"filename": "", "outDir": ""})
        self.assertEqual((config.filename, config.out_dir), ("example", "./output"))

    def test_non_object_json(self):
        self.assertEqual(resolve_config([1, 2, 3]), ImageGenConfig())
        self.assertEqual(resolve_config(None), ImageGenConfig())


def test_load_config_no_path(capsys):
    assert load_config(None) == ImageGenConfig()
    captured = capsys.readouterr()
    assert "using defaults" in captured.out
    assert "Configuration:" in captured.out


def test_load_config_missing_file(tmp_path, capsys):
    assert load_config(str(tmp_path / "nope.json")) == ImageGenConfig()
    assert "file not found" in capsys.readouterr().out


def test_load_config_partial(tmp_path, capsys):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"width": 500}), encoding="utf-8")

    config = load_config(str(cfg))

    assert config == ImageGenConfig(width=500)
    assert f"Loaded configuration from: {cfg}" in capsys.readouterr().out


def test_load_config_invalid_json(tmp_path, capsys):
    cfg = tmp_path / "broken.json"
    cfg.write_text("{width: 500,", encoding="utf-8")

    config = load_config(str(cfg))

    assert config == ImageGenConfig()
    captured = capsys.readouterr()
    assert "Failed to parse config JSON" in captured.err


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"filename": "a", "width": "big"}, ImageGenConfig(filename="a")),
        ({"outDir": "out", "height": 10}, ImageGenConfig(height=10, out_dir="out")),
    ],
)
def test_load_config_mixed_validity(tmp_path, payload, expected):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps(payload), encoding="utf-8")
    assert load_config(str(cfg)) == expected


@pytest.mark.parametrize("width", [1e30, 70000, 65536])
def test_oversized_width_rejected(width):
    assert resolve_config({"width": width, "height": 1}) == ImageGenConfig(height=1)


def test_largest_dimension_accepted():
    assert resolve_config({"height": 65535}).height == 65535


def test_load_config_prints_json_keys(capsys):
    load_config(None)
    out = capsys.readouterr().out
    assert "'outDir': './output'" in out
    assert "out_dir" not in out
