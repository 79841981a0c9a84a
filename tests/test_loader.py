import json

import pytest

from colorhash.core.errors import ConfigurationError
from colorhash.palette import loader as CH_loader
from colorhash.palette import model as CH_model


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_yaml_file(tmp_path):
    path = write(tmp_path, "colors.yaml",
                 "saturations: [0.4, 0.6]\n"
                 "hue_ranges:\n"
                 "  - [0.0, 0.2]\n"
                 "  - [0.9, 0.5]\n")
    config = CH_loader.load_config(path)
    assert config.saturations == (0.4, 0.6)
    assert config.lightnesses == CH_model.create().lightnesses
    assert config.hue_ranges == ((0.0, 0.2), (0.9, 0.5))


def test_json_file(tmp_path):
    path = write(tmp_path, "colors.json", json.dumps({"lightnesses": [0.5]}))
    config = CH_loader.load_config(path)
    assert config.lightnesses == (0.5,)


def test_integers_become_floats(tmp_path):
    path = write(tmp_path, "colors.yml", "saturations: [0, 1]\n")
    assert CH_loader.load_config(path).saturations == (0.0, 1.0)


def test_base_is_kept(tmp_path):
    fn = lambda text: 1  # noqa: E731
    base = CH_model.create().with_hash_function(fn).with_lightnesses([0.3])
    path = write(tmp_path, "colors.yaml", "saturations: [0.4]\n")
    config = CH_loader.load_config(path, base=base)
    assert config.hash_function is fn
    assert config.lightnesses == (0.3,)
    assert config.saturations == (0.4,)


def test_empty_file_returns_base(tmp_path):
    path = write(tmp_path, "colors.yaml", "")
    assert CH_loader.load_config(path) == CH_model.create()


def test_empty_list_is_kept(tmp_path):
    path = write(tmp_path, "colors.yaml", "saturations: []\n")
    assert CH_loader.load_config(path).saturations == ()


def test_out_of_range_is_not_checked_here(tmp_path):
    path = write(tmp_path, "colors.yaml", "saturations: [4.0]\n")
    assert CH_loader.load_config(path).saturations == (4.0,)


@pytest.mark.parametrize("text", [
    "- 0.1\n- 0.2\n",
    "colours: [0.1]\n",
    "saturations: 0.5\n",
    "saturations: [0.5, high]\n",
    "lightnesses: [true]\n",
    "hue_ranges: [[0.1, 0.2, 0.3]]\n",
    "hue_ranges: [0.1, 0.2]\n",
    "hue_ranges: [[0.1, x]]\n",
    "saturations: [0.1\n",
    "1: a\nfoo: b\n",
])
def test_malformed_files(tmp_path, text):
    path = write(tmp_path, "colors.yaml", text)
    with pytest.raises(ConfigurationError):
        CH_loader.load_config(path)


def test_malformed_json(tmp_path):
    path = write(tmp_path, "colors.json", "{not json")
    with pytest.raises(ConfigurationError):
        CH_loader.load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CH_loader.load_config(str(tmp_path / "nope.yaml"))
