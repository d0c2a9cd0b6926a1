import hashlib

import pytest

import imgpack.intern.dbc as dbc
from imgpack.intern import helper as h


def test_sha256_hash():
    assert h.make_sha256_hash_of_bytes(b"abc") == hashlib.sha256(b"abc").hexdigest()
    assert h.make_sha256_hash_of_bytes(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_load_toml_config(tmp_path):
    config_file = tmp_path / "imgpack.toml"
    config_file.write_text('[scan]\ninput_root = "images"\nextension = ".png"\n\n[logging]\nlevel = "DEBUG"\n')

    settings = h.get_settings(h.load_toml_config(config_file))

    assert settings["input_root"] == "images"
    assert settings["extension"] == "png"
    assert settings["log_level"] == "DEBUG"
    assert settings["output_root"] == "out"
    assert settings["images_file"] == "image_base85.json"
    assert settings["hashes_file"] == "image_hash.json"


def test_defaults_and_overrides():
    assert h.get_settings({}) == h.DEFAULTS
    settings = h.get_settings({"output": {"output_root": "a"}}, {"output_root": "b", "input_root": None})
    assert settings["output_root"] == "b"
    assert settings["input_root"] == "resources"


def test_invalid_toml(tmp_path):
    config_file = tmp_path / "imgpack.toml"
    config_file.write_text("[scan\n")
    with pytest.raises(dbc.ImgpackException) as e:
        h.load_toml_config(config_file)
    assert e.value.error_description["msg"] == "CONFIG_ERROR"


def test_missing_config_file(tmp_path):
    with pytest.raises(dbc.ImgpackException) as e:
        h.load_toml_config(tmp_path / "missing.toml")
    assert e.value.error_description["msg"] == "CONFIG_ERROR"


@pytest.mark.parametrize("config", [
    {"scan": {"unknown": 1}},
    {"scan": {"extension": "a/b"}},
    {"output": {"images_file": "sub/images.json"}},
    {"logging": {"level": "LOUD"}},
    {"other": {}},
])
def test_validate_config_fails(config):
    with pytest.raises(dbc.ImgpackException) as e:
        h.validate_config(config)
    assert e.value.error_description["msg"] == "VALIDATION_ERROR"


def test_validate_config_succeeds():
    h.validate_config({})
    h.validate_config({"scan": {"input_root": "r", "extension": "avif"}, "output": {"hashes_file": "h.json"}})


def test_empty_extension_override():
    with pytest.raises(dbc.ImgpackException):
        h.get_settings({}, {"extension": "."})
