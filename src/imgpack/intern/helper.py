# a helper module for the rest of the code.

import hashlib
import json
from pathlib import Path
import jsonschema
import toml
import os
import imgpack.intern.dbc as dbc


DEFAULT_CONFIG_FILE = "./imgpack.toml"

DEFAULTS: dict = {
    "input_root": "resources",
    "extension": "avif",
    "output_root": "out",
    "images_file": "image_base85.json",
    "hashes_file": "image_hash.json",
    "log_level": "INFO",
    "log_file": None,
}


def load_toml_config(config_file: Path) -> dict:
    """
    Load configuration from TOML file.

    Args:
        config_file (Path): Path to the configuration file

    Returns:
        dict: Configuration dictionary

    Raises:
        Raises an error if the file can't be read or is no valid TOML.
    """
    try:
        toml_config = toml.load(config_file)
    except (OSError, toml.TomlDecodeError) as e:
        dbc.raise_error({"msg": "CONFIG_ERROR", "path": str(config_file), "reason": str(e)})
    validate_config(toml_config)
    return toml_config


def validate_config(instance: dict) -> None:
    """
    Validate a configuration loaded from TOML against the schema.

    Args:
        instance (dict): The configuration to validate.

    Raises:
        Raises an error if validation fails.
    """
    try:
        jsonschema.validate(instance=instance, schema=_schema)
    except jsonschema.exceptions.ValidationError as e:
        dbc.raise_error({"msg": "VALIDATION_ERROR", "definition_of": "configuration", "error": e.message})


def get_settings(toml_config: dict, overrides: dict = None) -> dict:
    """
    Merges the defaults, the TOML configuration and the command line overrides into flat settings.
    Overrides with value None are ignored.

    Args:
        toml_config (dict): The validated TOML configuration, may be empty.
        overrides (dict, optional): Settings given on the command line.

    Returns:
        dict: The settings with all keys of DEFAULTS.
    """
    settings = dict(DEFAULTS)
    scan = toml_config.get("scan", {})
    output = toml_config.get("output", {})
    logging_config = toml_config.get("logging", {})
    settings["input_root"] = scan.get("input_root", settings["input_root"])
    settings["extension"] = scan.get("extension", settings["extension"])
    settings["output_root"] = output.get("output_root", settings["output_root"])
    settings["images_file"] = output.get("images_file", settings["images_file"])
    settings["hashes_file"] = output.get("hashes_file", settings["hashes_file"])
    settings["log_level"] = logging_config.get("level", settings["log_level"])
    settings["log_file"] = logging_config.get("file", settings["log_file"])
    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value
    settings["extension"] = settings["extension"].removeprefix(".")
    dbc.assert_true(settings["extension"], {"msg": "VALIDATION_ERROR", "definition_of": "extension", "error": "must not be empty"})
    return settings


def make_sha256_hash_of_bytes(bytes: bytes) -> str:
    """
    Computes a SHA-256 hash for the given bytes.

    Args:
        bytes (bytes): The bytes to hash.

    Returns:
        str: The SHA-256 hash as a lowercase hexadecimal string.
    """
    return hashlib.sha256(bytes).hexdigest()


# Construct an absolute path to the schema of the configuration and load it
def _load_schema(file_path):
    with open(file_path, 'r') as schema_file:
        return json.load(schema_file)


_schema_file_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schema-def-for-config.json")
_schema = _load_schema(_schema_file_path)
