"""File names used when training on a folder of labelled images."""

from __future__ import annotations

RUN_NAMES = ("train", "test", "validate")


def safe_model_name(model) -> str:
    """Model name usable in a file name: slashes become underscores."""
    return model.replace("/", "_")


def path_prefix(folder, layer="") -> str:
    """Prefix of every cached file in ``folder`` for a split at ``layer``."""
    layer_prefix = ""
    if layer:
        layer_prefix = layer.replace("/", "_").replace(".", "_") + "_"
    return f"{folder}/_{layer_prefix}"


def db_paths(prefix, db_type="leveldb") -> dict[str, str]:
    """Database path for each run (train, test, validate)."""
    return {name: f"{prefix}{name}.{db_type}" for name in RUN_NAMES}


def model_output_prefix(folder, layer, model) -> str:
    """Prefix of the written model files."""
    return path_prefix(folder, layer) + safe_model_name(model)