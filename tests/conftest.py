"""Shared test fixtures for tranclator tests."""

import os
import sys

import pytest

# Add project root to path so `tranclator` is importable without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))


@pytest.fixture
def sample_config_dict():
    """Minimal valid config dict matching tranclator.yaml.example structure."""
    return {
        "global": {
            "default-language": "spanish",
            "copy-to-clipboard": True,
            "quit-keywords": [":q", "exit"],
        },
        "language": [
            {
                "name": "spanish",
                "lower-mode": "preserve",
                "dict": {"hello": "hola", "world": "mundo"},
            },
            {
                "name": "shout",
                "lower-mode": "upper",
                "dict": {"please": "now"},
            },
        ],
    }


@pytest.fixture
def tmp_config_file(tmp_path, sample_config_dict):
    """Write a temporary config YAML file and return its path."""
    import yaml
    config_path = tmp_path / "tranclator.yaml"
    config_path.write_text(yaml.dump(sample_config_dict, sort_keys=False))
    return str(config_path)
