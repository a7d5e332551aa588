"""
Upload Config Tests

YAML overrides, defaults and validation.
"""

import pytest
import yaml

from config.settings import MAX_UPLOAD_SIZE_BYTES, REGISTRY_SERVER_URL
from upload.config import UploadConfig


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


def test_defaults_without_file(tmp_path):
    """Missing file -> settings defaults, no file created"""
    config_path = tmp_path / "upload.yaml"

    config = UploadConfig(config_path=config_path)

    assert config.server_url == REGISTRY_SERVER_URL
    assert config.max_upload_size_bytes == MAX_UPLOAD_SIZE_BYTES
    assert not config_path.exists()


def test_file_overrides_defaults(tmp_path):
    """Values in the YAML file win over defaults"""
    config_path = write_yaml(
        tmp_path / "upload.yaml",
        {
            "server_url": "https://videos.example.org",
            "max_upload_size_bytes": 10_000_000,
            "data_method": "put",
            "upload_workers": 4,
        },
    )

    config = UploadConfig(config_path=config_path)

    assert config.server_url == "https://videos.example.org"
    assert config.max_upload_size_bytes == 10_000_000
    assert config.data_method == "PUT"
    assert config.upload_workers == 4


def test_unknown_keys_ignored(tmp_path):
    """Unknown keys do not end up in the config"""
    config_path = write_yaml(tmp_path / "upload.yaml", {"colour": "blue"})

    config = UploadConfig(config_path=config_path)

    assert "colour" not in config.to_dict()


def test_broken_yaml_uses_defaults(tmp_path):
    """Unparseable file falls back to defaults"""
    config_path = tmp_path / "upload.yaml"
    config_path.write_text("server_url: [unclosed")

    config = UploadConfig(config_path=config_path)

    assert config.server_url == REGISTRY_SERVER_URL


def test_invalid_values_rejected(tmp_path):
    """Validation errors raise ValueError"""
    bad_values = [
        {"server_url": "not a url"},
        {"max_upload_size_bytes": 0},
        {"http_timeout": -1},
        {"data_method": "DELETE"},
        {"upload_workers": 0},
    ]

    for index, values in enumerate(bad_values):
        config_path = write_yaml(tmp_path / f"bad_{index}.yaml", values)
        with pytest.raises(ValueError):
            UploadConfig(config_path=config_path)


def test_set_validates(tmp_path):
    """set() applies valid values and rejects invalid ones"""
    config = UploadConfig(config_path=tmp_path / "upload.yaml")

    config.set("max_upload_size_bytes", 1024)
    assert config.max_upload_size_bytes == 1024

    with pytest.raises(ValueError):
        config.set("max_upload_size_bytes", -5)
    assert config.max_upload_size_bytes == 1024

    with pytest.raises(KeyError):
        config.set("nonexistent", 1)


def test_non_numeric_values_raise_value_error(tmp_path):
    """null, lists and strings in numeric fields raise ValueError naming the key"""
    bad_values = [
        ("http_timeout", None),
        ("max_upload_size_bytes", [1, 2]),
        ("upload_workers", "many"),
        ("http_timeout", True),
    ]

    for index, (key, value) in enumerate(bad_values):
        config_path = write_yaml(tmp_path / f"typed_{index}.yaml", {key: value})
        with pytest.raises(ValueError, match=key):
            UploadConfig(config_path=config_path)


def test_set_non_numeric_raises_value_error(tmp_path):
    config = UploadConfig(config_path=tmp_path / "upload.yaml")

    with pytest.raises(ValueError, match="http_timeout"):
        config.set("http_timeout", None)


def test_empty_server_url_means_not_configured(tmp_path):
    """Empty URL is accepted; the registry factory decides what it means"""
    config_path = tmp_path / "upload.yaml"
    config_path.write_text("server_url:\n")

    config = UploadConfig(config_path=config_path)

    assert config.server_url == ""
