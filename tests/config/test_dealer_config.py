import json
from pathlib import Path

import pytest

from threshold_bls.config import (
    DEALER_CONFIG_ENV_VAR,
    DealerConfig,
    KeyFormat,
    load_dealer_config,
    resolve_config_path,
)


def test_defaults_and_indices() -> None:
    config = DealerConfig.from_dict({"threshold": 1, "participants": 3})
    assert config.first_index == 1
    assert config.output_dir == "keys"
    assert config.key_format == KeyFormat.HEX
    assert config.indices == [1, 2, 3]


def test_custom_first_index() -> None:
    config = DealerConfig.from_dict({"threshold": 2, "participants": 3, "first_index": 10, "key_format": "base64"})
    assert config.indices == [10, 11, 12]
    assert config.key_format == KeyFormat.BASE64


@pytest.mark.parametrize(
    "data",
    [
        {"participants": 3},
        {"threshold": 3, "participants": 3},
        {"threshold": -1, "participants": 3},
        {"threshold": 1, "participants": 3, "first_index": 0},
        {"threshold": 1, "participants": 3, "output_dir": "  "},
        {"threshold": 1, "participants": 3, "key_format": "pem"},
        {"threshold": None, "participants": 3},
        {"threshold": [1], "participants": 3},
        {"threshold": 1, "participants": "three"},
        {"threshold": 1, "participants": 3, "first_index": None},
    ],
)
def test_invalid_configs_fail(data: dict) -> None:
    with pytest.raises(ValueError):
        DealerConfig.from_dict(data)


def test_env_var_overrides_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "custom.json"
    config_path.write_text(json.dumps({"threshold": 2, "participants": 5}))
    monkeypatch.setenv(DEALER_CONFIG_ENV_VAR, str(config_path))
    assert resolve_config_path() == config_path
    assert load_dealer_config().participants == 5


def test_default_path_under_base_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DEALER_CONFIG_ENV_VAR, raising=False)
    assert resolve_config_path(base_dir=tmp_path) == (tmp_path / "config" / "dealer-config.json").resolve()
    with pytest.raises(FileNotFoundError):
        load_dealer_config(base_dir=tmp_path)


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_dealer_config(path)


def test_non_object_json_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 3]))
    with pytest.raises(ValueError):
        load_dealer_config(path)
