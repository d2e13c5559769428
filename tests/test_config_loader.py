"""Tests for runtime configuration loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from zcount.common.config import load_runtime_config
from zcount.common.errors import ErrorCode, ZcountError


def test_load_default_profile() -> None:
    config = load_runtime_config()
    assert config.profile.upper == 0
    assert config.profile.lower == 1
    assert config.scan.chunk_size == 65536
    run = config.new_run()
    assert (run.verbosity, run.upper, run.lower, run.flagged_count) == (0, 0, 1, 0)


def test_quick_profile_caps_at_first_zero() -> None:
    config = load_runtime_config("quick")
    assert config.profile.upper == 1


def test_missing_profile_raises_config_error(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"version": 1, "global": {}, "profiles": {"only": _profile_payload()}})
    with pytest.raises(ZcountError) as exc:
        load_runtime_config("missing", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert "only" in str(exc.value)


def test_negative_lower_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {"version": 1, "global": {}, "profiles": {"default": _profile_payload(lower=-1)}},
    )
    with pytest.raises(ZcountError) as exc:
        load_runtime_config(config_path=config_path)
    assert "profiles.default.lower" in str(exc.value)


def test_zero_chunk_size_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {"version": 1, "global": {"chunk_size": 0}, "profiles": {"default": _profile_payload()}},
    )
    with pytest.raises(ZcountError) as exc:
        load_runtime_config(config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def test_invalid_json_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ZcountError) as exc:
        load_runtime_config(config_path=path)
    assert "not valid JSON" in str(exc.value)


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(ZcountError) as exc:
        load_runtime_config(config_path=tmp_path / "absent.json")
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def test_profile_overrides_applied(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"version": 1, "global": {}, "profiles": {"default": _profile_payload()}})
    config = load_runtime_config(config_path=config_path, overrides={"profile": {"lower": 9}})
    assert config.profile.lower == 9


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def _profile_payload(*, upper: int = 0, lower: int = 1) -> dict:
    return {"description": "tmp", "upper": upper, "lower": lower}


def test_error_string_carries_code(tmp_path: Path) -> None:
    with pytest.raises(ZcountError) as exc:
        load_runtime_config(config_path=tmp_path / "absent.json")
    assert str(exc.value).startswith("[CONFIG_ERROR] Config file")
