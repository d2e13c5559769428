"""Helpers for loading runtime configuration profiles."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ErrorCode, ZcountError
from .limits import ULONG_MAX
from .models import ProfileSettings, RuntimeConfig, ScanSettings

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "defaults.json"
DEFAULT_PROFILE = "default"


@dataclass(slots=True)
class ConfigDocument:
    source: Path
    version: int
    scan: ScanSettings
    profiles: Dict[str, ProfileSettings]


def load_runtime_config(
    profile: str = DEFAULT_PROFILE,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, validate it, and resolve a specific profile."""

    document = load_config_document(
        profile_name=profile,
        config_path=config_path,
        overrides=overrides,
    )
    return RuntimeConfig(
        scan=document.scan,
        profile=document.profiles[profile],
    )


def load_config_document(
    *,
    profile_name: Optional[str] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ConfigDocument:
    cfg_path = config_path or DEFAULT_CONFIG_PATH
    raw = _read_config_json(cfg_path)
    if not isinstance(raw, Mapping):
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"Config file '{cfg_path}' must hold a JSON object")

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {cfg_path}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    scan = ScanSettings(
        chunk_size=_require_positive_int(
            global_data.get("chunk_size", ScanSettings().chunk_size), "global.chunk_size", cfg_path
        )
    )

    profiles_section = raw.get("profiles")
    if not isinstance(profiles_section, Mapping) or not profiles_section:
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"'profiles' section missing in {cfg_path}")

    profile_overrides = overrides.get("profile") or {}
    profiles: Dict[str, ProfileSettings] = {}
    for name, profile_data in profiles_section.items():
        if not isinstance(profile_data, Mapping):
            raise ZcountError(
                ErrorCode.CONFIG_ERROR,
                f"Profile '{name}' must be an object in {cfg_path}",
            )
        merged = dict(profile_data)
        if profile_name and name == profile_name and profile_overrides:
            merged = {**merged, **profile_overrides}
        profiles[name] = _build_profile_settings(name, merged, cfg_path)

    if profile_name and profile_name not in profiles:
        available = ", ".join(sorted(profiles))
        raise ZcountError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile_name}' not found in {cfg_path}. Available: {available}",
        )

    return ConfigDocument(source=cfg_path, version=version, scan=scan, profiles=profiles)


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc


def _build_profile_settings(name: str, data: Mapping[str, Any], source: Path) -> ProfileSettings:
    prefix = f"profiles.{name}"
    missing = [field for field in ("description", "upper", "lower") if field not in data]
    if missing:
        raise ZcountError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{name}' missing fields {missing} in {source}",
        )
    description = data.get("description")
    if not isinstance(description, str):
        raise ZcountError(ErrorCode.CONFIG_ERROR, f"{prefix}.description must be a string in {source}")
    return ProfileSettings(
        description=description.strip(),
        upper=_require_unsigned_int(data.get("upper"), f"{prefix}.upper", source),
        lower=_require_unsigned_int(data.get("lower"), f"{prefix}.lower", source),
    )


def _require_int(value: Any, field: str, source: Path) -> int:
    # bool is an int subclass but never a sensible limit
    if isinstance(value, bool) or not isinstance(value, int):
        raise ZcountError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        )
    return value


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    num = _require_int(value, field, source)
    if num <= 0:
        raise ZcountError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num


def _require_unsigned_int(value: Any, field: str, source: Path) -> int:
    num = _require_int(value, field, source)
    if num < 0 or num > ULONG_MAX:
        raise ZcountError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be between 0 and {ULONG_MAX} in {source}",
        )
    return num
