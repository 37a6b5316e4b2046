from __future__ import annotations

from pathlib import Path
from string import Formatter
from typing import Any, Dict, List, Tuple, Union

import yaml

from .config import AppConfig
from .types import LoginRow, OutcomeSelector, RegistrationRow, template_fields

SCENARIO_DIR = Path(__file__).resolve().parents[1] / "scenarios"

PLACEHOLDERS = frozenset({"uid", "long_suffix", "app_username", "app_password", "email_registered"})

Row = Union[LoginRow, RegistrationRow]

_LOGIN_KEYS = ["label", "username", "password", "expected"]
_REGISTRATION_KEYS = ["label", "username", "email", "volute", "password", "repeat_password", "expected"]


def load_table(path: str | Path) -> Tuple[Row, ...]:
    p = Path(path)
    if not p.is_absolute() and not p.exists():
        p = SCENARIO_DIR / p
    if not p.exists():
        raise FileNotFoundError(f"Scenario file not found: {p.resolve()}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict) or "kind" not in raw or not isinstance(raw.get("rows"), list):
        raise ValueError(f"{p.name} must be a mapping with 'kind' and a 'rows' list")

    kind = raw["kind"]
    out: List[Row] = []
    for d in raw["rows"]:
        if not isinstance(d, dict):
            raise ValueError(f"Each scenario row must be a dict: {p.name}")
        row = _to_row(kind, d)
        _check_placeholders(row)
        out.append(row)

    labels = [r.label for r in out]
    if len(set(labels)) != len(labels):
        raise ValueError(f"Duplicate scenario labels in {p.name}")
    return tuple(out)


def _require(d: Dict[str, Any], keys: List[str]) -> None:
    for k in keys:
        if k not in d:
            raise ValueError(f"Missing key '{k}' in scenario: {d}")


def _s(v: Any) -> str:
    # YAML reads 10000 as int and an empty value as None
    return "" if v is None else str(v)


def _to_row(kind: str, d: Dict[str, Any]) -> Row:
    if kind == "login_invalid":
        _require(d, _LOGIN_KEYS)
        return LoginRow(**{k: _s(d[k]) for k in _LOGIN_KEYS})

    if kind in ("signup_valid", "signup_invalid"):
        _require(d, _REGISTRATION_KEYS)
        values = {k: _s(d[k]) for k in _REGISTRATION_KEYS}
        if kind == "signup_valid":
            if d.get("outcome") is not None:
                raise ValueError(f"signup_valid rows take no outcome: {d['label']}")
            return RegistrationRow(**values)
        if not d.get("outcome"):
            raise ValueError(f"signup_invalid rows need an outcome: {d['label']}")
        return RegistrationRow(**values, outcome=OutcomeSelector.parse(str(d["outcome"])))

    raise ValueError(f"Unknown scenario kind: {kind}")


def _check_placeholders(row: Row) -> None:
    for name, value in template_fields(row).items():
        for _, field_name, _, _ in Formatter().parse(value):
            if field_name is not None and field_name not in PLACEHOLDERS:
                raise ValueError(f"Unknown placeholder '{{{field_name}}}' in {row.label}.{name}")


def scenario_values(config: AppConfig, uid: str, long_suffix: str) -> Dict[str, str]:
    return {
        "uid": uid,
        "long_suffix": long_suffix,
        "app_username": config.app_username,
        "app_password": config.app_password,
        "email_registered": config.email_registered,
    }
