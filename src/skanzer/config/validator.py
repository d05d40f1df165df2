"""Config file validation for Skanzer scans."""

from __future__ import annotations

import difflib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from skanzer.constants.config import (
    CONFIG_FILENAME,
    MAX_FETCH_RETRIES,
    THRESHOLD_COUNT_KEYS,
    THRESHOLD_RATIO_KEYS,
)
from skanzer.constants.rules import ALL_RULE_IDS
from skanzer.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    LIST_OF_STRINGS_KEYS,
    POSITIVE_INT_KEYS,
)
from skanzer.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skanzer.yaml file and return all validation errors.

    Never raises; a missing default config file is valid.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            return [ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    return validate_config_payload(raw, path_str)


def validate_config_payload(raw: Any, path_str: str) -> list[ValidationError]:
    """Validate an already-parsed config payload."""
    errors: list[ValidationError] = []
    if raw is None:
        return errors
    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in sorted(LIST_OF_STRINGS_KEYS & raw.keys()):
        value = raw[key]
        if value is not None and (not isinstance(value, list) or not all(isinstance(item, str) for item in value)):
            errors.append(_type_error(path_str, key, "a list of strings", value))

    for key in sorted(POSITIVE_INT_KEYS & raw.keys()):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(_type_error(path_str, key, "a positive integer", value))

    if "fetch_retries" in raw:
        value = raw["fetch_retries"]
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(_type_error(path_str, "fetch_retries", "an integer", value))
        elif not 0 <= value <= MAX_FETCH_RETRIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="fetch_retries",
                    message=f"`fetch_retries` must be between 0 and {MAX_FETCH_RETRIES}",
                    hint=f"got: {value!r}",
                )
            )

    if "ignore_default_allowlist" in raw and not isinstance(raw["ignore_default_allowlist"], bool):
        errors.append(_type_error(path_str, "ignore_default_allowlist", "a boolean", raw["ignore_default_allowlist"]))

    errors.extend(_validate_rules(raw.get("rules"), path_str))
    errors.extend(_validate_thresholds(raw.get("thresholds"), path_str))
    return errors


def _validate_rules(rules: Any, path_str: str) -> list[ValidationError]:
    if rules is None:
        return []
    if not isinstance(rules, dict):
        return [_type_error(path_str, "rules", "a mapping of rule id to boolean", rules)]

    errors: list[ValidationError] = []
    for rule_id, enabled in sorted(rules.items(), key=lambda item: str(item[0])):
        field_name = f"rules.{rule_id}"
        if rule_id not in ALL_RULE_IDS:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=field_name,
                    message=f"unknown rule id `{rule_id}`",
                    hint=_suggest_key(str(rule_id), ALL_RULE_IDS),
                )
            )
        if not isinstance(enabled, bool):
            errors.append(_type_error(path_str, field_name, "a boolean", enabled))
    return errors


def _validate_thresholds(thresholds: Any, path_str: str) -> list[ValidationError]:
    if thresholds is None:
        return []
    if not isinstance(thresholds, dict):
        return [_type_error(path_str, "thresholds", "a mapping", thresholds)]

    allowed = THRESHOLD_RATIO_KEYS | THRESHOLD_COUNT_KEYS
    errors: list[ValidationError] = []
    for key, value in sorted(thresholds.items(), key=lambda item: str(item[0])):
        field_name = f"thresholds.{key}"
        if key not in allowed:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=field_name,
                    message=f"unknown key `{field_name}`",
                    hint=_suggest_key(str(key), allowed),
                )
            )
            continue
        if key in THRESHOLD_RATIO_KEYS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(_type_error(path_str, field_name, "a number", value))
            elif not 0.0 <= float(value) <= 1.0:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field=field_name,
                        message=f"`{field_name}` must be between 0 and 1",
                        hint=f"got: {value!r}",
                    )
                )
        elif isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(_type_error(path_str, field_name, "a positive integer", value))
    return errors


def _type_error(path_str: str, field_name: str, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field_name,
        message=f"`{field_name}` must be {expected}",
        hint=f"got: {value!r}",
    )


def _suggest_key(key: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean' hint for a mistyped key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
