"""Configuration model and loaders for speechsplit.

Responsibilities:
- Define segmentation configuration as an immutable typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SegmenterConfig`: maximum chunk size, stage/rule selection and symbol tables.
- `ConfigLoader`: static construction helpers for `SegmenterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_name_list,
    parse_permissive_boolean,
    parse_required_boolean,
)
from .text.preprocessors import DEFAULT_PRE_PROCESSORS, PRE_PROCESSOR_FACTORIES
from .text.symbols import ABBREVIATIONS, SUB_PAIRS, SymbolTable
from .text.tokenizer import DEFAULT_SPLIT_RULES, SPLIT_RULE_FACTORIES


DEFAULT_MAX_CHUNK_SIZE = 100


@dataclass(frozen=True, slots=True)
class SegmenterConfig:
    """Configuration for one segmentation run.

    Attributes:
        max_chunk_size: Maximum chunk length in characters.
        pre_processors: Ordered pre-processor stage names.
        split_rules: Ordered tokenizer split rule names.
        abbreviations: Abbreviation roots whose trailing period is removed.
        substitutions: Ordered literal `(find, replace)` pairs.
        ignore_case: Whether split rules match case-insensitively.
    """

    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE
    pre_processors: tuple[str, ...] = DEFAULT_PRE_PROCESSORS
    split_rules: tuple[str, ...] = DEFAULT_SPLIT_RULES
    abbreviations: tuple[str, ...] = ABBREVIATIONS
    substitutions: tuple[tuple[str, str], ...] = SUB_PAIRS
    ignore_case: bool = True

    def validate(self) -> None:
        """Validate configuration values before segmentation."""

        if (
            isinstance(self.max_chunk_size, bool)
            or not isinstance(self.max_chunk_size, int)
            or self.max_chunk_size <= 0
        ):
            raise ValueError("`max_chunk_size` must be a positive integer.")
        self._validate_names(self.pre_processors, PRE_PROCESSOR_FACTORIES, "pre_processors")
        self._validate_names(self.split_rules, SPLIT_RULE_FACTORIES, "split_rules")
        if not self.split_rules:
            raise ValueError("`split_rules` must name at least one split rule.")
        if any(normalize_optional_string(root) is None for root in self.abbreviations):
            raise ValueError("`abbreviations` contains a blank entry.")
        for find, _replace in self.substitutions:
            if not find:
                raise ValueError("`substitutions` contains a blank search string.")

    def symbol_table(self) -> SymbolTable:
        """Return the symbol table implied by this configuration."""

        return SymbolTable(
            abbreviations=self.abbreviations,
            sub_pairs=self.substitutions,
        )

    @staticmethod
    def _validate_names(
        names: tuple[str, ...], known: Mapping[str, object], field_name: str
    ) -> None:
        """Reject stage or rule names that are not registered."""

        unknown = [name for name in names if name not in known]
        if unknown:
            expected = ", ".join(sorted(known))
            raise ValueError(
                f"`{field_name}` contains unknown name(s): {', '.join(unknown)}. "
                f"Expected one of: {expected}."
            )


class ConfigLoader:
    """Factory methods for constructing `SegmenterConfig`."""

    _ALLOWED_YAML_KEYS = frozenset(
        {
            "max_chunk_size",
            "pre_processors",
            "split_rules",
            "abbreviations",
            "substitutions",
            "ignore_case",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> SegmenterConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SegmenterConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        max_chunk_size = ConfigLoader._optional_env_positive_int(
            env_map, "SPEECHSPLIT_MAX_CHUNK_SIZE"
        ) or DEFAULT_MAX_CHUNK_SIZE
        pre_processors = ConfigLoader._optional_env_names(env_map, "SPEECHSPLIT_PRE_PROCESSORS")
        split_rules = ConfigLoader._optional_env_names(env_map, "SPEECHSPLIT_SPLIT_RULES")
        ignore_case_text = ConfigLoader._optional_env_string(env_map, "SPEECHSPLIT_IGNORE_CASE")
        ignore_case = (
            parse_required_boolean(ignore_case_text, "SPEECHSPLIT_IGNORE_CASE")
            if ignore_case_text is not None
            else True
        )

        config = SegmenterConfig(
            max_chunk_size=max_chunk_size,
            pre_processors=pre_processors or DEFAULT_PRE_PROCESSORS,
            split_rules=split_rules or DEFAULT_SPLIT_RULES,
            ignore_case=ignore_case,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> SegmenterConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._ALLOWED_YAML_KEYS
        )
        if unknown_keys:
            raise ValueError(f"{source_label} has unknown key(s): {', '.join(unknown_keys)}.")

        max_chunk_size = ConfigLoader._optional_positive_int(
            payload, "max_chunk_size", source_label, default=DEFAULT_MAX_CHUNK_SIZE
        )
        pre_processors = ConfigLoader._optional_names(
            payload, "pre_processors", source_label, default=DEFAULT_PRE_PROCESSORS
        )
        split_rules = ConfigLoader._optional_names(
            payload, "split_rules", source_label, default=DEFAULT_SPLIT_RULES
        )
        abbreviations = ConfigLoader._optional_names(
            payload, "abbreviations", source_label, default=ABBREVIATIONS
        )
        substitutions = ConfigLoader._optional_substitutions(payload, "substitutions", source_label)
        ignore_case = ConfigLoader._optional_boolean(
            payload, "ignore_case", source_label, default=True
        )

        config = SegmenterConfig(
            max_chunk_size=max_chunk_size,
            pre_processors=pre_processors,
            split_rules=split_rules,
            abbreviations=abbreviations,
            substitutions=substitutions,
            ignore_case=ignore_case,
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label} is invalid: {exc}") from exc
        return config

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_names(
        payload: Mapping[str, Any],
        key: str,
        source_label: str,
        default: tuple[str, ...],
    ) -> tuple[str, ...]:
        """Read a list (or comma-separated string) of names from a payload."""

        if key not in payload or payload[key] is None:
            return default
        try:
            return parse_name_list(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_substitutions(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[tuple[str, str], ...]:
        """Read an ordered find -> replace mapping of literal substitutions."""

        if key not in payload:
            return SUB_PAIRS

        raw = payload[key]
        if raw is None:
            return ()
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        pairs: list[tuple[str, str]] = []
        for raw_find, raw_replace in raw.items():
            find = normalize_optional_string(raw_find)
            if find is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            replace = "" if raw_replace is None else str(raw_replace)
            pairs.append((find, replace))
        return tuple(pairs)

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_names(env: Mapping[str, str], key: str) -> tuple[str, ...] | None:
        """Read an optional comma-separated name list from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        return parse_name_list(raw_value, key)
