from __future__ import annotations

"""Loader for engine settings shared by the CLI and the HTTP facade."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from tripleForge.kg.formats import get_format
from tripleForge.ontology.options import LoweringOptions

CONFIG_ENV = "TRIPLEFORGE_CONFIG"
_TRUE = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class EngineConfig:
    """Defaults for lowering, decoding, entailment and the SPARQL endpoint."""

    base_uri: str | None = None
    prefix: str | None = None
    strict_decoding: bool = False
    strict_characteristics: bool = False
    max_inference_rounds: int | None = None
    sparql_endpoint: str = "http://localhost:3030/ds/sparql"
    sparql_timeout: int = 15
    default_format: str = "turtle"

    def lowering_options(self) -> LoweringOptions:
        return LoweringOptions(strict_characteristics=self.strict_characteristics)


def _coerce_int(value: Any, default: int | None) -> int | None:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


def _from_mapping(raw: Mapping[str, Any]) -> EngineConfig:
    rounds = _coerce_int(raw.get("max_inference_rounds"), None)
    fmt = raw.get("default_format") or "turtle"
    return EngineConfig(
        base_uri=raw.get("base_uri") or None,
        prefix=raw.get("prefix") or None,
        strict_decoding=_coerce_bool(raw.get("strict_decoding"), False),
        strict_characteristics=_coerce_bool(raw.get("strict_characteristics"), False),
        max_inference_rounds=rounds if rounds and rounds > 0 else None,
        sparql_endpoint=str(raw.get("sparql_endpoint") or "http://localhost:3030/ds/sparql"),
        sparql_timeout=max(1, _coerce_int(raw.get("sparql_timeout"), 15) or 15),
        default_format=get_format(str(fmt)).name,
    )


def _apply_env(config: EngineConfig, env: Mapping[str, str]) -> EngineConfig:
    if env.get("TRIPLEFORGE_BASE_URI"):
        config.base_uri = env["TRIPLEFORGE_BASE_URI"]
    if env.get("TRIPLEFORGE_SPARQL_ENDPOINT"):
        config.sparql_endpoint = env["TRIPLEFORGE_SPARQL_ENDPOINT"]
    if env.get("TRIPLEFORGE_SPARQL_TIMEOUT"):
        config.sparql_timeout = max(1, _coerce_int(env["TRIPLEFORGE_SPARQL_TIMEOUT"], config.sparql_timeout) or 1)
    if env.get("TRIPLEFORGE_MAX_ROUNDS"):
        rounds = _coerce_int(env["TRIPLEFORGE_MAX_ROUNDS"], None)
        config.max_inference_rounds = rounds if rounds and rounds > 0 else None
    if env.get("TRIPLEFORGE_STRICT_DECODING"):
        config.strict_decoding = _coerce_bool(env["TRIPLEFORGE_STRICT_DECODING"], config.strict_decoding)
    return config


def load_config(path: Path | str | None = None, env: Mapping[str, str] | None = None) -> EngineConfig:
    """Load settings from YAML with safe defaults, then apply env overrides."""

    env = os.environ if env is None else env
    if path is None and env.get(CONFIG_ENV):
        path = env[CONFIG_ENV]
    raw: Mapping[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return _apply_env(_from_mapping(raw), env)


__all__ = ["CONFIG_ENV", "EngineConfig", "load_config"]
