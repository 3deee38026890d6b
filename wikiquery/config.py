# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Client configuration: defaults, YAML file loader, environment loader.

YAML layout::

    client:
      endpoint: https://query.wikidata.org/sparql
      timeout: 30
      user_agent: my-tool/1.0 (me@example.org)
      label_languages: ["[AUTO_LANGUAGE]", "en"]
      relation_label_languages: ["en"]
      only_entity_values: true
      extra_headers:
        X-Client: my-tool
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from wikiquery.result import Fail, Ok, Result
from wikiquery.sparql.terms import require_language_tag

DEFAULT_ENDPOINT = "https://query.wikidata.org/sparql"
DEFAULT_USER_AGENT = "wikiquery/0.1 (https://www.wikidata.org/wiki/Wikidata:SPARQL_query_service)"
AUTO_LANGUAGE = "[AUTO_LANGUAGE]"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: int = 30
    user_agent: str = DEFAULT_USER_AGENT
    label_languages: tuple[str, ...] = (AUTO_LANGUAGE, "en")
    relation_label_languages: tuple[str, ...] = ("en",)
    only_entity_values: bool = True
    extra_headers: tuple[tuple[str, str], ...] = ()


# ── Loaders ────────────────────────────────────────────────────

def _languages(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = raw.split(",")
    languages = tuple(
        require_language_tag(str(lang).strip()) for lang in raw if str(lang).strip()
    )
    if not languages:
        raise TypeError("language list must not be empty")
    return languages


def _apply(base: ClientConfig, raw: dict[str, Any]) -> ClientConfig:
    overrides: dict[str, Any] = {}
    if "endpoint" in raw:
        overrides["endpoint"] = str(raw["endpoint"])
    if "timeout" in raw:
        overrides["timeout"] = int(raw["timeout"])
    if "user_agent" in raw:
        overrides["user_agent"] = str(raw["user_agent"])
    if "label_languages" in raw:
        overrides["label_languages"] = _languages(raw["label_languages"])
    if "relation_label_languages" in raw:
        overrides["relation_label_languages"] = _languages(raw["relation_label_languages"])
    if "only_entity_values" in raw:
        overrides["only_entity_values"] = bool(raw["only_entity_values"])
    if "extra_headers" in raw:
        overrides["extra_headers"] = tuple(
            (str(k), str(v)) for k, v in raw["extra_headers"].items()
        )
    return replace(base, **overrides)


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a YAML config file over the defaults."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path), cause=exc)

    try:
        section = raw.get("client", {}) or {}
        if not isinstance(section, dict):
            raise TypeError("'client' must be a mapping")
        config = _apply(ClientConfig(), section)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path), cause=exc)

    return Ok(data=config)


def config_from_env(base: ClientConfig | None = None) -> Result[ClientConfig]:
    """Build a config from WIKIQUERY_* environment variables (and .env)."""
    load_dotenv()
    raw: dict[str, Any] = {}
    for key in ("endpoint", "timeout", "user_agent", "label_languages"):
        value = os.getenv(f"WIKIQUERY_{key.upper()}")
        if value:
            raw[key] = value
    try:
        config = _apply(base or ClientConfig(), raw)
    except (TypeError, ValueError) as exc:
        return Fail(error=f"Environment config error: {exc}", context=raw, cause=exc)

    return Ok(data=config)
