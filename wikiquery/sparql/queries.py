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

"""SPARQL query builder for the two query shapes the client issues.

Templates carry ``{{variable}}`` placeholders that are filled by plain
string interpolation. Every value is either escaped (free text) or
validated (entity ids) before it reaches a template.
"""

from __future__ import annotations

from collections.abc import Sequence

from wikiquery.errors import InvalidInputError
from wikiquery.logger import get_logger
from wikiquery.models import DetailMode
from wikiquery.sparql.terms import escape_literal, require_entity_id, require_language_tag

log = get_logger(__name__)

Query = str

PREFIXES = """\
PREFIX wikibase: <http://wikiba.se/ontology#>
PREFIX wd: <http://www.wikidata.org/entity/>
PREFIX wdt: <http://www.wikidata.org/prop/direct/>
PREFIX p: <http://www.wikidata.org/prop/>
PREFIX ps: <http://www.wikidata.org/prop/statement/>
PREFIX bd: <http://www.bigdata.com/rdf#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
PREFIX schema: <http://schema.org/>
"""

NAME_SEARCH_TEMPLATE = """\
SELECT
  ?id          # Ex. Q42
  ?name        # Ex. Douglas Adams
  ?description # Ex. English author and humourist (1952–2001)
WHERE {
  VALUES ?name {
    \"\"\"{{name}}\"\"\"@en
  }

  ?id wdt:P31 wd:Q5;                 # an instance of human
    rdfs:label ?name;                # whose label matches ?name
    schema:description ?description. # with its one-sentence description

  FILTER(LANG(?name) = "en")
  FILTER(LANG(?description) = "en")
}
"""

PROPERTIES_TEMPLATE = """\
SELECT DISTINCT
  ?propID     # Ex. http://www.wikidata.org/prop/direct/P734
  ?propLabel  # Ex. family name
  ?value      # Ex. http://www.wikidata.org/entity/Q351735
  ?valueLabel # Ex. Adams
WHERE {
  VALUES ?target {
    wd:{{id}}
  }

  ?target ?propID ?value.
  ?prop wikibase:directClaim ?propID.
{{entity_filter}}
  SERVICE wikibase:label { bd:serviceParam wikibase:language "{{languages}}". }
}
ORDER BY UCASE(?propID)
"""

RELATIONS_TEMPLATE = """\
SELECT DISTINCT
  ?related      # Ex. http://www.wikidata.org/entity/Q84
  ?relatedLabel # Ex. London
WHERE {
  VALUES ?target {
    wd:{{id}}
  }

  { ?target ?prop ?related. }
  UNION
  { ?related ?prop ?target. }

  FILTER(CONTAINS(STR(?related), "/entity/Q"))
  FILTER(?related != ?target)

  SERVICE wikibase:label { bd:serviceParam wikibase:language "{{languages}}". }
}
ORDER BY (UCASE(?relatedLabel))
"""

# Keeps only values that are themselves entities (Q84, not "douglasadams").
ENTITY_VALUE_FILTER = '  FILTER(CONTAINS(STR(?value), "/entity/Q"))'


def render_template(template: str, variables: dict[str, str]) -> str:
    """Replace all {{key}} placeholders in template with variable values."""
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace("{{" + key + "}}", value)
    return rendered


def with_prefixes(body: str) -> Query:
    return PREFIXES + body


def _language_list(languages: Sequence[str]) -> str:
    if isinstance(languages, str):
        raise InvalidInputError(languages, "label languages must be a sequence of tags")
    cleaned = [
        require_language_tag(lang.strip() if isinstance(lang, str) else lang)
        for lang in languages
    ]
    if not cleaned:
        raise InvalidInputError(list(languages), "empty label language list")
    return ",".join(cleaned)


def parse_mode(mode: DetailMode | str) -> DetailMode:
    try:
        return DetailMode(mode)
    except ValueError:
        raise InvalidInputError(mode, "mode must be 'properties' or 'relations'") from None


def build_name_search_query(name: str) -> Query:
    """Query for humans whose English label is exactly ``name``."""
    if not isinstance(name, str):
        raise InvalidInputError(name, "name must be a string")
    return with_prefixes(render_template(NAME_SEARCH_TEMPLATE, {"name": escape_literal(name)}))


def build_entity_detail_query(
    entity_id: str,
    mode: DetailMode | str,
    *,
    only_entity_values: bool = True,
    languages: Sequence[str] | None = None,
) -> Query:
    """Query for the direct claims of, or entities linked to, ``entity_id``.

    Args:
        entity_id: Short entity code, e.g. ``Q8006577``.
        mode: ``"properties"`` or ``"relations"``.
        only_entity_values: Properties mode only; drop literal values.
        languages: Label preference list. Defaults to
            ``[AUTO_LANGUAGE], en`` for properties and ``en`` for relations.
    """
    entity_id = require_entity_id(entity_id)
    mode = parse_mode(mode)

    if mode is DetailMode.PROPERTIES:
        body = render_template(
            PROPERTIES_TEMPLATE,
            {
                "id": entity_id,
                "entity_filter": ENTITY_VALUE_FILTER if only_entity_values else "",
                "languages": _language_list(languages or ("[AUTO_LANGUAGE]", "en")),
            },
        )
    else:
        body = render_template(
            RELATIONS_TEMPLATE,
            {"id": entity_id, "languages": _language_list(languages or ("en",))},
        )

    log.debug("Built %s query for %s", mode.value, entity_id)
    return with_prefixes(body)
