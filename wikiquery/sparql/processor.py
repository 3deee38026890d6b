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

"""SPARQL result processor — maps result rows to domain objects.

A row is one entry of ``results.bindings`` in the SPARQL 1.1 JSON
results format: ``{"var": {"type": "uri" | "literal", "value": "..."}}``.
Unbound variables are simply absent from the row.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from wikiquery.errors import MissingBindingError
from wikiquery.models import Field, Person
from wikiquery.sparql.terms import last_segment

Row = Mapping[str, Mapping[str, Any]]

PERSON_VARIABLES = ("id", "name", "description")
PROPERTY_VARIABLES = ("propID", "propLabel", "valueLabel")
RELATION_VARIABLES = ("related", "relatedLabel")


def map_row(row: Row, required: Sequence[str]) -> dict[str, str]:
    """Read the value of every required variable, failing on the first unbound one."""
    values: dict[str, str] = {}
    for variable in required:
        term = row.get(variable)
        if term is None or term.get("value") is None:
            raise MissingBindingError(variable)
        values[variable] = str(term["value"])
    return values


def to_person(row: Row) -> Person:
    values = map_row(row, PERSON_VARIABLES)
    return Person(
        id=last_segment(values["id"]),
        name=values["name"],
        description=values["description"],
        id_url=values["id"],
    )


def to_property_field(row: Row) -> Field:
    values = map_row(row, PROPERTY_VARIABLES)
    return Field(
        property_id=last_segment(values["propID"]),
        label=values["propLabel"],
        value=values["valueLabel"],
        property_url=values["propID"],
    )


def to_relation_field(row: Row) -> Field:
    values = map_row(row, RELATION_VARIABLES)
    return Field(
        property_id=last_segment(values["related"]),
        label=values["relatedLabel"],
        value=values["related"],
        property_url=values["related"],
    )
