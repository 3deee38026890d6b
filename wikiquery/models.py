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

"""Domain value objects produced from query result rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DetailMode(str, Enum):
    """Shape of an entity detail query."""

    PROPERTIES = "properties"
    RELATIONS = "relations"


@dataclass(frozen=True, slots=True)
class Person:
    """A human entity matched by an exact English name."""

    id: str  # Ex. Q42
    name: str  # Ex. Douglas Adams
    description: str  # Ex. English author and humourist (1952–2001)
    id_url: str = ""  # Ex. http://www.wikidata.org/entity/Q42

    def __str__(self) -> str:
        return f"{self.id}: {self.name} ({self.description})"


@dataclass(frozen=True, slots=True)
class Field:
    """One claimed property of an entity, or one related entity.

    For a property, ``label`` is the property name and ``value`` the claim
    value label. For a relation, ``label`` is the related entity's label and
    ``value`` its URI.
    """

    property_id: str  # Ex. P106, or Q84 for a relation
    label: str  # Ex. occupation
    value: str  # Ex. novelist
    property_url: str = ""

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"
