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

"""SPARQL term helpers: literal escaping and entity identifiers."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from wikiquery.errors import InvalidInputError, MalformedUriError

# https://stackoverflow.com/questions/29601839/standard-regex-to-prevent-sparql-injection/55726984#55726984
_LITERAL_METACHARACTERS = re.compile(r"([\"'\\])")

ENTITY_ID = re.compile(r"^Q[0-9]+$")


def escape_literal(text: str) -> str:
    """Backslash-escape every ``"``, ``'`` and ``\\`` in ``text``.

    Newlines pass through untouched, so the result belongs inside a
    triple-quoted literal.
    """
    return _LITERAL_METACHARACTERS.sub(r"\\\1", text)


def last_segment(uri: str) -> str:
    """Return the final path segment of ``uri`` (``.../entity/Q42`` → ``Q42``)."""
    segment = urlsplit(uri).path.split("/")[-1]
    if not segment:
        raise MalformedUriError(uri)
    return segment


def require_entity_id(entity_id: object) -> str:
    """Return ``entity_id`` unchanged if it is a short entity code."""
    if not isinstance(entity_id, str) or not ENTITY_ID.fullmatch(entity_id):
        raise InvalidInputError(entity_id)
    return entity_id


# BCP 47-shaped tag (en, pt-br, zh-hant-tw) or the label service's auto token.
LANGUAGE_TAG = re.compile(r"^(\[AUTO_LANGUAGE\]|[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*)$")


def require_language_tag(tag: object) -> str:
    """Return ``tag`` unchanged if it is a language tag or ``[AUTO_LANGUAGE]``.

    Tags end up inside a single-line ``"..."`` literal, so anything else
    (newlines and quotes included) is rejected rather than escaped.
    """
    if not isinstance(tag, str) or not LANGUAGE_TAG.fullmatch(tag):
        raise InvalidInputError(tag, "not a language tag")
    return tag
