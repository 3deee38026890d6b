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

"""Async client for Wikidata person search and entity detail queries."""

from wikiquery.client import QueryClient
from wikiquery.config import ClientConfig, config_from_env, load_config
from wikiquery.errors import (
    InvalidInputError,
    MalformedUriError,
    MissingBindingError,
    QueryExecutionError,
    SparqlTransportError,
    WikiQueryError,
)
from wikiquery.models import DetailMode, Field, Person

__all__ = [
    "ClientConfig",
    "DetailMode",
    "Field",
    "InvalidInputError",
    "MalformedUriError",
    "MissingBindingError",
    "Person",
    "QueryClient",
    "QueryExecutionError",
    "SparqlTransportError",
    "WikiQueryError",
    "config_from_env",
    "load_config",
]
