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

"""Ok/Fail results returned by the SPARQL transport and the config loaders.

``execute_query`` answers Ok(list of bindings) or Fail(message, response
excerpt, original exception); ``HttpExecutor`` re-raises a Fail as
SparqlTransportError chained to ``cause``. ``load_config`` and
``config_from_env`` hand a Fail back to the caller untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message, optional context and cause."""

    error: str
    context: Any = None
    cause: BaseException | None = None
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Fail
