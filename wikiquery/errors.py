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

"""Exception taxonomy raised by the query client.

Every error reaches the caller of the awaited operation; nothing is
logged and swallowed inside the package.
"""

from __future__ import annotations


class WikiQueryError(Exception):
    """Base class for all wikiquery errors."""


class InvalidInputError(WikiQueryError, ValueError):
    """Caller-supplied input was rejected before any query was built."""

    def __init__(self, value: object, reason: str = "does not match ^Q[0-9]+$") -> None:
        self.value = value
        super().__init__(f"Invalid input {value!r}: {reason}")


class MalformedUriError(WikiQueryError, ValueError):
    """A URI has no trailing identifier segment."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"No identifier segment in URI: {uri!r}")


class MissingBindingError(WikiQueryError, KeyError):
    """A result row lacks a variable the mapper requires."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(variable)

    def __str__(self) -> str:
        return f"Result row has no binding for ?{self.variable}"


class SparqlTransportError(WikiQueryError):
    """The HTTP transport reported a failed request."""

    def __init__(self, message: str, context: object = None) -> None:
        self.context = context
        super().__init__(message)


class QueryExecutionError(WikiQueryError):
    """The execution capability failed; the original error is the cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
