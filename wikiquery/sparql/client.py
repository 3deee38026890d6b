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

"""SPARQL HTTP transport using urllib.

``execute_query`` POSTs a query and returns the parsed JSON bindings as a
Result. ``HttpExecutor`` adapts it to the async row-stream interface the
query client consumes. No domain logic here.
"""

from __future__ import annotations

import asyncio
import http.client
import json
import ssl
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import AsyncIterator
from typing import Any, Protocol

import certifi

from wikiquery.config import ClientConfig
from wikiquery.errors import SparqlTransportError
from wikiquery.logger import get_logger
from wikiquery.result import Fail, Ok, Result

log = get_logger(__name__)

Binding = dict[str, dict[str, str]]

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class Executor(Protocol):
    """Runs a query against ``source`` and streams result rows."""

    def execute(self, query: str, source: str) -> AsyncIterator[Binding]: ...


def execute_query(
    endpoint: str,
    query: str,
    timeout: int = 30,
    headers: dict[str, str] | None = None,
) -> Result[list[Binding]]:
    """POST a SPARQL query and return the parsed result bindings.

    Network, HTTP and decoding failures come back as Fail; nothing is raised.
    """
    encoded_body = urllib.parse.urlencode({"query": query}).encode("utf-8")

    req = urllib.request.Request(
        endpoint,
        data=encoded_body,
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/sparql-results+json",
            **(headers or {}),
        },
        method="POST",
    )

    log.info("SPARQL query → %s (%d bytes)", endpoint, len(encoded_body))

    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
            raw: dict[str, Any] = json.loads(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as exc:
        body = exc.read().decode("utf-8", errors="replace")[:500]
        return Fail(error=f"SPARQL HTTP {exc.code}: {exc.reason}", context=body, cause=exc)
    except urllib.error.URLError as exc:
        return Fail(error=f"SPARQL connection error: {exc.reason}", cause=exc)
    except TimeoutError as exc:
        return Fail(error=f"SPARQL timeout after {timeout}s", cause=exc)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return Fail(error=f"SPARQL response is not JSON: {exc}", cause=exc)
    except (OSError, http.client.HTTPException) as exc:
        return Fail(error=f"SPARQL connection error: {type(exc).__name__}: {exc}", cause=exc)

    if not isinstance(raw, dict):
        return Fail(error="SPARQL response is not a JSON results object", context=str(raw)[:500])

    bindings: list[Binding] = raw.get("results", {}).get("bindings", [])
    log.info("SPARQL returned %d bindings", len(bindings))
    return Ok(data=bindings)


class HttpExecutor:
    """Executor backed by ``execute_query`` running in a worker thread."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent, **dict(self.config.extra_headers)}

    async def execute(self, query: str, source: str) -> AsyncIterator[Binding]:
        result = await asyncio.to_thread(
            execute_query, source, query, self.config.timeout, self._headers()
        )
        if not result.ok:
            raise SparqlTransportError(result.error, result.context) from result.cause
        for binding in result.data:
            yield binding
