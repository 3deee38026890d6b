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

"""Query client: build a query, run it, map each row to a domain object.

Each call owns its query and its row stream; a client instance holds no
per-call state, so concurrent calls need no locking.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import TypeVar

from wikiquery.config import ClientConfig
from wikiquery.errors import QueryExecutionError
from wikiquery.logger import get_logger
from wikiquery.models import DetailMode, Field, Person
from wikiquery.sparql.client import Executor, HttpExecutor
from wikiquery.sparql.processor import Row, to_person, to_property_field, to_relation_field
from wikiquery.sparql.queries import (
    build_entity_detail_query,
    build_name_search_query,
    parse_mode,
)
from wikiquery.sparql.terms import require_entity_id

log = get_logger(__name__)

T = TypeVar("T")


class QueryClient:
    """Async client for person search and entity detail lookups."""

    def __init__(self, executor: Executor | None = None, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self.executor = executor or HttpExecutor(self.config)

    # ── Row stream ─────────────────────────────────────────────

    async def _stream(
        self,
        query: str,
        mapper: Callable[[Row], T],
        cancel: asyncio.Event | None,
    ) -> AsyncIterator[T]:
        try:
            rows = aiter(self.executor.execute(query, self.config.endpoint))
        except Exception as exc:
            raise QueryExecutionError(f"Query execution failed: {exc}", exc) from exc

        try:
            while cancel is None or not cancel.is_set():
                try:
                    row = await anext(rows)
                except StopAsyncIteration:
                    return
                except Exception as exc:
                    raise QueryExecutionError(f"Query execution failed: {exc}", exc) from exc
                yield mapper(row)
        finally:
            aclose = getattr(rows, "aclose", None)
            if aclose is not None:
                await aclose()

    @staticmethod
    async def _collect(stream: AsyncIterator[T], cancel: asyncio.Event | None) -> list[T]:
        items = [item async for item in stream]
        if cancel is not None and cancel.is_set():
            log.info("Query cancelled; discarding %d rows", len(items))
            return []
        return items

    # ── Person search ──────────────────────────────────────────

    def iter_people(self, name: str, cancel: asyncio.Event | None = None) -> AsyncIterator[Person]:
        """Lazily yield every human whose English label is exactly ``name``."""
        query = build_name_search_query(name)
        log.info("Searching people named %r", name)
        return self._stream(query, to_person, cancel)

    async def search_people(self, name: str, cancel: asyncio.Event | None = None) -> list[Person]:
        return await self._collect(self.iter_people(name, cancel), cancel)

    # ── Entity detail ──────────────────────────────────────────

    def iter_entity_detail(
        self,
        entity_id: str,
        mode: DetailMode | str = DetailMode.PROPERTIES,
        only_entity_values: bool | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[Field]:
        """Lazily yield the fields of ``entity_id`` in service row order.

        Raises InvalidInputError immediately for a malformed id or mode.
        """
        entity_id = require_entity_id(entity_id)
        mode = parse_mode(mode)
        if only_entity_values is None:
            only_entity_values = self.config.only_entity_values

        if mode is DetailMode.PROPERTIES:
            languages = self.config.label_languages
            mapper = to_property_field
        else:
            languages = self.config.relation_label_languages
            mapper = to_relation_field

        query = build_entity_detail_query(
            entity_id,
            mode,
            only_entity_values=only_entity_values,
            languages=languages,
        )
        log.info("Fetching %s of %s", mode.value, entity_id)
        return self._stream(query, mapper, cancel)

    async def get_entity_detail(
        self,
        entity_id: str,
        mode: DetailMode | str = DetailMode.PROPERTIES,
        only_entity_values: bool | None = None,
        cancel: asyncio.Event | None = None,
    ) -> list[Field]:
        stream = self.iter_entity_detail(entity_id, mode, only_entity_values, cancel)
        return await self._collect(stream, cancel)
