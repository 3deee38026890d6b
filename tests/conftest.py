"""Shared fixtures: SPARQL JSON row builders and an in-memory executor."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest

ENTITY = "http://www.wikidata.org/entity/"
DIRECT = "http://www.wikidata.org/prop/direct/"


def uri(value: str) -> dict[str, str]:
    return {"type": "uri", "value": value}


def literal(value: str, lang: str | None = "en") -> dict[str, str]:
    term = {"type": "literal", "value": value}
    if lang:
        term["xml:lang"] = lang
    return term


class FakeExecutor:
    """Replays canned rows and records every query it receives."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None,
                 fail_after: int | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.fail_after = fail_after
        self.calls: list[tuple[str, str]] = []
        self.yielded = 0
        self.closed = False

    async def execute(self, query: str, source: str) -> AsyncIterator[dict[str, Any]]:
        self.calls.append((query, source))
        try:
            if self.error is not None and self.fail_after is None:
                raise self.error
            for row in self.rows:
                if self.fail_after is not None and self.yielded >= self.fail_after:
                    raise self.error  # type: ignore[misc]
                self.yielded += 1
                yield row
        finally:
            self.closed = True


@pytest.fixture
def person_rows() -> list[dict[str, Any]]:
    return [
        {
            "id": uri("https://www.wikidata.org/entity/Q123"),
            "name": literal("William Carpenter"),
            "description": literal("English poet"),
        },
        {
            "id": uri(f"{ENTITY}Q8006577"),
            "name": literal("William Carpenter"),
            "description": literal("British physician and zoologist"),
        },
    ]


@pytest.fixture
def relation_rows() -> list[dict[str, Any]]:
    return [
        {"related": uri(f"{ENTITY}Q145"), "relatedLabel": literal("United Kingdom")},
        {"related": uri(f"{ENTITY}Q5"), "relatedLabel": literal("human")},
        {"related": uri(f"{ENTITY}Q39631"), "relatedLabel": literal("physician")},
    ]


@pytest.fixture
def property_rows() -> list[dict[str, Any]]:
    return [
        {
            "propID": uri(f"{DIRECT}P106"),
            "propLabel": literal("occupation"),
            "value": uri(f"{ENTITY}Q39631"),
            "valueLabel": literal("physician"),
        },
        {
            "propID": uri(f"{DIRECT}P27"),
            "propLabel": literal("country of citizenship"),
            "value": uri(f"{ENTITY}Q145"),
            "valueLabel": literal("United Kingdom"),
        },
    ]
