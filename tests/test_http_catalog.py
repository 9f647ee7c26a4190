from __future__ import annotations

import asyncio
import json

import pytest
from aiohttp import test_utils, web

from craftref.adapters.gemini_assistant import GeminiAssistant
from craftref.adapters.http_catalog import AiohttpCatalogFetcher
from craftref.core.assistant import ASSISTANT_FAILURE, ask
from craftref.core.errors import AssistantError, CatalogFetchError, CatalogParseError
from craftref.core.models import ENTITY, SOURCE_REMOTE
from craftref.core.synchronizer import CatalogSynchronizer

ENTITIES = [
    {"id": 1, "name": "zombie", "displayName": "Zombie"},
    {"id": 2, "name": "creeper", "displayName": "Creeper"},
]


def _catalog_app() -> web.Application:
    async def entities(request: web.Request) -> web.Response:
        # The real host serves JSON as text/plain.
        return web.Response(text=json.dumps(ENTITIES), content_type="text/plain")

    async def broken(request: web.Request) -> web.Response:
        return web.Response(text="<html>oops</html>", content_type="text/html")

    app = web.Application()
    app.router.add_get("/data/pc/1.20.1/entities.json", entities)
    app.router.add_get("/data/broken.json", broken)
    return app


def test_fetch_decodes_plain_text_json() -> None:
    async def scenario():
        async with test_utils.TestServer(_catalog_app()) as server:
            fetcher = AiohttpCatalogFetcher(timeout_seconds=5)
            return await fetcher.fetch_json(str(server.make_url("/data/pc/1.20.1/entities.json")))

    assert asyncio.run(scenario()) == ENTITIES


def test_missing_resource_raises_fetch_error() -> None:
    async def scenario() -> None:
        async with test_utils.TestServer(_catalog_app()) as server:
            await AiohttpCatalogFetcher().fetch_json(str(server.make_url("/data/pc/0.0/items.json")))

    with pytest.raises(CatalogFetchError, match="404"):
        asyncio.run(scenario())


def test_invalid_body_raises_parse_error() -> None:
    async def scenario() -> None:
        async with test_utils.TestServer(_catalog_app()) as server:
            await AiohttpCatalogFetcher().fetch_json(str(server.make_url("/data/broken.json")))

    with pytest.raises(CatalogParseError):
        asyncio.run(scenario())


def test_unreachable_host_raises_fetch_error() -> None:
    fetcher = AiohttpCatalogFetcher(timeout_seconds=5)

    with pytest.raises(CatalogFetchError):
        asyncio.run(fetcher.fetch_json("http://127.0.0.1:1/data/pc/1.21/items.json"))


def test_synchronizer_over_http() -> None:
    async def scenario():
        async with test_utils.TestServer(_catalog_app()) as server:
            synchronizer = CatalogSynchronizer(
                AiohttpCatalogFetcher(timeout_seconds=5),
                base_url=str(server.make_url("/data")),
            )
            return await synchronizer.synchronize("pc/1.20.1", ENTITY)

    snapshot = asyncio.run(scenario())

    assert snapshot.source == SOURCE_REMOTE
    assert [entry.id for entry in snapshot.entries] == ["zombie", "creeper"]
    assert {entry.category for entry in snapshot.entries} == {ENTITY}


def _gemini_app(calls: list) -> web.Application:
    async def generate(request: web.Request) -> web.Response:
        model = request.match_info["model"]
        calls.append((model, request.headers.get("x-goog-api-key")))
        if model == "busy-model":
            return web.json_response({"error": "rate limited"}, status=429)
        if model == "odd-model":
            return web.json_response({"candidates": [{"content": {"parts": ["hi"]}}]})
        return web.json_response({"candidates": [{"content": {"parts": [{"text": "Use /give @s diamond"}]}}]})

    app = web.Application()
    app.router.add_post("/models/{model}", generate)
    return app


def test_gemini_falls_through_to_next_model() -> None:
    calls: list = []

    async def scenario():
        async with test_utils.TestServer(_gemini_app(calls)) as server:
            assistant = GeminiAssistant(
                api_key="secret",
                models=["busy-model", "ready-model"],
                endpoint=str(server.make_url("/models/")) + "{model}",
            )
            return await assistant.generate("give me a diamond")

    assert asyncio.run(scenario()) == "Use /give @s diamond"
    assert calls == [("busy-model", "secret"), ("ready-model", "secret")]


def test_gemini_without_key_raises() -> None:
    assistant = GeminiAssistant(api_key=None, models=["gemini-2.0-flash"])

    with pytest.raises(AssistantError):
        asyncio.run(assistant.generate("hello"))


def test_gemini_unexpected_answer_shape_maps_to_failure() -> None:
    async def scenario():
        async with test_utils.TestServer(_gemini_app([])) as server:
            assistant = GeminiAssistant(
                api_key="secret",
                models=["odd-model"],
                endpoint=str(server.make_url("/models/")) + "{model}",
            )
            return await ask(assistant, "q", "java", "pc/1.21")

    assert asyncio.run(scenario()) == ASSISTANT_FAILURE
