"""Error Chain — ordering, first-responder-wins and the never-raise guarantee."""

from fastapi import Request
from fastapi.responses import PlainTextResponse

from app.api.error_handlers import (
    DEFAULT_ERROR_UNITS, ErrorChain, handle_domain_error,
)
from app.core.errors import EntityValidationError, ResourceNotFoundError


def _request(path: str = "/api/things/1") -> Request:
    return Request({
        "type": "http", "method": "GET", "path": path,
        "headers": [], "query_string": b"",
    })


async def test_first_responding_unit_wins():
    calls = []

    async def passes(request, exc):
        calls.append("passes")
        return None

    async def answers(request, exc):
        calls.append("answers")
        return PlainTextResponse("handled", status_code=409)

    async def never_reached(request, exc):
        calls.append("never")
        return PlainTextResponse("late", status_code=400)

    chain = ErrorChain([passes, answers, never_reached])
    res = await chain.handle(_request(), RuntimeError("x"))
    assert res.status_code == 409
    assert calls == ["passes", "answers"]


async def test_raising_unit_is_skipped():
    async def broken(request, exc):
        raise ValueError("unit bug")

    async def fallback(request, exc):
        return PlainTextResponse("ok", status_code=400)

    res = await ErrorChain([broken, fallback]).handle(_request(), RuntimeError("x"))
    assert res.status_code == 400


async def test_unit_answering_success_is_skipped():
    async def swallows(request, exc):
        return PlainTextResponse("fine", status_code=200)

    async def answers(request, exc):
        return PlainTextResponse("conflict", status_code=409)

    res = await ErrorChain([swallows, answers]).handle(_request(), RuntimeError("x"))
    assert res.status_code == 409

    res = await ErrorChain([swallows]).handle(_request(), RuntimeError("x"))
    assert res.status_code == 500


async def test_empty_chain_still_answers_500():
    res = await ErrorChain([]).handle(_request(), RuntimeError("x"))
    assert res.status_code == 500


async def test_domain_unit_ignores_foreign_errors():
    assert await handle_domain_error(_request(), RuntimeError("x")) is None


async def test_default_chain_maps_taxonomy_to_status():
    chain = ErrorChain(DEFAULT_ERROR_UNITS)
    not_found = await chain.handle(_request(), ResourceNotFoundError("thing", 1))
    invalid = await chain.handle(_request(), EntityValidationError("bad"))
    unknown = await chain.handle(_request(), KeyError("secret-internal"))
    assert not_found.status_code == 404
    assert invalid.status_code == 400
    assert unknown.status_code == 500
    assert b"secret-internal" not in unknown.body
