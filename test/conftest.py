import asyncio
from dataclasses import dataclass
from typing import List

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict


@dataclass
class RecordedRequest:
    method: str
    path: str
    query_string: str
    body: str
    headers: CIMultiDict


class LivecoinMockServer:
    """
    A local HTTP server standing in for api.livecoin.net. It records the raw shape of
    every request and answers with a configurable body.
    """

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self.response_body = '{"success": true}'
        self.response_status = 200
        self.response_delay = 0.0
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        self._server = TestServer(app)

    async def _handle(self, request: web.Request) -> web.Response:
        path, _, query_string = request.raw_path.partition("?")
        self.requests.append(RecordedRequest(
            method=request.method,
            path=path,
            query_string=query_string,
            body=await request.text(),
            headers=CIMultiDict(request.headers),
        ))
        if self.response_delay:
            await asyncio.sleep(self.response_delay)
        return web.Response(text=self.response_body, status=self.response_status,
                            content_type="application/json")

    @property
    def url(self) -> str:
        return str(self._server.make_url("/")).rstrip("/")

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def start(self):
        await self._server.start_server()

    async def close(self):
        await self._server.close()


@pytest.fixture
async def livecoin_server():
    server = LivecoinMockServer()
    await server.start()
    yield server
    await server.close()
