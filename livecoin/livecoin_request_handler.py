import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

import aiohttp
import ujson
from yarl import URL

from livecoin import livecoin_constants as CONSTANTS
from livecoin import livecoin_utils
from livecoin.livecoin_auth import LivecoinAuth
from livecoin.livecoin_errors import TransportError

lrh_logger = None


class LivecoinRequestHandler:
    """
    Turns one request descriptor (endpoint, params, method, auth flag) into exactly one
    HTTP exchange with the Livecoin REST API and returns the parsed JSON body.
    """

    @classmethod
    def logger(cls) -> logging.Logger:
        global lrh_logger
        if lrh_logger is None:
            lrh_logger = logging.getLogger(__name__)
        return lrh_logger

    def __init__(self,
                 auth: Optional[LivecoinAuth] = None,
                 rest_url: str = CONSTANTS.REST_URL,
                 request_timeout: Optional[float] = None,
                 shared_client: Optional[aiohttp.ClientSession] = None):
        """
        :param auth: Credentials used to sign private requests.
        :param rest_url: The base host every endpoint is resolved against.
        :param request_timeout: Total seconds allowed per request, None for no limit.
        :param shared_client: An existing session to send requests with. It is never closed here.
        """
        self.auth = auth or LivecoinAuth()
        self._rest_url = rest_url
        # None leaves a shared session on its own timeout
        self._timeout = aiohttp.ClientTimeout(total=request_timeout) if request_timeout is not None else None
        self._shared_client = shared_client

    @property
    def rest_url(self) -> str:
        return self._rest_url

    def build_url(self, endpoint: str) -> str:
        return livecoin_utils.join_paths(self._rest_url, endpoint)

    async def send(self,
                   endpoint: str,
                   params: Optional[Mapping[str, Any]] = None,
                   method: str = CONSTANTS.GET,
                   requires_auth: bool = True) -> Any:
        """
        Sends an aiohttp request and waits for a response.
        :param endpoint: The path of the API end point, relative to the base host
        :param params: Request parameters
        :param method: The HTTP method, GET or POST
        :param requires_auth: Whether the request is signed and carries the API key
        :returns A response in json format.
        """
        method = method.upper()
        if method not in CONSTANTS.SUPPORTED_METHODS:
            raise NotImplementedError(f"Unsupported HTTP method {method}.")

        # read once, the whole request is signed and stamped with this pair
        auth = self.auth
        query_string = livecoin_utils.get_param_string(params)

        url = self.build_url(endpoint)
        headers: Dict[str, str] = {}
        data = None
        if requires_auth:
            headers.update(auth.get_headers(query_string))
        if method == CONSTANTS.POST:
            headers[CONSTANTS.CONTENT_TYPE_HEADER] = CONSTANTS.FORM_CONTENT_TYPE
            data = query_string
        elif query_string:
            url = f"{url}?{query_string}"

        self.logger().debug(f"{method} {url} (signed: {requires_auth})")
        if self._shared_client is not None:
            return await self._execute(self._shared_client, method, url, headers, data)
        async with aiohttp.ClientSession(timeout=self._timeout or aiohttp.ClientTimeout(total=None)) as client:
            return await self._execute(client, method, url, headers, data)

    async def _execute(self,
                       client: aiohttp.ClientSession,
                       method: str,
                       url: str,
                       headers: Dict[str, str],
                       data: Optional[str]) -> Any:
        request_kwargs: Dict[str, Any] = {"timeout": self._timeout} if self._timeout is not None else {}
        try:
            async with client.request(method, URL(url, encoded=True), headers=headers, data=data, **request_kwargs) as response:
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger().error(f"Error calling {url}.", exc_info=True)
            raise TransportError(f"Error calling {url}. Error: {str(e)}", url, e) from e

        try:
            return ujson.loads(body)
        except ValueError as e:
            self.logger().error(f"Error parsing data from {url}. HTTP status is {response.status}.")
            raise TransportError(f"Error parsing data from {url}. Error: {str(e)}", url, e) from e
