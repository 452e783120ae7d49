from collections import deque
from typing import Iterable, Optional
from urllib.parse import urlencode

import aiohttp
import coc
import sentry_sdk
from asyncio_throttle import Throttler
from loguru import logger

from clashapi.classes import ClientError
from clashapi.utility.decoding import decode, encode, to_builtins
from clashapi.utility.errors import ClashModelError

STATUS_EXCEPTIONS = {
    400: coc.InvalidArgument,
    403: coc.Forbidden,
    404: coc.NotFound,
    500: coc.GatewayError,
    502: coc.GatewayError,
    503: coc.Maintenance,
    504: coc.GatewayError,
}


class Route:
    """Helper class to create endpoint URLs."""

    BASE = "https://api.clashofclans.com/v1"

    def __init__(self, method: str, path: str, base_url: Optional[str] = None, **kwargs):
        """
        The class is used to create the final URL used to fetch the data
        from the API. The parameters that are passed to the API are all in
        the GET request packet. This class will parse the `kwargs` dictionary
        and concatenate any parameters passed in, skipping the ones set to None.

        Parameters
        ----------
        method:
            :class:`str`: HTTP method used for the HTTP request
        path:
            :class:`str`: URL path used for the HTTP request, tags may keep their `#`
        base_url:
            :class:`str`: API root to use instead of `Route.BASE`, e.g. a local proxy
        kwargs:
            :class:`dict`: Optional options used to concatenate into the final
            URL
        """
        if "#" in path:
            path = path.replace("#", "%23")

        self.method = method
        self.path = path
        url = (base_url or self.BASE).rstrip("/") + self.path

        params = {k: v for k, v in kwargs.items() if v is not None}
        if params:
            self.url = "{}?{}".format(url, urlencode(params, True))
        else:
            self.url = url


class HTTPClient:
    """
    Sends requests to the API, one key per request in round robin.

    Non-200 answers are raised as the matching ``coc`` exception, so callers
    handle them the same way they would with coc.py.
    """

    def __init__(
        self,
        keys: Iterable[str],
        base_url: str = Route.BASE,
        throttle_limit: int = 30,
        timeout: float = 30,
    ):
        self.keys = deque(keys)
        if not self.keys:
            raise ValueError("At least one API key is required.")
        self.base_url = base_url
        self.throttler = Throttler(rate_limit=throttle_limit, period=1)
        self.timeout = timeout
        self.http_session: Optional[aiohttp.ClientSession] = None
        self.logger = logger

    async def initialize(self):
        if self.http_session is None or self.http_session.closed:
            connector = aiohttp.TCPConnector(limit=100, ttl_dns_cache=300)
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self.http_session = aiohttp.ClientSession(connector=connector, timeout=timeout)

    async def close(self):
        if self.http_session is not None and not self.http_session.closed:
            await self.http_session.close()
        self.http_session = None

    def route(self, method: str, path: str, **kwargs) -> Route:
        return Route(method, path, base_url=self.base_url, **kwargs)

    async def request(self, route: Route, json: Optional[dict] = None) -> bytes:
        """Send `route` and return the raw body of a 200 answer."""
        if self.http_session is None:
            await self.initialize()

        async with self.throttler:
            self.keys.rotate(1)
            headers = {"Authorization": f"Bearer {self.keys[0]}", "Accept": "application/json"}
            kwargs = {}
            if json is not None:
                headers["Content-Type"] = "application/json"
                kwargs["data"] = encode(json)

            self.logger.debug(f"{route.method} {route.url}")
            async with self.http_session.request(route.method, route.url, headers=headers, **kwargs) as response:
                data = await response.read()
                if response.status == 200:
                    return data
                self._raise_for_status(route, response, data)

    def _raise_for_status(self, route: Route, response, data: bytes):
        try:
            error = decode(data, type=ClientError)
        except ClashModelError:
            # gateways answer with html
            error = ClientError(reason="Unknown", message=data.decode("utf-8", errors="replace")[:200])

        self.logger.warning(f"{route.method} {route.path} returned {response.status}: {error.reason}")
        sentry_sdk.add_breadcrumb(
            category="http",
            message=f"{route.method} {route.path} returned {response.status}",
            data={"reason": error.reason, "message": error.message},
            level="warning",
        )
        exception_class = STATUS_EXCEPTIONS.get(response.status, coc.HTTPException)
        raise exception_class(response, to_builtins(error))
