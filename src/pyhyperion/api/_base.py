# py-hyperion: Hyperion history API client
# Copyright 2021-eternity Guillermo Rodriguez

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.

# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from __future__ import annotations

import logging
from typing import Any

import msgspec

from ..codec import (
    decode_response,
    encode_body,
    encode_query,
    is_empty_body,
    join_url,
)
from ..errors import HyperionAPIError, HyperionParseError
from ..transport import (
    HttpxTransport,
    is_async_transport,
)


DEFAULT_ENDPOINT = 'https://api.wax.liquidstudios.io'


class Route(msgspec.Struct, frozen=True):
    '''Everything needed to perform and decode one api call.

    :param empty_as_none: an empty, ``null`` or ``{}`` body on a 2xx is the
        api's way of saying "no such entity", return ``None`` instead of
        decoding
    '''
    method: str
    path: str
    type: Any
    params: dict[str, Any] | None = None
    body: Any = None
    empty_as_none: bool = False


class EndpointClient:
    '''Base for the per area clients.

    ``endpoint``, ``transport`` and ``logger`` are fixed at construction,
    calls share no other state so one instance can serve concurrent callers.

    When ``transport`` is asynchronous (its ``send`` is a coroutine function)
    every endpoint method returns an awaitable of the same result.

    :param endpoint: hyperion base url, with or without trailing slash
    :param transport: defaults to a fresh ``HttpxTransport``
    :param logger: optional logger, will use one named hyperion if none
    '''

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        transport=None,
        logger: logging.Logger | None = None
    ):
        if logger is None:
            self.logger = logging.getLogger('hyperion')
        else:
            self.logger = logger

        if transport is None:
            transport = HttpxTransport()

        self._endpoint = endpoint
        self._transport = transport
        self._is_async = is_async_transport(transport)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def transport(self):
        return self._transport

    @property
    def is_async(self) -> bool:
        return self._is_async

    def url(self, path: str) -> str:
        return join_url(self._endpoint, path)

    def _call(self, route: Route) -> Any:
        url = self.url(route.path)
        params = encode_query(route.params)
        body = encode_body(route.body)

        self.logger.debug(f'{route.method} {url} params={params} body={body}')

        if self._is_async:
            return self._acall(route, url, params, body)

        status, content = self._transport.send(
            route.method, url, params=params, json=body)

        return self._unwrap(route, status, content)

    async def _acall(self, route: Route, url: str, params, body) -> Any:
        status, content = await self._transport.send(
            route.method, url, params=params, json=body)

        return self._unwrap(route, status, content)

    def _unwrap(self, route: Route, status: int, content: bytes) -> Any:
        if not 200 <= status < 300:
            err = HyperionAPIError(status, _text(content))
            self.logger.error(repr(err))
            raise err

        if route.empty_as_none and is_empty_body(content):
            return None

        try:
            return decode_response(content, route.type)

        except msgspec.DecodeError as decode_err:
            err = HyperionParseError(status, _text(content), str(decode_err))
            self.logger.error(repr(err))
            raise err from decode_err


def _text(content: bytes | None) -> str | None:
    if content is None:
        return None

    return content.decode('utf-8', errors='replace')
