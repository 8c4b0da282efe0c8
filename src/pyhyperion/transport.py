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

import inspect
from typing import (
    Any,
    Protocol,
    runtime_checkable,
)

import httpx
import requests

from .errors import HyperionTransportError


DEFAULT_TIMEOUT = 5.0
DEFAULT_HEADERS = {
    'User-Agent': 'HyperionClient/1.0',
    'accept': 'application/json',
}


@runtime_checkable
class Transport(Protocol):
    '''Sends one request and hands back ``(status_code, body)``.

    Implementations must not raise on non 2xx statuses, interpreting them is
    the endpoint client's job. Failures to get any response at all are raised
    as ``HyperionTransportError``.
    '''

    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None
    ) -> tuple[int, bytes]:
        ...


@runtime_checkable
class AsyncTransport(Protocol):

    async def send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None
    ) -> tuple[int, bytes]:
        ...


def is_async_transport(transport: Any) -> bool:
    return inspect.iscoroutinefunction(getattr(transport, 'send', None))


class HttpxTransport:

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None
    ):
        if client is None:
            client = httpx.Client(
                timeout=httpx.Timeout(timeout),
                headers=headers or DEFAULT_HEADERS,
            )

        self._client = client

    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None
    ) -> tuple[int, bytes]:
        try:
            response = self._client.request(
                method, url, params=params, json=json)

        except httpx.TransportError as err:
            raise HyperionTransportError(method, url, repr(err)) from err

        return response.status_code, response.content

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class AsyncHttpxTransport:

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None
    ):
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                headers=headers or DEFAULT_HEADERS,
            )

        self._client = client

    async def send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None
    ) -> tuple[int, bytes]:
        try:
            response = await self._client.request(
                method, url, params=params, json=json)

        except httpx.TransportError as err:
            raise HyperionTransportError(method, url, repr(err)) from err

        return response.status_code, response.content

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()


class RequestsTransport:
    '''Blocking transport over a ``requests.Session``, for hosts that already
    ship requests. No retry adapter is mounted, failed requests surface
    immediately.
    '''

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        session: requests.Session | None = None
    ):
        if session is None:
            session = requests.Session()
            session.headers.update(headers or DEFAULT_HEADERS)

        self.timeout = timeout
        self._session = session

    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: Any = None
    ) -> tuple[int, bytes]:
        try:
            response = self._session.request(
                method, url, params=params, json=json, timeout=self.timeout)

        except requests.RequestException as err:
            raise HyperionTransportError(method, url, repr(err)) from err

        return response.status_code, response.content

    def close(self):
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
