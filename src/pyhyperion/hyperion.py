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
from typing import Literal

from .structs import Struct
from .transport import (
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    AsyncHttpxTransport,
    HttpxTransport,
    RequestsTransport,
    is_async_transport,
)
from .api import (
    DEFAULT_ENDPOINT,
    AccountsClient,
    ChainClient,
    HistoryClient,
    StatsClient,
    StatusClient,
    SystemClient,
)


Backend = Literal['httpx', 'httpx-async', 'requests']


class ClientConfig(Struct):
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_HEADERS['User-Agent']
    backend: Backend = 'httpx'

    @property
    def headers(self) -> dict[str, str]:
        return {
            **DEFAULT_HEADERS,
            'User-Agent': self.user_agent
        }


def make_transport(config: ClientConfig):
    match config.backend:
        case 'httpx':
            return HttpxTransport(
                timeout=config.timeout, headers=config.headers)

        case 'httpx-async':
            return AsyncHttpxTransport(
                timeout=config.timeout, headers=config.headers)

        case 'requests':
            return RequestsTransport(
                timeout=config.timeout, headers=config.headers)

        case _:
            raise ValueError(f'unknown transport backend {config.backend!r}')


class HyperionAPI:
    '''All endpoint clients over one shared transport.

    :param endpoint: hyperion base url
    :param transport: sync or async transport, defaults to ``HttpxTransport``
    :param logger: optional logger, will create one named hyperion if none
    '''

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        transport=None,
        logger: logging.Logger | None = None
    ):
        if logger is None:
            logger = logging.getLogger('hyperion')

        if transport is None:
            transport = HttpxTransport()

        self.endpoint = endpoint
        self.transport = transport
        self.logger = logger

        client_args = (endpoint, transport, logger)
        self.accounts = AccountsClient(*client_args)
        self.chain = ChainClient(*client_args)
        self.history = HistoryClient(*client_args)
        self.stats = StatsClient(*client_args)
        self.status = StatusClient(*client_args)
        self.system = SystemClient(*client_args)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig | dict,
        logger: logging.Logger | None = None
    ) -> HyperionAPI:
        config = ClientConfig.from_dict(config)
        return cls(
            endpoint=config.endpoint,
            transport=make_transport(config),
            logger=logger
        )

    @property
    def is_async(self) -> bool:
        return is_async_transport(self.transport)

    def close(self):
        self.transport.close()

    async def aclose(self):
        await self.transport.aclose()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
