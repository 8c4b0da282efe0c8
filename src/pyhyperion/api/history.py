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
from ..structs import Sort
from ..responses import (
    AbiSnapshotResponse,
    BlockTrace,
    GetActionsResponse,
    GetActionsV1Response,
    GetDeltasResponse,
    GetScheduleResponse,
    GetTransactionResponse,
    GetTransactionV1Response,
)

from ._base import EndpointClient, Route


class HistoryClient(EndpointClient):

    def get_abi_snapshot(
        self,
        contract: str,
        block: int | None = None,
        fetch: bool | None = None
    ) -> AbiSnapshotResponse:
        '''Fetch the abi a contract had at a specific block.

        :param contract: contract account
        :param block: target block
        :param fetch: include the abi itself, otherwise only the block number
            of the snapshot is returned
        '''
        return self._call(Route(
            'GET', '/v2/history/get_abi_snapshot', AbiSnapshotResponse,
            params={
                'contract': contract,
                'block': block,
                'fetch': fetch
            }
        ))

    def get_actions(
        self,
        limit: int | None = None,
        skip: int | None = None,
        account: str | None = None,
        track: int | bool | None = None,
        filter: str | None = None,
        sort: Sort | str | None = None,
        after: str | None = None,
        before: str | None = None,
        simple: bool | None = None,
        hot_only: bool | None = None,
        no_binary: bool | None = None,
        check_lib: bool | None = None
    ) -> GetActionsResponse:
        '''Get root actions.

        :param limit: limit of [n] results per page
        :param skip: skip [n] results
        :param account: notified account
        :param track: total results to track (count) [number or true]
        :param filter: ``code:name`` filter
        :param sort: sort direction
        :param after: filter after specified date (ISO8601)
        :param before: filter before specified date (ISO8601)
        :param simple: simplified output mode, results land in
            ``simple_actions``
        :param hot_only: search only the latest hot index
        :param no_binary: exclude large binary data
        :param check_lib: perform reversibility check
        '''
        return self._call(Route(
            'GET', '/v2/history/get_actions', GetActionsResponse,
            params={
                'limit': limit,
                'skip': skip,
                'account': account,
                'track': track,
                'filter': filter,
                'sort': sort,
                'after': after,
                'before': before,
                'simple': simple,
                'hot_only': hot_only,
                'noBinary': no_binary,
                'checkLib': check_lib
            }
        ))

    def get_deltas(
        self,
        limit: int | None = None,
        skip: int | None = None,
        code: str | None = None,
        scope: str | None = None,
        table: str | None = None,
        payer: str | None = None,
        after: str | None = None,
        before: str | None = None
    ) -> GetDeltasResponse:
        '''Get state deltas.
        '''
        return self._call(Route(
            'GET', '/v2/history/get_deltas', GetDeltasResponse,
            params={
                'limit': limit,
                'skip': skip,
                'code': code,
                'scope': scope,
                'table': table,
                'payer': payer,
                'after': after,
                'before': before
            }
        ))

    def get_schedule(
        self,
        producer: str | None = None,
        key: str | None = None,
        after: str | None = None,
        before: str | None = None,
        version: int | None = None
    ) -> GetScheduleResponse:
        return self._call(Route(
            'GET', '/v2/history/get_schedule', GetScheduleResponse,
            params={
                'producer': producer,
                'key': key,
                'after': after,
                'before': before,
                'version': version
            }
        ))

    def get_transaction(self, id: str) -> GetTransactionResponse | None:
        '''Get transaction by id, ``None`` if hyperion doesn't know it.
        '''
        return self._call(Route(
            'GET', '/v2/history/get_transaction', GetTransactionResponse,
            params={'id': id},
            empty_as_none=True
        ))

    def get_block_trace(
        self,
        block_num: int | None = None,
        block_id: str | None = None
    ) -> BlockTrace | None:
        '''Get block traces by number or id.
        '''
        if block_num is None and block_id is None:
            raise ValueError('need either block_num or block_id')

        return self._call(Route(
            'POST', '/v1/trace_api/get_block', BlockTrace,
            body={
                'block_num': block_num,
                'block_id': block_id
            },
            empty_as_none=True
        ))

    # v1 history plugin compatibility routes

    def get_actions_v1(
        self,
        account_name: str,
        pos: int | None = None,
        offset: int | None = None
    ) -> GetActionsV1Response:
        return self._call(Route(
            'POST', '/v1/history/get_actions', GetActionsV1Response,
            body={
                'account_name': account_name,
                'pos': pos,
                'offset': offset
            }
        ))

    def get_transaction_v1(self, id: str) -> GetTransactionV1Response | None:
        return self._call(Route(
            'POST', '/v1/history/get_transaction', GetTransactionV1Response,
            body={'id': id},
            empty_as_none=True
        ))
