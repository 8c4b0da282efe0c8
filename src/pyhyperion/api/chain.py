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
from typing import Any

from ..structs import (
    Block,
    BlockHeaderState,
    ChainAccount,
    ChainInfo,
)
from ..responses import (
    AbiBinToJsonResponse,
    AbiJsonToBinResponse,
    ActivatedProtocolFeaturesResponse,
    CodeResponse,
    CurrencyStatsResponse,
    GetAbiResponse,
    ProducersResponse,
    PushTransactionResponse,
    RawAbiResponse,
    RawCodeAndAbiResponse,
    ScheduledTransactionsResponse,
    TableByScopeResponse,
    TableRowsResponse,
)

from ._base import EndpointClient, Route


class ChainClient(EndpointClient):
    '''Node api routes (``/v1/chain/*``) as proxied by hyperion.
    '''

    def get_info(self) -> ChainInfo:
        '''Get blockchain statistics.

            - ``server_version``
            - ``head_block_num``
            - ``last_irreversible_block_num``
            - ``head_block_id``
            - ``head_block_time``
            - ``head_block_producer``
            - ``block_cpu_limit`` & ``block_net_limit``

        :return: chain info
        :rtype: ChainInfo
        '''
        return self._call(Route('GET', '/v1/chain/get_info', ChainInfo))

    def get_block(self, block_num_or_id: int | str) -> Block | None:
        '''Get a block by number or id, ``None`` if the node doesn't have it.
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_block', Block,
            body={'block_num_or_id': block_num_or_id},
            empty_as_none=True
        ))

    def get_block_header_state(
        self,
        block_num_or_id: int | str
    ) -> BlockHeaderState:
        return self._call(Route(
            'POST', '/v1/chain/get_block_header_state', BlockHeaderState,
            body={'block_num_or_id': block_num_or_id}
        ))

    def get_account(self, account_name: str) -> ChainAccount | None:
        return self._call(Route(
            'POST', '/v1/chain/get_account', ChainAccount,
            body={'account_name': account_name},
            empty_as_none=True
        ))

    def get_abi(self, account_name: str) -> GetAbiResponse:
        '''Fetches the ABI for a given account.

        :param account_name: Account to get the ABI for
        :return: account name and decoded abi, ``abi`` is ``None`` when no
            contract is deployed
        :rtype: GetAbiResponse
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_abi', GetAbiResponse,
            body={'account_name': account_name}
        ))

    def get_raw_abi(self, account_name: str) -> RawAbiResponse:
        return self._call(Route(
            'POST', '/v1/chain/get_raw_abi', RawAbiResponse,
            body={'account_name': account_name}
        ))

    def get_raw_code_and_abi(self, account_name: str) -> RawCodeAndAbiResponse:
        '''Base64 encoded wasm & abi for a given account.
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_raw_code_and_abi', RawCodeAndAbiResponse,
            body={'account_name': account_name}
        ))

    def get_code(
        self,
        account_name: str,
        code_as_wasm: bool = True
    ) -> CodeResponse:
        return self._call(Route(
            'POST', '/v1/chain/get_code', CodeResponse,
            body={
                'account_name': account_name,
                'code_as_wasm': code_as_wasm
            }
        ))

    def get_currency_balance(
        self,
        code: str,
        account: str,
        symbol: str | None = None
    ) -> list[str]:
        '''Get account balances on a token contract.

        :param code: token contract
        :param account: account to query
        :param symbol: only this symbol
        :return: balances in asset form, empty if the account has none
        :rtype: list[str]
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_currency_balance', list[str],
            body={
                'code': code,
                'account': account,
                'symbol': symbol
            }
        ))

    def get_currency_stats(
        self,
        code: str,
        symbol: str
    ) -> CurrencyStatsResponse:
        '''Token supply, max supply and issuer keyed by symbol code.
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_currency_stats', CurrencyStatsResponse,
            body={
                'code': code,
                'symbol': symbol
            }
        ))

    def get_producers(
        self,
        limit: int | None = None,
        lower_bound: str | None = None,
        json: bool = True
    ) -> ProducersResponse:
        return self._call(Route(
            'POST', '/v1/chain/get_producers', ProducersResponse,
            body={
                'limit': limit,
                'lower_bound': lower_bound,
                'json': json
            }
        ))

    def get_activated_protocol_features(
        self,
        lower_bound: int | None = None,
        upper_bound: int | None = None,
        limit: int | None = None,
        search_by_block_num: bool | None = None,
        reverse: bool | None = None
    ) -> ActivatedProtocolFeaturesResponse:
        '''Activated protocol features, ``meta.more`` holds the next lower
        bound when there are more pages.
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_activated_protocol_features',
            ActivatedProtocolFeaturesResponse,
            body={
                'lower_bound': lower_bound,
                'upper_bound': upper_bound,
                'limit': limit,
                'search_by_block_num': search_by_block_num,
                'reverse': reverse
            }
        ))

    def get_scheduled_transactions(
        self,
        lower_bound: str | None = None,
        limit: int | None = None,
        json: bool = True
    ) -> ScheduledTransactionsResponse:
        return self._call(Route(
            'POST', '/v1/chain/get_scheduled_transactions',
            ScheduledTransactionsResponse,
            body={
                'lower_bound': lower_bound,
                'limit': limit,
                'json': json
            }
        ))

    def get_table_by_scope(
        self,
        code: str,
        table: str | None = None,
        lower_bound: str | None = None,
        upper_bound: str | None = None,
        limit: int | None = None,
        reverse: bool | None = None
    ) -> TableByScopeResponse:
        return self._call(Route(
            'POST', '/v1/chain/get_table_by_scope', TableByScopeResponse,
            body={
                'code': code,
                'table': table,
                'lower_bound': lower_bound,
                'upper_bound': upper_bound,
                'limit': limit,
                'reverse': reverse
            }
        ))

    def get_table_rows(
        self,
        code: str,
        table: str,
        scope: str,
        index_position: str | None = None,
        key_type: str | None = None,
        encode_type: str | None = None,
        lower_bound: str | None = None,
        upper_bound: str | None = None,
        limit: int | None = None,
        reverse: bool | None = None,
        json: bool = True
    ) -> TableRowsResponse:
        '''Get one page of table rows.

        :param code: Account name of contract were table is located.
        :param table: Table name.
        :param scope: Table scope in LEAP name format.

        :return: rows (``Blob`` per row when ``json`` is set), ``next_key``
            and ``meta.more`` for pagination
        :rtype: TableRowsResponse
        '''
        return self._call(Route(
            'POST', '/v1/chain/get_table_rows', TableRowsResponse,
            body={
                'code': code,
                'table': table,
                'scope': scope,
                'index_position': index_position,
                'key_type': key_type,
                'encode_type': encode_type,
                'lower_bound': lower_bound,
                'upper_bound': upper_bound,
                'limit': limit,
                'reverse': reverse,
                'json': json
            }
        ))

    def abi_json_to_bin(
        self,
        code: str,
        action: str,
        args: dict[str, Any]
    ) -> AbiJsonToBinResponse:
        return self._call(Route(
            'POST', '/v1/chain/abi_json_to_bin', AbiJsonToBinResponse,
            body={
                'code': code,
                'action': action,
                'args': args
            }
        ))

    def abi_bin_to_json(
        self,
        code: str,
        action: str,
        binargs: str
    ) -> AbiBinToJsonResponse:
        return self._call(Route(
            'POST', '/v1/chain/abi_bin_to_json', AbiBinToJsonResponse,
            body={
                'code': code,
                'action': action,
                'binargs': binargs
            }
        ))

    # tx submission, single shot, a failed push is raised not retried

    def push_transaction(self, tx: dict) -> PushTransactionResponse:
        return self._call(Route(
            'POST', '/v1/chain/push_transaction', PushTransactionResponse,
            body=tx
        ))

    def push_transactions(
        self,
        txs: list[dict]
    ) -> list[PushTransactionResponse]:
        return self._call(Route(
            'POST', '/v1/chain/push_transactions',
            list[PushTransactionResponse],
            body=txs
        ))

    def send_transaction(self, tx: dict) -> PushTransactionResponse:
        return self._call(Route(
            'POST', '/v1/chain/send_transaction', PushTransactionResponse,
            body=tx
        ))
