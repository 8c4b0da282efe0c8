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
'''
Response records, one per endpoint shape.

Hyperion v2 responses share a metadata envelope (query time, cache flags,
lib, totals, pagination). Instead of every response inheriting it, each one
embeds a ``ResponseMeta`` as ``meta``, filled from the same body by
``pyhyperion.codec.decode_response``.
'''
from __future__ import annotations

import msgspec

from .loose import ABSENT, Loose
from .structs import (
    Struct,
    Abi,
    Action,
    ActionTrace,
    ChainAccount,
    CreatedAccount,
    CurrencyStats,
    Delta,
    KeyPermission,
    Link,
    MissedBlockEvent,
    MissedBlockStats,
    ProducerInfo,
    Proposal,
    ProtocolFeature,
    ResourceUsage,
    ScheduleProducer,
    ServiceHealth,
    SimpleAction,
    TableScope,
    Token,
    TraceTransaction,
    V1Action,
    Voter,
)


class Total(Struct):
    value: int = 0
    relation: str = ''


class ResponseMeta(Struct):
    query_time_ms: float = 0.0
    cached: bool = False
    hot_only: bool = False
    lib: int = 0
    # object on v2 history routes, plain count on some state routes
    total: Total | int | None = None
    last_indexed_block: int = 0
    last_indexed_block_time: str = ''
    # table queries use bool, feature queries the next bound as int,
    # producer & scheduled tx queries a string key
    more: bool | int | str | None = None


def _meta():
    return msgspec.field(default_factory=ResponseMeta)


#
# status
#

class HealthResponse(Struct):
    version: str = ''
    version_hash: str = ''
    host: str = ''
    health: list[ServiceHealth] = []
    features: Loose = ABSENT
    meta: ResponseMeta = _meta()

    def service(self, name: str) -> ServiceHealth | None:
        return next((s for s in self.health if s.service == name), None)


#
# history
#

class AbiSnapshotResponse(Struct):
    block_num: int = 0
    present: bool = False
    abi: Abi | None = None
    meta: ResponseMeta = _meta()


class GetActionsResponse(Struct):
    actions: list[Action] = []
    simple_actions: list[SimpleAction] = []
    meta: ResponseMeta = _meta()


class GetDeltasResponse(Struct):
    deltas: list[Delta] = []
    meta: ResponseMeta = _meta()


class GetScheduleResponse(Struct):
    timestamp: str = ''
    block_num: int = 0
    version: int = 0
    producers: list[ScheduleProducer] = []
    meta: ResponseMeta = _meta()


class GetTransactionResponse(Struct):
    trx_id: str = ''
    executed: bool = False
    actions: list[Action] = []
    meta: ResponseMeta = _meta()


class BlockTrace(Struct):
    id: str = ''
    number: int = 0
    previous_id: str = ''
    status: str = ''
    timestamp: str = ''
    producer: str = ''
    transactions: list[TraceTransaction] = []
    meta: ResponseMeta = _meta()


class GetActionsV1Response(Struct):
    query_time: float = 0.0
    last_irreversible_block: int = 0
    actions: list[V1Action] = []
    meta: ResponseMeta = _meta()


class GetTransactionV1Response(Struct):
    id: str = ''
    trx: Loose = ABSENT
    block_time: str = ''
    block_num: int = 0
    last_irreversible_block: int = 0
    traces: list[ActionTrace] = []
    meta: ResponseMeta = _meta()


#
# accounts
#

class GetCreatedAccountsResponse(Struct):
    accounts: list[CreatedAccount] = []
    meta: ResponseMeta = _meta()


class GetCreatorResponse(Struct):
    account: str = ''
    creator: str = ''
    timestamp: str = ''
    block_num: int = 0
    trx_id: str = ''
    indirect_creator: str = ''
    meta: ResponseMeta = _meta()


class GetAccountResponse(Struct):
    account: ChainAccount | None = None
    links: list[Link] = []
    tokens: list[Token] = []
    total_actions: int = 0
    actions: list[Action] = []
    meta: ResponseMeta = _meta()


class KeyAccountsResponse(Struct):
    '''Shared by the v2 state route and the v1 history route, ``permissions``
    only shows up on v2 with ``details=true``.
    '''
    account_names: list[str] = []
    permissions: list[KeyPermission] = []
    meta: ResponseMeta = _meta()


class ControlledAccountsResponse(Struct):
    controlled_accounts: list[str] = []
    meta: ResponseMeta = _meta()


class GetLinksResponse(Struct):
    links: list[Link] = []
    meta: ResponseMeta = _meta()


class GetTokensResponse(Struct):
    account: str = ''
    tokens: list[Token] = []
    meta: ResponseMeta = _meta()


#
# system
#

class GetProposalsResponse(Struct):
    proposals: list[Proposal] = []
    meta: ResponseMeta = _meta()


class GetVotersResponse(Struct):
    voters: list[Voter] = []
    meta: ResponseMeta = _meta()


#
# stats
#

class ActionUsageResponse(Struct):
    action_count: int = 0
    tx_count: int = 0
    unique_actors: int = 0
    period: str = ''
    from_: str = msgspec.field(default='', name='from')
    to: str = ''
    meta: ResponseMeta = _meta()


class MissedBlocksResponse(Struct):
    stats: MissedBlockStats | None = None
    events: list[MissedBlockEvent] = []
    meta: ResponseMeta = _meta()


class ResourceUsageResponse(Struct):
    cpu: ResourceUsage | None = None
    net: ResourceUsage | None = None
    meta: ResponseMeta = _meta()


#
# chain
#

class GetAbiResponse(Struct):
    account_name: str = ''
    abi: Abi | None = None
    meta: ResponseMeta = _meta()


class RawAbiResponse(Struct):
    account_name: str = ''
    code_hash: str = ''
    abi_hash: str = ''
    abi: str = ''
    meta: ResponseMeta = _meta()


class RawCodeAndAbiResponse(Struct):
    account_name: str = ''
    wasm: str = ''
    abi: str = ''
    meta: ResponseMeta = _meta()


class CodeResponse(Struct):
    account_name: str = ''
    code_hash: str = ''
    wast: str = ''
    wasm: str = ''
    abi: Abi | None = None
    meta: ResponseMeta = _meta()


class ProducersResponse(Struct):
    rows: list[ProducerInfo] = []
    total_producer_vote_weight: str = ''
    meta: ResponseMeta = _meta()


class ActivatedProtocolFeaturesResponse(Struct):
    activated_protocol_features: list[ProtocolFeature] = []
    meta: ResponseMeta = _meta()


class ScheduledTransactionsResponse(Struct):
    transactions: list[Loose] = []
    meta: ResponseMeta = _meta()


class TableByScopeResponse(Struct):
    rows: list[TableScope] = []
    meta: ResponseMeta = _meta()


class TableRowsResponse(Struct):
    rows: list[Loose] = []
    next_key: str = ''
    ram_payers: list[str] = []
    meta: ResponseMeta = _meta()


class AbiJsonToBinResponse(Struct):
    binargs: str = ''
    meta: ResponseMeta = _meta()


class AbiBinToJsonResponse(Struct):
    args: Loose = ABSENT
    meta: ResponseMeta = _meta()


class PushTransactionResponse(Struct):
    transaction_id: str = ''
    processed: Loose = ABSENT
    meta: ResponseMeta = _meta()


CurrencyStatsResponse = dict[str, CurrencyStats]
