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
import enum

import msgspec
from msgspec import to_builtins

from .loose import (
    ABSENT,
    Loose,
    loose_dec_hook,
    loose_enc_hook,
)


class Struct(msgspec.Struct, frozen=True):

    def encode(self) -> bytes:
        return msgspec.json.encode(self, enc_hook=loose_enc_hook)

    def to_dict(self) -> dict:
        return to_builtins(self, enc_hook=loose_enc_hook)

    @classmethod
    def from_dict(cls, d: dict | Struct):
        if isinstance(d, cls):
            return d

        return msgspec.convert(d, type=cls, dec_hook=loose_dec_hook)


class Sort(enum.StrEnum):
    DESC = 'desc'
    ASC = 'asc'
    # legacy numeric spellings
    ONE = '1'
    MINUS_ONE = '-1'


#
# authorities
#

class PermissionLevel(Struct):
    actor: str = ''
    permission: str = ''


class KeyWeight(Struct):
    key: str = ''
    weight: int = 0


class PermissionLevelWeight(Struct):
    permission: PermissionLevel | None = None
    weight: int = 0


class WaitWeight(Struct):
    wait_sec: int = 0
    weight: int = 0


class Authority(Struct):
    threshold: int = 0
    keys: list[KeyWeight] = []
    accounts: list[PermissionLevelWeight] = []
    waits: list[WaitWeight] = []


#
# actions & traces
#

class Act(Struct):
    account: str = ''
    name: str = ''
    authorization: list[PermissionLevel] = []
    data: Loose = ABSENT
    hex_data: str = ''


class AccountRamDelta(Struct):
    account: str = ''
    delta: int = 0


class AuthSequence(Struct):
    account: str = ''
    sequence: int = 0


class ActionReceipt(Struct):
    receiver: str = ''
    global_sequence: int = 0
    recv_sequence: int = 0
    auth_sequence: list[AuthSequence] = []
    act_digest: str = ''
    code_sequence: int = 0
    abi_sequence: int = 0


class Action(Struct):
    at_timestamp: str = msgspec.field(default='', name='@timestamp')
    timestamp: str = ''
    block_num: int = 0
    block_id: str = ''
    trx_id: str = ''
    act: Act | None = None
    receipts: list[ActionReceipt] = []
    notified: list[str] = []
    cpu_usage_us: int = 0
    net_usage_words: int = 0
    account_ram_deltas: list[AccountRamDelta] = []
    global_sequence: int = 0
    receiver: str = ''
    producer: str = ''
    parent: int = 0
    action_ordinal: int = 0
    creator_action_ordinal: int = 0
    signatures: list[str] = []


class SimpleAction(Struct):
    block: int = 0
    timestamp: str = ''
    irreversible: bool = False
    contract: str = ''
    action: str = ''
    actors: str = ''
    notified: str = ''
    transaction_id: str = ''
    data: Loose = ABSENT


class ActionTrace(Struct):
    action_ordinal: int = 0
    creator_action_ordinal: int = 0
    receipt: ActionReceipt | None = None
    receiver: str = ''
    act: Act | None = None
    trx_id: str = ''
    block_num: int = 0
    block_time: str = ''
    elapsed: int = 0
    console: str = ''


class V1Action(Struct):
    account_action_seq: int = 0
    global_action_seq: int = 0
    block_num: int = 0
    block_time: str = ''
    action_trace: ActionTrace | None = None


class TraceAction(Struct):
    receiver: str = ''
    account: str = ''
    action: str = ''
    authorization: list[PermissionLevel] = []
    data: Loose = ABSENT


class TraceTransaction(Struct):
    id: str = ''
    actions: list[TraceAction] = []


class Delta(Struct):
    timestamp: str = ''
    code: str = ''
    scope: str = ''
    table: str = ''
    primary_key: str = ''
    payer: str = ''
    present: bool | int = False
    block_num: int = 0
    block_id: str = ''
    data: Loose = ABSENT


#
# accounts
#

class CreatedAccount(Struct):
    name: str = ''
    timestamp: str = ''
    trx_id: str = ''


class Link(Struct):
    block_num: int = 0
    timestamp: str = ''
    account: str = ''
    permission: str = ''
    code: str = ''
    action: str = ''
    irreversible: bool = False


class Token(Struct):
    symbol: str = ''
    precision: int = 0
    amount: float = 0.0
    contract: str = ''
    error: str = ''


class KeyPermission(Struct):
    owner: str = ''
    block_num: int = 0
    parent: str = ''
    last_updated: str = ''
    auth: Authority | None = None
    name: str = ''
    present: bool | int = False


class ResourceLimit(Struct):
    '''used/available/max are passed through as reported, the client never
    checks used <= max.
    '''
    used: int = 0
    available: int = 0
    max: int = 0
    last_usage_update_time: str = ''
    current_used: int = 0


class TotalResources(Struct):
    owner: str = ''
    net_weight: str = ''
    cpu_weight: str = ''
    ram_bytes: int = 0


class VoterInfo(Struct):
    owner: str = ''
    proxy: str = ''
    producers: list[str] = []
    staked: int | str = 0
    last_vote_weight: str = ''
    proxied_vote_weight: str = ''
    is_proxy: int = 0
    flags1: int = 0
    reserved2: int = 0
    reserved3: str = ''
    unpaid_voteshare: str = ''
    unpaid_voteshare_last_updated: str = ''
    unpaid_voteshare_change_rate: str = ''
    last_claim_time: str = ''


class LinkedAction(Struct):
    account: str = ''
    action: str = ''


class ChainPermission(Struct):
    perm_name: str = ''
    parent: str = ''
    required_auth: Authority | None = None
    linked_actions: list[LinkedAction] = []


class ChainAccount(Struct):
    account_name: str = ''
    head_block_num: int = 0
    head_block_time: str = ''
    privileged: bool = False
    last_code_update: str = ''
    created: str = ''
    core_liquid_balance: str = ''
    ram_quota: int = 0
    net_weight: int = 0
    cpu_weight: int = 0
    net_limit: ResourceLimit | None = None
    cpu_limit: ResourceLimit | None = None
    subjective_cpu_bill_limit: ResourceLimit | None = None
    ram_usage: int = 0
    permissions: list[ChainPermission] = []
    total_resources: TotalResources | None = None
    self_delegated_bandwidth: Loose = ABSENT
    refund_request: Loose = ABSENT
    voter_info: VoterInfo | None = None
    rex_info: Loose = ABSENT


#
# blocks & chain state
#

class ChainInfo(Struct):
    server_version: str = ''
    chain_id: str = ''
    head_block_num: int = 0
    last_irreversible_block_num: int = 0
    last_irreversible_block_id: str = ''
    head_block_id: str = ''
    head_block_time: str = ''
    head_block_producer: str = ''
    virtual_block_cpu_limit: int = 0
    virtual_block_net_limit: int = 0
    block_cpu_limit: int = 0
    block_net_limit: int = 0
    server_version_string: str = ''
    fork_db_head_block_num: int = 0
    fork_db_head_block_id: str = ''
    server_full_version_string: str = ''
    total_cpu_weight: str = ''
    total_net_weight: str = ''
    earliest_available_block_num: int = 0
    last_irreversible_block_time: str = ''


class BlockTransactionReceipt(Struct):
    status: str = ''
    cpu_usage_us: int = 0
    net_usage_words: int = 0
    # trx is either an id string or a packed transaction object
    trx: Loose = ABSENT


class Block(Struct):
    '''``previous`` links to the parent block by id only.
    '''
    timestamp: str = ''
    producer: str = ''
    confirmed: int = 0
    previous: str = ''
    transaction_mroot: str = ''
    action_mroot: str = ''
    schedule_version: int = 0
    new_producers: Loose = ABSENT
    producer_signature: str = ''
    transactions: list[BlockTransactionReceipt] = []
    block_extensions: list[Loose] = []
    id: str = ''
    block_num: int = 0
    ref_block_prefix: int = 0


class ProducerAuthority(Struct):
    producer_name: str = ''
    block_signing_key: str = ''
    # variant pair, [0, {threshold, keys}]
    authority: Loose = ABSENT


class ProducerSchedule(Struct):
    version: int = 0
    producers: list[ProducerAuthority] = []


class PendingSchedule(Struct):
    schedule_lib_num: int = 0
    schedule_hash: str = ''
    schedule: ProducerSchedule | None = None


class ActivatedProtocolFeatures(Struct):
    protocol_features: list[str] = []


class BlockHeaderState(Struct):
    id: str = ''
    block_num: int = 0
    header: Loose = ABSENT
    dpos_proposed_irreversible_blocknum: int = 0
    dpos_irreversible_blocknum: int = 0
    active_schedule: ProducerSchedule | None = None
    pending_schedule: PendingSchedule | None = None
    activated_protocol_features: ActivatedProtocolFeatures | None = None
    blockroot_merkle: Loose = ABSENT
    producer_to_last_produced: list[Loose] = []
    producer_to_last_implied_irb: list[Loose] = []
    confirm_count: list[int] = []
    additional_signatures: list[str] = []


class Specification(Struct):
    name: str = ''
    value: str = ''


class ProtocolFeature(Struct):
    feature_digest: str = ''
    activation_ordinal: int = 0
    activation_block_num: int = 0
    description_digest: str = ''
    dependencies: list[str] = []
    protocol_feature_type: str = ''
    specification: list[Specification] = []


class ProducerInfo(Struct):
    owner: str = ''
    total_votes: str = ''
    producer_key: str = ''
    is_active: int = 0
    url: str = ''
    unpaid_blocks: int = 0
    last_claim_time: str = ''
    location: int = 0
    producer_authority: Loose = ABSENT


class TableScope(Struct):
    code: str = ''
    scope: str = ''
    table: str = ''
    payer: str = ''
    count: int = 0


class CurrencyStats(Struct):
    supply: str = ''
    max_supply: str = ''
    issuer: str = ''


class ScheduleProducer(Struct):
    producer_name: str = ''
    block_signing_key: str = ''
    legacy_key: str = ''


#
# abi
#

class AbiType(Struct):
    new_type_name: str = ''
    type: str = ''


class AbiField(Struct):
    name: str = ''
    type: str = ''


class AbiStruct(Struct):
    name: str = ''
    base: str = ''
    fields: list[AbiField] = []


class AbiAction(Struct):
    name: str = ''
    type: str = ''
    ricardian_contract: str = ''


class AbiTable(Struct):
    name: str = ''
    index_type: str = ''
    key_names: list[str] = []
    key_types: list[str] = []
    type: str = ''


class RicardianClause(Struct):
    id: str = ''
    body: str = ''


class AbiErrorMessage(Struct):
    error_code: int = 0
    error_msg: str = ''


class AbiVariant(Struct):
    name: str = ''
    types: list[str] = []


class Abi(Struct):
    version: str = ''
    types: list[AbiType] = []
    structs: list[AbiStruct] = []
    actions: list[AbiAction] = []
    tables: list[AbiTable] = []
    ricardian_clauses: list[RicardianClause] = []
    error_messages: list[AbiErrorMessage] = []
    abi_extensions: list[Loose] = []
    variants: list[AbiVariant] = []
    action_results: list[Loose] = []

    def struct(self, name: str) -> AbiStruct | None:
        return next((s for s in self.structs if s.name == name), None)

    def action(self, name: str) -> AbiAction | None:
        return next((a for a in self.actions if a.name == name), None)

    def table(self, name: str) -> AbiTable | None:
        return next((t for t in self.tables if t.name == name), None)


#
# stats, system & status
#

class UsageStats(Struct):
    count: int = 0
    min: float = 0.0
    max: float = 0.0
    avg: float = 0.0
    sum: float = 0.0


class ResourceUsage(Struct):
    stats: UsageStats | None = None
    percentiles: dict[str, float] = {}


class MissedBlockEvent(Struct):
    at_timestamp: str = msgspec.field(default='', name='@timestamp')
    last_block: int = 0
    schedule_version: int = 0
    size: int = 0
    producer: str = ''


class MissedBlockStats(Struct):
    by_producer: Loose = ABSENT


class ProposalApproval(Struct):
    actor: str = ''
    permission: str = ''
    time: str = ''


class Proposal(Struct):
    proposer: str = ''
    proposal_name: str = ''
    primary_key: str = ''
    block_num: int = 0
    executed: bool = False
    expiration: str = ''
    requested_approvals: list[ProposalApproval] = []
    provided_approvals: list[ProposalApproval] = []
    trx: Loose = ABSENT


class Voter(Struct):
    account: str = ''
    weight: float = 0.0
    last_vote: int = 0
    data: Loose = ABSENT


class ServiceHealth(Struct):
    service: str = ''
    status: str = ''
    time: int = 0
    service_data: Loose = ABSENT


