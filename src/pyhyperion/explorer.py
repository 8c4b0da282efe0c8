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
Presentation logic of the account/block/info explorer panel, kept apart from
any ui toolkit: widgets turn user events into command values, ``update`` runs
at most one api call per command and folds the outcome into a new
``ViewState``, ``labels`` renders what the panel shows.
'''
from __future__ import annotations
import enum

from msgspec.structs import replace

from .structs import Struct, Block, ChainInfo
from .responses import GetCreatorResponse
from .errors import HyperionAPIError


class FilterType(enum.StrEnum):
    ACCOUNT = 'Account'
    BLOCK = 'Block'
    INFO = 'Info'


class SelectFilter(Struct, tag='select_filter'):
    filter: FilterType


class Search(Struct, tag='search'):
    text: str


class ShowInfo(Struct, tag='show_info'):
    ...


class Close(Struct, tag='close'):
    ...


Command = SelectFilter | Search | ShowInfo | Close


class ViewState(Struct):
    filter: FilterType = FilterType.ACCOUNT
    visible: bool = True
    creator: GetCreatorResponse | None = None
    block: Block | None = None
    info: ChainInfo | None = None
    message: str = ''
    error: str | None = None


def update(state: ViewState, command: Command, api) -> ViewState:
    '''Apply ``command`` to ``state``.

    ``api`` is a ``HyperionAPI`` over a blocking transport. Api failures end
    up in ``error`` (the raw response body), any other exception propagates.
    '''
    match command:
        case SelectFilter(filter=filter_type):
            return replace(state, filter=filter_type, message='', error=None)

        case ShowInfo():
            state = replace(state, filter=FilterType.INFO, message='', error=None)
            try:
                return replace(state, info=api.chain.get_info())

            except HyperionAPIError as err:
                return replace(state, error=err.content or str(err))

        case Close():
            return replace(state, visible=False)

        case Search(text=text):
            return _search(state, text, api)

    raise TypeError(f'unknown command {command!r}')


def _search(state: ViewState, text: str, api) -> ViewState:
    state = replace(state, message='', error=None)
    try:
        match state.filter:
            case FilterType.ACCOUNT:
                creator = api.accounts.get_creator(text)
                if creator is None:
                    return replace(state, message='account not found')

                return replace(state, creator=creator)

            case FilterType.BLOCK:
                block = api.chain.get_block(text)
                if block is None:
                    return replace(state, message='block not found')

                return replace(state, block=block)

            case _:
                return state

    except HyperionAPIError as err:
        return replace(state, error=err.content or str(err))


def labels(state: ViewState) -> dict[str, str]:
    '''Label texts for the active box, keyed by widget name.
    '''
    rows: dict[str, str] = {'filter-type': str(state.filter)}

    match state.filter:
        case FilterType.ACCOUNT if state.creator is not None:
            creator = state.creator
            rows.update({
                'account-name-label': creator.account,
                'timespan-label': creator.timestamp,
                'transaction-id-label': creator.trx_id,
                'block-number-label': str(creator.block_num),
                'creator-label': creator.creator,
            })

        case FilterType.BLOCK if state.block is not None:
            block = state.block
            rows.update({
                'block-number-block-label': str(block.block_num),
                'block-action-mroot-label': block.action_mroot,
                'confirm-label': str(block.confirmed),
                'previous-block-label': block.previous,
                'block-producer-signature-label': block.producer_signature,
                'timestamp-block-label': block.timestamp,
                'block-transaction-mroot-label': block.transaction_mroot,
            })

        case FilterType.INFO if state.info is not None:
            info = state.info
            rows.update({
                'head-block-id-label': info.head_block_id,
                'block-cpu-limit-label': str(info.block_cpu_limit),
                'block-net-limit-label': str(info.block_net_limit),
                'chain-id-label': info.chain_id,
                'fork-block-id-label': info.fork_db_head_block_id,
                'fork-block-number-label': str(info.fork_db_head_block_num),
                'head-block-number-label': str(info.head_block_num),
                'head-block-producer-label': info.head_block_producer,
                'head-block-time-label': info.head_block_time,
            })

    if state.message:
        rows['status-label'] = state.message

    if state.error is not None:
        rows['error-label'] = state.error

    return rows
