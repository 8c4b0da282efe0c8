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
from ..responses import (
    GetProposalsResponse,
    GetVotersResponse,
)

from ._base import EndpointClient, Route


class SystemClient(EndpointClient):

    def get_proposals(
        self,
        proposer: str | None = None,
        proposal: str | None = None,
        account: str | None = None,
        requested: str | None = None,
        provided: str | None = None,
        executed: bool | None = None,
        track: int | bool | None = None,
        skip: int | None = None,
        limit: int | None = None
    ) -> GetProposalsResponse:
        '''Get msig proposals.

        :param proposer: filter by proposer
        :param proposal: filter by proposal name
        :param account: filter by either requested or provided account
        :param requested: filter by requested account
        :param provided: filter by provided account
        :param executed: filter by execution status
        :param track: total results to track (count) [number or true]
        :param skip: skip [n] results
        :param limit: limit of [n] results per page
        '''
        return self._call(Route(
            'GET', '/v2/state/get_proposals', GetProposalsResponse,
            params={
                'proposer': proposer,
                'proposal': proposal,
                'account': account,
                'requested': requested,
                'provided': provided,
                'executed': executed,
                'track': track,
                'skip': skip,
                'limit': limit
            }
        ))

    def get_voters(
        self,
        limit: int | None = None,
        skip: int | None = None,
        producer: str | None = None
    ) -> GetVotersResponse:
        return self._call(Route(
            'GET', '/v2/state/get_voters', GetVotersResponse,
            params={
                'limit': limit,
                'skip': skip,
                'producer': producer
            }
        ))
