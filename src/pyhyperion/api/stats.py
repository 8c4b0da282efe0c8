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
    ActionUsageResponse,
    MissedBlocksResponse,
    ResourceUsageResponse,
)

from ._base import EndpointClient, Route


class StatsClient(EndpointClient):

    def get_action_usage(
        self,
        period: str,
        end_date: str | None = None,
        unique_actors: bool | None = None
    ) -> ActionUsageResponse:
        '''Action and transaction stats for a given period.

        :param period: analysis period, ``1h``, ``24h``, ``7d``...
        :param end_date: final date (ISO8601)
        :param unique_actors: also compute unique actors
        '''
        return self._call(Route(
            'GET', '/v2/stats/get_action_usage', ActionUsageResponse,
            params={
                'period': period,
                'end_date': end_date,
                'unique_actors': unique_actors
            }
        ))

    def get_missed_blocks(
        self,
        producer: str | None = None,
        after: str | None = None,
        before: str | None = None,
        min_blocks: int | None = None
    ) -> MissedBlocksResponse:
        return self._call(Route(
            'GET', '/v2/stats/get_missed_blocks', MissedBlocksResponse,
            params={
                'producer': producer,
                'after': after,
                'before': before,
                'min_blocks': min_blocks
            }
        ))

    def get_resource_usage(
        self,
        code: str,
        action: str
    ) -> ResourceUsageResponse:
        '''cpu & net usage stats for a specific action.
        '''
        return self._call(Route(
            'GET', '/v2/stats/get_resource_usage', ResourceUsageResponse,
            params={
                'code': code,
                'action': action
            }
        ))
