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
from ..responses import HealthResponse

from ._base import EndpointClient, Route


class StatusClient(EndpointClient):

    def health(self) -> HealthResponse:
        '''API service health report.

            - ``version`` & ``version_hash``
            - ``host``
            - ``health``: one entry per backing service (nodeos,
              elasticsearch, rabbitmq)
            - ``features``: enabled indexer features

        :return: health report
        :rtype: HealthResponse
        '''
        return self._call(Route('GET', '/v2/health', HealthResponse))
