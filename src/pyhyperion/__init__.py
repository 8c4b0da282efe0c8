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
from .errors import (
    ChainAPIError,
    ChainHTTPError,
    HyperionAPIError,
    HyperionError,
    HyperionParseError,
    HyperionTransportError,
)
from .loose import (
    ABSENT,
    Absent,
    Blob,
    Loose,
    Primitive,
    loose,
)
from .transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    RequestsTransport,
    Transport,
)
from .api import (
    AccountsClient,
    ChainClient,
    EndpointClient,
    HistoryClient,
    Route,
    StatsClient,
    StatusClient,
    SystemClient,
)
from .hyperion import (
    ClientConfig,
    HyperionAPI,
    make_transport,
)
