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
import enum
from typing import Any

import msgspec

from .loose import loose_dec_hook, loose_enc_hook
from .responses import ResponseMeta


_decoders: dict[Any, msgspec.json.Decoder] = {}


def decoder_for(type: Any) -> msgspec.json.Decoder:
    dec = _decoders.get(type)
    if dec is None:
        dec = msgspec.json.Decoder(type=type, dec_hook=loose_dec_hook)
        _decoders[type] = dec

    return dec


_meta_decoder = msgspec.json.Decoder(type=ResponseMeta)


def is_empty_body(body: bytes) -> bool:
    '''True for the bodies hyperion answers with when an entity doesn't exist:
    nothing, ``null`` or ``{}``.
    '''
    if not body.strip():
        return True

    try:
        obj = msgspec.json.decode(body)

    except msgspec.DecodeError:
        return False

    return obj is None or obj == {}


def decode_response(body: bytes, type: Any) -> Any:
    '''Decode ``body`` into ``type``, filling the embedded ``meta`` envelope
    when the record carries one.

    Raises ``msgspec.DecodeError`` (``msgspec.ValidationError`` on type
    mismatches).
    '''
    result = decoder_for(type).decode(body)

    if (
        isinstance(result, msgspec.Struct)
        and 'meta' in result.__struct_fields__
    ):
        result = msgspec.structs.replace(
            result, meta=_meta_decoder.decode(body))

    return result


def join_url(base: str, path: str) -> str:
    '''Exactly one slash between ``base`` and ``path``.
    '''
    return base.rstrip('/') + '/' + path.lstrip('/')


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, enum.Enum):
        return str(value.value)

    return str(value)


def encode_query(params: dict[str, Any] | None) -> dict[str, str] | None:
    '''Drop unset params and render the rest the way the api expects them.
    '''
    if not params:
        return None

    query = {
        key: _query_value(value)
        for key, value in params.items()
        if value is not None
    }
    return query or None


def encode_body(body: Any) -> Any:
    '''Json body with unset keys dropped, records turned into builtins.
    '''
    if body is None:
        return None

    if isinstance(body, msgspec.Struct):
        return msgspec.to_builtins(body, enc_hook=loose_enc_hook)

    if isinstance(body, dict):
        return {
            key: encode_body(value) if isinstance(value, msgspec.Struct) else value
            for key, value in body.items()
            if value is not None
        }

    return body
