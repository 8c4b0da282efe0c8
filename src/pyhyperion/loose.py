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
Tagged union for the loosely typed parts of hyperion responses (action data,
delta rows, producer authorities, feature flags...).

``Absent`` means the field never showed up on the wire, ``Primitive`` wraps a
json scalar and ``Blob`` keeps objects and arrays as raw json bytes so nothing
is lost until someone asks for a concrete type.
'''
from __future__ import annotations

from typing import Any

import msgspec


class Loose:
    __slots__ = ()

    @property
    def is_absent(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        raise NotImplementedError

    def to_builtins(self) -> Any:
        return self.value


class Absent(Loose):
    __slots__ = ()

    _instance: Absent | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    @property
    def is_absent(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def __eq__(self, other) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'


ABSENT = Absent()


class Primitive(Loose):
    __slots__ = ('_value',)

    def __init__(self, value: str | int | float | bool | None):
        self._value = value

    @property
    def value(self) -> str | int | float | bool | None:
        return self._value

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Primitive)
            and type(self._value) is type(other._value)
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((Primitive, self._value))

    def __repr__(self) -> str:
        return f'Primitive({self._value!r})'


class Blob(Loose):
    __slots__ = ('raw',)

    def __init__(self, raw: bytes):
        self.raw = raw

    @classmethod
    def from_value(cls, obj: dict | list) -> Blob:
        return cls(msgspec.json.encode(obj))

    @property
    def value(self) -> dict | list:
        return msgspec.json.decode(self.raw)

    def convert(self, type: Any) -> Any:
        '''Decode the kept json into ``type``, raises
        ``msgspec.ValidationError`` on mismatch.
        '''
        return msgspec.json.decode(self.raw, type=type, dec_hook=loose_dec_hook)

    def __eq__(self, other) -> bool:
        return isinstance(other, Blob) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Blob, msgspec.json.encode(self.value, order='sorted')))

    def __repr__(self) -> str:
        return f'Blob({self.raw.decode()})'


def loose(obj: Any) -> Loose:
    if isinstance(obj, Loose):
        return obj

    if isinstance(obj, (dict, list)):
        return Blob.from_value(obj)

    if obj is None or isinstance(obj, (str, int, float, bool)):
        return Primitive(obj)

    raise TypeError(f'{type(obj).__name__} is not a json value')


def loose_dec_hook(type: Any, obj: Any) -> Any:
    if type is Loose:
        return loose(obj)

    raise NotImplementedError(f'Objects of type {type} are not supported')


def loose_enc_hook(obj: Any) -> Any:
    if isinstance(obj, Loose):
        return obj.to_builtins()

    raise NotImplementedError(f'Objects of type {type(obj)} are not supported')
