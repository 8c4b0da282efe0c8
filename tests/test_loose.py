#!/usr/bin/env python3

import msgspec
import pytest

from pyhyperion import ABSENT, Absent, Blob, Loose, Primitive, loose
from pyhyperion.loose import loose_dec_hook
from pyhyperion.structs import Act, PermissionLevel


def test_absent_singleton():
    assert Absent() is ABSENT
    assert ABSENT.is_absent
    assert ABSENT.value is None
    assert not ABSENT
    assert ABSENT != Primitive(None)


@pytest.mark.parametrize('value', ['eosio', 42, 1.5, True, None])
def test_primitive(value):
    prim = loose(value)

    assert isinstance(prim, Primitive)
    assert not prim.is_absent
    assert prim.value == value


def test_primitive_keeps_json_type():
    assert Primitive(1) != Primitive(True)
    assert Primitive(1) != Primitive('1')
    assert Primitive('a') == Primitive('a')


def test_blob():
    blob = loose({'from': 'alice', 'to': 'bob', 'amounts': [1, 2]})

    assert isinstance(blob, Blob)
    assert blob.value == {'from': 'alice', 'to': 'bob', 'amounts': [1, 2]}
    assert blob == Blob(b'{"from":"alice","to":"bob","amounts":[1,2]}')
    assert loose(blob) is blob


def test_blob_convert():
    blob = loose({'actor': 'alice', 'permission': 'active'})

    assert blob.convert(PermissionLevel) == PermissionLevel(
        actor='alice', permission='active')

    with pytest.raises(msgspec.ValidationError):
        blob.convert(list[int])


def test_loose_rejects_non_json():
    with pytest.raises(TypeError):
        loose(object())


def test_loose_fields_decode():
    act = msgspec.json.decode(
        b'{"account": "eosio", "name": "setcode", "data": "0061736d"}',
        type=Act,
        dec_hook=loose_dec_hook
    )

    assert isinstance(act.data, Loose)
    assert act.data == Primitive('0061736d')


def test_loose_fields_encode():
    act = Act(account='eosio.token', name='transfer', data=loose({'memo': 'hi'}))

    assert act.to_dict()['data'] == {'memo': 'hi'}
    assert Act.from_dict(act.to_dict()) == act


def test_blob_hash_follows_equality():
    spaced = Blob(b'{"a": 1, "b": [1, 2]}')
    compact = Blob(b'{"b":[1,2],"a":1}')

    assert spaced == compact
    assert hash(spaced) == hash(compact)
    assert len({spaced, compact}) == 1
