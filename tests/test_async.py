#!/usr/bin/env python3

import inspect

import pytest
import trio

from pyhyperion import HyperionAPIError


def test_async_call_returns_awaitable(async_api, async_transport):
    async_transport.reply({'account': 'alice', 'creator': 'eosio'})

    pending = async_api.accounts.get_creator('alice')
    assert inspect.isawaitable(pending)

    async def main():
        return await pending

    creator = trio.run(main)

    assert creator.creator == 'eosio'
    assert async_transport.last['params'] == {'account': 'alice'}


def test_async_not_found(async_api, async_transport):
    async_transport.reply({})

    async def main():
        return await async_api.history.get_transaction('00ff')

    assert trio.run(main) is None


def test_async_error(async_api, async_transport):
    async_transport.reply(b'"internal error"', status=500)

    async def main():
        await async_api.chain.get_info()

    with pytest.raises(HyperionAPIError) as err:
        trio.run(main)

    assert err.value.status_code == 500
    assert err.value.content == '"internal error"'


def test_async_concurrent_calls(async_api, async_transport):
    for i in range(5):
        async_transport.reply({'account_names': [f'acc{i}']})

    results = []

    async def fetch(key):
        resp = await async_api.accounts.get_key_accounts(key)
        results.append(resp.account_names[0])

    async def main():
        async with trio.open_nursery() as n:
            for i in range(5):
                n.start_soon(fetch, f'EOS{i}')

    trio.run(main)

    assert sorted(results) == [f'acc{i}' for i in range(5)]
    assert len(async_transport.calls) == 5


def test_async_context_manager(async_api):
    async def main():
        async with async_api as api:
            assert api.is_async

    trio.run(main)
