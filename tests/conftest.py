#!/usr/bin/env python3

import json

import pytest

from pyhyperion import HyperionAPI


ENDPOINT = 'https://hyperion.test'


def body(obj) -> bytes:
    if isinstance(obj, bytes):
        return obj

    return json.dumps(obj).encode()


class StubTransport:
    '''Blocking transport that answers every request with a queued
    ``(status, body)`` pair and records what was sent.
    '''

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def reply(self, obj, status: int = 200):
        self.responses.append((status, body(obj)))
        return self

    def send(self, method, url, params=None, json=None):
        self.calls.append({
            'method': method,
            'url': url,
            'params': params,
            'json': json
        })
        return self.responses.pop(0)

    @property
    def last(self) -> dict:
        return self.calls[-1]

    def close(self):
        ...


class AsyncStubTransport(StubTransport):

    async def send(self, method, url, params=None, json=None):
        return StubTransport.send(self, method, url, params=params, json=json)

    async def aclose(self):
        ...


@pytest.fixture()
def transport():
    yield StubTransport()


@pytest.fixture()
def async_transport():
    yield AsyncStubTransport()


@pytest.fixture()
def api(transport):
    yield HyperionAPI(ENDPOINT, transport=transport)


@pytest.fixture()
def async_api(async_transport):
    yield HyperionAPI(ENDPOINT, transport=async_transport)
