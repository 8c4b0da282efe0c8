#!/usr/bin/env python3

from __future__ import annotations

import json
import string
import random
import logging

from typing import Iterator

from .loose import Loose
from .structs import Struct, Action


#
# data generators for testing
#

def random_token_symbol():
    return ''.join(
        random.choice(string.ascii_uppercase)
        for _ in range(3)
    )

def random_leap_name():
    return ''.join(
        random.choice('12345abcdefghijklmnopqrstuvwxyz')
        for _ in range(12)
    )


class HyperionJSONEncoder(json.JSONEncoder):

    def default(self, obj):
        if isinstance(obj, Struct):
            return obj.to_dict()

        if isinstance(obj, Loose):
            return obj.to_builtins()

        return super().default(obj)


#
# pagination over blocking clients
#

def iter_table_rows(
    chain,
    code: str,
    scope: str,
    table: str,
    logger=None,
    **kwargs
) -> Iterator[Loose]:
    '''Walk every row of a table following ``next_key``.

    :param chain: ``ChainClient`` over a blocking transport
    :param kwargs: extra ``get_table_rows`` arguments
    '''
    if logger is None:
        logger = logging.getLogger('hyperion')

    done = False
    while not done:
        resp = chain.get_table_rows(code, table, scope, **kwargs)

        logger.debug(f'get_table {code} {scope} {table}: {len(resp.rows)} rows')
        yield from resp.rows

        done = not resp.meta.more or not resp.next_key
        if not done:
            kwargs['lower_bound'] = resp.next_key


def iter_actions(
    history,
    account: str,
    page_size: int = 100,
    **kwargs
) -> Iterator[Action]:
    '''Walk an account's actions page by page with ``skip``.

    :param history: ``HistoryClient`` over a blocking transport
    :param kwargs: extra ``get_actions`` filters
    '''
    skip = 0
    while True:
        resp = history.get_actions(
            account=account, limit=page_size, skip=skip, **kwargs)

        yield from resp.actions

        if len(resp.actions) < page_size:
            break

        skip += len(resp.actions)
