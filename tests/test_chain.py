#!/usr/bin/env python3

import pytest

from pyhyperion import Blob, HyperionAPIError
from pyhyperion.structs import ChainInfo


INFO = {
    'server_version': 'd133c641',
    'chain_id': '1064487b3cd1a897ce03ae5b6a865651747e2e152090f99c1d19d44e01aea5a4',
    'head_block_num': 250000000,
    'last_irreversible_block_num': 249999670,
    'last_irreversible_block_id': '0ee6b0f6aa',
    'head_block_id': '0ee6b280bb',
    'head_block_time': '2023-06-01T00:00:00.000',
    'head_block_producer': 'eosnationftw',
    'virtual_block_cpu_limit': 200000000,
    'virtual_block_net_limit': 1048576000,
    'block_cpu_limit': 199900,
    'block_net_limit': 1048576,
    'server_version_string': 'v4.0.4',
    'fork_db_head_block_num': 250000000,
    'fork_db_head_block_id': '0ee6b280bb'
}

BLOCK = {
    'timestamp': '2023-06-01T00:00:00.000',
    'producer': 'eosnationftw',
    'confirmed': 0,
    'previous': '0ee6b27fcc',
    'transaction_mroot': '00' * 32,
    'action_mroot': 'ff' * 32,
    'schedule_version': 42,
    'producer_signature': 'SIG_K1_abc',
    'transactions': [{
        'status': 'executed',
        'cpu_usage_us': 120,
        'net_usage_words': 16,
        'trx': 'deadbeef'
    }],
    'id': '0ee6b280bb',
    'block_num': 250000000,
    'ref_block_prefix': 12345
}

CHAIN_ERROR = {
    'code': 500,
    'message': 'Internal Service Error',
    'error': {
        'code': 3010001,
        'name': 'name_type_exception',
        'what': 'Invalid name',
        'details': [{
            'message': 'Name should be less than 13 characters',
            'file': 'name.cpp',
            'line_number': 15,
            'method': 'set'
        }]
    }
}


def test_get_info(api, transport):
    transport.reply(INFO)

    info = api.chain.get_info()

    assert isinstance(info, ChainInfo)
    assert info.head_block_producer == 'eosnationftw'
    assert info.block_cpu_limit == 199900
    assert transport.last['method'] == 'GET'
    assert transport.last['url'] == 'https://hyperion.test/v1/chain/get_info'


def test_get_block(api, transport):
    transport.reply(BLOCK)

    block = api.chain.get_block(250000000)

    assert block.block_num == 250000000
    assert block.producer == 'eosnationftw'
    assert block.transactions[0].cpu_usage_us == 120
    assert block.transactions[0].trx.value == 'deadbeef'
    assert transport.last['method'] == 'POST'
    assert transport.last['json'] == {'block_num_or_id': 250000000}


def test_get_block_not_found(api, transport):
    transport.reply(b'')
    assert api.chain.get_block('0ee6b280bb') is None


def test_chain_error_envelope(api, transport):
    transport.reply(CHAIN_ERROR, status=500)

    with pytest.raises(HyperionAPIError) as err:
        api.chain.get_account('waytoolongaccountname')

    chain_error = err.value.chain_error
    assert err.value.status_code == 500
    assert chain_error is not None
    assert chain_error.code == 3010001
    assert chain_error.name == 'name_type_exception'
    assert chain_error.messages == ['Name should be less than 13 characters']
    assert 'ChainAPIError [3010001]' in repr(err.value)


def test_plain_error_has_no_chain_error(api, transport):
    transport.reply({'statusCode': 404, 'message': 'not found'}, status=404)

    with pytest.raises(HyperionAPIError) as err:
        api.chain.get_abi('nobody')

    assert err.value.chain_error is None


def test_get_currency_balance(api, transport):
    transport.reply(['100.0000 EOS', '5.0000 TLOS'])

    balances = api.chain.get_currency_balance('eosio.token', 'alice')

    assert balances == ['100.0000 EOS', '5.0000 TLOS']
    assert transport.last['json'] == {'code': 'eosio.token', 'account': 'alice'}


def test_get_currency_balance_empty(api, transport):
    transport.reply([])
    assert api.chain.get_currency_balance('eosio.token', 'alice', 'EOS') == []
    assert transport.last['json']['symbol'] == 'EOS'


def test_get_currency_stats(api, transport):
    transport.reply({
        'EOS': {
            'supply': '1000.0000 EOS',
            'max_supply': '10000.0000 EOS',
            'issuer': 'eosio'
        }
    })

    stats = api.chain.get_currency_stats('eosio.token', 'EOS')

    assert stats['EOS'].issuer == 'eosio'
    assert stats['EOS'].max_supply == '10000.0000 EOS'


def test_get_abi(api, transport):
    transport.reply({
        'account_name': 'eosio.token',
        'abi': {
            'version': 'eosio::abi/1.2',
            'structs': [{
                'name': 'transfer',
                'base': '',
                'fields': [
                    {'name': 'from', 'type': 'name'},
                    {'name': 'to', 'type': 'name'},
                    {'name': 'quantity', 'type': 'asset'},
                    {'name': 'memo', 'type': 'string'}
                ]
            }],
            'actions': [{'name': 'transfer', 'type': 'transfer', 'ricardian_contract': ''}],
            'tables': [{
                'name': 'accounts',
                'index_type': 'i64',
                'key_names': [],
                'key_types': [],
                'type': 'account'
            }]
        }
    })

    resp = api.chain.get_abi('eosio.token')

    assert resp.abi.version == 'eosio::abi/1.2'
    assert [f.name for f in resp.abi.struct('transfer').fields] == [
        'from', 'to', 'quantity', 'memo']
    assert resp.abi.action('transfer').type == 'transfer'
    assert resp.abi.table('accounts').type == 'account'
    assert resp.abi.struct('missing') is None


def test_get_code(api, transport):
    transport.reply({'account_name': 'eosio.token', 'code_hash': 'aa', 'wasm': '0061736d'})

    resp = api.chain.get_code('eosio.token')

    assert resp.code_hash == 'aa'
    assert transport.last['json'] == {
        'account_name': 'eosio.token', 'code_as_wasm': True}


def test_get_producers(api, transport):
    transport.reply({
        'rows': [{
            'owner': 'eosnationftw',
            'total_votes': '123.5',
            'producer_key': 'EOS5...',
            'is_active': 1,
            'url': 'https://eosnation.io',
            'unpaid_blocks': 0,
            'last_claim_time': '2023-06-01T00:00:00.000',
            'location': 124,
            'producer_authority': ['block_signing_authority_v0', {'threshold': 1, 'keys': []}]
        }],
        'total_producer_vote_weight': '9999.0',
        'more': 'eosrio'
    })

    resp = api.chain.get_producers(limit=1)

    assert resp.rows[0].owner == 'eosnationftw'
    assert isinstance(resp.rows[0].producer_authority, Blob)
    assert resp.rows[0].producer_authority.value[0] == 'block_signing_authority_v0'
    assert resp.meta.more == 'eosrio'
    assert transport.last['json'] == {'limit': 1, 'json': True}


def test_get_table_rows(api, transport):
    transport.reply({
        'rows': [{'balance': '1.0000 EOS'}, {'balance': '2.0000 TLOS'}],
        'more': True,
        'next_key': '1397703940',
        'ram_payers': []
    })

    resp = api.chain.get_table_rows(
        'eosio.token', 'accounts', 'alice', limit=2)

    assert [row.value['balance'] for row in resp.rows] == [
        '1.0000 EOS', '2.0000 TLOS']
    assert resp.meta.more is True
    assert resp.next_key == '1397703940'
    assert transport.last['json'] == {
        'code': 'eosio.token',
        'table': 'accounts',
        'scope': 'alice',
        'limit': 2,
        'json': True
    }


def test_get_table_by_scope(api, transport):
    transport.reply({
        'rows': [{'code': 'eosio.token', 'scope': 'alice', 'table': 'accounts', 'payer': 'alice', 'count': 1}],
        'more': ''
    })

    resp = api.chain.get_table_by_scope('eosio.token', table='accounts')

    assert resp.rows[0].count == 1
    assert resp.meta.more == ''


def test_get_activated_protocol_features(api, transport):
    transport.reply({
        'activated_protocol_features': [{
            'feature_digest': 'aa',
            'activation_ordinal': 0,
            'activation_block_num': 4,
            'description_digest': 'bb',
            'dependencies': [],
            'protocol_feature_type': 'builtin',
            'specification': [{'name': 'builtin_feature_codename', 'value': 'PREACTIVATE_FEATURE'}]
        }],
        'more': 1
    })

    resp = api.chain.get_activated_protocol_features(limit=1)

    feature = resp.activated_protocol_features[0]
    assert feature.specification[0].value == 'PREACTIVATE_FEATURE'
    assert resp.meta.more == 1


def test_abi_json_to_bin(api, transport):
    transport.reply({'binargs': '0000'})

    resp = api.chain.abi_json_to_bin(
        'eosio.token', 'transfer', {'from': 'alice', 'to': 'bob'})

    assert resp.binargs == '0000'
    assert transport.last['json'] == {
        'code': 'eosio.token',
        'action': 'transfer',
        'args': {'from': 'alice', 'to': 'bob'}
    }


def test_push_transaction(api, transport):
    transport.reply({
        'transaction_id': 'ff00',
        'processed': {'id': 'ff00', 'receipt': {'status': 'executed'}}
    })

    tx = {'signatures': ['SIG_K1_a'], 'compression': 0, 'packed_trx': '00'}
    resp = api.chain.push_transaction(tx)

    assert resp.transaction_id == 'ff00'
    assert resp.processed.value['receipt']['status'] == 'executed'
    assert transport.last['json'] == tx
