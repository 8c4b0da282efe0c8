#!/usr/bin/env python3

from pyhyperion.responses import HealthResponse


HEALTH = {
    'version': '3.3.9-8',
    'version_hash': 'a1b2c3',
    'host': 'wax.hyperion.test',
    'health': [
        {
            'service': 'RabbitMq',
            'status': 'OK',
            'time': 1685577600000
        },
        {
            'service': 'NodeosRPC',
            'status': 'OK',
            'service_data': {
                'head_block_num': 250000000,
                'head_block_time': '2023-06-01T00:00:00.000',
                'time_offset': -120,
                'last_irreversible_block': 249999670,
                'chain_id': '1064487b'
            },
            'time': 1685577600000
        },
        {
            'service': 'Elasticsearch',
            'status': 'OK',
            'service_data': {
                'last_indexed_block': 250000000,
                'total_indexed_blocks': 250000000,
                'active_shards': '100.0%'
            },
            'time': 1685577600000
        }
    ],
    'features': {
        'streaming': {'enable': True, 'traces': True, 'deltas': True},
        'tables': {'proposals': True, 'accounts': True, 'voters': True},
        'index_deltas': True,
        'index_transfer_memo': True
    },
    'query_time_ms': 8.2
}


def test_health(api, transport):
    transport.reply(HEALTH)

    health = api.status.health()

    assert isinstance(health, HealthResponse)
    assert health.version == '3.3.9-8'
    assert [s.service for s in health.health] == [
        'RabbitMq', 'NodeosRPC', 'Elasticsearch']
    assert health.meta.query_time_ms == 8.2

    nodeos = health.service('NodeosRPC')
    assert nodeos.status == 'OK'
    assert nodeos.service_data.value['head_block_num'] == 250000000

    assert health.service('RabbitMq').service_data.is_absent
    assert health.service('missing') is None

    assert health.features.value['tables']['voters']

    assert transport.last['method'] == 'GET'
    assert transport.last['url'] == 'https://hyperion.test/v2/health'
    assert transport.last['params'] is None


def test_health_ignores_unknown_fields(api, transport):
    transport.reply({**HEALTH, 'new_top_level_field': [1, 2, 3]})
    assert api.status.health().host == 'wax.hyperion.test'
