#!/usr/bin/env python3

from pyhyperion import Blob


def test_get_proposals(api, transport):
    transport.reply({
        'query_time_ms': 3,
        'total': {'value': 1, 'relation': 'eq'},
        'proposals': [{
            'proposer': 'alice',
            'proposal_name': 'upgrade',
            'primary_key': '1',
            'block_num': 1000,
            'executed': False,
            'requested_approvals': [
                {'actor': 'bob', 'permission': 'active', 'time': '1970-01-01T00:00:00.000'}
            ],
            'provided_approvals': [
                {'actor': 'carol', 'permission': 'active', 'time': '2023-06-01T00:00:00.000'}
            ]
        }]
    })

    resp = api.system.get_proposals(proposer='alice', executed=False, limit=5)

    proposal = resp.proposals[0]
    assert proposal.proposal_name == 'upgrade'
    assert proposal.requested_approvals[0].actor == 'bob'
    assert proposal.provided_approvals[0].actor == 'carol'
    assert proposal.trx.is_absent
    assert resp.meta.total.value == 1
    assert transport.last['params'] == {
        'proposer': 'alice', 'executed': 'false', 'limit': '5'}


def test_get_voters(api, transport):
    transport.reply({
        'voters': [{
            'account': 'alice',
            'weight': 1.5e16,
            'last_vote': 250000000,
            'data': {'producers': ['bp1', 'bp2'], 'is_proxy': 0}
        }]
    })

    resp = api.system.get_voters(producer='bp1', limit=1)

    voter = resp.voters[0]
    assert voter.account == 'alice'
    assert voter.weight == 1.5e16
    assert isinstance(voter.data, Blob)
    assert voter.data.value['producers'] == ['bp1', 'bp2']
    assert transport.last['params'] == {'producer': 'bp1', 'limit': '1'}
    assert transport.last['url'].endswith('/v2/state/get_voters')


def test_get_voters_plain_total(api, transport):
    transport.reply({'voters': [], 'total': 0})

    resp = api.system.get_voters()

    assert resp.voters == []
    assert resp.meta.total == 0
    assert transport.last['params'] is None
