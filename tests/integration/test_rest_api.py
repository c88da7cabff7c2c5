from fastapi.testclient import TestClient

from api.rest_api import app


def test_health_score_and_groups_endpoints():
    client = TestClient(app)

    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.json()['status'] == 'ok'

    # black wall on column 1, white wall on column 2 of a 4x4 board
    content = [0, 1, 2, 0] * 4
    scored = client.post('/score', json={'content': content})
    assert scored.status_code == 200
    assert scored.json()['territory'] == {'black': 4, 'white': 4}
    assert scored.json()['dead'] == []

    groups = client.post('/groups', json={'content': content})
    assert groups.status_code == 200
    assert [g['color'] for g in groups.json()['groups']] == ['black', 'white']
    assert [g['liberties'] for g in groups.json()['groups']] == [4, 4]


def test_same_position_hashes_alike():
    client = TestClient(app)
    content = [1, 0, 0, 0, 2, 0, 0, 0, 0]
    first = client.post('/score', json={'content': content}).json()['hash']
    second = client.post('/score', json={'content': content}).json()['hash']
    assert first == second
