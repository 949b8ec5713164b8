

def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'joined' for pkt in received)


def test_score_submission_pushes_leaderboard_update(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    res = client.post('/api/scores', json={'username': 'alice', 'clicks': 42})
    assert res.status_code == 201
    score_id = res.get_json()['score']['id']

    updates = [e for e in sio_client.get_received('/ws') if e['name'] == 'leaderboard_update']
    assert len(updates) == 1
    assert updates[0]['args'][0] == {'username': 'alice', 'clicks': 42, 'score_id': score_id}


def test_left_clients_get_no_updates(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.emit('leave_leaderboard', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'left' for pkt in received)

    client.post('/api/scores', json={'username': 'bob', 'clicks': 3})
    assert not any(e['name'] == 'leaderboard_update' for e in sio_client.get_received('/ws'))


def test_rejected_submission_is_not_broadcast(sio_client, client):
    sio_client.emit('join_leaderboard', {}, namespace='/ws')
    sio_client.get_received('/ws')

    res = client.post('/api/scores', json={'username': 'carol', 'clicks': -1})
    assert res.status_code == 400
    assert sio_client.get_received('/ws') == []
