def _events(sio_client, name):
    return [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == name]


def test_socket_connect_sends_snapshot(sio_client):
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    received = sio_client.get_received('/ws')
    names = [pkt['name'] for pkt in received]
    assert 'connected' in names
    assert 'leaderboard_update' in names


def test_request_leaderboard(sio_client):
    sio_client.get_received('/ws')  # flush
    sio_client.emit('request_leaderboard', {}, namespace='/ws')
    updates = _events(sio_client, 'leaderboard_update')
    assert updates
    entries = updates[-1]['args'][0]['entries']
    assert [e['player'] for e in entries] == ['Alice', 'Bob', 'Cara']


def test_request_achievements(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('request_achievements', {}, namespace='/ws')
    facts = _events(sio_client, 'achievements')
    assert facts
    assert facts[-1]['args'][0]['fastest_catch'] is None


def test_ping(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    pongs = _events(sio_client, 'pong')
    assert pongs and pongs[-1]['args'][0] == {'n': 1}


def test_upload_broadcasts_update(sio_client, client, example_csv):
    sio_client.get_received('/ws')
    client.post('/api/tag/upload', json={'csv': example_csv})
    updates = _events(sio_client, 'leaderboard_update')
    assert updates
    assert updates[-1]['args'][0]['last_caught_player'] == 'Alice'


def test_request_with_bad_payload_emits_error(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('request_leaderboard', 'oops', namespace='/ws')
    sio_client.emit('request_achievements', 'oops', namespace='/ws')
    received = sio_client.get_received('/ws')
    names = [pkt['name'] for pkt in received]
    assert names.count('error') == 2
    assert 'leaderboard_update' not in names
    assert 'achievements' not in names
