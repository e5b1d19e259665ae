from flask_socketio import emit
from wordtower import current_session, socketio


def handle_connect():
    # New clients get the current tower straight away
    emit('connected', {
        'message': 'Connected to /ws',
        'snapshot': current_session().towers().to_dict(),
    })


def handle_ping(data):
    emit('pong', data or {})


def handle_get_towers(data=None):
    emit('tower_update', current_session().towers().to_dict())


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
    socketio.on_event('get_towers', handle_get_towers, namespace='/ws')

    if testing:
        # Test-only mirror on default namespace
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
        socketio.on_event('get_towers', handle_get_towers, namespace='/')
