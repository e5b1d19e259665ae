import os


def _int_tuple(raw, default):
    try:
        return tuple(int(x.strip()) for x in raw.split(',')) if raw else default
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Remote competition API
    UPSTREAM_BASE_URL = os.environ.get('UPSTREAM_BASE_URL', 'https://games-test.datsteam.dev/api')
    AUTH_TOKEN = os.environ.get('AUTH_TOKEN', '')
    UPSTREAM_TIMEOUT_SEC = float(os.environ.get('UPSTREAM_TIMEOUT_SEC', '10'))
    # Optional word list file, one word per line. Unset uses the built-in list.
    WORDS_FILE = os.environ.get('WORDS_FILE') or None
    # Initial round state
    SHUFFLE_ALLOWANCE = int(os.environ.get('SHUFFLE_ALLOWANCE', '3'))
    MAP_SIZE = _int_tuple(os.environ.get('MAP_SIZE'), (30, 30, 100))
    NEXT_TURN_SEC = int(os.environ.get('NEXT_TURN_SEC', '60'))
    ROUND_DURATION_SEC = int(os.environ.get('ROUND_DURATION_SEC', '300'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
    ).split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
