from datetime import datetime, timezone

from wordtower.models import ExtendedWordPool
from wordtower.services.towers.state import GameStateStore


def make_pool(**overrides):
    data = {
        'mapSize': [20, 20, 50],
        'nextTurnSec': 30,
        'roundEndsAt': '2025-03-01T12:00:00Z',
        'shuffleLeft': 1,
        'turn': 4,
        'usedIndexes': [0, 2],
        'words': ['foo', 'stack'],
    }
    data.update(overrides)
    return ExtendedWordPool.from_dict(data)


def test_from_config_defaults():
    store = GameStateStore.from_config({'SHUFFLE_ALLOWANCE': 5, 'MAP_SIZE': (10, 10, 10)})
    assert store.state.shuffle_left == 5
    assert store.state.map_size == (10, 10, 10)
    assert store.state.turn == 1
    assert store.state.used_ids == set()
    assert store.state.round_ends_at > datetime.now(timezone.utc)


def test_apply_upstream_refreshes_metadata_and_pool(store, catalog):
    assert store.apply_upstream(make_pool(), catalog) is True
    st = store.state
    assert st.map_size == (20, 20, 50)
    assert st.next_turn_sec == 30
    assert st.turn == 4
    assert st.round_ends_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert st.shuffle_left == 1
    assert [e.text for e in st.active_word_pool] == ['foo', 'stack']


def test_apply_upstream_never_raises_allowance(store, catalog):
    store.apply_upstream(make_pool(shuffleLeft=10), catalog)
    assert store.state.shuffle_left == 3


def test_apply_upstream_keeps_pool_when_words_unknown(store, catalog):
    store.apply_upstream(make_pool(words=['up']), catalog)
    assert store.apply_upstream(make_pool(words=['up', 'zzz'], turn=5), catalog) is False
    assert [e.text for e in store.state.active_word_pool] == ['up']
    assert store.state.turn == 5


def test_apply_upstream_ignores_missing_fields(store, catalog):
    store.apply_upstream(ExtendedWordPool.from_dict({'words': ['foo'], 'turn': 2}), catalog)
    st = store.state
    assert st.turn == 2
    assert st.shuffle_left == 3
    assert st.map_size == (30, 30, 100)
    assert st.next_turn_sec == 60
    assert [e.text for e in st.active_word_pool] == ['foo']


def test_apply_upstream_without_words_keeps_pool(store, catalog):
    store.apply_upstream(make_pool(words=['up']), catalog)
    assert store.apply_upstream(ExtendedWordPool.from_dict({'turn': 9}), catalog) is False
    assert [e.text for e in store.state.active_word_pool] == ['up']
    assert store.state.turn == 9


def test_apply_upstream_accepts_nanosecond_timestamps(store, catalog):
    store.apply_upstream(make_pool(roundEndsAt='2025-03-01T12:00:00.123456789Z'), catalog)
    assert store.state.round_ends_at == datetime(2025, 3, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)


def test_unparseable_timestamp_keeps_previous_deadline(store, catalog):
    store.apply_upstream(make_pool(), catalog)
    store.apply_upstream(make_pool(roundEndsAt='tomorrow-ish'), catalog)
    assert store.state.round_ends_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
