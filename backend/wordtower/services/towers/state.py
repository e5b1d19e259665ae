import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Set

from wordtower.models import ExtendedWordPool, Position, parse_timestamp
from .catalog import WordCatalog, WordEntry


logger = logging.getLogger(__name__)


@dataclass
class GameState:
    map_size: Position
    next_turn_sec: int
    round_ends_at: Optional[datetime]
    shuffle_left: int
    turn: int
    used_ids: Set[int] = field(default_factory=set)
    active_word_pool: List[WordEntry] = field(default_factory=list)


class GameStateStore:
    """Holds the mutable game state of one session and the lock guarding it.

    Every operation that reads or mutates the state (including the tower
    engine and the shuffle coordinator) must hold ``lock`` for its whole
    check-and-commit sequence. The lock is never held across upstream I/O.
    """

    def __init__(self, state: GameState):
        self.state = state
        self.lock = threading.Lock()
        # bumped on every committed change, under the lock
        self.version = 0

    @classmethod
    def from_config(cls, config) -> 'GameStateStore':
        duration = int(config.get('ROUND_DURATION_SEC', 300))
        state = GameState(
            map_size=tuple(config.get('MAP_SIZE', (30, 30, 100))),
            next_turn_sec=int(config.get('NEXT_TURN_SEC', 60)),
            round_ends_at=datetime.now(timezone.utc) + timedelta(seconds=duration),
            shuffle_left=int(config.get('SHUFFLE_ALLOWANCE', 3)),
            turn=1,
        )
        return cls(state)

    def apply_upstream(self, pool: ExtendedWordPool, catalog: WordCatalog) -> bool:
        """Refresh round metadata from an upstream ``/words`` payload.

        Only fields present in the payload are applied. The shuffle
        allowance is only ever lowered. The active word pool is replaced
        only if every upstream word resolves in the catalog. Returns True
        when the pool was replaced.
        """
        words = pool.words
        resolved = [catalog.resolve(text) for text in words] if words is not None else []
        missing = [text for text, entry in zip(words or (), resolved) if entry is None]
        ends_at = parse_timestamp(pool.round_ends_at)
        with self.lock:
            st = self.state
            if pool.map_size is not None:
                st.map_size = tuple(pool.map_size)
            if pool.next_turn_sec is not None:
                st.next_turn_sec = pool.next_turn_sec
            if pool.turn is not None:
                st.turn = pool.turn
            if ends_at is not None:
                st.round_ends_at = ends_at
            if pool.shuffle_left is not None:
                st.shuffle_left = max(0, min(st.shuffle_left, pool.shuffle_left))
            replaced = words is not None and not missing
            if replaced:
                st.active_word_pool = list(resolved)
            self.version += 1
            shuffle_left = st.shuffle_left
        if missing:
            logger.warning(f"[words-sync] kept local pool, {len(missing)} upstream words not in catalog")
        else:
            logger.info(f"[words-sync] turn={pool.turn} pool={len(words or ())} shuffle_left={shuffle_left}")
        return replaced
