import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from wordtower.services.towers.errors import InvalidRequestError

logger = logging.getLogger(__name__)

Position = Tuple[int, int, int]


class Direction(IntEnum):
    AXIS_NEG_Z = 1
    AXIS_POS_X = 2
    AXIS_POS_Y = 3

    @property
    def vector(self) -> Position:
        return _DIRECTION_VECTORS[self]


_DIRECTION_VECTORS = {
    Direction.AXIS_NEG_Z: (0, 0, -1),
    Direction.AXIS_POS_X: (1, 0, 0),
    Direction.AXIS_POS_Y: (0, 1, 0),
}


def _parse_int(value: Any, name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"'{name}' must be an integer")
    return value


def _parse_position(value: Any, name: str = 'pos') -> Position:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidRequestError(f"'{name}' must be a list of 3 integers")
    x, y, z = (_parse_int(v, name) for v in value)
    return (x, y, z)


@dataclass(frozen=True)
class Placement:
    """One word placement requested by a build call."""
    id: int
    direction: Direction
    position: Position

    @classmethod
    def from_dict(cls, data: Any) -> 'Placement':
        if not isinstance(data, dict):
            raise InvalidRequestError('each word must be an object')
        word_id = _parse_int(data.get('id'), 'id')
        raw_dir = _parse_int(data.get('dir'), 'dir')
        try:
            direction = Direction(raw_dir)
        except ValueError:
            raise InvalidRequestError(f"'dir' must be one of 1, 2, 3 (got {raw_dir})") from None
        return cls(id=word_id, direction=direction, position=_parse_position(data.get('pos')))


@dataclass(frozen=True)
class PlacedWord:
    id: int
    text: str
    position: Position
    direction: Direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'dir': int(self.direction),
            'pos': list(self.position),
        }


@dataclass
class Tower:
    words: List[PlacedWord] = field(default_factory=list)
    score: float = 0.0
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'words': [w.to_dict() for w in self.words],
        }


@dataclass(frozen=True)
class CompletedTower:
    id: int
    words: Tuple[PlacedWord, ...]
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'score': self.score}


@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only view of total score, finished towers and the active tower.

    ``version`` increases with every committed change to the session, so
    clients receiving broadcasts out of order can drop stale ones.
    """
    score: float
    done_towers: Tuple[CompletedTower, ...]
    tower: Tower
    version: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'doneTowers': [t.to_dict() for t in self.done_towers],
            'tower': self.tower.to_dict(),
            'version': self.version,
        }


@dataclass(frozen=True)
class ShuffleResult:
    shuffle_left: int
    words: Tuple[str, ...]
    version: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'shuffleLeft': self.shuffle_left, 'words': list(self.words), 'version': self.version}


# RFC 3339 fractional seconds; Go emits up to 9 digits, fromisoformat takes 6
_FRACTION_RE = re.compile(r'(\.\d{6})\d+')


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    normalized = _FRACTION_RE.sub(r'\1', value.replace('Z', '+00:00'))
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        logger.warning(f"[timestamp] could not parse {value!r}")
        return None


def _expect_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _optional_list(data: Dict[str, Any], key: str, item_type: type) -> Optional[tuple]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, item_type) and not isinstance(v, bool) for v in value):
        raise ValueError(f"'{key}' must be a list of {item_type.__name__}")
    return tuple(value)


@dataclass(frozen=True)
class ExtendedWordPool:
    """Payload of the upstream ``/words`` endpoint.

    Fields the upstream left out are None, so a partial payload never
    overwrites local state with made-up values.
    """
    map_size: Optional[Position] = None
    next_turn_sec: Optional[int] = None
    round_ends_at: Optional[str] = None
    shuffle_left: Optional[int] = None
    turn: Optional[int] = None
    used_indexes: Optional[Tuple[int, ...]] = None
    words: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'ExtendedWordPool':
        data = _expect_dict(data, 'word pool')
        map_size = _optional_list(data, 'mapSize', int)
        if map_size is not None and len(map_size) != 3:
            raise ValueError("'mapSize' must have 3 entries")
        round_ends_at = data.get('roundEndsAt')
        if round_ends_at is not None and not isinstance(round_ends_at, str):
            raise ValueError("'roundEndsAt' must be a string")
        return cls(
            map_size=map_size,
            next_turn_sec=_optional_int(data, 'nextTurnSec'),
            round_ends_at=round_ends_at,
            shuffle_left=_optional_int(data, 'shuffleLeft'),
            turn=_optional_int(data, 'turn'),
            used_indexes=_optional_list(data, 'usedIndexes', int),
            words=_optional_list(data, 'words', str),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mapSize': list(self.map_size) if self.map_size is not None else None,
            'nextTurnSec': self.next_turn_sec,
            'roundEndsAt': self.round_ends_at,
            'shuffleLeft': self.shuffle_left,
            'turn': self.turn,
            'usedIndexes': list(self.used_indexes) if self.used_indexes is not None else None,
            'words': list(self.words) if self.words is not None else None,
        }


@dataclass(frozen=True)
class Round:
    name: str
    status: str
    start_at: Optional[str]
    end_at: Optional[str]
    duration: int
    repeat: int

    @classmethod
    def from_dict(cls, data: Any) -> 'Round':
        data = _expect_dict(data, 'round')
        return cls(
            name=data.get('name', ''),
            status=data.get('status', ''),
            start_at=data.get('startAt'),
            end_at=data.get('endAt'),
            duration=int(data.get('duration') or 0),
            repeat=int(data.get('repeat') or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'status': self.status,
            'startAt': self.start_at,
            'endAt': self.end_at,
            'duration': self.duration,
            'repeat': self.repeat,
        }


@dataclass(frozen=True)
class RoundList:
    event_id: str
    now: Optional[str]
    rounds: Tuple[Round, ...]

    @classmethod
    def from_dict(cls, data: Any) -> 'RoundList':
        data = _expect_dict(data, 'round list')
        rounds = data.get('rounds') or []
        if not isinstance(rounds, list):
            raise ValueError("'rounds' must be a list")
        return cls(
            event_id=data.get('eventId', ''),
            now=data.get('now'),
            rounds=tuple(Round.from_dict(r) for r in rounds),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'eventId': self.event_id,
            'now': self.now,
            'rounds': [r.to_dict() for r in self.rounds],
        }
