import itertools
import logging
from typing import Callable, Iterable, List, Set

from wordtower.models import CompletedTower, PlacedWord, Placement, PlayerSnapshot, Tower
from .catalog import WordCatalog, WordEntry
from .errors import UnknownWordError, WordAlreadyUsedError
from .state import GameStateStore


logger = logging.getLogger(__name__)

ScoreFn = Callable[[WordEntry], float]


def score_by_length(entry: WordEntry) -> float:
    """Reference scoring rule: one point per character."""
    return float(len(entry.text))


class TowerEngine:
    """Builds the active tower and keeps the completed towers and total score.

    Batches are all-or-nothing: every placement of a build call is validated
    before anything is committed, so a rejected call leaves the tower and the
    used-id set exactly as they were.
    """

    def __init__(self, store: GameStateStore, catalog: WordCatalog, score_fn: ScoreFn = score_by_length):
        self.store = store
        self.catalog = catalog
        self.score_fn = score_fn
        self.current_tower = Tower()
        self.completed: List[CompletedTower] = []
        self.total_score = 0.0
        self._tower_ids = itertools.count(1)

    def place_words(self, placements: Iterable[Placement], done: bool = False) -> PlayerSnapshot:
        placements = list(placements)
        with self.store.lock:
            used_ids = self.store.state.used_ids
            seen: Set[int] = set()
            staged: List[PlacedWord] = []
            gained = 0.0
            for placement in placements:
                entry = self.catalog.get(placement.id)
                if entry is None:
                    logger.info(f"[build-reject] unknown word id={placement.id}")
                    raise UnknownWordError(placement.id)
                if placement.id in used_ids or placement.id in seen:
                    logger.info(f"[build-reject] word already used id={placement.id}")
                    raise WordAlreadyUsedError(placement.id)
                seen.add(placement.id)
                staged.append(PlacedWord(
                    id=entry.id,
                    text=entry.text,
                    position=placement.position,
                    direction=placement.direction,
                ))
                gained += self.score_fn(entry)

            # commit
            self.current_tower.words.extend(staged)
            self.current_tower.score += gained
            used_ids.update(seen)
            if done:
                self._finish_tower()
            self.store.version += 1
            return self._snapshot_locked()

    def _finish_tower(self) -> None:
        tower = self.current_tower
        tower.done = True
        finished = CompletedTower(id=next(self._tower_ids), words=tuple(tower.words), score=tower.score)
        self.completed.append(finished)
        self.total_score += finished.score
        self.current_tower = Tower()
        self.store.state.used_ids.clear()
        logger.info(f"[tower-done] id={finished.id} words={len(finished.words)} score={finished.score} total={self.total_score}")

    def snapshot(self) -> PlayerSnapshot:
        with self.store.lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> PlayerSnapshot:
        tower = Tower(
            words=list(self.current_tower.words),
            score=self.current_tower.score,
            done=self.current_tower.done,
        )
        return PlayerSnapshot(
            score=self.total_score,
            done_towers=tuple(self.completed),
            tower=tower,
            version=self.store.version,
        )
