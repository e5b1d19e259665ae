import logging

from wordtower.models import ShuffleResult
from .catalog import WordCatalog
from .errors import NoShufflesLeftError, WordResolutionError
from .state import GameStateStore


logger = logging.getLogger(__name__)


class ShuffleCoordinator:
    """Spends one shuffle to replace the active word pool.

    The upstream fetch runs without the store lock. The allowance is checked
    again under the lock before committing, since a concurrent shuffle may
    have spent the last one in the meantime.
    """

    def __init__(self, store: GameStateStore, catalog: WordCatalog, gateway):
        self.store = store
        self.catalog = catalog
        self.gateway = gateway

    def _ensure_allowance(self) -> None:
        if self.store.state.shuffle_left <= 0:
            logger.info("[shuffle-reject] no shuffles left")
            raise NoShufflesLeftError()

    def shuffle(self) -> ShuffleResult:
        with self.store.lock:
            self._ensure_allowance()

        words = self.gateway.fetch_word_pool()

        entries = []
        for text in words:
            entry = self.catalog.resolve(text)
            if entry is None:
                logger.warning(f"[shuffle-reject] upstream word not in catalog: {text!r}")
                raise WordResolutionError(text)
            entries.append(entry)

        with self.store.lock:
            self._ensure_allowance()
            state = self.store.state
            state.active_word_pool = entries
            state.shuffle_left -= 1
            self.store.version += 1
            result = ShuffleResult(
                shuffle_left=state.shuffle_left,
                words=tuple(e.text for e in entries),
                version=self.store.version,
            )
        logger.info(f"[shuffle] words={len(result.words)} shuffle_left={result.shuffle_left}")
        return result
