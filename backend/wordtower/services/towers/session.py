import logging
from typing import Iterable, Optional

from wordtower.models import ExtendedWordPool, Placement, PlayerSnapshot, RoundList, ShuffleResult
from .catalog import WordCatalog
from .engine import ScoreFn, TowerEngine, score_by_length
from .gateway import UpstreamGateway
from .shuffle import ShuffleCoordinator
from .state import GameStateStore
from .wordlist import DEFAULT_WORDS


logger = logging.getLogger(__name__)


def load_catalog(config) -> WordCatalog:
    path = config.get('WORDS_FILE')
    if path:
        catalog = WordCatalog.from_file(path)
        logger.info(f"[catalog] loaded {len(catalog)} words from {path}")
        return catalog
    return WordCatalog.from_words(DEFAULT_WORDS)


class GameSession:
    """One player's game: catalog, state store, tower engine and shuffles.

    This is what the HTTP and Socket.IO layers talk to. A session is created
    per Flask app; tests build their own with a fresh state and a fake
    gateway.
    """

    def __init__(self, catalog: WordCatalog, store: GameStateStore, gateway,
                 score_fn: ScoreFn = score_by_length):
        self.catalog = catalog
        self.store = store
        self.gateway = gateway
        self.engine = TowerEngine(store, catalog, score_fn=score_fn)
        self.shuffler = ShuffleCoordinator(store, catalog, gateway)

    @classmethod
    def from_config(cls, config, gateway: Optional[UpstreamGateway] = None) -> 'GameSession':
        return cls(
            catalog=load_catalog(config),
            store=GameStateStore.from_config(config),
            gateway=gateway or UpstreamGateway.from_config(config),
        )

    def build(self, done: bool, words: Iterable[Placement]) -> PlayerSnapshot:
        return self.engine.place_words(words, done=done)

    def shuffle(self) -> ShuffleResult:
        return self.shuffler.shuffle()

    def towers(self) -> PlayerSnapshot:
        return self.engine.snapshot()

    def words(self) -> ExtendedWordPool:
        pool = self.gateway.fetch_raw_words()
        self.store.apply_upstream(pool, self.catalog)
        return pool

    def rounds(self) -> RoundList:
        return self.gateway.fetch_rounds()
