from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class WordEntry:
    id: int
    text: str


class WordCatalog:
    """Fixed universe of words, looked up by id or by exact text."""

    def __init__(self, entries: Iterable[WordEntry]):
        self._by_id: Dict[int, WordEntry] = {}
        self._by_text: Dict[str, WordEntry] = {}
        for entry in entries:
            if entry.id in self._by_id:
                raise ValueError(f"duplicate word id {entry.id}")
            if entry.text in self._by_text:
                raise ValueError(f"duplicate word text {entry.text!r}")
            self._by_id[entry.id] = entry
            self._by_text[entry.text] = entry

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'WordCatalog':
        # ids are 1-based in list order
        return cls(WordEntry(id=i, text=w) for i, w in enumerate(words, start=1))

    @classmethod
    def from_file(cls, path: str) -> 'WordCatalog':
        with open(path, encoding='utf-8') as fh:
            words = [line.strip() for line in fh]
        return cls.from_words(w for w in words if w)

    def get(self, word_id: int) -> Optional[WordEntry]:
        return self._by_id.get(word_id)

    def resolve(self, text: str) -> Optional[WordEntry]:
        return self._by_text.get(text)

    def entries(self) -> List[WordEntry]:
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, word_id: int) -> bool:
        return word_id in self._by_id
