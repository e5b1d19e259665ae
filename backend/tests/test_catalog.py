import pytest

from wordtower.services.towers.catalog import WordCatalog, WordEntry
from wordtower.services.towers.wordlist import DEFAULT_WORDS


def test_ids_are_one_based_in_order(catalog):
    assert catalog.get(1) == WordEntry(1, 'foo')
    assert catalog.get(2) == WordEntry(2, 'bars')
    assert len(catalog) == 6


def test_missing_lookups_return_none(catalog):
    assert catalog.get(0) is None
    assert catalog.get(999) is None
    assert catalog.resolve('nope') is None
    assert 999 not in catalog


def test_resolve_is_case_exact(catalog):
    assert catalog.resolve('foo').id == 1
    assert catalog.resolve('Foo').id == 6
    assert catalog.resolve('FOO') is None
    assert catalog.resolve('foo ') is None


def test_id_text_round_trip(catalog):
    for entry in catalog.entries():
        assert catalog.resolve(catalog.get(entry.id).text) == entry


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        WordCatalog.from_words(['a', 'b', 'a'])
    with pytest.raises(ValueError):
        WordCatalog([WordEntry(1, 'a'), WordEntry(1, 'b')])


def test_from_file_skips_blank_lines(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('пальба\n\n  кан  \nфитиль\n', encoding='utf-8')
    catalog = WordCatalog.from_file(str(path))
    assert [e.text for e in catalog.entries()] == ['пальба', 'кан', 'фитиль']
    assert catalog.resolve('кан').id == 2


def test_builtin_list_loads():
    catalog = WordCatalog.from_words(DEFAULT_WORDS)
    assert len(catalog) == len(DEFAULT_WORDS)
    assert catalog.get(1).text == 'извратитель'
