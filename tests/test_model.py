"""Tests for the document model."""

import pytest

from inidoc import IniDocument, IniSection


class TestIniSection:
    def test_last_write_wins(self):
        sect = IniSection('a')
        sect['x'] = '1'
        sect['x'] = '2'
        assert sect['x'] == '2'
        assert len(sect) == 1

    def test_init_copies_pairs(self):
        src = {'x': '1'}
        sect = IniSection('a', src)
        src['x'] = '2'
        assert sect['x'] == '1'
        assert sect.name == 'a'
        assert str(sect) == '[a]'

    def test_to_dict_is_a_copy(self):
        sect = IniSection('a', {'x': '1'})
        d = sect.to_dict()
        d['y'] = '2'
        assert 'y' not in sect


class TestIniDocument:
    def test_section_creates_on_access(self):
        doc = IniDocument()
        assert 'x' not in doc
        sect = doc.section('x')
        assert 'x' in doc
        assert len(sect) == 0
        assert sect.name == 'x'

    def test_section_returns_same_object(self):
        doc = IniDocument()
        first = doc.section('x')
        second = doc.section('x')
        assert first is second
        first['key'] = 'value'
        assert second['key'] == 'value'
        assert doc.get('x', 'key') == ('value', True)

    def test_get_found(self):
        doc = IniDocument()
        doc.section('a')['x'] = '1'
        assert doc.get('a', 'x') == ('1', True)

    def test_get_missing_key(self):
        doc = IniDocument()
        doc.section('a')['x'] = '1'
        assert doc.get('a', 'y') == ('', False)

    def test_get_missing_section_does_not_create(self):
        doc = IniDocument()
        assert doc.get('nope', 'x') == ('', False)
        assert 'nope' not in doc
        assert len(doc) == 0

    def test_getitem_does_not_create(self):
        doc = IniDocument()
        with pytest.raises(KeyError):
            doc['nope']
        assert len(doc) == 0

    def test_setitem_stores_a_copy(self):
        doc = IniDocument()
        src = {'x': '1'}
        doc['a'] = src
        src['x'] = '2'
        assert doc.get('a', 'x') == ('1', True)
        assert isinstance(doc['a'], IniSection)
        assert doc['a'].name == 'a'

    def test_sections_keep_creation_order(self):
        doc = IniDocument()
        for name in ('b', 'a', 'c'):
            doc.section(name)
        doc.section('a')
        assert list(doc) == ['b', 'a', 'c']
