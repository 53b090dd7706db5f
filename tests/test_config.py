# tests.test_config

from collections import defaultdict
from unittest    import TestCase

from dagsort.config import MergeError, merge

class TestInputsUnchanged(TestCase):
    def test_empty(self):
        empty = {}
        merge(empty, empty)
        assert({} == empty)

    def test_graphs(self):
        source    = {'graph': {'a': ['b']}}
        extension = {'graph': {'a': ['c'], 'c': []}}
        merge(source, extension)
        assert({'graph': {'a': ['b']}}          == source)
        assert({'graph': {'a': ['c'], 'c': []}} == extension)

    def test_extension_values_copied(self):
        extension = {'roots': ['a']}
        result = merge({}, extension)
        result['roots'].append('b')
        assert({'roots': ['a']} == extension)

class TestMerge(TestCase):
    def test_simple_values(self):
        assert({} == merge({}, {}))
        assert({'a': 1} == merge({'a': 1}, {}))
        assert({'a': 1} == merge({}, {'a': 1}))

    def test_sequence_values(self):
        assert({'roots': ['a', 'b']} == merge({'roots': ['a']},
                                              {'roots': ['b']}))
        assert({'roots': ['b', 'a']} == merge({'roots': ['b']},
                                              {'roots': ['a']}))

    def test_graphs(self):
        source    = {'roots': [], 'graph': {'a': ['b'], 'b': []}}
        extension = {'graph': {'a': ['c'], 'c': []}}
        assert({'roots': [],
                'graph': {'a': ['b', 'c'], 'b': [], 'c': []}} ==
                                                     merge(source, extension))

    def test_defaultdict_source(self):
        source = defaultdict(list)
        assert({'a': ['b']} == merge(source, {'a': ['b']}))

    def test_mapping_and_sequence_conflict(self):
        with self.assertRaises(MergeError) as e:
            merge({'graph': {'a': []}}, {'graph': ['a']})
        assert('graph' == e.exception.args[0])

        with self.assertRaises(MergeError) as e:
            merge({'graph': {'a': ['b']}}, {'graph': {'a': {'b': []}}})
        assert('a' == e.exception.args[0])

    def test_incompatible_values(self):
        with self.assertRaises(MergeError) as e:
            merge({'roots': ['a']}, {'roots': 1})
        assert('roots' == e.exception.args[0])
