from gridver.utils.merge import deep_merge

class TestDeepMerge:
    """Tests for deep_merge() used to layer config files over defaults."""

    def test_nested_dicts_are_merged(self):
        parent = {'sources': {'a': {'pattern': 'x', 'description': 'old'}}}
        child = {'sources': {'a': {'description': 'new'}, 'b': {'pattern': 'y'}}}
        merged = deep_merge(parent, child)
        assert merged == {'sources': {'a': {'pattern': 'x', 'description': 'new'}, 'b': {'pattern': 'y'}}}

    def test_none_drops_key(self):
        merged = deep_merge({'a': 1, 'b': 2}, {'a': None, 'c': None})
        assert merged == {'b': 2}

    def test_scalars_and_lists_override(self):
        merged = deep_merge({'a': [1, 2], 'b': {'x': 1}}, {'a': [3], 'b': 'flat'})
        assert merged == {'a': [3], 'b': 'flat'}

    def test_parent_is_not_mutated(self):
        parent = {'sources': {'a': {'pattern': 'x'}}}
        deep_merge(parent, {'sources': {'a': {'pattern': 'y'}}})
        assert parent == {'sources': {'a': {'pattern': 'x'}}}
