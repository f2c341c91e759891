from docrepo.repositories.expressions import and_, combine_updates, eq, exists, not_, set_, unset


def test_eq_and_exists_build_plain_documents() -> None:
    assert eq('name', 'x') == {'name': 'x'}
    assert exists('deleted_at') == {'deleted_at': {'$exists': True}}
    assert exists('deleted_at', present=False) == {'deleted_at': {'$exists': False}}


def test_and_drops_match_all_clauses() -> None:
    assert and_() == {}
    assert and_({}, {}) == {}
    assert and_({'a': 1}, {}) == {'a': 1}
    assert and_({'a': 1}, {'b': 2}) == {'$and': [{'a': 1}, {'b': 2}]}


def test_and_returns_a_copy_of_a_single_clause() -> None:
    clause = {'a': 1}
    combined = and_(clause)
    combined['b'] = 2
    assert clause == {'a': 1}


def test_not_wraps_predicate_in_nor() -> None:
    assert not_({'a': 1}) == {'$nor': [{'a': 1}]}


def test_update_operators() -> None:
    assert set_('name', 'y') == {'$set': {'name': 'y'}}
    assert unset('deleted_at') == {'$unset': {'deleted_at': ''}}


def test_combine_updates_merges_per_operator() -> None:
    merged = combine_updates(set_('a', 1), set_('b', 2), unset('c'))
    assert merged == {'$set': {'a': 1, 'b': 2}, '$unset': {'c': ''}}
