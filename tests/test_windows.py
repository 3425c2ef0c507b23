import pytest

from lexicon_trends.config import make_config
from lexicon_trends.windows.assign_windows import assign_fixed_windows, assign_key_windows, assign_windows
from lexicon_trends.windows.window_totals import window_totals

from conftest import make_tokens


def _covers_stream_once(tokens, windowed):
    # every token is in exactly one window and nothing else is
    assert len(windowed) == len(tokens)
    assert windowed['global_position'].tolist() == tokens['global_position'].tolist()
    assert windowed['window_id'].notna().all()


def test_fixed_windows_follow_global_position(mortality_documents):
    tokens = make_tokens(mortality_documents)
    windowed = assign_fixed_windows(tokens, 3)
    _covers_stream_once(tokens, windowed)
    assert windowed['window_id'].tolist() == [0, 0, 0, 1, 1, 1, 2]
    assert set(windowed['window_group']) == {'all'}
    # the input is left untouched
    assert 'window_id' not in tokens.columns


def test_fixed_windows_totals_last_window_shorter(mortality_documents):
    totals = window_totals(assign_fixed_windows(make_tokens(mortality_documents), 3))
    assert totals['window_id'].tolist() == [0, 1, 2]
    assert totals['token_count'].tolist() == [3, 3, 1]
    assert totals['start_position'].tolist() == [0, 3, 6]
    assert totals['end_position'].tolist() == [2, 5, 6]


def test_fixed_windows_restart_in_each_partition():
    tokens = make_tokens([
        {'text': 'a b c', 'timestamp': '2020-01-01', 'group_key': 'A'},
        {'text': 'd e', 'timestamp': '2020-01-02', 'group_key': 'B'},
        {'text': 'f', 'timestamp': '2020-01-03', 'group_key': 'A'},
    ])
    windowed = assign_fixed_windows(tokens, 2, partition_key='group_key')
    _covers_stream_once(tokens, windowed)
    assert windowed['window_id'].tolist() == [0, 0, 1, 2, 2, 1]
    assert windowed['window_group'].tolist() == ['A', 'A', 'A', 'B', 'B', 'A']

    totals = window_totals(windowed)
    assert totals['group_key'].tolist() == ['A', 'A', 'B']
    assert totals['token_count'].tolist() == [2, 2, 2]


def test_key_windows_by_date(mortality_documents):
    tokens = make_tokens(mortality_documents)
    windowed = assign_key_windows(tokens, 'date')
    _covers_stream_once(tokens, windowed)
    totals = window_totals(windowed)
    assert totals['window_id'].tolist() == ['2020-04-01', '2020-04-02']
    assert totals['group_key'].tolist() == ['2020-04-01', '2020-04-02']
    assert totals['token_count'].tolist() == [5, 2]


def test_key_windows_by_document_use_the_source_as_group(newspaper_documents):
    totals = window_totals(assign_key_windows(make_tokens(newspaper_documents), 'sequence'))
    assert totals['window_id'].tolist() == [0, 1, 2, 3, 4]
    assert totals['group_key'].tolist() == ['FAZ', 'Handelsblatt', 'FAZ', 'FAZ', 'Handelsblatt']


def test_key_windows_by_source_are_ordered_by_first_appearance(newspaper_documents):
    totals = window_totals(assign_key_windows(make_tokens(newspaper_documents), 'group_key'))
    assert totals['window_id'].tolist() == ['FAZ', 'Handelsblatt']
    assert totals['window_order'].tolist() == [0, 1]
    assert totals['token_count'].sum() == len(make_tokens(newspaper_documents))


def test_assign_windows_dispatches_on_config(mortality_documents):
    tokens = make_tokens(mortality_documents)
    by_size = assign_windows(tokens, make_config(window_size=2, lexicon_name='x'))
    assert by_size['window_id'].tolist() == [0, 0, 1, 1, 2, 2, 3]
    by_month = assign_windows(tokens, make_config(window_key='month', lexicon_name='x'))
    assert set(by_month['window_id']) == {'2020-04'}


def test_windows_need_the_global_order(mortality_documents):
    tokens = make_tokens(mortality_documents)
    shuffled = tokens.iloc[::-1].reset_index(drop=True)
    with pytest.raises(ValueError):
        assign_fixed_windows(shuffled, 2)
    with pytest.raises(ValueError):
        assign_key_windows(tokens.iloc[1:], 'date')


@pytest.mark.parametrize('assign', [
    lambda tokens: assign_fixed_windows(tokens, 4),
    lambda tokens: assign_fixed_windows(tokens, 4, partition_key='group_key'),
    lambda tokens: assign_key_windows(tokens, 'date'),
])
def test_empty_stream_has_no_windows(assign):
    windowed = assign(make_tokens([]))
    assert windowed.empty
    totals = window_totals(windowed)
    assert totals.empty
    assert list(totals.columns) == ['window_id', 'group_key', 'window_order', 'start_position',
                                    'end_position', 'token_count']
