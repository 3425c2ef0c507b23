import pandas as pd
import pytest

from lexicon_trends.errors import AggregationError
from lexicon_trends.lexicon.lexicon import Lexicon
from lexicon_trends.lexicon.load_lexicon import build_lexicon
from lexicon_trends.scoring import score_chunk
from lexicon_trends.scoring.match_terms import match_keys, match_terms
from lexicon_trends.scoring.score_windows import score_windows
from lexicon_trends.windows.assign_windows import assign_fixed_windows, assign_key_windows

from conftest import make_tokens


def _one_document(text):
    return make_tokens([{'text': text, 'timestamp': '2020-01-01', 'group_key': 'A'}])


def test_match_terms_prefers_the_longest_phrase():
    lexicon = build_lexicon(['trans rights activists', 'trans'], 'trans')
    windowed = assign_fixed_windows(_one_document('Trans rights activists protest, trans people march'), 100)
    matches = match_terms(windowed, lexicon)
    assert matches['term'].tolist() == ['trans rights activists', 'trans']
    assert matches['global_position'].tolist() == [0, 4]


def test_phrases_do_not_span_documents():
    lexicon = build_lexicon(['trans rights activists'], 'trans')
    tokens = make_tokens([
        {'text': 'support for trans rights', 'timestamp': '2020-01-01', 'group_key': 'A'},
        {'text': 'activists gathered', 'timestamp': '2020-01-02', 'group_key': 'A'},
    ])
    assert match_terms(assign_fixed_windows(tokens, 100), lexicon).empty


def test_phrase_belongs_to_the_window_of_its_first_token():
    lexicon = build_lexicon(['interest rate'], 'policy')
    windowed = assign_fixed_windows(_one_document('the interest rate rises'), 2)
    scores = score_windows(windowed, lexicon)
    assert scores['window_id'].tolist() == [0]
    assert scores['raw_value'].tolist() == [1.0]


def test_score_windows_counts_every_category_of_a_term(emotion_lexicon):
    windowed = assign_fixed_windows(_one_document('They abandon the good plan'), 10)
    scores = score_windows(windowed, emotion_lexicon)
    assert scores['category'].tolist() == ['fear', 'joy', 'negative', 'positive']
    assert scores['raw_value'].tolist() == [1.0, 1.0, 1.0, 1.0]
    assert scores['matches'].tolist() == [1, 1, 1, 1]


def test_score_windows_binary_counts_matches():
    lexicon = Lexicon([('good', 'positive'), ('bad', 'negative')])
    windowed = assign_fixed_windows(_one_document('good bad good'), 10)
    scores = score_windows(windowed, lexicon).set_index('category')['raw_value']
    assert scores.to_dict() == {'negative': 1.0, 'positive': 2.0}


def test_score_windows_scalar_sums_weights():
    lexicon = Lexicon([('good', None, 3), ('bad', None, -2), ('fine', None, 0)], kind='scalar')
    windowed = assign_key_windows(make_tokens([
        {'text': 'good bad good', 'timestamp': '2020-01-01', 'group_key': 'A'},
        {'text': 'fine', 'timestamp': '2020-01-02', 'group_key': 'A'},
    ]), 'date')
    scores = score_windows(windowed, lexicon)
    assert scores['window_id'].tolist() == ['2020-01-01', '2020-01-02']
    assert scores['category'].tolist() == ['value', 'value']
    assert scores['raw_value'].tolist() == [4.0, 0.0]
    # a zero-weight match still contributes a record
    assert scores['matches'].tolist() == [3, 1]


def test_score_windows_without_matches_or_entries(emotion_lexicon):
    windowed = assign_fixed_windows(_one_document('nothing to see here'), 10)
    assert score_windows(windowed, emotion_lexicon).empty
    assert score_windows(windowed, Lexicon([])).empty


def test_windows_spanning_partitions_are_summed(newspaper_documents, emotion_lexicon):
    # window size 50 puts the whole corpus into one window, scored from several partitions
    windowed = assign_fixed_windows(make_tokens(newspaper_documents), 50)
    serial = score_windows(windowed, emotion_lexicon, n_jobs=1)
    parallel = score_windows(windowed, emotion_lexicon, n_jobs=3)
    pd.testing.assert_frame_equal(serial, parallel)
    assert serial.set_index('category')['raw_value'].to_dict() == {
        'fear': 1.0, 'joy': 3.0, 'negative': 6.0, 'positive': 3.0, 'trust': 1.0}


def test_worker_failure_raises_aggregation_error(monkeypatch, emotion_lexicon):
    def broken(*args):
        raise MemoryError('worker died')

    monkeypatch.setattr(score_chunk, 'score_chunk', broken)
    windowed = assign_fixed_windows(_one_document('good bad'), 10)
    with pytest.raises(AggregationError):
        score_windows(windowed, emotion_lexicon)


def test_phrases_with_stopwords_match_the_reduced_stream():
    stopwords = {'of', 'the'}
    lexicon = build_lexicon(['state of the art'], 'praise')
    tokens = make_tokens([{'text': 'the state of the art', 'timestamp': '2020-01-01', 'group_key': 'A'}],
                         stopwords=stopwords)
    windowed = assign_fixed_windows(tokens, 10)
    matches = match_terms(windowed, lexicon, stopwords=stopwords)
    assert matches['term'].tolist() == ['state of the art']
    assert matches['global_position'].tolist() == [0]
    scores = score_windows(windowed, lexicon, stopwords=stopwords)
    assert scores['raw_value'].tolist() == [1.0]


def test_terms_made_of_stopwords_only_never_match():
    stopwords = {'the'}
    lexicon = build_lexicon(['the', 'art'], 'x')
    assert match_keys(lexicon, stopwords) == {'art': 'art'}
    tokens = make_tokens([{'text': 'the art', 'timestamp': '2020-01-01', 'group_key': 'A'}], stopwords=stopwords)
    matches = match_terms(assign_fixed_windows(tokens, 10), lexicon, stopwords=stopwords)
    assert matches['term'].tolist() == ['art']
