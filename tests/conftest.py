import pytest

from lexicon_trends.documents.prepare_documents import prepare_documents
from lexicon_trends.lexicon.lexicon import Lexicon
from lexicon_trends.lexicon.load_lexicon import build_lexicon
from lexicon_trends.tokenizer.tokenize_documents import tokenize_documents


def make_tokens(documents, stopwords=None):
    """Run the document preparation and the tokenizer on a list of raw documents."""
    prepared = prepare_documents(documents)
    return tokenize_documents(prepared.documents, stopwords=stopwords)


@pytest.fixture
def mortality_documents():
    return [
        {'id': 'a', 'text': 'Death news today', 'timestamp': '2020-04-01T08:00:00', 'group_key': 'Bild'},
        {'id': 'b', 'text': 'Hospital reports', 'timestamp': '2020-04-01T09:00:00', 'group_key': 'Bild'},
        {'id': 'c', 'text': 'Good news', 'timestamp': '2020-04-02T10:00:00', 'group_key': 'Bild'},
    ]


@pytest.fixture
def mortality_lexicon():
    return build_lexicon(['death', 'hospital'], 'mortality')


@pytest.fixture
def emotion_lexicon():
    return Lexicon([
        ('good', 'positive'),
        ('good', 'joy'),
        ('bad', 'negative'),
        ('abandon', 'fear'),
        ('abandon', 'negative'),
        ('trust', 'trust'),
    ], name='emotions')


@pytest.fixture
def newspaper_documents():
    return [
        {'id': 1, 'text': 'Good news: the economy is good, not bad.', 'timestamp': '2021-01-04T07:00:00',
         'group_key': 'FAZ'},
        {'id': 2, 'text': 'Investors abandon hope after a bad week', 'timestamp': '2021-01-04T12:30:00',
         'group_key': 'Handelsblatt'},
        {'id': 3, 'text': 'Nothing to report.', 'timestamp': '2021-01-05T09:00:00', 'group_key': 'FAZ'},
        {'id': 4, 'text': 'We trust the good data', 'timestamp': '2021-01-06T18:00:00+01:00',
         'group_key': 'Handelsblatt'},
        {'id': 5, 'text': 'bad bad bad', 'timestamp': '2021-01-06T08:00:00', 'group_key': 'FAZ'},
    ]
