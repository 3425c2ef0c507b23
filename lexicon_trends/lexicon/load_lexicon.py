# -*- coding: utf-8 -*-
"""
Load lexicons from term lists in the formats we work with.
"""

import logging

import pandas as pd

from lexicon_trends.lexicon.lexicon import BINARY, SCALAR, SCALAR_CATEGORY, Lexicon
from lexicon_trends.tokenizer.read_dictionary import read_dictionary

logger = logging.getLogger(__name__)


def lexicon_from_frame(frame, kind=BINARY, name=None):

    """
    Build a lexicon from a DataFrame with the columns 'term', 'category' and 'weight'.

    'weight' is optional for binary lexicons (defaults to 1) and 'category'
    is optional for scalar lexicons (always 'value').
    """

    if 'term' not in frame.columns:
        raise ValueError("lexicon table needs a 'term' column")
    frame = frame.copy()
    if 'category' not in frame.columns:
        if kind == BINARY:
            raise ValueError("binary lexicon table needs a 'category' column")
        frame['category'] = SCALAR_CATEGORY
    if 'weight' not in frame.columns:
        if kind == SCALAR:
            raise ValueError("scalar lexicon table needs a 'weight' column")
        frame['weight'] = 1.0
    # Rows without a term (or, in binary lexicons, without a category) cannot be used
    frame = frame.dropna(subset=['term', 'category'] if kind == BINARY else ['term'])
    frame['weight'] = frame['weight'].fillna(1.0)

    entries = zip(frame['term'].astype(str), frame['category'], frame['weight'])
    lexicon = Lexicon(entries, kind=kind, name=name)
    logger.info('Loaded lexicon %r: %d terms, %d categories', name, len(lexicon), len(lexicon.categories))
    return lexicon


def read_lexicon(path, kind=BINARY, name=None):
    """Read a lexicon from a CSV file with a header 'term,category,weight'."""
    frame = pd.read_csv(path, encoding='utf-8-sig')
    return lexicon_from_frame(frame, kind=kind, name=name)


def read_nrc_lexicon(path, name='nrc'):

    """
    Read the word-level NRC Emotion Lexicon.

    Each line is 'word<TAB>emotion<TAB>association'; only associations equal to 1
    are kept, so a word appears once for every emotion it is associated with
    (e.g. 'abandon' under 'fear', 'negative' and 'sadness').
    """

    frame = pd.read_csv(path, sep='\t', header=None, names=['term', 'category', 'association'],
                        encoding='utf-8-sig', keep_default_na=False)
    frame = frame[pd.to_numeric(frame['association'], errors='coerce') == 1].copy()
    frame['category'] = frame['category'].str.strip().str.lower()
    return lexicon_from_frame(frame[['term', 'category']], kind=BINARY, name=name)


def read_afinn_lexicon(path, name='afinn'):
    """Read an AFINN-style valence list, 'term<TAB>value' per line, as a scalar lexicon."""
    frame = pd.read_csv(path, sep='\t', header=None, names=['term', 'weight'],
                        encoding='utf-8-sig', keep_default_na=False)
    frame['weight'] = pd.to_numeric(frame['weight'])
    return lexicon_from_frame(frame, kind=SCALAR, name=name)


def build_lexicon(words, category, name=None):

    """
    Build an ad hoc binary lexicon with a single category.

    Used for dictionaries assembled at run time, e.g. a list of
    mortality-related words scored as the category 'mortality'.
    """

    return Lexicon(((w, category, 1.0) for w in words), kind=BINARY, name=name or category)


def read_word_list(path, category, name=None):
    """Read a one-word-per-line dictionary file as a single-category lexicon."""
    return build_lexicon(sorted(read_dictionary(path)), category, name=name)
