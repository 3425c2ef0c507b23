# -*- coding: utf-8 -*-
"""
Find the lexicon terms occurring in the token stream.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)

MATCH_COLUMNS = ['global_position', 'window_id', 'sequence_index', 'term']


def match_keys(lexicon, stopwords=None):

    """
    Map the token sequence under which each lexicon term appears in the stream to the term.

    Stop words are removed from the documents before matching, so they are
    removed from the terms as well: with the stop words {'of', 'the'} the term
    'state of the art' is matched by the tokens 'state art'. A term made only
    of stop words can never occur and gets no key. When two terms collapse to
    the same key the first one in sorted order keeps it.
    """

    stopwords = stopwords or frozenset()
    keys = {}
    for term in lexicon.terms:
        key = ' '.join(w for w in term.split(' ') if w not in stopwords)
        if not key:
            logger.warning('Lexicon term %r consists of stop words only and cannot match', term)
            continue
        if key in keys:
            logger.warning('Lexicon terms %r and %r are identical without stop words, matching %r',
                           keys[key], term, keys[key])
            continue
        keys[key] = term
    return keys


def match_terms(windowed, lexicon, stopwords=None):

    '''
    Match the windowed token stream against the terms of a lexicon.

    Multi-word terms (e.g. 'trans rights activists') are matched by scanning
    n-grams inside each document, longest term first; a phrase never spans two
    documents and the tokens it consumes are not matched again on their own.
    A match belongs to the window of its first token. 'stopwords' must be the
    set removed during tokenization, so that phrases containing stop words
    still match.

    Returns a dataframe with one row per match and MATCH_COLUMNS as columns;
    'term' is the lexicon term, not the matched key.
    '''

    if windowed.empty or len(lexicon) == 0:
        return pd.DataFrame(columns=MATCH_COLUMNS)

    keys = match_keys(lexicon, stopwords)
    max_ngram = max((len(k.split(' ')) for k in keys), default=0)
    if max_ngram == 0:
        return pd.DataFrame(columns=MATCH_COLUMNS)

    # Single-word keys only need a vectorized membership test
    if max_ngram == 1:
        matches = windowed[windowed['text'].isin(list(keys))].copy()
        matches['term'] = matches['text'].map(keys)
        return matches[MATCH_COLUMNS].reset_index(drop=True)

    rows = []
    for seq, doc in windowed.groupby('sequence_index', sort=False):
        words = doc['text'].tolist()
        positions = doc['global_position'].tolist()
        windows = doc['window_id'].tolist()
        i = 0
        while i < len(words):
            for n in range(min(max_ngram, len(words) - i), 0, -1):
                candidate = ' '.join(words[i:i + n])
                if candidate in keys:
                    rows.append((positions[i], windows[i], seq, keys[candidate]))
                    i += n
                    break
            else:
                i += 1

    return pd.DataFrame(rows, columns=MATCH_COLUMNS)
