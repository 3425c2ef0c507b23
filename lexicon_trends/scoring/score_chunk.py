# -*- coding: utf-8 -*-
"""
Score a chunk of windows against a lexicon.
"""

from sklearn.feature_extraction.text import CountVectorizer
import numpy as np


def _matched_terms(doc):
    # the documents of a chunk are already lists of matched lexicon terms
    return doc


def score_chunk(term_chunk, vocabulary, weight_matrix, indicator_matrix):
    """
    For a chunk of windows, count occurrences of each vocabulary term
    and return two NumPy arrays of shape (n_windows, n_categories):
    the per-category score sums and the per-category match counts.
    """
    vectorizer = CountVectorizer(vocabulary=vocabulary, analyzer=_matched_terms, lowercase=False)
    X = vectorizer.fit_transform(term_chunk)
    # X is (n_windows, n_vocab), weight_matrix is (n_vocab, n_categories)
    score_sum = X.dot(weight_matrix)
    match_count = X.dot(indicator_matrix)
    return np.asarray(score_sum), np.asarray(match_count)
