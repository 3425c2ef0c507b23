# -*- coding: utf-8 -*-
"""
Aggregate lexicon matches per window and category.
"""

import logging
import multiprocessing as mp

import numpy as np
import pandas as pd

from lexicon_trends.errors import AggregationError
from lexicon_trends.scoring import score_chunk as _chunk
from lexicon_trends.scoring.match_terms import match_terms

logger = logging.getLogger(__name__)

SCORE_COLUMNS = ['window_id', 'category', 'raw_value', 'matches']


def _empty_scores():
    return pd.DataFrame({'window_id': pd.Series(dtype=object), 'category': pd.Series(dtype=object),
                         'raw_value': pd.Series(dtype=float), 'matches': pd.Series(dtype='int64')})


def _partition_terms(matches, n_partitions):
    """Split the matches into disjoint document partitions, grouped by window inside each."""
    documents = matches['sequence_index'].unique()
    partitions = []
    for doc_ids in np.array_split(documents, min(n_partitions, len(documents))):
        part = matches[matches['sequence_index'].isin(doc_ids)]
        grouped = part.groupby('window_id', sort=True)['term'].apply(list)
        partitions.append((grouped.index.tolist(), grouped.tolist()))
    return partitions


def score_windows(windowed, lexicon, n_jobs=1, stopwords=None):

    """
    Score every window of the token stream against one lexicon.

    Binary lexicons count the matches of each category, scalar lexicons sum
    the weights of the matched terms under the category 'value'. A term
    belonging to several categories counts for each of them.

    The matches are split into disjoint document partitions which are
    scored independently (in a process pool when n_jobs > 1); the partial
    aggregates are then added up per (window, category). Scoring is a sum,
    so the result does not depend on the partitioning. If any partition
    fails the whole run fails with an AggregationError.

    'stopwords' is the set removed during tokenization; it is needed to
    match lexicon phrases that contain stop words.

    Returns a dataframe with one row per (window, category) that has at
    least one match, and SCORE_COLUMNS as columns.
    """

    if len(lexicon) == 0:
        logger.info('Lexicon %r is empty, every aggregate is zero', lexicon.name)
        return _empty_scores()

    matches = match_terms(windowed, lexicon, stopwords=stopwords)
    if matches.empty:
        return _empty_scores()

    categories = lexicon.categories
    weights = lexicon.weight_matrix(categories)
    indicator = lexicon.indicator_matrix(categories)
    partitions = _partition_terms(matches, n_jobs)
    tasks = [(terms, lexicon.terms, weights, indicator) for _, terms in partitions]

    try:
        if n_jobs > 1 and len(tasks) > 1:
            with mp.Pool(processes=len(tasks)) as pool:
                results = pool.starmap(_chunk.score_chunk, tasks)
        else:
            results = [_chunk.score_chunk(*task) for task in tasks]
    except Exception as exc:
        raise AggregationError(f'scoring worker failed: {exc}') from exc

    if len(results) != len(partitions):
        raise AggregationError(f'expected {len(partitions)} partial aggregates, got {len(results)}')

    # Partition-local aggregates in long format, one row per (window, category)
    partials = []
    for (window_ids, _), (score_sum, match_count) in zip(partitions, results):
        partials.append(pd.DataFrame({
            'window_id': np.repeat(np.asarray(window_ids), len(categories)),
            'category': np.tile(np.array(categories, dtype=object), len(window_ids)),
            'raw_value': score_sum.ravel(),
            'matches': match_count.ravel().astype(np.int64),
        }))

    # Reduction barrier: partial sums combine by addition
    scores = (pd.concat(partials, ignore_index=True)
                .groupby(['window_id', 'category'], sort=True)[['raw_value', 'matches']]
                .sum()
                .reset_index())
    scores = scores[scores['matches'] > 0].reset_index(drop=True)

    logger.info('Scored %d matches into %d (window, category) aggregates', len(matches), len(scores))
    return scores[SCORE_COLUMNS]
