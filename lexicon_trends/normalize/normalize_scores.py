# -*- coding: utf-8 -*-
"""
Relate the window aggregates to the total number of tokens in each window.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

NORMALIZED_COLUMNS = ['window_id', 'group_key', 'window_order', 'category', 'raw_value', 'matches',
                      'token_count', 'ratio']


def resolve_categories(lexicon, categories_of_interest='all'):

    """Return the sorted list of categories a run reports on."""

    if categories_of_interest == 'all':
        return list(lexicon.categories)
    categories = sorted(categories_of_interest)
    unknown = [c for c in categories if c not in lexicon.categories]
    if unknown:
        logger.warning('Categories %s are not in lexicon %r, they will be reported as zero', unknown, lexicon.name)
    return categories


def safe_ratio(raw_value, token_count):
    # an existing window always has tokens, but a zero total must not fault
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = np.where(token_count > 0, raw_value / np.where(token_count > 0, token_count, 1), 0.0)
    return ratio


def normalize_scores(scores, totals, categories):

    """
    Combine the window aggregates with the window totals.

    The key space is every window of 'totals' crossed with every category
    in 'categories'; aggregates missing from 'scores' (no match of that
    category in that window) are filled with zero rather than dropped.
    ratio = raw_value / token_count, and 0 when a window has no tokens.

    Returns a dataframe with NORMALIZED_COLUMNS as columns, one row per
    (window, category).
    """

    categories = list(categories)
    if totals.empty or not categories:
        return pd.DataFrame({c: pd.Series(dtype=object) for c in NORMALIZED_COLUMNS})

    key_space = pd.MultiIndex.from_product([totals['window_id'].tolist(), categories],
                                           names=['window_id', 'category'])

    aggregates = (scores.set_index(['window_id', 'category'])[['raw_value', 'matches']]
                        .reindex(key_space, fill_value=0)
                        .reset_index())

    normalized = aggregates.merge(totals[['window_id', 'group_key', 'window_order', 'token_count']],
                                  on='window_id', how='left', validate='many_to_one')
    normalized['raw_value'] = normalized['raw_value'].astype(float)
    normalized['matches'] = normalized['matches'].astype(np.int64)
    normalized['ratio'] = safe_ratio(normalized['raw_value'].to_numpy(), normalized['token_count'].to_numpy())

    return normalized[NORMALIZED_COLUMNS]
