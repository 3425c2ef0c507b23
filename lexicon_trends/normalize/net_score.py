# -*- coding: utf-8 -*-
"""
Net sentiment per window: positive aggregate minus negative aggregate.
"""

import logging

import pandas as pd

from lexicon_trends.normalize.normalize_scores import safe_ratio, normalize_scores

logger = logging.getLogger(__name__)

POSITIVE = 'positive'
NEGATIVE = 'negative'
NET_COLUMNS = ['window_id', 'group_key', 'positive', 'negative', 'net', 'token_count', 'net_ratio']


def has_net_score(lexicon):
    """A net score is defined only for lexicons with both a 'positive' and a 'negative' category."""
    return POSITIVE in lexicon.categories and NEGATIVE in lexicon.categories


def net_scores(scores, totals, lexicon):
    """
    Function to calculate the net sentiment of every window.

    Only the 'positive' and 'negative' aggregates enter the net score; other
    categories of the lexicon (fear, anger, trust, ...) never do, so a term
    tagged both 'fear' and 'negative' lowers the net score exactly once.

    Returns a dataframe with NET_COLUMNS as columns, one row per window,
    or None when the lexicon has no positive/negative pair. Callers must
    check for None before using the result.
    """
    if not has_net_score(lexicon):
        logger.info('Lexicon %r has no positive/negative categories, net score is undefined', lexicon.name)
        return None

    if totals.empty:
        return pd.DataFrame({c: pd.Series(dtype=object) for c in NET_COLUMNS})

    normalized = normalize_scores(scores, totals, [POSITIVE, NEGATIVE])
    wide = (normalized.pivot(index=['window_order', 'window_id', 'group_key', 'token_count'],
                             columns='category', values='raw_value')
                      .reset_index()
                      .sort_values('window_order'))
    wide.columns.name = None
    wide['net'] = wide[POSITIVE] - wide[NEGATIVE]
    wide['net_ratio'] = safe_ratio(wide['net'].to_numpy(), wide['token_count'].to_numpy())
    return wide[NET_COLUMNS].reset_index(drop=True)
