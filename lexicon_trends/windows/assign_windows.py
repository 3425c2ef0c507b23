# -*- coding: utf-8 -*-
"""
Assign every token of the stream to exactly one window.
"""

import logging

import numpy as np

from lexicon_trends.config import WINDOW_KEYS

logger = logging.getLogger(__name__)

# window_group of fixed-size windows cut over the whole corpus
ALL_GROUPS = 'all'


def check_order(tokens):
    """Windows can only be cut once the global token order is fixed."""
    positions = tokens['global_position'].to_numpy()
    if not np.array_equal(positions, np.arange(len(positions))):
        raise ValueError('token stream is not in global_position order; '
                         'order the documents and tokenize them before assigning windows')


def _window_order(tokens, keys):
    # Windows are ordered by the position of their first token
    first = tokens.groupby(keys)['global_position'].transform('min')
    return (first.rank(method='dense') - 1).astype(np.int64)


def assign_fixed_windows(tokens, window_size, partition_key=None):

    """
    Cut the token stream into consecutive runs of 'window_size' tokens.

    Without a partition the window of a token is global_position // window_size.
    With a partition (e.g. 'group_key') every partition is cut on its own,
    in position order, and the windows are numbered by their first token.
    The last window of a partition may be shorter than 'window_size'.

    Returns a copy of 'tokens' with the columns window_id, window_group
    and window_order added.
    """

    check_order(tokens)
    windowed = tokens.copy()

    if partition_key is None:
        windowed['window_id'] = windowed['global_position'] // window_size
        windowed['window_group'] = ALL_GROUPS
        windowed['window_order'] = windowed['window_id']
    else:
        # cumcount follows the row order, which is the global position order
        local = windowed.groupby(partition_key, sort=False).cumcount() // window_size
        windowed['window_order'] = _window_order(windowed, [windowed[partition_key], local])
        windowed['window_id'] = windowed['window_order']
        windowed['window_group'] = windowed[partition_key]

    logger.info('Assigned %d tokens to %d windows of size %d',
                len(windowed), windowed['window_id'].nunique(), window_size)
    return windowed


def assign_key_windows(tokens, window_key):

    """
    Build one window per distinct value of 'window_key'.

    'sequence' gives one window per document, 'date', 'month' and 'year'
    one window per calendar period, 'group_key' one window per source.
    A window holds exactly the tokens sharing its key.
    """

    check_order(tokens)
    windowed = tokens.copy()

    windowed['window_id'] = windowed[WINDOW_KEYS[window_key]]
    if window_key == 'sequence':
        # one window per document, labelled with the document's source
        windowed['window_group'] = windowed['group_key']
    else:
        windowed['window_group'] = windowed['window_id'].astype(str)
    windowed['window_order'] = _window_order(windowed, 'window_id')

    logger.info('Assigned %d tokens to %d windows keyed by %s',
                len(windowed), windowed['window_id'].nunique(), window_key)
    return windowed


def assign_windows(tokens, config):
    """Assign windows with the strategy selected in the run configuration."""
    if config.window_size is not None:
        return assign_fixed_windows(tokens, config.window_size, partition_key=config.partition_key)
    return assign_key_windows(tokens, config.window_key)
