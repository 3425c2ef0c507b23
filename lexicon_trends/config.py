# -*- coding: utf-8 -*-
"""
Run configuration for the scoring pipeline.
"""

import types

from lexicon_trends.errors import ConfigError

# Fields a key window can be built on, mapped to the token column holding the key
WINDOW_KEYS = {
    'sequence': 'sequence_index',
    'date': 'date',
    'month': 'month',
    'year': 'year',
    'group_key': 'group_key',
}

PARTITION_KEYS = (None, 'group_key')

DEFAULTS = {
    'window_size': None,
    'window_key': None,
    'lexicon_name': None,
    'categories_of_interest': 'all',
    'partition_key': None,
    'n_jobs': 1,
}


def make_config(window_size=None, window_key=None, lexicon_name=None,
                categories_of_interest='all', partition_key=None, n_jobs=1):
    """
    Validate the options of one pipeline run and bundle them into a namespace.

    Parameters:
      window_size: positive int, cut the token stream into runs of this many tokens
      window_key: one of WINDOW_KEYS, one window per distinct key value
      lexicon_name: name of the lexicon to score with
      categories_of_interest: iterable of category names or "all"
      partition_key: None or "group_key", fixed windows restart in each partition
      n_jobs: number of worker processes used for tokenization and scoring

    Exactly one of 'window_size' and 'window_key' must be given.
    """
    if (window_size is None) == (window_key is None):
        raise ConfigError('exactly one of window_size and window_key must be set')

    if window_size is not None:
        # bool is an int subclass, but True is not a window size
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
            raise ConfigError(f'window_size must be a positive integer, got {window_size!r}')
    elif window_key not in WINDOW_KEYS:
        raise ConfigError(f'unknown window_key {window_key!r}, expected one of {sorted(WINDOW_KEYS)}')

    if partition_key not in PARTITION_KEYS:
        raise ConfigError(f'unknown partition_key {partition_key!r}')
    if partition_key is not None and window_size is None:
        raise ConfigError('partition_key only applies to fixed-size windows')

    if not lexicon_name or not isinstance(lexicon_name, str):
        raise ConfigError('lexicon_name must be a non-empty string')

    if categories_of_interest != 'all':
        if isinstance(categories_of_interest, str):
            categories_of_interest = [categories_of_interest]
        categories_of_interest = frozenset(categories_of_interest)
        if not categories_of_interest:
            raise ConfigError('categories_of_interest must be "all" or a non-empty set')

    if isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs < 1:
        raise ConfigError(f'n_jobs must be a positive integer, got {n_jobs!r}')

    return types.SimpleNamespace(
        window_size=window_size, window_key=window_key,
        lexicon_name=lexicon_name,
        categories_of_interest=categories_of_interest,
        partition_key=partition_key, n_jobs=n_jobs)


def config_from_dict(options):
    """Build a run configuration from a plain mapping (e.g. parsed from JSON)."""
    unknown = set(options) - set(DEFAULTS)
    if unknown:
        raise ConfigError(f'unknown configuration options: {sorted(unknown)}')
    merged = dict(DEFAULTS)
    merged.update(options)
    return make_config(**merged)
