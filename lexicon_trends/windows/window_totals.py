# -*- coding: utf-8 -*-
"""
Count the tokens observed in each window, independently of any lexicon.
"""

import pandas as pd

TOTAL_COLUMNS = ['window_id', 'group_key', 'window_order', 'start_position', 'end_position', 'token_count']


def window_totals(windowed):
    """
    Function to calculate the total number of tokens in every window.
    Every token counts, whether or not it matches a lexicon term, so that
    windows without a single match keep their denominator.
    Returns a dataframe with one row per window, ordered by window_order.
    """
    if windowed.empty:
        return pd.DataFrame({c: pd.Series(dtype='int64') for c in TOTAL_COLUMNS}).astype({'group_key': object})

    totals = (windowed.groupby('window_id', sort=False)
                      .agg(group_key=('window_group', 'first'),
                           window_order=('window_order', 'first'),
                           start_position=('global_position', 'min'),
                           end_position=('global_position', 'max'),
                           token_count=('global_position', 'size'))
                      .reset_index())
    return totals.sort_values('window_order').reset_index(drop=True)[TOTAL_COLUMNS]
