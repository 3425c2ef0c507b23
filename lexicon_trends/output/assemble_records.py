# -*- coding: utf-8 -*-
"""
Flatten the normalized scores into the rows handed to reporting and plotting.
"""

RECORD_COLUMNS = ['window_id', 'group_key', 'category', 'raw_value', 'ratio']


def assemble_records(normalized):
    """
    Return one row per (window, category) with RECORD_COLUMNS as columns,
    sorted by the window order (sequence or date) and then by category name.
    """
    records = normalized.sort_values(['window_order', 'category'], kind='mergesort')
    return records[RECORD_COLUMNS].reset_index(drop=True)


def records_to_dicts(records):
    """Rows as plain dictionaries, for consumers that do not use pandas."""
    return records.to_dict(orient='records')
