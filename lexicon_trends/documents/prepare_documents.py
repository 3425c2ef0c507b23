# -*- coding: utf-8 -*-
"""
Turn raw documents into the ordered document table the rest of the pipeline consumes.
"""

import logging
import types
from datetime import datetime, timezone

import pandas as pd
from dateutil.parser import isoparse

from lexicon_trends.errors import ParseError

logger = logging.getLogger(__name__)

DOCUMENT_COLUMNS = ['id', 'text', 'timestamp', 'group_key', 'sequence_index', 'date', 'month', 'year']


def parse_timestamp(value, document_id=None):
    """
    Parse the timestamp of a document.

    Accepts datetime objects, pandas Timestamps and ISO-8601 strings.
    Aware values are converted to UTC and returned naive so that
    the whole corpus can be sorted on one time axis.
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        raise ParseError('missing timestamp', document_id=document_id)

    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        if not value.strip():
            raise ParseError('missing timestamp', document_id=document_id)
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as exc:
            raise ParseError(f'malformed timestamp {value!r}', document_id=document_id) from exc
    else:
        raise ParseError(f'unsupported timestamp type {type(value).__name__}', document_id=document_id)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    # The timestamp column is a datetime64[ns] series
    try:
        in_range = pd.Timestamp.min <= pd.Timestamp(parsed) <= pd.Timestamp.max
    except (pd.errors.OutOfBoundsDatetime, OverflowError):
        in_range = False
    if not in_range:
        raise ParseError(f'timestamp {parsed.isoformat()} outside the supported range', document_id=document_id)
    return parsed


def prepare_documents(documents):
    """
    Parse timestamps, drop unparseable documents and fix the global document order.

    'documents' is a DataFrame or a sequence of mappings with the fields
    text (or raw_text), timestamp, group_key and optionally id.

    Returns a namespace with
      documents: DataFrame with DOCUMENT_COLUMNS, sorted by timestamp
                 (ties keep the ingestion order) and numbered by sequence_index
      skipped: number of documents excluded because of their timestamp
      errors: the ParseError raised for each excluded document
    """
    frame = pd.DataFrame(documents).reset_index(drop=True)

    if 'text' not in frame.columns and 'raw_text' in frame.columns:
        frame = frame.rename(columns={'raw_text': 'text'})
    if 'text' not in frame.columns:
        frame['text'] = ''
    if 'timestamp' not in frame.columns:
        frame['timestamp'] = None
    if 'group_key' not in frame.columns:
        frame['group_key'] = ''
    if 'id' not in frame.columns:
        frame['id'] = frame.index

    # Missing text is an empty document, missing group key the empty key
    frame['text'] = frame['text'].where(frame['text'].notna(), '').astype(str)
    frame['group_key'] = frame['group_key'].where(frame['group_key'].notna(), '').astype(str)

    timestamps = []
    keep = []
    errors = []
    for doc_id, value in zip(frame['id'], frame['timestamp']):
        try:
            timestamps.append(parse_timestamp(value, document_id=doc_id))
            keep.append(True)
        except ParseError as exc:
            logger.warning('Skipping document %r: %s', doc_id, exc)
            timestamps.append(None)
            keep.append(False)
            errors.append(exc)

    frame['timestamp'] = timestamps
    frame = frame[pd.Series(keep, index=frame.index, dtype=bool)].copy()
    frame['timestamp'] = pd.to_datetime(frame['timestamp'])

    # A stable sort keeps the ingestion order among equal timestamps
    frame = frame.sort_values('timestamp', kind='mergesort').reset_index(drop=True)
    frame['sequence_index'] = range(len(frame))

    frame['date'] = frame['timestamp'].dt.strftime('%Y-%m-%d')
    frame['month'] = frame['timestamp'].dt.strftime('%Y-%m')
    frame['year'] = frame['timestamp'].dt.strftime('%Y')

    if errors:
        logger.warning('Skipped %d of %d documents with unusable timestamps',
                       len(errors), len(errors) + len(frame))
    logger.info('Prepared %d documents', len(frame))

    return types.SimpleNamespace(documents=frame[DOCUMENT_COLUMNS], skipped=len(errors), errors=errors)
