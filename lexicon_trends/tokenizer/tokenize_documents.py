# -*- coding: utf-8 -*-
"""
Build the corpus-wide token stream from the ordered document table.
"""

import logging
import multiprocessing as mp

import numpy as np
import pandas as pd

from lexicon_trends.errors import AggregationError
from lexicon_trends.tokenizer import tokenize_chunk as _chunk

logger = logging.getLogger(__name__)

TOKEN_COLUMNS = ['text', 'document_id', 'sequence_index', 'timestamp', 'group_key',
                 'date', 'month', 'year', 'token_index', 'global_position']


def tokenize_documents(documents, stopwords=None, n_jobs=1):
    """
    Tokenize every document and number the tokens across the corpus.

    'documents' is the table returned by prepare_documents, already sorted
    by sequence_index. With n_jobs > 1 the texts are split into contiguous
    chunks and tokenized in a process pool; the chunks are re-sorted by
    (sequence_index, token_index) before the global positions are assigned,
    so the stream is identical to the serial one.

    Returns a DataFrame with one row per token and TOKEN_COLUMNS as columns.
    """
    stopwords = frozenset(stopwords) if stopwords else frozenset()
    texts = documents['text'].tolist()

    if n_jobs > 1 and len(texts) > 1:
        chunks = [list(c) for c in np.array_split(np.array(texts, dtype=object), min(n_jobs, len(texts)))]
        try:
            with mp.Pool(processes=len(chunks)) as pool:
                results = pool.starmap(_chunk.tokenize_chunk, [(c, stopwords) for c in chunks])
        except Exception as exc:
            raise AggregationError(f'tokenization worker failed: {exc}') from exc
        token_lists = [tokens for result in results for tokens in result]
    else:
        token_lists = _chunk.tokenize_chunk(texts, stopwords)

    # One row per document with its token list, then one row per token
    tokens = documents.rename(columns={'id': 'document_id'}).copy()
    tokens['text'] = pd.Series(token_lists, index=tokens.index, dtype=object)
    tokens = tokens.explode('text')
    tokens = tokens[tokens['text'].notna()].copy()
    tokens['token_index'] = tokens.groupby('sequence_index').cumcount()

    tokens = tokens.sort_values(['sequence_index', 'token_index'], kind='mergesort').reset_index(drop=True)
    tokens['global_position'] = np.arange(len(tokens), dtype=np.int64)

    logger.info('Tokenized %d documents into %d tokens', len(documents), len(tokens))
    return tokens[TOKEN_COLUMNS]
