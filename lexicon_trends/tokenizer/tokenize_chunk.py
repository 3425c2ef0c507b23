# -*- coding: utf-8 -*-
"""
Worker unit for tokenizing documents in a multiprocessing pool.
"""

from lexicon_trends.tokenizer.tokenize_text import tokenize_text


def tokenize_chunk(text_chunk, stopwords):

    """Tokenize every text of a chunk, keeping the chunk order"""

    return [tokenize_text(text, stopwords) for text in text_chunk]
