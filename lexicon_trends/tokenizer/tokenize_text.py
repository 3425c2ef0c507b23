# -*- coding: utf-8 -*-
"""
Split a text into normalized word tokens.
"""

from nltk.tokenize import RegexpTokenizer

# A token is a run of letters (any script, with diacritics), so every
# digit, underscore, punctuation mark or whitespace character is a boundary
WORD_TOKENIZER = RegexpTokenizer(r'[^\W\d_]+')


def tokenize_text(text, stopwords=None):

    '''This function returns the lower-cased words of a text, without stop words.'''

    if not text:
        return []
    # lowercase the text to make the lexicon lookup case-insensitive
    text = text.lower()
    # split the text whenever a non-alphabetic character is encountered
    tokens = WORD_TOKENIZER.tokenize(text)
    # keep only tokens containing at least one alphabetic character
    tokens = [t for t in tokens if any(c.isalpha() for c in t)]
    if stopwords:
        tokens = [t for t in tokens if t not in stopwords]
    return tokens
