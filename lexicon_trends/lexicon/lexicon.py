# -*- coding: utf-8 -*-
"""
In-memory lexicon: a multimap from term to (category, weight) pairs.
"""

import logging

import numpy as np

from lexicon_trends.tokenizer.tokenize_text import tokenize_text

logger = logging.getLogger(__name__)

BINARY = 'binary'
SCALAR = 'scalar'
# Scalar-valence lexicons have exactly one implicit category
SCALAR_CATEGORY = 'value'


def canonical_term(term):
    """Normalize a lexicon term the same way document text is tokenized."""
    return ' '.join(tokenize_text(term))


class Lexicon():

    """
    Map terms to the categories they belong to.

    A term may belong to several categories (e.g. 'fear' and 'negative'),
    so each term maps to a frozenset of (category, weight) pairs.
    Binary lexicons count matches; scalar lexicons sum one signed weight
    per term under the single category 'value'. Terms are canonicalized
    with the document tokenizer, so multi-word terms are stored as
    space-separated token sequences.
    """

    def __init__(self, entries=(), kind=BINARY, name=None):

        if kind not in (BINARY, SCALAR):
            raise ValueError(f'unknown lexicon kind {kind!r}')
        self.kind = kind
        self.name = name

        table = {}
        for entry in entries:
            term, category, weight = self._unpack(entry)
            key = canonical_term(term)
            if not key:
                logger.warning('Ignoring lexicon term without alphabetic characters: %r', term)
                continue
            if kind == SCALAR:
                # one weight per term, the last definition wins
                table[key] = {SCALAR_CATEGORY: float(weight)}
            else:
                table.setdefault(key, {})[category] = 1.0 if weight is None else float(weight)

        self._table = {term: frozenset(pairs.items()) for term, pairs in table.items()}
        self.terms = sorted(self._table)
        self.term_index = {term: i for i, term in enumerate(self.terms)}
        if kind == SCALAR:
            self.categories = [SCALAR_CATEGORY]
        else:
            self.categories = sorted({c for pairs in self._table.values() for c, _ in pairs})
        self.max_ngram = max((len(t.split(' ')) for t in self.terms), default=0)

    def _unpack(self, entry):
        if isinstance(entry, dict):
            term = entry['term']
            category = entry.get('category')
            weight = entry.get('weight')
        elif len(entry) == 2:
            term, category = entry
            weight = None
        else:
            term, category, weight = entry
        if self.kind == SCALAR:
            if weight is None:
                raise ValueError(f'scalar lexicon entry {term!r} has no weight')
        elif not category:
            raise ValueError(f'lexicon entry {term!r} has no category')
        return term, category, weight

    def lookup(self, term):
        """Return the (category, weight) pairs of a term, empty if it is not in the lexicon."""
        return self._table.get(canonical_term(term), frozenset())

    def __contains__(self, term):
        return canonical_term(term) in self._table

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return f'Lexicon(name={self.name!r}, kind={self.kind!r}, terms={len(self)}, categories={self.categories})'

    def _matrix(self, categories, weighted):
        categories = self.categories if categories is None else list(categories)
        col = {c: j for j, c in enumerate(categories)}
        M = np.zeros((len(self.terms), len(categories)), dtype=float)
        for term, pairs in self._table.items():
            i = self.term_index[term]
            for category, weight in pairs:
                if category in col:
                    M[i, col[category]] = weight if weighted else 1.0
        return M

    def weight_matrix(self, categories=None):
        """
        Terms x categories array of the aggregation weights.

        Binary lexicons get an indicator matrix, so that a dot product with
        term counts yields match counts; scalar lexicons get their weights.
        """
        return self._matrix(categories, weighted=self.kind == SCALAR)

    def indicator_matrix(self, categories=None):
        """Terms x categories 0/1 membership array."""
        return self._matrix(categories, weighted=False)
