# -*- coding: utf-8 -*-
"""
Named lexicons that are loaded once and queried independently.
"""

from lexicon_trends.errors import UnknownLexiconError


class LexiconRegistry():

    """
    Hold several lexicons side by side, addressed by name.

    The registry never merges the category spaces of two lexicons;
    a run always scores with exactly one of them.
    """

    def __init__(self, lexicons=None):
        self._lexicons = {}
        for name, lexicon in (lexicons or {}).items():
            self.add(name, lexicon)

    def add(self, name, lexicon):
        if name in self._lexicons:
            raise ValueError(f'a lexicon named {name!r} is already registered')
        if lexicon.name is None:
            lexicon.name = name
        self._lexicons[name] = lexicon
        return lexicon

    def get(self, name):
        try:
            return self._lexicons[name]
        except KeyError:
            raise UnknownLexiconError(f'no lexicon named {name!r}, known: {self.names}') from None

    @property
    def names(self):
        return sorted(self._lexicons)

    def __contains__(self, name):
        return name in self._lexicons

    def __len__(self):
        return len(self._lexicons)
