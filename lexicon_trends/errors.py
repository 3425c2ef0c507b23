# -*- coding: utf-8 -*-
"""
Exceptions raised by the scoring pipeline.
"""


class LexiconTrendsError(Exception):
    """Base class for all errors raised by lexicon_trends."""


class ParseError(LexiconTrendsError, ValueError):
    """A document carries a missing or malformed timestamp."""

    def __init__(self, message, document_id=None):
        super().__init__(message)
        self.document_id = document_id


class AggregationError(LexiconTrendsError):
    """A worker failed while tokenizing or scoring a partition of the corpus."""


class ConfigError(LexiconTrendsError, ValueError):
    pass


class UnknownLexiconError(LexiconTrendsError, KeyError):
    pass
