# -*- coding: utf-8 -*-
"""
Lexicon-based scoring of document streams into time- or group-indexed trend series.
"""

from lexicon_trends.config import config_from_dict, make_config
from lexicon_trends.errors import (AggregationError, ConfigError, LexiconTrendsError, ParseError,
                                   UnknownLexiconError)
from lexicon_trends.lexicon.lexicon import Lexicon
from lexicon_trends.lexicon.load_lexicon import (build_lexicon, lexicon_from_frame, read_afinn_lexicon,
                                                 read_lexicon, read_nrc_lexicon, read_word_list)
from lexicon_trends.lexicon.registry import LexiconRegistry
from lexicon_trends.pipeline import run_pipeline

__version__ = '0.1.0'
