# -*- coding: utf-8 -*-
"""
One batch run: documents in, score records out.
"""

import logging
import types

from lexicon_trends.documents.prepare_documents import prepare_documents
from lexicon_trends.lexicon.lexicon import Lexicon
from lexicon_trends.lexicon.registry import LexiconRegistry
from lexicon_trends.normalize.net_score import net_scores
from lexicon_trends.normalize.normalize_scores import normalize_scores, resolve_categories
from lexicon_trends.output.assemble_records import assemble_records
from lexicon_trends.scoring.score_windows import score_windows
from lexicon_trends.tokenizer.tokenize_documents import tokenize_documents
from lexicon_trends.windows.assign_windows import assign_windows
from lexicon_trends.windows.window_totals import window_totals

logger = logging.getLogger(__name__)


def run_pipeline(documents, lexicons, config, stopwords=None):
    """
    Score a closed corpus of documents against one lexicon.

    Parameters:
      documents: DataFrame or sequence of mappings with text, timestamp, group_key (and optionally id)
      lexicons: a LexiconRegistry, or a single Lexicon registered under config.lexicon_name
      config: namespace returned by make_config
      stopwords: optional set of words removed during tokenization

    The steps run strictly in this order: the document order is fixed,
    then the corpus is tokenized, then windows are assigned. Totals are
    counted from the token stream, independently of the lexicon matches.

    Returns a namespace with
      records: DataFrame(window_id, group_key, category, raw_value, ratio)
      net: DataFrame of net scores per window, or None if the lexicon has no positive/negative pair
      totals: DataFrame of tokens per window
      skipped: number of documents dropped for an unusable timestamp
      errors: the ParseErrors of the dropped documents
    """
    if isinstance(lexicons, Lexicon):
        lexicons = LexiconRegistry({config.lexicon_name: lexicons})
    lexicon = lexicons.get(config.lexicon_name)

    prepared = prepare_documents(documents)
    tokens = tokenize_documents(prepared.documents, stopwords=stopwords, n_jobs=config.n_jobs)
    windowed = assign_windows(tokens, config)
    totals = window_totals(windowed)

    scores = score_windows(windowed, lexicon, n_jobs=config.n_jobs, stopwords=stopwords)
    categories = resolve_categories(lexicon, config.categories_of_interest)
    normalized = normalize_scores(scores, totals, categories)
    records = assemble_records(normalized)
    net = net_scores(scores, totals, lexicon)

    logger.info('Run finished: %d documents (%d skipped), %d tokens, %d windows, %d records',
                len(prepared.documents), prepared.skipped, len(tokens), len(totals), len(records))

    return types.SimpleNamespace(records=records, net=net, totals=totals,
                                 skipped=prepared.skipped, errors=prepared.errors)
