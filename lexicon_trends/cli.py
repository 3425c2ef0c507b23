# -*- coding: utf-8 -*-
"""
Command line entry point: score a CSV of documents against a lexicon file.

Usage example:
  lexicon-trends articles.csv --lexicon NRC-Emotion-Lexicon-Wordlevel-v0.92.txt \
      --lexicon-format nrc --window-key date --output daily_emotions.csv
"""

import argparse
import logging
import sys

import pandas as pd

from lexicon_trends.config import WINDOW_KEYS, make_config
from lexicon_trends.errors import LexiconTrendsError
from lexicon_trends.lexicon.load_lexicon import read_afinn_lexicon, read_lexicon, read_nrc_lexicon, read_word_list
from lexicon_trends.lexicon.lexicon import BINARY, SCALAR
from lexicon_trends.pipeline import run_pipeline
from lexicon_trends.tokenizer.read_dictionary import read_dictionary

logger = logging.getLogger(__name__)

LEXICON_FORMATS = ('csv', 'scalar-csv', 'nrc', 'afinn', 'words')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='lexicon-trends',
        description='Score documents against a lexicon and write per-window category ratios.')
    parser.add_argument('documents', help='CSV file with the columns text, timestamp, group_key (and optionally id)')
    parser.add_argument('--lexicon', required=True, help='lexicon file')
    parser.add_argument('--lexicon-format', choices=LEXICON_FORMATS, default='csv')
    parser.add_argument('--lexicon-name', default=None, help='name of the lexicon (defaults to the format)')
    parser.add_argument('--category', default=None, help='category of a "words" lexicon')
    windowing = parser.add_mutually_exclusive_group(required=True)
    windowing.add_argument('--window-size', type=int, help='fixed number of tokens per window')
    windowing.add_argument('--window-key', choices=sorted(WINDOW_KEYS), help='one window per key value')
    parser.add_argument('--partition-key', choices=['group_key'], default=None,
                        help='cut fixed-size windows separately for each group')
    parser.add_argument('--categories', default='all', help='comma-separated categories, or "all"')
    parser.add_argument('--stopwords', default=None, help='stop-word list, one word per line')
    parser.add_argument('--jobs', type=int, default=1, help='worker processes')
    parser.add_argument('--output', default=None, help='CSV file for the score records (default: stdout)')
    parser.add_argument('--net-output', default=None, help='CSV file for the net scores per window')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def load_lexicon(path, fmt, name, category=None):
    if fmt == 'csv':
        return read_lexicon(path, kind=BINARY, name=name)
    if fmt == 'scalar-csv':
        return read_lexicon(path, kind=SCALAR, name=name)
    if fmt == 'nrc':
        return read_nrc_lexicon(path, name=name)
    if fmt == 'afinn':
        return read_afinn_lexicon(path, name=name)
    if not category:
        raise ValueError('a "words" lexicon needs --category')
    return read_word_list(path, category, name=name)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    name = args.lexicon_name or args.lexicon_format
    categories = 'all' if args.categories == 'all' else [c.strip() for c in args.categories.split(',') if c.strip()]

    try:
        config = make_config(window_size=args.window_size, window_key=args.window_key,
                             lexicon_name=name, categories_of_interest=categories,
                             partition_key=args.partition_key, n_jobs=args.jobs)
        lexicon = load_lexicon(args.lexicon, args.lexicon_format, name, category=args.category)
    except (LexiconTrendsError, ValueError) as exc:
        parser.error(str(exc))

    stopwords = read_dictionary(args.stopwords) if args.stopwords else None
    documents = pd.read_csv(args.documents, encoding='utf-8-sig')

    result = run_pipeline(documents, lexicon, config, stopwords=stopwords)
    if result.skipped:
        logger.warning('%d documents were skipped because of their timestamp', result.skipped)

    result.records.to_csv(args.output if args.output else sys.stdout, index=False)
    if args.net_output:
        if result.net is None:
            logger.warning('Lexicon %r has no positive/negative categories, no net scores written', name)
        else:
            result.net.to_csv(args.net_output, index=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
