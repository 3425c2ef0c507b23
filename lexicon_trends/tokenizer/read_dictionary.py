# -*- coding: utf-8 -*-
"""
Read word lists (stop words, ad hoc dictionaries) from text files.
"""

import codecs


def read_dictionary(file):
    """This function reads in a word list from a .txt file, one entry per line."""
    with codecs.open(file, 'r', 'utf-8-sig') as f:
        # splitlines() splits a string into a list, where each line is a list item.
        dictionary = f.read().splitlines()
    # lines starting with '#' are comments
    return set([d.lower().strip() for d in dictionary if d.strip() and not d.strip().startswith('#')])
