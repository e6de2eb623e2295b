"""
Prints sentence counts of CoNLL corpora and checks their dependency trees.
"""


import argparse
import logging
import sys

from conllio.reader import read_file
from conllio.stats import collect_statistics, find_corpus_files


if __name__ == "__main__":
    aparser = argparse.ArgumentParser(
        description="count the sentences of CoNLL files and check their trees"
    )
    aparser.add_argument("input", help="input file(s) or directories", nargs="+")
    aparser.add_argument(
        "--no-validate",
        action="store_true",
        help="do not raise on invalid trees",
    )
    aparser.add_argument(
        "--print-first",
        action="store_true",
        help="print the first sentence of each file",
    )
    aparser.add_argument("--verbose", "-v", action="store_true")
    args = aparser.parse_args(sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    for i in args.input:
        for fn in find_corpus_files(i):
            logging.info("Reading %s ...", fn)
            stats = collect_statistics(
                read_file(fn), validate=not args.no_validate
            )
            print(fn, stats)
            if args.print_first and stats.first_sentence is not None:
                print(stats.first_sentence.to_conll(write_comments=True) + "\n")
