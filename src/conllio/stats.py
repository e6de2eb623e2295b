"""
Counting sentences, tokens and non-projective trees of CoNLL corpora.
"""

import logging
import os

log = logging.getLogger(__name__)


CONLL_EXTENSIONS = (".conllu", ".conll", ".conllx")


def find_corpus_files(path, extensions=CONLL_EXTENSIONS):
    """
    Returns the sorted paths of the corpus files found at `path`: the
    path itself if it is a file, else the files with one of the
    `extensions` in the directory tree below it.
    """
    if os.path.isfile(path):
        return [path]
    if not os.path.isdir(path):
        raise FileNotFoundError("File {} not found.".format(path))
    found = []
    for dirpath, _, filenames in os.walk(path):
        for fn in filenames:
            if fn.endswith(tuple(extensions)):
                found.append(os.path.join(dirpath, fn))
    return sorted(found)


class CorpusStatistics(object):
    def __init__(self):
        self.sentences = 0
        self.tokens = 0
        self.annotated = 0
        self.non_projective = 0
        self.first_sentence = None

    def add(self, sentence, validate=True):
        """
        Counts a sentence. Sentences with annotated heads are checked for
        non-projectivity and, if `validate` is set, for being a single
        rooted tree.

        Raises:
            InvalidTree: when validating an invalid tree
        """
        if self.first_sentence is None:
            self.first_sentence = sentence
        self.sentences += 1
        self.tokens += len(sentence)
        if sentence.has_annotated_heads():
            if validate:
                sentence.assert_valid_tree()
            self.annotated += 1
            if sentence.is_non_projective():
                self.non_projective += 1

    def to_dict(self):
        return {
            "sentences": self.sentences,
            "tokens": self.tokens,
            "with_heads": self.annotated,
            "non_projective": self.non_projective,
        }

    def __str__(self):
        return "sentences: {} (with-heads: {} non-projective: {})".format(
            self.sentences, self.annotated, self.non_projective
        )


def collect_statistics(sentences, validate=True):
    """
    Returns the CorpusStatistics of an iterable of sentences.

    >>> from .reader import read_string
    >>> text = "1\\tHi\\thi\\tINTJ\\t_\\t_\\t0\\troot\\t_\\t_\\n\\n"
    >>> print(collect_statistics(read_string(text * 2)))
    sentences: 2 (with-heads: 2 non-projective: 0)
    """
    stats = CorpusStatistics()
    for sentence in sentences:
        stats.add(sentence, validate=validate)
    log.debug("counted %d sentences", stats.sentences)
    return stats
