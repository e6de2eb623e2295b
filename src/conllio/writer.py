"""
Writing of sentences in the CoNLL format.
"""

import io


def to_string(sentences, write_comments=False):
    """
    Returns the CoNLL text of the sentences, each one followed by a blank
    line.

    >>> from .token import Token
    >>> from .sentence import Sentence
    >>> s = Sentence([Token(1, "Hi", "hi", "INTJ", "_", {}, 0, "root")], "s1", "Hi")
    >>> to_string([s], write_comments=True).split("\\n")
    ['# sent_id = s1', '# text = Hi', '1\\tHi\\thi\\tINTJ\\t_\\t_\\t0\\troot\\t_\\t_', '', '']
    """
    return "".join(
        "{}\n\n".format(sentence.to_conll(write_comments=write_comments))
        for sentence in sentences
    )


def to_file(sentences, path, write_comments=False):
    """Writes the sentences to a UTF-8 file at `path`."""
    with io.open(path, "w", encoding="utf-8") as out:
        for sentence in sentences:
            out.write(
                "{}\n\n".format(sentence.to_conll(write_comments=write_comments))
            )
