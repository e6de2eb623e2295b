"""
Reading of CoNLL-style data: the CoNLL-X format of the CoNLL 2006 shared
task and the CoNLL-U format of the CoNLL 2017 shared task.

The data is plain text (UTF-8) with three kinds of lines:
- word lines containing the annotation of a word/token,
- blank lines marking sentence boundaries,
- comment lines starting with hash (#).
"""

import io
import logging
import re

from .exceptions import InvalidLine, InvalidTokenId
from .sentence import Sentence
from .token import EMPTY_FILLER, FIELD_COUNT, MultiWord, Token

log = logging.getLogger(__name__)


TOKEN_LINE = re.compile(r"^[0-9]+\t")
"""Tokens are indexed with integers like 1, 2, 3 ..."""

MULTIWORD_LINE = re.compile(r"^([0-9]+)-([0-9]+)\t")
"""Multi-word tokens are indexed with integer ranges like 1-2 or 3-5."""

EMPTY_NODE_LINE = re.compile(r"^[0-9]+\.[0-9]+\t")
"""Empty nodes are indexed like i.1, i.2 etc."""

HEAD_FORM = re.compile(r"^[0-9]+$")

FEATURE_NAME_FORM = re.compile(r"[A-Z0-9][A-Z0-9a-z]*(\[[a-z0-9]+\])?")

FEATURE_VALUE_FORM = re.compile(r"[A-Z0-9][a-zA-Z0-9]*(,[A-Z0-9][a-zA-Z0-9]*)*")

WHITESPACE = re.compile(r"\s")


def is_comment_line(line):
    return line.lstrip().startswith("#")


def is_sentence_boundary(line):
    return not line.strip()


def parse_features(feats):
    """
    Parses the FEATS field into a dict.

    Raises:
        ValueError: naming the invalid feature

    >>> sorted(parse_features("Case=Nom|Number=Sing").items())
    [('Case', 'Nom'), ('Number', 'Sing')]
    >>> parse_features("_")
    {}
    >>> parse_features("Number[psor]=Plur|PronType=Int,Rel")
    {'Number[psor]': 'Plur', 'PronType': 'Int,Rel'}
    >>> parse_features("case=Nom")
    Traceback (most recent call last):
    [...]
    ValueError: case is an invalid feature name
    """
    result = {}
    if feats == EMPTY_FILLER:
        return result
    for pair in feats.split("|"):
        if "=" not in pair:
            raise ValueError("{} is an invalid feature".format(pair))
        name, value = (part.strip() for part in pair.split("=", 1))
        if not FEATURE_NAME_FORM.fullmatch(name):
            raise ValueError("{} is an invalid feature name".format(name))
        if not FEATURE_VALUE_FORM.fullmatch(value):
            raise ValueError("{} is an invalid feature value".format(value))
        if name in result:
            raise ValueError("{} is a repeated feature name".format(name))
        result[name] = value
    return result


class SentenceReader(object):
    def __init__(self, lines):
        """
        Reads one sentence from its lines.

        Args:
            lines (list): (line index, line) pairs, without the boundary
                blank lines. The line index is the position in the whole
                corpus and is used in the error messages.
        """
        self.lines = list(lines)
        self.line_index = 0
        self.tokens = []
        self.sentence_info = {}
        self._done = False

    @property
    def current(self):
        return self.lines[self.line_index]

    def read_sentence(self):
        """
        Reads the lines and returns a new Sentence. Supported lines are
        comment lines (before the first token only), token lines,
        multi-word token lines and empty node lines (skipped).

        Raises:
            InvalidLine: for a line that cannot be read
            InvalidToken: for a token violating the token constraints
        """
        if self._done:
            raise RuntimeError("A SentenceReader reads a single sentence.")
        self._done = True

        while self.line_index < len(self.lines):
            i, line = self.current
            if is_comment_line(line) and not self.tokens:
                self.read_comment()
            elif MULTIWORD_LINE.match(line):
                self.read_multiword_tokens()
            elif TOKEN_LINE.match(line):
                self.add_token(self.build_token(i, line))
            elif EMPTY_NODE_LINE.match(line):
                # empty nodes (ellipsis, traces) are not supported
                log.debug("skipping empty node at line %d", i)
            else:
                raise InvalidLine(i, line)
            self.line_index += 1

        if not self.tokens:
            i, line = self.lines[-1] if self.lines else (None, "")
            raise InvalidLine(i, line, "A sentence without tokens.")

        return Sentence(
            self.tokens,
            sentence_id=self.sentence_info.get("sent_id", ""),
            text=self.sentence_info.get("text", ""),
            metadata=self.sentence_info,
        )

    def read_comment(self):
        """
        Adds a key-value comment to the sentence information.
        Other comments are ignored.
        """
        i, line = self.current
        body = line.lstrip()[1:]
        if "=" in body:
            key, value = (part.strip() for part in body.split("=", 1))
            self.sentence_info[key] = value
        else:
            log.debug("ignoring comment at line %d", i)

    def read_multiword_info(self):
        i, line = self.current
        first, last = (int(x) for x in MULTIWORD_LINE.match(line).groups())
        fields = line.split("\t")
        if first >= last:
            raise InvalidLine(i, line, "Required first token id < last token id.")
        if first != len(self.tokens) + 1:
            raise InvalidTokenId(i, "Required consecutive ids.")
        if len(fields) < 2 or not fields[1].strip():
            raise InvalidLine(i, line, "A multi-word token requires a form.")
        return MultiWord(fields[1].strip(), first, last)

    def read_multiword_tokens(self):
        """
        Reads the token lines following a multi-word token line, one for
        each id of its range, and tags them with the multi-word span.
        """
        multiword = self.read_multiword_info()
        for _ in multiword.range:
            i, line = self.current
            self.line_index += 1
            if self.line_index >= len(self.lines):
                raise InvalidLine(
                    i, line, "Expected {} tokens.".format(multiword.conll_range)
                )
            i, line = self.current
            if not TOKEN_LINE.match(line):
                raise InvalidLine(i, line, "Expected a token line.")
            self.add_token(self.build_token(i, line, multiword=multiword))

    def build_token(self, i, line, multiword=None):
        """
        Builds a Token from its 10 tab separated fields. The fields other
        than FORM and LEMMA must not contain whitespace, DEPS and MISC are
        ignored.
        """
        fields = line.split("\t")
        if len(fields) != FIELD_COUNT:
            raise InvalidLine(
                i,
                line,
                "Expected {} fields, found {}.".format(FIELD_COUNT, len(fields)),
            )
        if any(WHITESPACE.search(field) for field in fields[3:]):
            raise InvalidLine(
                i,
                line,
                "Fields other than FORM and LEMMA must not contain spaces.",
            )

        head = fields[6]
        if head == EMPTY_FILLER:
            head = None
        elif HEAD_FORM.match(head):
            head = int(head)
        else:
            raise InvalidLine(i, line, "Invalid head {!r}.".format(head))

        try:
            feats = parse_features(fields[5])
        except ValueError as e:
            raise InvalidLine(i, line, str(e))

        return Token(
            id=int(fields[0]),
            form=fields[1].strip(),
            lemma=fields[2].strip(),
            pos=fields[3],
            pos2=fields[4],
            feats=feats,
            head=head,
            deprel=fields[7],
            multiword=multiword,
            line_number=i,
        )

    def add_token(self, token):
        """
        Appends a token, whose id must be 1 for the first token of the
        sentence and consecutive afterwards.
        """
        if not self.tokens:
            if token.id != 1:
                raise InvalidTokenId(
                    token.line_number, "The first token must have id=1"
                )
        elif token.id != self.tokens[-1].id + 1:
            raise InvalidTokenId(token.line_number, "Not consecutive id")
        self.tokens.append(token)


class CoNLLReader(object):
    def __init__(self, lines):
        """
        Iterates over the sentences of CoNLL lines. A blank line ends a
        sentence, consecutive blank lines are collapsed and the last
        sentence does not need a final blank line.

        Every iteration consumes the given lines: an iterator or an open
        file can be read once.

        Args:
            lines (iterable of str): the lines, line endings are stripped
        """
        self.lines = lines

    def __iter__(self):
        buffer = []
        for i, line in enumerate(self.lines):
            line = line.rstrip("\r\n")
            if is_sentence_boundary(line):
                if buffer:
                    log.debug("sentence boundary at line %d", i)
                    yield SentenceReader(buffer).read_sentence()
                    buffer = []
            else:
                buffer.append((i, line))
        if buffer:
            yield SentenceReader(buffer).read_sentence()


def read_string(text):
    """
    Returns a lazy iterator over the sentences of a CoNLL string.

    >>> s = next(read_string("1\\tHi\\thi\\tINTJ\\t_\\t_\\t0\\troot\\t_\\t_\\n"))
    >>> s.tokens[0].form
    'Hi'
    """
    return iter(CoNLLReader(text.split("\n")))


def read_file(path):
    """
    Returns a lazy iterator over the sentences of a CoNLL file (UTF-8,
    with or without byte order mark).
    The file is read line by line and closed when the iteration ends or
    the iterator is closed.
    """
    with io.open(path, encoding="utf-8-sig") as f:
        for sentence in CoNLLReader(f):
            yield sentence
