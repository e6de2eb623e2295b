"""
Tokens and multi-word spans of CoNLL sentences.
"""

from collections import namedtuple
from types import MappingProxyType

from .exceptions import (
    InvalidTokenForm,
    InvalidTokenHead,
    InvalidTokenId,
    InvalidTokenPOS,
)


EMPTY_FILLER = "_"
"""Denotes unspecified values in all fields except ID. No distinction is
   made for the rare cases where FORM or LEMMA is the underscore itself."""

CONLL_FIELDS = [
    "ID",
    "FORM",
    "LEMMA",
    "POS",
    "POS2",
    "FEATS",
    "HEAD",
    "DEPREL",
    "DEPS",
    "MISC",
]
"""The columns of a token line. POS and POS2 are the UPOS and XPOS columns
   of CoNLL-U, DEPS and MISC are not read."""

FIELD_COUNT = len(CONLL_FIELDS)


class MultiWord(namedtuple("MultiWord", ["form", "first", "last"])):
    """
    A surface form spanning the tokens with ids first..last (inclusive).

    >>> m = MultiWord("della", 3, 4)
    >>> m.conll_range
    '3-4'
    >>> list(m.range)
    [3, 4]
    """

    __slots__ = ()

    @property
    def range(self):
        return range(self.first, self.last + 1)

    @property
    def conll_range(self):
        return "{}-{}".format(self.first, self.last)


class Token(
    namedtuple(
        "Token",
        [
            "id",
            "form",
            "lemma",
            "pos",
            "pos2",
            "feats",
            "head",
            "deprel",
            "multiword",
            "line_number",
        ],
    )
):
    """
    One annotated word, immutable once built. The features are kept in a
    read-only mapping.

    The invariants checked at construction are: id >= 1, head (if
    annotated) >= 0 and different from id, a dependency relation for an
    annotated head, form and pos not blank.

    >>> t = Token(1, "dogs", "dog", "NOUN", "NNS", {}, 0, "root")
    >>> t.to_conll()
    '1\\tdogs\\tdog\\tNOUN\\tNNS\\t_\\t0\\troot\\t_\\t_'
    >>> t.head = 2
    Traceback (most recent call last):
    [...]
    AttributeError: ...
    """

    __slots__ = ()

    def __new__(
        cls,
        id,
        form,
        lemma,
        pos,
        pos2,
        feats,
        head,
        deprel,
        multiword=None,
        line_number=0,
    ):
        if id < 1:
            raise InvalidTokenId(line_number, "id {} < 1".format(id))
        if head is not None and (head < 0 or head == id):
            raise InvalidTokenHead(
                line_number, "invalid head {} for id {}".format(head, id)
            )
        if head is not None and not deprel.strip():
            raise InvalidTokenHead(
                line_number, "annotated head without dependency relation"
            )
        if not form.strip():
            raise InvalidTokenForm(line_number, "empty form")
        if not pos.strip():
            raise InvalidTokenPOS(line_number, "empty pos")

        return super(Token, cls).__new__(
            cls,
            id,
            form,
            lemma,
            pos,
            pos2,
            MappingProxyType(dict(feats)),
            head,
            deprel,
            multiword,
            line_number,
        )

    def _key(self):
        return self[:5] + (dict(self.feats),) + self[6:9]

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Token({!r})".format(self.to_conll())

    @property
    def pos_labels(self):
        return self.pos.split("+")

    @property
    def pos2_labels(self):
        return self.pos2.split("+")

    @property
    def deprel_labels(self):
        return self.deprel.split("+")

    @property
    def is_multiword(self):
        return self.multiword is not None

    @property
    def is_first_of_multiword(self):
        return self.multiword is not None and self.id == self.multiword.first

    def feats_to_conll(self):
        """
        >>> t = Token(1, "I", "I", "PRON", "_", {"Case": "Nom"}, 0, "root")
        >>> t.feats_to_conll()
        'Case=Nom'
        """
        if not self.feats:
            return EMPTY_FILLER
        return "|".join(
            "{}={}".format(name, value) for name, value in self.feats.items()
        )

    def multiword_headline(self):
        """
        Returns the multi-word line preceding the first token of a
        multi-word span, or None for any other token.
        """
        if not self.is_first_of_multiword:
            return None
        return "\t".join(
            [self.multiword.conll_range, self.multiword.form]
            + [EMPTY_FILLER] * (FIELD_COUNT - 2)
        )

    def to_conll(self):
        """
        Returns the CoNLL line of the token, preceded by the multi-word
        line if the token opens a multi-word span.
        """
        line = "\t".join(
            [
                str(self.id),
                self.form,
                self.lemma,
                self.pos,
                self.pos2,
                self.feats_to_conll(),
                EMPTY_FILLER if self.head is None else str(self.head),
                self.deprel,
                EMPTY_FILLER,
                EMPTY_FILLER,
            ]
        )
        headline = self.multiword_headline()
        if headline is not None:
            return headline + "\n" + line
        return line
