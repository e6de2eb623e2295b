"""
Reading, validation and writing of dependency treebanks in the CoNLL-X
and CoNLL-U formats, with checks of the dependency trees (tree-ness,
single root, projectivity) on the head arrays of the sentences.
"""

from .exceptions import (
    CoNLLError,
    InvalidLine,
    InvalidToken,
    InvalidTokenForm,
    InvalidTokenHead,
    InvalidTokenId,
    InvalidTokenPOS,
    InvalidTree,
    MissingHeads,
)
from .reader import CoNLLReader, SentenceReader, read_file, read_string
from .sentence import Sentence
from .token import EMPTY_FILLER, MultiWord, Token
from .writer import to_file, to_string
