"""
Sentences of CoNLL corpora and the checks of their dependency trees.
"""

import logging
from types import MappingProxyType

import networkx as nx
from pydot import graph_from_dot_data

from . import treeutils
from .depgraph.graph import Digraph
from .exceptions import InvalidTokenId, InvalidTree, MissingHeads

log = logging.getLogger(__name__)


class Sentence(object):
    def __init__(self, tokens, sentence_id="", text="", metadata=None):
        """
        A sentence: the tokens with ids 1..N in order, plus the sentence
        information collected from the comment lines.

        Args:
            tokens (iterable of Token): the tokens, at least one
            sentence_id (str): the value of the "sent_id" comment
            text (str): the value of the "text" comment
            metadata (optional: dict): all the key-value comments

        Raises:
            ValueError: when no token is given
            InvalidTokenId: when the ids are not 1..N

        >>> from .token import Token
        >>> s = Sentence([Token(1, "the", "the", "DET", "_", {}, 2, "det"),
        ...               Token(2, "dogs", "dog", "NOUN", "_", {}, 0, "root")])
        >>> s.heads
        [1, None]
        """
        tokens = tuple(tokens)
        if not tokens:
            raise ValueError("A Sentence requires at least one Token.")
        for expected_id, token in enumerate(tokens, 1):
            if token.id != expected_id:
                raise InvalidTokenId(
                    token.line_number,
                    "expected id {}, found {}".format(expected_id, token.id),
                )
        self._tokens = tokens
        self._sentence_id = sentence_id
        self._text = text
        self._metadata = MappingProxyType(dict(metadata or {}))
        self._heads = None

    @property
    def tokens(self):
        return self._tokens

    @property
    def sentence_id(self):
        return self._sentence_id

    @property
    def text(self):
        return self._text

    @property
    def metadata(self):
        """All the key-value comments, read-only."""
        return self._metadata

    def __len__(self):
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __eq__(self, other):
        if not isinstance(other, Sentence):
            return NotImplemented
        return (self.sentence_id, self.text, self.tokens) == (
            other.sentence_id,
            other.text,
            other.tokens,
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Sentence(sentence_id={!r}, tokens={})".format(
            self.sentence_id, len(self.tokens)
        )

    @property
    def corpus_lines_range(self):
        """The line numbers of the first and the last token."""
        return self.tokens[0].line_number, self.tokens[-1].line_number

    def has_annotated_heads(self):
        return all(token.head is not None for token in self.tokens)

    @property
    def heads(self):
        """
        The head array of the sentence: 0-based heads, None for the tokens
        attached to the root.

        Raises:
            MissingHeads: when some token has no annotated head
        """
        if self._heads is None:
            if not self.has_annotated_heads():
                first, last = self.corpus_lines_range
                raise MissingHeads(
                    "Require annotated heads: Lines {} .. {}".format(first, last)
                )
            self._heads = [
                None if token.head == 0 else token.head - 1
                for token in self.tokens
            ]
        return list(self._heads)

    def is_tree(self):
        return treeutils.is_tree(self.heads)

    def is_single_root(self):
        return treeutils.is_single_root(self.heads)

    def count_roots(self):
        return treeutils.count_roots(self.heads)

    def is_non_projective(self):
        return treeutils.is_non_projective_tree(self.heads)

    def non_projective_arcs(self):
        """Returns the ids of the tokens whose arc is non-projective."""
        return [i + 1 for i in treeutils.non_projective_arcs(self.heads)]

    def find_cycle(self):
        """Returns the ids of the tokens on a cycle of heads, or None."""
        cycle = self.to_digraph().find_cycle()
        if cycle is None:
            return None
        return sorted(node + 1 for node in cycle)

    def assert_valid_tree(self, require_single_root=True):
        """
        Checks that the heads form a valid tree.

        Raises:
            InvalidTree: when the heads do not form a tree, or when they
                form more than one tree and `require_single_root` is set.
            MissingHeads: when some token has no annotated head
        """
        first, last = self.corpus_lines_range
        if not self.is_tree():
            message = "Invalid CoNLL: Not a Tree: Lines {} .. {}".format(
                first, last
            )
            cycle = self.find_cycle()
            if cycle:
                message += " (cycle through ids {})".format(
                    ", ".join(str(i) for i in cycle)
                )
            raise InvalidTree(message)
        if require_single_root and not self.is_single_root():
            raise InvalidTree(
                "Invalid CoNLL: Multiple Roots: Lines {} .. {}".format(
                    first, last
                )
            )

    def to_conll(self, write_comments=False):
        """Returns the CoNLL lines of the sentence, without final newline."""
        lines = []
        if write_comments:
            lines.append("# sent_id = {}".format(self.sentence_id))
            lines.append("# text = {}".format(self.text))
        lines.extend(token.to_conll() for token in self.tokens)
        return "\n".join(lines)

    def to_digraph(self):
        """
        Returns the Digraph of the heads, nodes are 0-based token indices.
        """
        return Digraph.from_heads(
            self.heads, labels=[token.deprel for token in self.tokens]
        )

    def to_networkx(self):
        """
        Returns a networkx DiGraph of the dependency tree. Node 0 is the
        virtual root, the other nodes are the token ids with the token
        fields as attributes. Edges point from head to dependent.
        """
        g = nx.DiGraph(sent_id=self.sentence_id, text=self.text)
        g.add_node(0, form="ROOT")
        for token in self.tokens:
            g.add_node(
                token.id,
                form=token.form,
                lemma=token.lemma,
                pos=token.pos,
                pos2=token.pos2,
                feats=dict(token.feats),
            )
        for token in self.tokens:
            if token.head is not None:
                g.add_edge(token.head, token.id, deprel=token.deprel)
        log.debug(
            "built graph of %s with %d nodes", self.sentence_id, len(g)
        )
        return g

    def render_as_dot(self):
        name = self.sentence_id or "sentence"
        name = "".join(c if c.isalnum() else "_" for c in name)
        return self.to_digraph().dot(name)

    def render_as_png(self, filename):
        dot_graph = graph_from_dot_data(self.render_as_dot())[0]
        dot_graph.write_png(filename)

    def render_as_pdf(self, filename):
        dot_graph = graph_from_dot_data(self.render_as_dot())[0]
        dot_graph.write_pdf(filename)
