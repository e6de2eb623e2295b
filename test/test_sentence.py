import networkx as nx
import pytest

from conllio.exceptions import InvalidTokenId, InvalidTree, MissingHeads
from conllio.sentence import Sentence
from conllio.token import Token


# You cannot put flavor into   a   bean that is not already there
FORMS = "You cannot put flavor into a bean that is not already there".split()


def make_sentence(heads, sentence_id="s1"):
    """Builds a sentence from 1-based heads (0 = root, None = unannotated)."""
    tokens = [
        Token(
            id=i,
            form=form,
            lemma=form.lower(),
            pos="X",
            pos2="_",
            feats={},
            head=head,
            deprel="root" if head == 0 else "dep",
            line_number=100 + i,
        )
        for i, (form, head) in enumerate(zip(FORMS, heads), 1)
    ]
    return Sentence(tokens, sentence_id=sentence_id, text=" ".join(FORMS))


PROJECTIVE = [3, 3, 0, 3, 7, 7, 3, 9, 3, 9, 12, 9]
NON_PROJECTIVE = [3, 3, 0, 3, 7, 7, 3, 9, 4, 9, 12, 9]
MULTIPLE_ROOTS = [3, 3, 0, 3, 7, 7, 3, 9, 0, 9, 12, 9]
CYCLE = [3, 3, 0, 3, 7, 7, 3, 9, 11, 9, 12, 9]


def test_heads():
    sentence = make_sentence(PROJECTIVE)
    assert sentence.heads == [2, 2, None, 2, 6, 6, 2, 8, 2, 8, 11, 8]


def test_valid_tree():
    sentence = make_sentence(PROJECTIVE)
    assert sentence.is_tree()
    assert sentence.is_single_root()
    assert sentence.count_roots() == 1
    assert not sentence.is_non_projective()
    assert sentence.find_cycle() is None
    sentence.assert_valid_tree()


def test_non_projective():
    sentence = make_sentence(NON_PROJECTIVE)
    assert sentence.is_tree()
    assert sentence.is_non_projective()
    assert sentence.non_projective_arcs() == [9]


def test_multiple_roots():
    sentence = make_sentence(MULTIPLE_ROOTS)
    assert sentence.is_tree()
    assert not sentence.is_single_root()
    sentence.assert_valid_tree(require_single_root=False)
    with pytest.raises(InvalidTree) as e:
        sentence.assert_valid_tree()
    assert "Multiple Roots: Lines 101 .. 112" in str(e.value)


def test_cycle():
    sentence = make_sentence(CYCLE)
    assert not sentence.is_tree()
    assert sentence.find_cycle() == [9, 11, 12]
    with pytest.raises(InvalidTree) as e:
        sentence.assert_valid_tree(require_single_root=False)
    assert "Not a Tree: Lines 101 .. 112" in str(e.value)
    assert "9, 11, 12" in str(e.value)


def test_invalid_tree_is_a_graph_error():
    assert issubclass(InvalidTree, nx.NetworkXException)


def test_head_out_of_range():
    sentence = make_sentence([0, 5])
    assert not sentence.is_tree()
    with pytest.raises(InvalidTree):
        sentence.assert_valid_tree()


def test_missing_heads():
    sentence = make_sentence([2, None, 2])
    assert not sentence.has_annotated_heads()
    with pytest.raises(MissingHeads):
        sentence.heads
    with pytest.raises(MissingHeads):
        sentence.is_non_projective()
    with pytest.raises(MissingHeads):
        sentence.assert_valid_tree()


def test_empty_sentence():
    with pytest.raises(ValueError):
        Sentence([])


def test_ids_must_be_consecutive():
    first = Token(1, "a", "a", "X", "_", {}, 0, "root")
    third = Token(3, "c", "c", "X", "_", {}, 1, "dep")
    with pytest.raises(InvalidTokenId):
        Sentence([first, third])
    with pytest.raises(InvalidTokenId):
        Sentence([third])


def test_to_networkx():
    sentence = make_sentence(PROJECTIVE)
    g = sentence.to_networkx()
    assert g.graph["sent_id"] == "s1"
    assert len(g) == len(PROJECTIVE) + 1
    assert nx.is_arborescence(g)
    assert g.nodes[3]["form"] == "put"
    assert g.edges[0, 3]["deprel"] == "root"
    assert g.edges[3, 1]["deprel"] == "dep"


def test_render_as_dot():
    sentence = make_sentence([2, 0], sentence_id="doc-1")
    dot = sentence.render_as_dot()
    assert dot.startswith("digraph _doc_1 {")
    assert '_ROOT_doc_1 -> _1_doc_1 [label="root"];' in dot
    assert '_1_doc_1 -> _0_doc_1 [label="dep"];' in dot


def test_dot_is_readable_by_pydot():
    from pydot import graph_from_dot_data

    graphs = graph_from_dot_data(make_sentence(PROJECTIVE).render_as_dot())
    assert len(graphs) == 1
    assert len(graphs[0].get_edges()) == len(PROJECTIVE)


def test_sentence_is_immutable():
    sentence = make_sentence(PROJECTIVE)
    heads = sentence.heads
    with pytest.raises(AttributeError):
        sentence.tokens = sentence.tokens[:1]
    with pytest.raises(AttributeError):
        sentence.tokens[0].head = 1
    with pytest.raises(TypeError):
        sentence.metadata["sent_id"] = "other"
    heads[0] = None
    assert sentence.heads == [2, 2, None, 2, 6, 6, 2, 8, 2, 8, 11, 8]
