import pytest

from conllio.exceptions import (
    InvalidTokenForm,
    InvalidTokenHead,
    InvalidTokenId,
    InvalidTokenPOS,
)
from conllio.token import EMPTY_FILLER, MultiWord, Token


def make_token(**kwargs):
    fields = dict(
        id=1,
        form=EMPTY_FILLER,
        lemma=EMPTY_FILLER,
        pos=EMPTY_FILLER,
        pos2=EMPTY_FILLER,
        feats={},
        head=0,
        deprel=EMPTY_FILLER,
        line_number=0,
    )
    fields.update(kwargs)
    return Token(**fields)


def test_id_zero():
    with pytest.raises(InvalidTokenId):
        make_token(id=0)


def test_negative_head():
    with pytest.raises(InvalidTokenHead):
        make_token(head=-1)


def test_head_equals_id():
    with pytest.raises(InvalidTokenHead):
        make_token(id=1, head=1)


def test_annotated_head_without_deprel():
    with pytest.raises(InvalidTokenHead):
        make_token(head=0, deprel="")


def test_unannotated_head_without_deprel():
    assert make_token(head=None, deprel="").head is None


@pytest.mark.parametrize("form", ["", "  "])
def test_empty_form(form):
    with pytest.raises(InvalidTokenForm):
        make_token(form=form)


def test_empty_pos():
    with pytest.raises(InvalidTokenPOS):
        make_token(pos="")


def test_error_cites_line_number():
    with pytest.raises(InvalidTokenId) as e:
        make_token(id=0, line_number=42)
    assert e.value.line_number == 42
    assert "Line 42" in str(e.value)


def test_to_conll():
    token = make_token(form="dogs", lemma="dog", pos="noun", deprel="root")
    assert token.to_conll() == "1\tdogs\tdog\tnoun\t_\t_\t0\troot\t_\t_"


def test_to_conll_unannotated_head_and_feats():
    token = make_token(
        id=3, head=None, feats={"Case": "Nom", "Number": "Sing"}
    )
    assert token.to_conll() == "3\t_\t_\t_\t_\tCase=Nom|Number=Sing\t_\t_\t_\t_"


def test_multiword_headline():
    multiword = MultiWord("della", 2, 3)
    first = make_token(id=2, form="di", multiword=multiword)
    second = make_token(id=3, form="la", head=2, multiword=multiword)
    assert first.is_first_of_multiword
    assert second.is_multiword and not second.is_first_of_multiword
    assert first.to_conll().split("\n") == [
        "2-3\tdella\t_\t_\t_\t_\t_\t_\t_\t_",
        "2\tdi\t_\t_\t_\t_\t0\t_\t_\t_",
    ]
    assert "\n" not in second.to_conll()


def test_composite_labels():
    token = make_token(pos="ADP+DET", pos2="E+RD", deprel="case+det")
    assert token.pos_labels == ["ADP", "DET"]
    assert token.pos2_labels == ["E", "RD"]
    assert token.deprel_labels == ["case", "det"]


def test_equality_ignores_line_number():
    assert make_token(line_number=1) == make_token(line_number=7)
    assert make_token(form="a") != make_token(form="b")


def test_multiword_range():
    multiword = MultiWord("della", 2, 3)
    assert list(multiword.range) == [2, 3]
    assert multiword.conll_range == "2-3"


def test_token_is_immutable():
    token = make_token(form="dogs")
    with pytest.raises(AttributeError):
        token.head = 1
    with pytest.raises(AttributeError):
        token.form = ""
    with pytest.raises(AttributeError):
        token.extra = "x"
    assert token.head == 0 and token.form == "dogs"


def test_feats_are_read_only():
    feats = {"Case": "Nom"}
    token = make_token(feats=feats)
    with pytest.raises(TypeError):
        token.feats["Case"] = "Acc"
    feats["Case"] = "Acc"
    assert token.feats["Case"] == "Nom"
    assert token == make_token(feats={"Case": "Nom"})
