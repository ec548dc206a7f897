import pytest

from tikwire.query import Query, QueryToken, make_tokens


def test_query_from_single_word_and_list_agree():
    assert Query("?name") == Query(["?name"])


def test_token_to_query():
    assert QueryToken("name").to_query().words == ["?name"]


def test_token_invert():
    assert (~QueryToken("name")).words == ["?-name"]


def test_token_equality_word():
    assert (QueryToken("name") == "x").words == ["?=name=x"]


def test_token_bool_value_uses_api_spelling():
    assert (QueryToken("disabled") == True).words == ["?=disabled=true"]  # noqa: E712


def test_token_not_equal_is_negated_equal():
    prop = QueryToken("name")
    assert (prop != "x") == ~(prop == "x")
    assert (prop != "x").words[-1] == "?#!"


def test_token_less_and_greater():
    prop = QueryToken("n")
    assert (prop < 5).words == ["?<n=5"]
    assert (prop > 5).words == ["?>n=5"]


def test_less_equal_is_or_of_less_and_equal():
    prop = QueryToken("n")
    assert (prop <= 5) == ((prop < 5) | (prop == 5))
    assert (prop <= 5).words == (prop < 5).words + (prop == 5).words + ["?#|"]


def test_greater_equal_is_or_of_greater_and_equal():
    prop = QueryToken("n")
    assert (prop >= 5).words == (prop > 5).words + (prop == 5).words + ["?#|"]


def test_double_invert_is_identity():
    q = QueryToken("a") == 1
    assert ~~q == q
    assert (~q).words == q.words + ["?#!"]


def test_invert_empty_query():
    assert (~Query([])).words == ["?#!"]


def test_and_with_itself_is_unchanged():
    q = QueryToken("a") == 1
    assert (q & q) == q
    assert (q | q) == q


def test_and_or_append_operator():
    a = QueryToken("a") == 1
    b = QueryToken("b") == 2
    assert (a & b).words == a.words + b.words + ["?#&"]
    assert (a | b).words == a.words + b.words + ["?#|"]


def test_operators_do_not_modify_operands():
    a = QueryToken("a") == 1
    b = QueryToken("b") == 2
    before_a, before_b = list(a.words), list(b.words)
    _ = a & b
    _ = a | b
    _ = a ^ b
    _ = ~a
    assert a.words == before_a
    assert b.words == before_b


def test_xor_expands_to_and_or_not():
    a = QueryToken("a") == 1
    b = QueryToken("b") == 2
    assert (a ^ b) == ((a & ~b) | (~a & b))


def test_query_accepts_token_operand():
    a = QueryToken("a") == 1
    prop = QueryToken("b")
    assert (a & prop).words == a.words + prop.to_query().words + ["?#&"]


def test_query_rejects_other_operands():
    with pytest.raises(TypeError):
        _ = Query("?a") & 3


def test_extend_appends_words():
    q = Query("?a")
    q.extend(Query(["?b", "?c"]))
    assert list(q) == ["?a", "?b", "?c"]
    assert len(q) == 3


def test_make_tokens():
    name, address = make_tokens("name", "address")
    assert name.name == "name"
    assert address.name == "address"
    assert make_tokens() == ()