import pytest
from mal.errors import MissingHashMapValue, UnsupportedHashMapKeyType
from mal.types import (
    Container,
    HashMap,
    Keyword,
    List,
    Nil,
    Number,
    String,
    Symbol,
    Vector,
    boolean,
    from_hashmap_key,
    hashmap,
    hashmap_from_pairs,
    keyword,
    list_,
    nil,
    number,
    string,
    symbol,
    to_hashmap_key,
    vector,
)


def test_constructors():
    assert nil() == Nil()
    assert boolean(1).value is True
    assert number(3) == Number(3.0)
    assert symbol("s") == Symbol("s")
    assert keyword("k") == Keyword("k")
    assert string("x") == String("x")
    assert list_([nil()]) == List((Nil(),))
    assert vector(iter([number(1)])) == Vector((Number(1.0),))
    assert hashmap({keyword("a"): nil()}) == HashMap({Keyword("a"): Nil()})


def test_variants_are_distinct():
    assert Keyword("a") != String("a")
    assert Symbol("a") != Keyword("a")
    assert List((Nil(),)) != Vector((Nil(),))


def test_nodes_are_immutable():
    with pytest.raises(AttributeError):
        Symbol("a").value = "b"


@pytest.mark.parametrize("key", [Keyword("a"), String("a")])
def test_key_conversion_round_trip(key):
    assert from_hashmap_key(to_hashmap_key(key)) == key


@pytest.mark.parametrize("ast", [Nil(), Number(1.0), Symbol("a"), List(), Vector(), HashMap()])
def test_key_conversion_rejects(ast):
    with pytest.raises(UnsupportedHashMapKeyType):
        to_hashmap_key(ast)


def test_hashmap_rejects_bad_key():
    with pytest.raises(UnsupportedHashMapKeyType):
        hashmap({Symbol("a"): Nil()})


def test_hashmap_from_pairs():
    hm = hashmap_from_pairs([Keyword("a"), Number(1.0), Keyword("a"), Number(2.0)])
    assert hm.entries == {Keyword("a"): Number(2.0)}


def test_hashmap_from_pairs_odd_length():
    with pytest.raises(MissingHashMapValue):
        hashmap_from_pairs([Keyword("a"), Number(1.0), Keyword("b")])


def test_container_delimiters():
    assert Container.for_opener("(") is Container.LIST
    assert Container.for_opener("[") is Container.VECTOR
    assert Container.for_opener("{").closer == "}"
    assert Container.for_opener(")") is None


def test_hashmap_entries_are_read_only():
    hm = hashmap_from_pairs([Keyword("a"), Number(1.0)])
    with pytest.raises(TypeError):
        hm.entries[Keyword("b")] = Number(2.0)
    assert hm.entries == {Keyword("a"): Number(1.0)}


def test_hashmap_copies_source_dict():
    source = {Keyword("a"): Nil()}
    hm = HashMap(source)
    source[Keyword("b")] = Nil()
    assert Keyword("b") not in hm.entries


def test_hashmaps_are_hashable():
    a = hashmap({keyword("k"): vector([number(1)])})
    b = hashmap({keyword("k"): vector([number(1)])})
    assert hash(a) == hash(b)
    assert {a, b} == {a}
    assert hash(HashMap()) == hash(HashMap())
