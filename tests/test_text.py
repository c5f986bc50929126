import pytest

from alexandria.text import base64_decode, base64_encode, extract_map, extract_vector, trim_spaces


@pytest.mark.parametrize("plain,encoded", [
    ("", ""),
    ("f", "Zg=="),
    ("fo", "Zm8="),
    ("foo", "Zm9v"),
    ("foobar", "Zm9vYmFy"),
])
def test_base64_known_vectors(plain, encoded):
    assert base64_encode(plain) == encoded
    assert base64_decode(encoded) == plain.encode()


def test_base64_accepts_bytes():
    assert base64_encode(b"\x00\xff\x10") == "AP8Q"
    assert base64_decode("AP8Q") == b"\x00\xff\x10"


def test_base64_decode_stops_at_first_foreign_character():
    assert base64_decode("Zm9v YmFy") == b"foo"
    assert base64_decode("Zm8=Zm9v") == b"fo"
    assert base64_decode("!Zm9v") == b""


def test_base64_decode_drops_partial_bits():
    assert base64_decode("Zm9vY") == b"foo"
    assert base64_decode("Zm9vYm") == b"foob"


@pytest.mark.parametrize("source,expected", [
    ("  hello  ", "hello"),
    ("hello", "hello"),
    (" a b ", "a b"),
    ("\thello ", "\thello"),
    ("    ", ""),
    ("", ""),
])
def test_trim_spaces_only_trims_spaces(source, expected):
    assert trim_spaces(source) == expected


def test_extract_vector_defaults():
    assert extract_vector("[1, 2, 3]") == ["1", "2", "3"]
    assert extract_vector("(a,\n b,\tc)") == ["a", "b", "c"]


def test_extract_vector_keeps_inner_empty_values():
    assert extract_vector("1,,2,") == ["1", "", "2"]
    assert extract_vector("") == []


def test_extract_vector_custom_delimiter():
    assert extract_vector("a;b c;d", delimiter=";") == ["a", "bc", "d"]


def test_extract_map_defaults():
    text = "width = 640\nheight = 480\n"
    assert extract_map(text) == {"width": "640", "height": "480"}


def test_extract_map_splits_on_first_delimiter_only():
    assert extract_map("url=a=b") == {"url": "a=b"}


def test_extract_map_entry_without_delimiter_maps_to_itself():
    assert extract_map("flag\nk=v") == {"flag": "flag", "k": "v"}


def test_extract_map_custom_delimiters():
    assert extract_map("a:1, b:2", keyval_delimiter=":", entry_delimiter=",") == {"a": "1", "b": "2"}
