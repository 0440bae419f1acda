import pytest

from storuntime.sso import SSOString


def test_short_string_is_inline():
    s = SSOString("Hello")
    assert str(s) == "Hello"
    assert not s.is_heap
    assert s.flags & 1 == 0
    assert s.flags == 5 << 1


def test_exactly_23_bytes_is_inline():
    s = SSOString("12345678901234567890123")
    assert str(s) == "12345678901234567890123"
    assert not s.is_heap
    assert s.flags & 1 == 0


def test_24_bytes_is_heap():
    s = SSOString("123456789012345678901234")
    assert str(s) == "123456789012345678901234"
    assert s.is_heap
    assert s.flags == 1


def test_long_string_is_heap():
    text = "This is a very long string that exceeds 23 bytes!"
    s = SSOString(text)
    assert str(s) == text
    assert s.is_heap


def test_rejects_non_string():
    with pytest.raises(TypeError):
        SSOString(42)


@pytest.mark.parametrize(
    "text, expected",
    [("Hello", 5), ("", 0), ("Very long string that exceeds SSO limit", 39)],
)
def test_length(text, expected):
    assert len(SSOString(text)) == expected


def test_concat_stays_inline():
    result = SSOString("Hello") + SSOString(" World")
    assert str(result) == "Hello World"
    assert not result.is_heap


def test_concat_promotes_to_heap():
    result = SSOString("This is a longer") + SSOString(" string example")
    assert str(result) == "This is a longer string example"
    assert result.is_heap


def test_concat_with_plain_str():
    assert str(SSOString("Hello") + " World") == "Hello World"


def test_comparison():
    apple = SSOString("apple")
    banana = SSOString("banana")
    assert apple.compare(banana) < 0
    assert banana.compare(apple) > 0
    assert apple.compare(SSOString("apple")) == 0
    assert apple == SSOString("apple")
    assert apple < banana


def test_compare_rejects_other_types():
    with pytest.raises(TypeError):
        SSOString("a").compare(1)


def test_substring():
    s = SSOString("Hello World")
    assert str(s.substring(0, 5)) == "Hello"
    assert str(s.substring(6, 5)) == "World"
    assert str(s.substring(0, 100)) == "Hello World"


def test_substring_start_past_end():
    with pytest.raises(IndexError):
        SSOString("Hello").substring(5, 1)


def test_substring_negative():
    with pytest.raises(ValueError):
        SSOString("Hello").substring(-1, 2)


def test_int_conversions():
    assert str(SSOString.from_int(42)) == "42"
    assert str(SSOString.from_int(-123)) == "-123"
    assert SSOString("999").to_int() == 999


def test_to_int_parses_leading_number():
    assert SSOString("  -12abc").to_int() == -12
    assert SSOString("abc").to_int() == 0


def test_from_int_out_of_range():
    with pytest.raises(ValueError):
        SSOString.from_int(2**63)


def test_find():
    s = SSOString("Hello World, Hello Universe")
    assert s.find("World") == 6
    assert s.find("Hello") == 0
    assert s.find("NotFound") == -1


def test_prefix_suffix():
    s = SSOString("filename.txt")
    assert s.starts_with("file")
    assert s.ends_with(".txt")
    assert not s.starts_with("data")
    assert not SSOString("ab").ends_with("abc")


def test_copy_is_equal_and_independent():
    original = SSOString("Original")
    copy = original.copy()
    assert copy == original
    assert str(copy) == "Original"
    assert copy is not original


def test_hash_matches_equality():
    assert hash(SSOString("apple")) == hash(SSOString("apple"))
    assert len({SSOString("apple"), SSOString("apple")}) == 1