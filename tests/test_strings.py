import pytest

from pipex.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_repeated_delimiters():
    assert split("  ls   -la /tmp ", " ") == ["ls", "-la", "/tmp"]


def test_split_path_variable():
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_only_delimiters_is_empty():
    assert split("::::", ":") == []
    assert split("", " ") == []


@pytest.mark.parametrize("text", ["a b c", "grep -v foo", "single"])
def test_split_round_trip_on_single_spaces(text):
    words = split(text, " ")
    assert " ".join(words) == text
    assert all(words)


def test_strchr_finds_first():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_nul_is_end_and_missing_is_none():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", "z") is None


def test_strrchr_finds_last():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1 :]
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None


def test_strdup_copies():
    assert strdup("PATH=/bin") == "PATH=/bin"


def test_striteri_replaces_in_place_with_indices():
    chars = list("abc")
    seen = []

    def upper(index, char):
        seen.append(index)
        return char.upper()

    striteri(chars, upper)
    assert "".join(chars) == "abc".upper()
    assert seen == list(range(len("abc")))


def test_striteri_none_leaves_elements():
    chars = list("xyz")
    striteri(chars, lambda index, char: None)
    assert chars == list("xyz")


def test_strmapi_identity_and_indices():
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    assert strmapi("pipex", record) == "pipex"
    assert seen == list(range(len("pipex")))


def test_strjoin_builds_command_path():
    assert strjoin(strjoin("/bin", "/"), "ls") == "/bin/ls"
    assert strjoin("", "abc") == "abc"


def test_strlcpy_full_copy():
    buf = bytearray(10)
    assert strlcpy(buf, b"hello", 10) == len(b"hello")
    assert buf[: len(b"hello") + 1] == b"hello\0"


def test_strlcpy_truncates():
    buf = bytearray(b"zzzzzz")
    assert strlcpy(buf, b"hello", 3) == len(b"hello")
    assert buf[:3] == b"he\0"
    assert buf[3:] == b"zzz"


def test_strlcpy_size_zero_untouched():
    buf = bytearray(b"keep")
    assert strlcpy(buf, b"hello", 0) == len(b"hello")
    assert buf == bytearray(b"keep")


def test_strlcat_appends():
    buf = bytearray(b"ab\0" + bytes(7))
    assert strlcat(buf, b"cd", 10) == len(b"abcd")
    assert buf[:5] == b"abcd\0"


def test_strlcat_size_not_larger_than_dst():
    buf = bytearray(b"abcd\0\0\0")
    assert strlcat(buf, b"xy", 3) == len(b"xy") + 3
    assert buf == bytearray(b"abcd\0\0\0")


def test_strlcat_none_destination_with_zero_size():
    assert strlcat(None, b"hello", 0) == len(b"hello")


def test_strlen():
    assert strlen("hello") == len("hello")
    assert strlen(bytearray(b"hi\0there")) == len(b"hi")
    assert strlen(b"") == 0


def test_strncmp_path_prefix():
    assert strncmp("PATH=/usr/bin", "PATH=", 5) == 0
    assert strncmp("HOME=/root", "PATH=", 5) != 0


def test_strncmp_sign_and_limits():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abc", 100) == 0


def test_strncmp_shorter_string_ends_with_nul():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strnstr_found_within_bound():
    text = "find the needle here"
    index = strnstr(text, "needle", len(text))
    assert text[index : index + len("needle")] == "needle"


def test_strnstr_bound_excludes_match():
    text = "find the needle here"
    start = text.index("needle")
    assert strnstr(text, "needle", start + len("needle") - 1) is None
    assert strnstr(text, "needle", start + len("needle")) == start


def test_strnstr_empty_needle_and_errors():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("", "a", 5) is None
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr():
    text = "pipeline"
    assert substr(text, 4, 100) == text[4:]
    assert substr(text, 0, 4) == "pipe"
    assert substr(text, len(text) + 1, 3) == ""
    assert substr(text, len(text), 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)