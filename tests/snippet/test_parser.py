import pytest

from clipsnip.exceptions import FormatError
from clipsnip.snippet import SnippetDefinition, SnippetStore
from clipsnip.snippet.parser import decode_store, encode_store, strip_line_comments


COMMENTED_STORE = (
    "{\n"
    "\t// Place your snippets for python here.\n"
    "\t// Each snippet has a prefix, body and description.\n"
    '\t"print": {\n'
    '\t\t"prefix": "pr",\n'
    '\t\t"body": ["print($1)"],\n'
    '\t\t"description": "Print a value"\n'
    "\t}\n"
    "}\n"
)


def test_strip_drops_single_tab_comment_lines():
    stripped = strip_line_comments(COMMENTED_STORE)

    assert "//" not in stripped
    assert stripped.startswith("{\n\t\"print\": {\n")
    assert stripped.count("\n") == COMMENTED_STORE.count("\n") - 2


def test_strip_leaves_other_comment_shapes_untouched():
    text = (
        "    // four spaces\n"
        "\t\t// two tabs\n"
        '\t"url": "https://example.com" // trailing\n'
        "// no indent\n"
    )

    assert strip_line_comments(text) == text


def test_strip_handles_crlf_line_endings():
    text = "{\r\n\t// comment\r\n}\r\n"

    assert strip_line_comments(text) == "{\r\n}\r\n"


def test_strip_is_idempotent():
    once = strip_line_comments(COMMENTED_STORE)

    assert strip_line_comments(once) == once


def test_decode_accepts_commented_store():
    store = decode_store(COMMENTED_STORE)

    assert store.names() == ["print"]
    assert store["print"].prefix == "pr"
    assert store["print"].body == ["print($1)"]
    assert store["print"].description == "Print a value"


def test_decode_rejects_invalid_json():
    with pytest.raises(FormatError):
        decode_store('{\n  // indented with spaces is not stripped\n  "a": {}\n}')


def test_decode_rejects_non_object_document():
    with pytest.raises(FormatError) as exc_info:
        decode_store("[1, 2, 3]")

    assert "expected a JSON object" in str(exc_info.value)


def test_decode_rejects_entry_without_prefix():
    with pytest.raises(FormatError) as exc_info:
        decode_store('{"a": {"body": ["x"]}}')

    assert "prefix" in str(exc_info.value)


def test_decode_rejects_empty_file():
    with pytest.raises(FormatError):
        decode_store("")


def test_encode_then_decode_reproduces_store():
    store = SnippetStore(
        {
            "double log": SnippetDefinition(
                prefix="cl2",
                body=["console.log(1)", "console.log(2)"],
                description="two logs",
            ),
            "no description": SnippetDefinition(prefix="nd", body=["x"]),
        }
    )

    decoded = decode_store(encode_store(store))

    assert decoded == store
    assert decoded.names() == ["double log", "no description"]


def test_encode_uses_four_space_indent_and_omits_missing_description():
    store = SnippetStore({"a": SnippetDefinition(prefix="p", body=["x"])})

    text = encode_store(store)

    assert text.endswith("}\n")
    assert '\n    "a": {\n' in text
    assert "description" not in text


@pytest.mark.parametrize("separator", ["\x0c", "\u2028", "\u2029", "\x85", "\x1e"])
def test_strip_splits_only_at_line_feeds(separator):
    text = '{\n\t"a": "x' + separator + '\t// not a comment line"\n}\n'

    assert strip_line_comments(text) == text


def test_decode_keeps_unicode_line_separators_inside_strings():
    text = '{\n\t// header\n\t"a": {"prefix": "p", "body": ["x\u2028// url", "y\u2029z"]}\n}\n'

    store = decode_store(text)

    assert store["a"].body == ["x\u2028// url", "y\u2029z"]


def test_decode_accepts_list_prefix():
    store = decode_store('{"a": {"prefix": ["log", "cl"], "body": ["x"]}}')

    assert store["a"].prefix == ["log", "cl"]
    assert decode_store(encode_store(store))["a"].prefix == ["log", "cl"]


def test_decode_rejects_prefix_of_wrong_type():
    with pytest.raises(FormatError) as exc_info:
        decode_store('{"a": {"prefix": 3, "body": ["x"]}}')

    assert "prefix" in str(exc_info.value)


def test_encode_keeps_null_extra_keys_and_drops_only_null_description():
    store = decode_store(
        '{"a": {"prefix": "p", "body": ["x"], "description": null, "scope": null}}'
    )

    text = encode_store(store)

    assert '"scope": null' in text
    assert "description" not in text
