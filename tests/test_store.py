"""Tests for i18nkit.store — JSON payload parsing and locale loading."""

from __future__ import annotations

import pytest

from i18nkit.errors import InvalidValue, MalformedPayload, ParseError
from i18nkit.store import load_locales_dir, parse, parse_catalog


def _deeply_nested(depth: int) -> str:
    """Return ``{"a": {"a": ... "x" ...}}`` nested *depth* levels."""
    return '{"a":' * depth + '"x"' + "}" * depth


# ---------------------------------------------------------------------------
# parse()
# ---------------------------------------------------------------------------


class TestParse:
    """Test parse() on well-formed payloads."""

    def test_flat_object(self) -> None:
        """Top-level string values become leaves."""
        tree = parse('{"greeting": "Hello"}')
        assert tree["greeting"] == "Hello"

    def test_nested_object(self) -> None:
        """Nested objects become nested trees."""
        tree = parse('{"menu": {"file": {"open": "Open"}}}')
        assert tree["menu"]["file"]["open"] == "Open"

    def test_empty_object(self) -> None:
        """An empty object is a valid, empty tree."""
        assert len(parse("{}")) == 0

    def test_accepts_utf8_bytes(self) -> None:
        """Raw UTF-8 bytes are decoded by the JSON parser."""
        tree = parse('{"greeting": "مرحبا"}'.encode("utf-8"))
        assert tree["greeting"] == "مرحبا"

    def test_tree_is_read_only(self) -> None:
        """Neither the root nor nested nodes accept assignment."""
        tree = parse('{"menu": {"open": "Open"}}')
        with pytest.raises(TypeError):
            tree["menu"] = "x"  # type: ignore[index]
        with pytest.raises(TypeError):
            tree["menu"]["open"] = "x"  # type: ignore[index]


class TestParseErrors:
    """Test parse() on payloads that must be rejected."""

    def test_malformed_json(self) -> None:
        """Plain text is a syntax error."""
        with pytest.raises(MalformedPayload):
            parse("not json")

    def test_truncated_json(self) -> None:
        """An unterminated object is a syntax error."""
        with pytest.raises(MalformedPayload):
            parse('{"greeting": "Hello"')

    def test_invalid_utf8_bytes(self) -> None:
        """Bytes that are not valid UTF-8 are a syntax error."""
        with pytest.raises(MalformedPayload):
            parse(b'{"greeting": "\xff\xfe"}')

    def test_excessive_nesting(self) -> None:
        """Nesting beyond the interpreter's recursion limit is rejected, not raised."""
        with pytest.raises(MalformedPayload, match="nested too deeply"):
            parse(_deeply_nested(100_000))

    @pytest.mark.parametrize("raw", ['"just a string"', "[]", "42", "null", "true"])
    def test_non_object_top_level(self, raw: str) -> None:
        """Anything but an object at the top level is an invalid value at the root."""
        with pytest.raises(InvalidValue) as exc_info:
            parse(raw)
        assert exc_info.value.path == ""

    @pytest.mark.parametrize(
        ("raw", "found"),
        [
            ('{"count": 3}', "number"),
            ('{"ratio": 1.5}', "number"),
            ('{"enabled": false}', "boolean"),
            ('{"items": ["a"]}', "array"),
            ('{"nothing": null}', "null"),
        ],
    )
    def test_invalid_leaf_types(self, raw: str, found: str) -> None:
        """Non-string leaves are rejected, never coerced."""
        with pytest.raises(InvalidValue) as exc_info:
            parse(raw)
        assert exc_info.value.found == found

    def test_invalid_value_reports_nested_path(self) -> None:
        """The error names the dot path of the offending value."""
        with pytest.raises(InvalidValue) as exc_info:
            parse('{"menu": {"file": {"open": "Open", "count": 2}}}')
        assert exc_info.value.path == "menu.file.count"
        assert "menu.file.count" in str(exc_info.value)

    def test_errors_share_base_class(self) -> None:
        """Both failure kinds can be caught as ParseError."""
        assert issubclass(MalformedPayload, ParseError)
        assert issubclass(InvalidValue, ParseError)


# ---------------------------------------------------------------------------
# parse_catalog()
# ---------------------------------------------------------------------------


class TestParseCatalog:
    """Test parse_catalog() over several languages."""

    def test_all_valid(self) -> None:
        """Every valid payload lands in the catalog."""
        catalog, errors = parse_catalog({"en": '{"a": "A"}', "fr": '{"a": "Á"}'})
        assert sorted(catalog) == ["en", "fr"]
        assert errors == {}

    def test_invalid_language_is_excluded(self) -> None:
        """A broken payload only removes its own language."""
        catalog, errors = parse_catalog({"en": '{"a": "A"}', "es": "not json"})
        assert list(catalog) == ["en"]
        assert list(errors) == ["es"]
        assert isinstance(errors["es"], MalformedPayload)

    def test_deeply_nested_language_is_excluded(self) -> None:
        """A payload too deep to parse is reported like any other broken payload."""
        catalog, errors = parse_catalog({"en": '{"a": "A"}', "xx": _deeply_nested(100_000)})
        assert list(catalog) == ["en"]
        assert isinstance(errors["xx"], MalformedPayload)

    def test_error_carries_language(self) -> None:
        """The language code is attached to the error and its message."""
        _, errors = parse_catalog({"de": '{"a": 1}'})
        assert errors["de"].language == "de"
        assert "'de'" in str(errors["de"])


# ---------------------------------------------------------------------------
# load_locales_dir()
# ---------------------------------------------------------------------------


class TestLoadLocalesDir:
    """Test load_locales_dir() file discovery."""

    def test_reads_json_files_by_stem(self, tmp_path) -> None:
        """Each ``*.json`` file is keyed by its stem; other files are ignored."""
        (tmp_path / "en.json").write_text('{"a": "A"}', encoding="utf-8")
        (tmp_path / "pt-BR.json").write_text('{"a": "Á"}', encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        raw = load_locales_dir(tmp_path)

        assert raw == {"en": b'{"a": "A"}', "pt-BR": '{"a": "Á"}'.encode("utf-8")}

    def test_broken_file_is_returned_unparsed(self, tmp_path) -> None:
        """Invalid JSON is passed through for the parser to reject."""
        (tmp_path / "es.json").write_text("not json", encoding="utf-8")
        assert load_locales_dir(tmp_path) == {"es": b"not json"}

    def test_non_utf8_file_only_drops_its_language(self, tmp_path) -> None:
        """A file that is not UTF-8 loads, then fails to parse on its own."""
        (tmp_path / "en.json").write_text('{"g": "Hello"}', encoding="utf-8")
        (tmp_path / "fr.json").write_bytes(b'{"g": "\xff\xfe"}')

        raw = load_locales_dir(tmp_path)
        catalog, errors = parse_catalog(raw)

        assert sorted(raw) == ["en", "fr"]
        assert list(catalog) == ["en"]
        assert isinstance(errors["fr"], MalformedPayload)

    def test_missing_dir_raises(self, tmp_path) -> None:
        """A missing directory is a configuration error."""
        with pytest.raises(FileNotFoundError, match="not found"):
            load_locales_dir(tmp_path / "missing")
