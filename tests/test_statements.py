"""Unit tests for statement rendering: let/const/assign, inert fallback and dispatch."""

import pytest
from pydantic import BaseModel

from weft.exceptions import InvalidIdentifierError, ScriptEncodingError
from weft.js import (
    DeclarationKind,
    Statement,
    assign,
    assign_bool,
    assign_int,
    assign_json,
    assign_string,
    assignment,
    const_bool,
    const_int,
    const_json,
    const_string,
    declaration,
    declare,
    let_bool,
    let_int,
    let_json,
    let_string,
)


class Payload(BaseModel):
    foo: str
    bar: int


# ── let ──────────────────────────────────────────────────────────────────────


class TestLet:
    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("myVar", "hello", 'let myVar = "hello";'),
            ("myVar", 'he"llo', 'let myVar = "he\\"llo";'),
            ("myVar", "he\\llo", 'let myVar = "he\\\\llo";'),
            ("myVar", "</script>", 'let myVar = "\\u003C/script\\u003E";'),
            ("1-invalid", "hello", 'let </script> add By js.let_string: 1-invalid = "hello";'),
            (
                "1<invalid",
                "hello",
                'let </script> add By js.let_string: 1&lt;invalid = "hello";',
            ),
        ],
    )
    def test_let_string(self, name: str, value: str, expected: str):
        assert let_string(name, value) == expected

    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("myVar", 123, "let myVar = 123;"),
            ("myVar", -123, "let myVar = -123;"),
            ("myVar", 0, "let myVar = 0;"),
            ("1-invalid", 42, "let </script> add By js.let_int: 1-invalid = 42;"),
            ("1<invalid", 42, "let </script> add By js.let_int: 1&lt;invalid = 42;"),
        ],
    )
    def test_let_int(self, name: str, value: int, expected: str):
        assert let_int(name, value) == expected

    def test_let_int_rejects_float(self):
        with pytest.raises(TypeError):
            let_int("x", 1.9)

    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("myVar", True, "let myVar = true;"),
            ("myVar", False, "let myVar = false;"),
            ("1-invalid", True, "let </script> add By js.let_bool: 1-invalid = true;"),
            ("1<invalid", False, "let </script> add By js.let_bool: 1&lt;invalid = false;"),
        ],
    )
    def test_let_bool(self, name: str, value: bool, expected: str):
        assert let_bool(name, value) == expected

    def test_let_json_mapping(self):
        assert let_json("myJson", {"foo": "baz", "bar": 42}) == 'let myJson = {"foo":"baz","bar":42};'

    def test_let_json_model(self):
        assert let_json("myJson", Payload(foo="baz", bar=42)) == 'let myJson = {"foo":"baz","bar":42};'

    def test_let_json_invalid_identifier(self):
        with pytest.raises(InvalidIdentifierError, match="invalid identifier: 1-invalid"):
            let_json("1-invalid", {"foo": "baz", "bar": 42})

    def test_let_json_unsupported_type(self):
        with pytest.raises(ScriptEncodingError, match="json: unsupported type: set"):
            let_json("myJson", {1, 2, 3})

    def test_invalid_identifier_checked_before_serialization(self):
        with pytest.raises(InvalidIdentifierError):
            let_json("1-invalid", {1, 2, 3})


# ── const ────────────────────────────────────────────────────────────────────


class TestConst:
    def test_const_string(self):
        assert const_string("myVar", "hello") == 'const myVar = "hello";'
        assert (
            const_string("1-invalid", "hello")
            == 'const </script> add By js.const_string: 1-invalid = "hello";'
        )

    def test_const_int(self):
        assert const_int("myVar", 123) == "const myVar = 123;"
        assert const_int("1-invalid", 42) == "const </script> add By js.const_int: 1-invalid = 42;"

    def test_const_bool(self):
        assert const_bool("myVar", True) == "const myVar = true;"
        assert (
            const_bool("1-invalid", True) == "const </script> add By js.const_bool: 1-invalid = true;"
        )

    def test_const_json(self):
        assert const_json("myJson", {"foo": "bar"}) == 'const myJson = {"foo":"bar"};'

    def test_const_json_errors(self):
        with pytest.raises(InvalidIdentifierError, match="invalid identifier: 1-invalid"):
            const_json("1-invalid", {"foo": "bar"})
        with pytest.raises(ScriptEncodingError, match="json: unsupported type: object"):
            const_json("myJson", object())

    def test_reserved_word_accepted(self):
        assert const_int("let", 1) == "const let = 1;"


# ── assignment ───────────────────────────────────────────────────────────────


class TestAssign:
    def test_assign_string_property_path(self):
        assert assign_string("window.app.title", "Hi") == 'window.app.title = "Hi";'

    def test_assign_int_and_bool(self):
        assert assign_int("a.b", 7) == "a.b = 7;"
        assert assign_bool("a.b", False) == "a.b = false;"

    def test_invalid_segment_falls_back(self):
        assert (
            assign_string("a.1b.c", "x") == '</script> add By js.assign_string: a.1b.c = "x";'
        )
        assert assign_int("a..b", 1) == "</script> add By js.assign_int: a..b = 1;"
        assert assign_bool("<x>", True) == "</script> add By js.assign_bool: &lt;x&gt; = true;"

    def test_assign_json(self):
        assert assign_json("state.items", [1, "two"]) == 'state.items = [1,"two"];'

    def test_assign_json_invalid_path(self):
        with pytest.raises(InvalidIdentifierError, match="invalid identifier: a.1b.c"):
            assign_json("a.1b.c", [])


# ── tagged result ────────────────────────────────────────────────────────────


class TestStatement:
    def test_valid_declaration_is_not_fallback(self):
        statement = declaration(DeclarationKind.LET, "myVar", "hello")
        assert isinstance(statement, Statement)
        assert statement.fallback is False
        assert statement.target == "myVar"
        assert str(statement) == 'let myVar = "hello";'

    def test_invalid_declaration_is_fallback(self):
        statement = declaration("let", "1-invalid", "hello")
        assert statement.fallback is True
        assert statement.origin == "js.let_string"
        assert statement.target.startswith("</script>")

    def test_assignment_has_no_keyword(self):
        statement = assignment("a.b", 1)
        assert statement.keyword is None
        assert str(statement) == "a.b = 1;"

    def test_statement_is_immutable(self):
        statement = declaration("const", "x", 1)
        with pytest.raises(Exception):
            statement.target = "y"


# ── generic dispatch ─────────────────────────────────────────────────────────


class TestDispatch:
    @pytest.mark.parametrize(
        "kind, value, expected",
        [
            ("let", "s", 'let x = "s";'),
            ("let", 5, "let x = 5;"),
            ("const", True, "const x = true;"),
            ("const", None, "const x = null;"),
            (DeclarationKind.LET, [1, 2], "let x = [1,2];"),
            (DeclarationKind.CONST, {"a": 1.5}, 'const x = {"a":1.5};'),
        ],
    )
    def test_declare(self, kind, value, expected: str):
        assert declare(kind, "x", value) == expected

    def test_bool_dispatches_before_int(self):
        assert declare("let", "1x", True) == "let </script> add By js.let_bool: 1x = true;"

    def test_origin_names_typed_function(self):
        assert "js.const_int" in declare("const", "1x", 3)
        assert "js.assign_string" in assign("1x", "v")

    def test_json_dispatch_raises(self):
        with pytest.raises(InvalidIdentifierError):
            declare("let", "1x", {"a": 1})
        with pytest.raises(ScriptEncodingError):
            assign("a.b", {1, 2})

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            declare("var", "x", 1)

    def test_rendering_is_deterministic(self):
        first = declare("let", "data", {"k": "</script>", "n": [1, 2]})
        second = declare("let", "data", {"k": "</script>", "n": [1, 2]})
        assert first == second
        assert let_string("1<x", "v") == let_string("1<x", "v")
