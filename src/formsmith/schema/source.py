# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Schema source reader.

Reads Zod construction source (TypeScript) back into schema nodes. Only the
declarative subset is understood: ``const`` declarations whose initialisers
are ``z.<ctor>(...)`` chains, identifiers bound by earlier declarations,
object/array literals and string, number, boolean and regex literals.
``import``, ``type`` and ``interface`` statements are skipped.

Nothing is executed. Member access is limited to the builder namespace and
the public schema-node methods listed below.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from formsmith.logging import get_logger
from formsmith.schema.builder import SchemaBuilder, _IsoNamespace, z
from formsmith.schema.errors import SCHEMA_EXPORT_NOT_FOUND, SchemaSourceError
from formsmith.schema.nodes import SchemaNode

logger = get_logger("formsmith.schema.source")

_PUNCTUATION = "(){}[],:.;=<>|&?!+-*"
_REGEX_PREFIX = set("(,[:=!&|?{;")
_STATEMENT_KEYWORDS = frozenset(
    {"import", "export", "const", "let", "var", "type", "interface"}
)
_LITERAL_IDENTIFIERS: dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_BUILDER_MEMBERS = frozenset(
    {
        "string",
        "email",
        "url",
        "uuid",
        "cuid",
        "iso",
        "number",
        "boolean",
        "date",
        "enum",
        "literal",
        "object",
        "array",
        "set",
        "tuple",
        "record",
        "union",
        "discriminated_union",
        "intersection",
        "any",
        "unknown",
        "bigint",
        "null",
    }
)
_NODE_METHODS = frozenset(
    {
        "optional",
        "nullable",
        "describe",
        "transform",
        "pipe",
        "and_",
        "refine",
        "min",
        "max",
        "gt",
        "lt",
        "length",
        "nonempty",
        "regex",
        "email",
        "url",
        "uuid",
        "cuid",
        "datetime",
        "trim",
        "lowercase",
        "starts_with",
        "ends_with",
        "positive",
        "nonnegative",
        "int",
        "multiple_of",
        "step",
        "extend",
        "keyof",
    }
)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")
_NUMBER = re.compile(r"\d+(\.\d+)?([eE][+-]?\d+)?")


@dataclass(frozen=True)
class Token:
    """A lexical token with its 1-based source position."""

    kind: str
    value: Any
    line: int
    column: int


def _to_snake(name: str) -> str:
    if name == "and":
        return "and_"
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


class _Lexer:
    def __init__(self, code: str) -> None:
        self._code = code
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def _error(self, message: str) -> SchemaSourceError:
        return SchemaSourceError(message, line=self._line, column=self._column)

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._code[index] if index < len(self._code) else ""

    def _advance(self, count: int = 1) -> str:
        text = self._code[self._pos : self._pos + count]
        for char in text:
            if char == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        self._pos += count
        return text

    def _regex_allowed(self) -> bool:
        if not self._tokens:
            return True
        last = self._tokens[-1]
        return last.kind == "punct" and last.value in _REGEX_PREFIX

    def tokenize(self) -> list[Token]:
        while self._pos < len(self._code):
            char = self._peek()
            if char.isspace():
                self._advance()
            elif char == "/" and self._peek(1) == "/":
                while self._pos < len(self._code) and self._peek() != "\n":
                    self._advance()
            elif char == "/" and self._peek(1) == "*":
                end = self._code.find("*/", self._pos + 2)
                if end == -1:
                    raise self._error("Unterminated block comment")
                self._advance(end + 2 - self._pos)
            elif char == "/":
                if not self._regex_allowed():
                    raise self._error("Unexpected '/'")
                self._read_regex()
            elif char in "\"'`":
                self._read_string(char)
            elif char.isdigit():
                self._read_number()
            elif char.isalpha() or char in "_$":
                self._read_identifier()
            elif char in _PUNCTUATION:
                self._tokens.append(Token("punct", char, self._line, self._column))
                self._advance()
            else:
                raise self._error(f"Unexpected character {char!r}")
        self._tokens.append(Token("eof", None, self._line, self._column))
        return self._tokens

    def _read_identifier(self) -> None:
        line, column = self._line, self._column
        start = self._pos
        while self._peek() and (self._peek().isalnum() or self._peek() in "_$"):
            self._advance()
        self._tokens.append(Token("ident", self._code[start : self._pos], line, column))

    def _read_number(self) -> None:
        line, column = self._line, self._column
        match = _NUMBER.match(self._code, self._pos)
        text = match.group(0) if match else self._peek()
        self._advance(len(text))
        value: int | float
        value = float(text) if ("." in text or "e" in text.lower()) else int(text)
        self._tokens.append(Token("number", value, line, column))

    def _read_string(self, quote: str) -> None:
        line, column = self._line, self._column
        self._advance()
        chars: list[str] = []
        while True:
            char = self._peek()
            if not char or (char == "\n" and quote != "`"):
                raise SchemaSourceError(
                    "Unterminated string literal", line=line, column=column
                )
            if char == quote:
                self._advance()
                break
            if quote == "`" and char == "$" and self._peek(1) == "{":
                raise self._error("Template literal substitutions are not supported")
            if char == "\\":
                self._advance()
                chars.append(self._read_escape())
                continue
            chars.append(self._advance())
        self._tokens.append(Token("string", "".join(chars), line, column))

    def _read_escape(self) -> str:
        char = self._advance()
        if char in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[char]
        if char == "\n":
            return ""
        if char == "x":
            return chr(int(self._advance(2), 16))
        if char == "u":
            if self._peek() == "{":
                end = self._code.find("}", self._pos)
                if end == -1:
                    raise self._error("Malformed unicode escape")
                digits = self._advance(end + 1 - self._pos)[1:-1]
                return chr(int(digits, 16))
            return chr(int(self._advance(4), 16))
        return char

    def _read_regex(self) -> None:
        line, column = self._line, self._column
        self._advance()
        chars: list[str] = []
        in_class = False
        while True:
            char = self._peek()
            if not char or char == "\n":
                raise SchemaSourceError(
                    "Unterminated regular expression", line=line, column=column
                )
            if char == "\\":
                escaped = self._advance(2)
                # "\/" only exists to keep the literal delimited.
                chars.append("/" if escaped == "\\/" else escaped)
                continue
            if char == "[":
                in_class = True
            elif char == "]":
                in_class = False
            elif char == "/" and not in_class:
                self._advance()
                break
            chars.append(self._advance())
        while self._peek().isalpha():
            self._advance()
        self._tokens.append(Token("regex", "".join(chars), line, column))


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._bindings: dict[str, Any] = {"z": z}
        self.declarations: dict[str, Any] = {}

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.kind != "eof":
            self._pos += 1
        return token

    def _error(self, message: str, token: Token | None = None) -> SchemaSourceError:
        token = token or self._peek()
        return SchemaSourceError(message, line=token.line, column=token.column)

    def _is(self, kind: str, value: Any = None) -> bool:
        token = self._peek()
        return token.kind == kind and (value is None or token.value == value)

    def _expect(self, kind: str, value: Any = None) -> Token:
        if not self._is(kind, value):
            token = self._peek()
            expected = repr(value) if value is not None else kind
            found = "end of input" if token.kind == "eof" else repr(token.value)
            raise self._error(f"Expected {expected}, found {found}")
        return self._advance()

    def _accept(self, kind: str, value: Any = None) -> bool:
        if self._is(kind, value):
            self._advance()
            return True
        return False

    def parse(self) -> dict[str, Any]:
        while not self._is("eof"):
            self._statement()
        return self.declarations

    def _statement(self) -> None:
        token = self._peek()
        if self._accept("punct", ";"):
            return
        if token.kind != "ident":
            raise self._error(f"Unexpected {token.value!r} at statement start")
        if token.value in ("import", "type", "interface"):
            self._skip_statement()
            return
        if token.value == "export":
            self._advance()
            follow = self._peek()
            if follow.kind == "ident" and follow.value in ("type", "interface"):
                self._skip_statement()
                return
            if self._accept("ident", "default"):
                self._bind("default", self._expression_statement())
                return
        self._declaration()

    def _declaration(self) -> None:
        keyword = self._peek()
        if not (keyword.kind == "ident" and keyword.value in ("const", "let", "var")):
            raise self._error(f"Unsupported statement starting with {keyword.value!r}")
        self._advance()
        name = self._expect("ident").value
        if self._accept("punct", ":"):
            self._skip_type_annotation()
        self._expect("punct", "=")
        self._bind(name, self._expression_statement())

    def _expression_statement(self) -> Any:
        value = self._expression()
        if self._is("ident", "as") or self._is("ident", "satisfies"):
            self._skip_statement()
        else:
            self._accept("punct", ";")
        return value

    def _bind(self, name: str, value: Any) -> None:
        self._bindings[name] = value
        self.declarations[name] = value

    def _skip_type_annotation(self) -> None:
        depth = 0
        while not self._is("eof"):
            token = self._peek()
            if token.kind == "punct" and token.value in "([{<":
                depth += 1
            elif token.kind == "punct" and token.value in ")]}>":
                depth -= 1
            elif depth == 0 and token.kind == "punct" and token.value == "=":
                return
            self._advance()

    def _skip_statement(self) -> None:
        """Skip to the end of the current statement.

        A statement ends at a top-level ``;`` or where a statement keyword
        opens a new line.
        """
        depth = 0
        previous = self._advance()
        while not self._is("eof"):
            token = self._peek()
            if depth == 0:
                if token.kind == "punct" and token.value == ";":
                    self._advance()
                    return
                if (
                    token.kind == "ident"
                    and token.value in _STATEMENT_KEYWORDS
                    and token.line > previous.line
                ):
                    return
            if token.kind == "punct" and token.value in "([{":
                depth += 1
            elif token.kind == "punct" and token.value in ")]}":
                depth = max(depth - 1, 0)
            previous = self._advance()

    def _expression(self) -> Any:
        value = self._primary()
        while True:
            token = self._peek()
            if self._accept("punct", "."):
                name = self._expect("ident").value
                value = self._member(value, name, token)
            elif self._is("punct", "("):
                arguments = self._arguments()
                value = self._call(value, arguments, token)
            else:
                return value

    def _primary(self) -> Any:
        token = self._advance()
        if token.kind in ("string", "number", "regex"):
            return token.value
        if token.kind == "ident":
            if token.value in _LITERAL_IDENTIFIERS:
                return _LITERAL_IDENTIFIERS[token.value]
            if token.value not in self._bindings:
                raise self._error(f"Unknown identifier {token.value!r}", token)
            return self._bindings[token.value]
        if token.kind == "punct":
            if token.value == "-":
                number = self._expect("number")
                return -number.value
            if token.value == "[":
                return self._array_literal()
            if token.value == "{":
                return self._object_literal()
            if token.value == "(":
                value = self._expression()
                self._expect("punct", ")")
                return value
        found = "end of input" if token.kind == "eof" else repr(token.value)
        raise self._error(f"Unexpected {found} in expression", token)

    def _array_literal(self) -> list[Any]:
        items: list[Any] = []
        while not self._accept("punct", "]"):
            items.append(self._expression())
            if not self._accept("punct", ","):
                self._expect("punct", "]")
                break
        return items

    def _object_literal(self) -> dict[str, Any]:
        entries: dict[str, Any] = {}
        while not self._accept("punct", "}"):
            key_token = self._advance()
            if key_token.kind not in ("ident", "string", "number"):
                raise self._error("Expected property name", key_token)
            key = str(key_token.value)
            if self._accept("punct", ":"):
                entries[key] = self._expression()
            elif key_token.kind == "ident" and key in self._bindings:
                entries[key] = self._bindings[key]
            else:
                raise self._error(f"Expected ':' after property {key!r}")
            if not self._accept("punct", ","):
                self._expect("punct", "}")
                break
        return entries

    def _arguments(self) -> list[Any]:
        self._expect("punct", "(")
        arguments: list[Any] = []
        while not self._accept("punct", ")"):
            arguments.append(self._expression())
            if not self._accept("punct", ","):
                self._expect("punct", ")")
                break
        return arguments

    def _member(self, target: Any, name: str, token: Token) -> Any:
        attribute = _to_snake(name)
        if isinstance(target, SchemaBuilder):
            allowed = attribute in _BUILDER_MEMBERS
        elif isinstance(target, _IsoNamespace):
            allowed = attribute == "datetime"
        elif isinstance(target, SchemaNode):
            allowed = attribute in _NODE_METHODS and hasattr(target, attribute)
        else:
            allowed = False
        if not allowed:
            owner = getattr(target, "type", type(target).__name__)
            raise self._error(f"Unsupported member '.{name}' on {owner}", token)
        return getattr(target, attribute)

    def _call(self, target: Any, arguments: list[Any], token: Token) -> Any:
        if not callable(target):
            raise self._error("Value is not callable", token)
        try:
            return target(*arguments)
        except (TypeError, ValueError) as exc:
            raise self._error(f"Invalid call: {exc}", token) from exc


def load_schema_source(code: str) -> dict[str, SchemaNode]:
    """Read every schema-valued declaration from Zod source.

    Args:
        code: TypeScript source built from ``z`` constructor chains

    Returns:
        Schema nodes keyed by declaration name, in declaration order

    Raises:
        SchemaSourceError: If the source cannot be tokenised or evaluated
    """
    tokens = _Lexer(code).tokenize()
    declarations = _Parser(tokens).parse()
    schemas = {
        name: value
        for name, value in declarations.items()
        if isinstance(value, SchemaNode)
    }
    logger.debug("Loaded schema source", declarations=list(schemas))
    return schemas


def load_schema(code: str, export_name: str) -> SchemaNode:
    """Read one named schema declaration from Zod source."""
    schemas = load_schema_source(code)
    if export_name not in schemas:
        raise SchemaSourceError(
            f"No schema named '{export_name}' in source",
            code=SCHEMA_EXPORT_NOT_FOUND,
            available=list(schemas),
        )
    return schemas[export_name]
