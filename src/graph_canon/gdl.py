# src/graph_canon/gdl.py
"""Parser for GDL, a small Cypher-like graph description language.

GDL lets test fixtures describe graphs inline:

    (a:Person {name: 'Alice', age: 42}),
    (b:Person {name: 'Bob'}),
    (a)-[:KNOWS {since: 2019}]->(b)<-[:KNOWS]-(c:Person),
    (a)-->(c)

Grammar:
    graph        := [path (',' path)*]
    path         := node (relationship node)*
    node         := '(' [variable] (':' name)* [properties] ')'
    relationship := '-' [body] '->'  |  '<-' [body] '-'
    body         := '[' [variable] [':' name] [properties] ']'
    properties   := '{' [name ':' value (',' name ':' value)*] '}'
    value        := integer | float | string | true | false | nan
                  | [-]infinity | list | map

A variable declares a node the first time it appears; later occurrences
refer back to the same node and must not repeat labels or properties.
Anonymous nodes are always distinct. Strings may use single or double quotes.
Names may be backtick-quoted to include arbitrary characters.
"""

from __future__ import annotations

import re
from typing import Any

from graph_canon.contracts.errors import GdlSyntaxError
from graph_canon.core.graph import InMemoryGraph

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(r"-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_NEGATIVE_INFINITY = re.compile(r"-infinity(?![A-Za-z0-9_])", re.IGNORECASE)
_ESCAPES = {"\\": "\\", "'": "'", '"': '"', "n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "/": "/"}


class _GdlParser:
    """Recursive-descent parser building an InMemoryGraph as it goes."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._graph = InMemoryGraph()
        self._variables: set[str] = set()
        self._relationship_variables: set[str] = set()
        self._anonymous = 0

    # -- scanning ---------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _peek(self) -> str:
        self._skip_whitespace()
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _accept(self, token: str) -> bool:
        if self._peek() == token:
            self._pos += 1
            return True
        return False

    def _expect(self, token: str) -> None:
        if not self._accept(token):
            found = self._peek() or "end of input"
            raise GdlSyntaxError(f"Expected '{token}', found '{found}'", self._pos)

    def _match(self, pattern: re.Pattern[str]) -> str | None:
        self._skip_whitespace()
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def _name(self) -> str:
        if self._peek() == "`":
            return self._quoted_name()
        name = self._match(_IDENTIFIER)
        if name is None:
            raise GdlSyntaxError("Expected a name", self._pos)
        return name

    def _quoted_name(self) -> str:
        self._expect("`")
        chars: list[str] = []
        while True:
            if self._pos >= len(self._text):
                raise GdlSyntaxError("Unterminated backtick-quoted name", self._pos)
            char = self._text[self._pos]
            self._pos += 1
            if char == "`":
                # A doubled backtick is an escaped backtick
                if self._pos < len(self._text) and self._text[self._pos] == "`":
                    chars.append("`")
                    self._pos += 1
                    continue
                return "".join(chars)
            chars.append(char)

    # -- values -----------------------------------------------------------

    def _value(self) -> Any:
        char = self._peek()
        if char in ("'", '"'):
            return self._string()
        if char == "[":
            return self._list()
        if char == "{":
            return self._map()
        if self._match(_NEGATIVE_INFINITY) is not None:
            return float("-inf")
        number = self._match(_NUMBER)
        if number is not None:
            if any(c in number for c in ".eE"):
                return float(number)
            return int(number)
        start = self._pos
        word = self._match(_IDENTIFIER)
        if word is not None:
            lowered = word.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
            if lowered == "nan":
                return float("nan")
            if lowered == "infinity":
                return float("inf")
        raise GdlSyntaxError("Expected a property value", start)

    def _string(self) -> str:
        self._skip_whitespace()
        quote = self._text[self._pos]
        start = self._pos
        self._pos += 1
        chars: list[str] = []
        while True:
            if self._pos >= len(self._text):
                raise GdlSyntaxError("Unterminated string", start)
            char = self._text[self._pos]
            self._pos += 1
            if char == quote:
                return "".join(chars)
            if char != "\\":
                chars.append(char)
                continue
            if self._pos >= len(self._text):
                raise GdlSyntaxError("Unterminated string", start)
            escape = self._text[self._pos]
            self._pos += 1
            if escape == "u":
                digits = self._text[self._pos : self._pos + 4]
                if len(digits) != 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                    raise GdlSyntaxError("Invalid \\u escape", self._pos)
                chars.append(chr(int(digits, 16)))
                self._pos += 4
            elif escape in _ESCAPES:
                chars.append(_ESCAPES[escape])
            else:
                raise GdlSyntaxError(f"Invalid escape '\\{escape}'", self._pos - 1)

    def _list(self) -> list[Any]:
        self._expect("[")
        items: list[Any] = []
        if self._accept("]"):
            return items
        items.append(self._value())
        while self._accept(","):
            items.append(self._value())
        self._expect("]")
        return items

    def _map(self) -> dict[str, Any]:
        self._expect("{")
        result: dict[str, Any] = {}
        if self._accept("}"):
            return result
        while True:
            key_pos = self._pos
            key = self._name()
            if key in result:
                raise GdlSyntaxError(f"Duplicate property key '{key}'", key_pos)
            self._expect(":")
            result[key] = self._value()
            if not self._accept(","):
                break
        self._expect("}")
        return result

    # -- graph elements ---------------------------------------------------

    def _node(self) -> str:
        start = self._pos
        self._expect("(")
        variable = self._match(_IDENTIFIER)
        labels: list[str] = []
        while self._accept(":"):
            labels.append(self._name())
        properties = self._map() if self._peek() == "{" else None
        self._expect(")")

        if variable is None:
            node_id = f"_:{self._anonymous}"
            self._anonymous += 1
        elif variable in self._variables:
            if labels or properties is not None:
                raise GdlSyntaxError(f"Node '{variable}' is already declared", start)
            return variable
        else:
            node_id = variable
            self._variables.add(variable)

        self._graph.add_node(node_id, labels=labels, properties=properties)
        return node_id

    def _relationship_body(self) -> tuple[str | None, dict[str, Any] | None]:
        if not self._accept("["):
            return None, None
        start = self._pos
        variable = self._match(_IDENTIFIER)
        if variable is not None:
            if variable in self._relationship_variables or variable in self._variables:
                raise GdlSyntaxError(f"Variable '{variable}' is already declared", start)
            self._relationship_variables.add(variable)
        rel_type = self._name() if self._accept(":") else None
        properties = self._map() if self._peek() == "{" else None
        self._expect("]")
        return rel_type, properties

    def _path(self) -> None:
        current = self._node()
        while self._peek() in ("-", "<"):
            start = self._pos
            incoming = self._accept("<")
            self._expect("-")
            rel_type, properties = self._relationship_body()
            self._expect("-")
            outgoing = self._accept(">")
            if incoming == outgoing:
                raise GdlSyntaxError("Relationships must have exactly one direction", start)
            following = self._node()
            if outgoing:
                self._graph.add_relationship(current, following, rel_type=rel_type, properties=properties)
            else:
                self._graph.add_relationship(following, current, rel_type=rel_type, properties=properties)
            current = following

    def parse(self) -> InMemoryGraph:
        if self._peek():
            self._path()
            while self._accept(","):
                self._path()
        if self._peek():
            raise GdlSyntaxError(f"Unexpected '{self._peek()}'", self._pos)
        return self._graph


def parse_gdl(text: str) -> InMemoryGraph:
    """Parse GDL text into an InMemoryGraph.

    Args:
        text: Graph description, e.g. "(a:A), (b), (a)-[:REL {w: 1}]->(b)"

    Returns:
        New InMemoryGraph; named nodes keep their variable as identity

    Raises:
        GdlSyntaxError: If the text is not valid GDL
    """
    return _GdlParser(text).parse()
