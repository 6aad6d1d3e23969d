"""
Text form of class list expressions

Lets class lists live outside Python code (templates, config files, the
command line) using the same shape as the call syntax:

    "btn", size, "active" => is_active, "disabled" => !enabled,

Values are quoted strings or names; conditions are true, false or names,
optionally negated with "!". Names are looked up in a context mapping and
may be dotted to reach into nested mappings. A trailing comma is allowed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from clsx_core.builder import clsx
from clsx_core.config import ClsxConfig
from clsx_core.constants import FALSE_LITERAL, NEGATION_PREFIX, TRUE_LITERAL
from clsx_core.exceptions import ExpressionSyntaxError, UndefinedNameError

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*")
_ESCAPES = {'"': '"', "'": "'", "\\": "\\", "n": "\n", "t": "\t"}


@dataclass(frozen=True)
class Operand:
    """A literal or a name reference."""
    kind: str  # "literal" or "name"
    value: Any

    def resolve(self, context: Mapping[str, Any]) -> Any:
        if self.kind == "literal":
            return self.value
        return lookup(context, self.value)


@dataclass(frozen=True)
class ExpressionItem:
    """One parsed item: a value and an optional condition."""
    value: Operand
    condition: Optional[Operand] = None
    negated: bool = False


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(message, expression=self.text, position=self.pos)

    def skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.pos >= len(self.text)

    def startswith(self, token: str) -> bool:
        self.skip_whitespace()
        return self.text.startswith(token, self.pos)

    def consume(self, token: str) -> bool:
        if self.startswith(token):
            self.pos += len(token)
            return True
        return False

    def string(self) -> str:
        quote = self.text[self.pos]
        self.pos += 1
        chars = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == "\\" and self.pos + 1 < len(self.text):
                nxt = self.text[self.pos + 1]
                chars.append(_ESCAPES.get(nxt, "\\" + nxt))
                self.pos += 2
                continue
            if ch == quote:
                self.pos += 1
                return "".join(chars)
            chars.append(ch)
            self.pos += 1
        raise self.error("Unterminated string")

    def name(self) -> str:
        match = _NAME_RE.match(self.text, self.pos)
        if not match:
            raise self.error("Expected a string or a name")
        self.pos = match.end()
        return match.group(0)

    def operand(self) -> Operand:
        self.skip_whitespace()
        if self.pos >= len(self.text):
            raise self.error("Unexpected end of expression")
        if self.text[self.pos] in "\"'":
            return Operand("literal", self.string())
        return Operand("name", self.name())

    def condition(self) -> tuple[Operand, bool]:
        negated = False
        while self.consume(NEGATION_PREFIX):
            negated = not negated
        operand = self.operand()
        if operand.kind == "name" and operand.value == TRUE_LITERAL:
            operand = Operand("literal", True)
        elif operand.kind == "name" and operand.value == FALSE_LITERAL:
            operand = Operand("literal", False)
        return operand, negated


def parse_expression(text: str, config: Optional[ClsxConfig] = None) -> List[ExpressionItem]:
    """
    Parse a class list expression.

    Args:
        text: Expression text, e.g. '"a", "b" => flag,'
        config: Supplies the condition marker and item delimiter

    Returns:
        Parsed items in input order

    Raises:
        ExpressionSyntaxError: On malformed input, with the character offset
    """
    config = config or ClsxConfig()
    marker, delimiter = config.condition_marker, config.delimiter
    scanner = _Scanner(text)
    items: List[ExpressionItem] = []

    while not scanner.at_end():
        if scanner.startswith(delimiter):
            raise scanner.error("Empty item")

        value = scanner.operand()
        condition = None
        negated = False
        if scanner.consume(marker):
            condition, negated = scanner.condition()
        items.append(ExpressionItem(value, condition, negated))

        if scanner.at_end():
            break
        if not scanner.consume(delimiter):
            raise scanner.error(f"Expected '{delimiter}' or '{marker}'")

    logger.debug("Parsed %d item(s) from %r", len(items), text)
    return items


def parse_item(
    text: str, literal_value: bool = True, config: Optional[ClsxConfig] = None
) -> ExpressionItem:
    """
    Parse a single command-line style item: CLASS or CLASS=>CONDITION.

    With literal_value, CLASS is taken verbatim instead of as a quoted string
    or a name.
    """
    config = config or ClsxConfig()
    head, marker, tail = text.partition(config.condition_marker)
    if literal_value:
        value = Operand("literal", head.strip())
    else:
        scanner = _Scanner(head)
        value = scanner.operand()
        if not scanner.at_end():
            raise scanner.error("Unexpected text after value")

    if not marker:
        return ExpressionItem(value)

    scanner = _Scanner(tail)
    condition, negated = scanner.condition()
    if not scanner.at_end():
        raise scanner.error("Unexpected text after condition")
    return ExpressionItem(value, condition, negated)


def lookup(context: Mapping[str, Any], name: str) -> Any:
    """Resolve a possibly dotted name against nested mappings."""
    current: Any = context
    for part in name.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            logger.debug("Undefined name %r", name)
            raise UndefinedNameError(name)
    return current


def evaluate(items: List[ExpressionItem], context: Optional[Mapping[str, Any]] = None) -> str:
    """
    Evaluate parsed items against a context and join the result.

    Values are resolved before their conditions, left to right, so an
    undefined name fails even when it sits behind a false condition.
    """
    context = context or {}
    args = []
    for item in items:
        value = item.value.resolve(context)
        if item.condition is None:
            args.append((value, True))
            continue
        flag = bool(item.condition.resolve(context))
        args.append((value, not flag if item.negated else flag))
    return clsx(*args)


def render(text: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """Parse and evaluate a class list expression in one step."""
    return evaluate(parse_expression(text), context)
