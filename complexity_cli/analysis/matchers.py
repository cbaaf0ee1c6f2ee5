"""
Single-line lexical detectors.

Each detector is a named predicate over one trimmed line. Constructs that
span several lines (multi-line signatures, loop headers broken across
lines) are invisible to them.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Type

from complexity_cli.analysis.models import FunctionRegistry
from complexity_cli.core.constants import CONTROL_KEYWORDS

IDENTIFIER = r"[a-zA-Z_][a-zA-Z0-9_]*"

LOOP_PATTERN = re.compile(r"\b(for|while)\s*\(")
SIGNATURE_PATTERN = re.compile(rf"\b({IDENTIFIER})\s*\([^)]*\)\s*(?:const)?\s*\{{")
DECLARATION_PATTERN = re.compile(rf"\b({IDENTIFIER})\s*\([^)]*\)\s*(?:const)?\s*[{{;]")
CALL_PATTERN = re.compile(rf"\b{IDENTIFIER}\s*\([^)]*\)\s*;")


class Matcher(ABC):
    """
    Base class for all line matchers.

    Attributes:
        name (str): Unique identifier used to register the matcher.
        description (str): One-line summary shown by the ``patterns`` command.
    """

    name: str = "base"
    description: str = ""

    @abstractmethod
    def match(self, line: str):
        """Test one trimmed line. Returns a bool or the captured text."""
        pass


class LoopOpenerMatcher(Matcher):
    name = "loop"
    description = "'for' or 'while' followed by an opening parenthesis"

    def match(self, line: str) -> bool:
        return LOOP_PATTERN.search(line) is not None


class FunctionSignatureMatcher(Matcher):
    """
    Extracts the name of a function whose body opens on this line.

    With ``allow_declarations`` a statement terminator is accepted in place
    of the opening brace, so forward declarations are picked up as well.
    """

    name = "function"
    description = "identifier(params) [const] followed by '{' (or ';' for declarations)"

    def __init__(self, allow_declarations: bool = False):
        self.allow_declarations = allow_declarations
        self._pattern = DECLARATION_PATTERN if allow_declarations else SIGNATURE_PATTERN

    def match(self, line: str) -> Optional[str]:
        for found in self._pattern.finditer(line):
            name = found.group(1)
            if name not in CONTROL_KEYWORDS:
                return name
        return None


class CallMatcher(Matcher):
    name = "call"
    description = "identifier(args) terminated by ';', a call of unknown cost"

    def match(self, line: str) -> bool:
        return CALL_PATTERN.search(line) is not None


class RecursiveCallMatcher(Matcher):
    name = "recursion"
    description = "the active function's own name followed by '('"

    def __init__(self):
        self._cache: Dict[str, "re.Pattern[str]"] = {}

    def match(self, line: str, function_name: Optional[str] = None) -> bool:
        if not function_name:
            return False
        pattern = self._cache.get(function_name)
        if pattern is None:
            pattern = re.compile(rf"\b{re.escape(function_name)}\s*\(")
            self._cache[function_name] = pattern
        return pattern.search(line) is not None


@dataclass
class MatcherSet:
    """The detectors used by one analyzer. Any of them can be swapped out."""

    loop: Matcher = field(default_factory=LoopOpenerMatcher)
    function: Matcher = field(default_factory=FunctionSignatureMatcher)
    declaration: Matcher = field(
        default_factory=lambda: FunctionSignatureMatcher(allow_declarations=True)
    )
    call: Matcher = field(default_factory=CallMatcher)
    recursion: Matcher = field(default_factory=RecursiveCallMatcher)


def build_registry(lines: Iterable[str], matcher: Optional[Matcher] = None) -> FunctionRegistry:
    """Pre-pass: count every apparent function definition or declaration."""
    matcher = matcher or FunctionSignatureMatcher(allow_declarations=True)
    registry = FunctionRegistry()
    for line in lines:
        name = matcher.match(line)
        if name:
            registry.register(name)
    return registry


MATCHERS: Dict[str, Type[Matcher]] = {}


def register_matcher(matcher_cls: Type[Matcher]) -> Type[Matcher]:
    """Register a matcher class under its name."""
    MATCHERS[matcher_cls.name] = matcher_cls
    return matcher_cls


def get_matcher(name: str) -> Optional[Matcher]:
    matcher_cls = MATCHERS.get(name)
    return matcher_cls() if matcher_cls else None


register_matcher(LoopOpenerMatcher)
register_matcher(FunctionSignatureMatcher)
register_matcher(CallMatcher)
register_matcher(RecursiveCallMatcher)
