"""
Line-by-line time complexity estimation for brace-delimited source code.

The analysis is lexical: loop keywords, call syntax and a name-matching
recursion proxy stand in for real parsing. Two passes are made over the
input. The first counts every apparent function definition; the second
walks the lines in order, tracking open blocks and classifying each line.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from complexity_cli.analysis.classifier import classify_line
from complexity_cli.analysis.estimator import estimate_overall
from complexity_cli.analysis.matchers import MatcherSet, build_registry
from complexity_cli.analysis.models import (
    AnalysisResult,
    AnalysisState,
    LineRecord,
)
from complexity_cli.analysis.normalizer import normalize, split_lines
from complexity_cli.analysis.tracker import close_frame, open_frame
from complexity_cli.core.constants import DEFAULT_COMMENT_TOKEN
from complexity_cli.core.logging import get_logger, log_debug, logged_operation


class ComplexityAnalyzer:
    """
    Estimates the time complexity of each line and of the whole input.

    The analyzer holds only configuration. Every call to :meth:`analyze`
    builds a fresh :class:`AnalysisState`, so repeated or concurrent runs
    never see each other's counters.

    The active function is a single name: the last function header seen.
    Nested or overlapping definitions overwrite it and closing braces never
    clear it, so recursion hits may be attributed to the wrong function.
    """

    def __init__(
        self,
        lines: Sequence[str],
        comment_token: str = DEFAULT_COMMENT_TOKEN,
        matchers: Optional[MatcherSet] = None,
        fold_recursion: bool = False,
        source: Optional[str] = None,
    ):
        self.lines = list(lines)
        self.comment_token = comment_token
        self.matchers = matchers or MatcherSet()
        self.fold_recursion = fold_recursion
        self.source = source

    @logged_operation("analysis")
    def analyze(self) -> AnalysisResult:
        """Run both passes and return the per-line records and overall verdict."""
        state = AnalysisState(
            registry=build_registry(self.lines, self.matchers.declaration)
        )
        trace = get_logger().isEnabledFor(logging.DEBUG)
        if trace:
            log_debug(f"Registered functions: {state.registry.as_dict()}")

        records: List[LineRecord] = []
        recursive_lines: List[int] = []

        for number, raw in enumerate(self.lines, start=1):
            records.append(
                self._scan_line(state, number, raw, recursive_lines, trace)
            )

        overall = estimate_overall(
            state.max_depth,
            recursion_detected=bool(recursive_lines),
            fold_recursion=self.fold_recursion,
        )
        if trace:
            log_debug(
                f"Max loop nesting {state.max_depth}, overall {overall.notation}"
            )

        return AnalysisResult(
            records=tuple(records),
            overall=overall,
            max_depth=state.max_depth,
            functions=state.registry.as_dict(),
            recursive_lines=tuple(recursive_lines),
        )

    def _scan_line(
        self,
        state: AnalysisState,
        number: int,
        raw: str,
        recursive_lines: List[int],
        trace: bool = False,
    ) -> LineRecord:
        text, is_comment = normalize(raw, self.comment_token)

        function = self.matchers.function.match(text)
        if trace and function and function != state.current_function:
            log_debug(f"Active function is now '{function}'", line=number)
        if function:
            state.current_function = function

        depth = state.depth
        frame = open_frame(state, text, bool(self.matchers.loop.match(text)))
        if trace and frame is not None:
            log_debug(f"Opened {frame.value} frame (depth {state.depth})", line=number)

        classification = classify_line(text, is_comment, depth, state, self.matchers)
        if classification.recursive:
            recursive_lines.append(number)

        record = LineRecord(
            line_number=number,
            text=text,
            complexity=classification.complexity,
            reason=classification.reason,
            depth=depth,
            function=state.current_function,
        )

        frame = close_frame(state, text)
        if trace and frame is not None:
            log_debug(f"Closed {frame.value} frame (depth {state.depth})", line=number)

        return record


def analyze_lines(lines: Iterable[str], **kwargs) -> AnalysisResult:
    """Analyze an already-materialized sequence of lines."""
    return ComplexityAnalyzer(list(lines), **kwargs).analyze()


def analyze_source(source: str, **kwargs) -> AnalysisResult:
    """Analyze a block of source text."""
    return analyze_lines(split_lines(source), **kwargs)

