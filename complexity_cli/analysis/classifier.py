from typing import NamedTuple

from complexity_cli.analysis.matchers import MatcherSet
from complexity_cli.analysis.models import AnalysisState, ComplexityClass

REASON_NO_OPERATION = "No operation (blank line or comment)"
REASON_SINGLE_LOOP = "Single loop running n times"
REASON_NESTED_LOOPS = "Nested loops (n × n iterations)"
REASON_TRIPLE_LOOPS = "Triple-nested loops (n × n × n iterations)"
REASON_RECURSION = "Divide-and-conquer or recursive pattern"
REASON_CALL = "Call of indeterminate cost"
REASON_CONSTANT = "Constant time operation (no loop or call detected)"


class Classification(NamedTuple):
    complexity: ComplexityClass
    reason: str
    recursive: bool = False


def loop_complexity(depth: int) -> Classification:
    """Class of a loop header opened while ``depth`` loops are already open."""
    if depth <= 0:
        return Classification(ComplexityClass.LINEAR, REASON_SINGLE_LOOP)
    if depth == 1:
        return Classification(ComplexityClass.QUADRATIC, REASON_NESTED_LOOPS)
    return Classification(ComplexityClass.CUBIC, REASON_TRIPLE_LOOPS)


def classify_line(
    line: str,
    is_comment: bool,
    depth: int,
    state: AnalysisState,
    matchers: MatcherSet,
) -> Classification:
    """
    Assign one complexity class to a trimmed line. The first matching rule wins:

    1. blank or comment -> O(1)
    2. loop header -> O(n), O(n²) or O(n³) by the number of enclosing loops
    3. call to the active function -> O(n log n)
    4. any other call statement -> Unknown
    5. otherwise -> O(1)

    Args:
        line: Trimmed source text
        is_comment: Whether the normalizer flagged the line as a comment
        depth: Number of loops enclosing the line, not counting its own
        state: Run state; only the active function is read
        matchers: Detectors to apply
    """
    if is_comment:
        return Classification(ComplexityClass.CONSTANT, REASON_NO_OPERATION)

    if matchers.loop.match(line):
        return loop_complexity(depth)

    function = state.current_function
    if function and matchers.recursion.match(line, function):
        return Classification(ComplexityClass.LOG_LINEAR, REASON_RECURSION, True)

    if matchers.call.match(line):
        return Classification(ComplexityClass.UNKNOWN, REASON_CALL)

    return Classification(ComplexityClass.CONSTANT, REASON_CONSTANT)
