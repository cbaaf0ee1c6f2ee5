from complexity_cli.analysis.models import ComplexityClass

_BY_DEPTH = {
    0: ComplexityClass.CONSTANT,
    1: ComplexityClass.LINEAR,
    2: ComplexityClass.QUADRATIC,
    3: ComplexityClass.CUBIC,
}


def estimate_overall(
    max_depth: int, recursion_detected: bool = False, fold_recursion: bool = False
) -> ComplexityClass:
    """
    Reduce a run's deepest loop nesting to one program-wide verdict.

    Nesting beyond three loops falls back to O(n log n). This is a crude
    placeholder for "worse than cubic", not an asymptotic law.

    Recursion only affects the verdict when ``fold_recursion`` is set, in
    which case an O(1) or O(n) verdict is raised to O(n log n).
    """
    overall = _BY_DEPTH.get(max(max_depth, 0), ComplexityClass.LOG_LINEAR)
    if fold_recursion and recursion_detected and overall < ComplexityClass.LOG_LINEAR:
        return ComplexityClass.LOG_LINEAR
    return overall
