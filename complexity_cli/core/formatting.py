from complexity_cli.analysis.models import ComplexityClass

# Rich styles used by the original console tool for each notation
COMPLEXITY_STYLES = {
    ComplexityClass.CONSTANT: "green",
    ComplexityClass.LINEAR: "yellow",
    ComplexityClass.QUADRATIC: "red",
    ComplexityClass.CUBIC: "magenta",
    ComplexityClass.LOG_LINEAR: "cyan",
    ComplexityClass.UNKNOWN: "white",
}


def format_time(seconds: float) -> str:
    """
    Format time in the most appropriate unit:
    - <1μs: ns
    - <1ms: μs
    - <1s: ms
    - >=1s: s
    Args:
        seconds: Time in seconds
    Returns:
        Formatted time string with unit
    """
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f} ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.2f} μs"
    elif seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    else:
        return f"{seconds:.6f} s"


def format_complexity(complexity: ComplexityClass, markup: bool = True) -> str:
    """
    Format a complexity class as its big-O notation.
    Args:
        complexity: The class to format
        markup: Wrap the notation in Rich style markup
    Returns:
        Notation string, e.g. "[red]O(n²)[/red]"
    """
    notation = complexity.notation
    if not markup:
        return notation
    style = COMPLEXITY_STYLES[complexity]
    return f"[{style}]{notation}[/{style}]"
