from complexity_cli.analysis.models import ComplexityClass
from complexity_cli.core.formatting import format_complexity, format_time


def test_format_time():
    assert format_time(0.0000001) == "100.00 ns"
    assert format_time(0.0001) == "100.00 μs"
    assert format_time(0.1) == "100.00 ms"
    assert format_time(10) == "10.000000 s"


def test_format_complexity():
    assert format_complexity(ComplexityClass.QUADRATIC) == "[red]O(n²)[/red]"
    assert format_complexity(ComplexityClass.LOG_LINEAR) == "[cyan]O(n log n)[/cyan]"
    assert format_complexity(ComplexityClass.UNKNOWN, markup=False) == "Unknown"
