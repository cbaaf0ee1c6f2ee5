from complexity_cli.analysis import (
    AnalysisResult,
    ComplexityAnalyzer,
    ComplexityClass,
    LineRecord,
    analyze_lines,
    analyze_source,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "ComplexityAnalyzer",
    "ComplexityClass",
    "LineRecord",
    "analyze_lines",
    "analyze_source",
]
