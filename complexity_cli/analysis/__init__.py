from complexity_cli.analysis.analyzer import (
    ComplexityAnalyzer,
    analyze_lines,
    analyze_source,
)
from complexity_cli.analysis.models import (
    AnalysisResult,
    BlockFrame,
    ComplexityClass,
    LineRecord,
)

__all__ = [
    "AnalysisResult",
    "BlockFrame",
    "ComplexityAnalyzer",
    "ComplexityClass",
    "LineRecord",
    "analyze_lines",
    "analyze_source",
]
