from complexity_cli.analysis.estimator import estimate_overall
from complexity_cli.analysis.models import ComplexityClass


def test_depth_mapping():
    assert estimate_overall(0) is ComplexityClass.CONSTANT
    assert estimate_overall(1) is ComplexityClass.LINEAR
    assert estimate_overall(2) is ComplexityClass.QUADRATIC
    assert estimate_overall(3) is ComplexityClass.CUBIC


def test_deep_nesting_falls_back_to_log_linear():
    assert estimate_overall(4) is ComplexityClass.LOG_LINEAR
    assert estimate_overall(9) is ComplexityClass.LOG_LINEAR


def test_recursion_ignored_unless_folded():
    assert estimate_overall(0, recursion_detected=True) is ComplexityClass.CONSTANT
    assert (
        estimate_overall(0, recursion_detected=True, fold_recursion=True)
        is ComplexityClass.LOG_LINEAR
    )
    assert (
        estimate_overall(1, recursion_detected=True, fold_recursion=True)
        is ComplexityClass.LOG_LINEAR
    )
    assert (
        estimate_overall(2, recursion_detected=True, fold_recursion=True)
        is ComplexityClass.QUADRATIC
    )
    assert estimate_overall(1, fold_recursion=True) is ComplexityClass.LINEAR
