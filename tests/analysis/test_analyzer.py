from complexity_cli.analysis.analyzer import ComplexityAnalyzer, analyze_lines, analyze_source
from complexity_cli.analysis.matchers import Matcher, MatcherSet
from complexity_cli.analysis.models import ComplexityClass

C = ComplexityClass

TRIPLE_LOOP = """\
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        for (int k = 0; k < n; k++) {
            sum += i * j * k;
        }
    }
}
"""

FIB = """\
int fib(int n) {
    if (n < 2) {
        return n;
    }
    return fib(n-1) + fib(n-2);
}
"""


def _classes(result):
    return [record.complexity for record in result.records]


def test_one_record_per_line_in_order():
    lines = ["int a = 0;", "", "// note", "doWork();", "}"]
    result = analyze_lines(lines)
    assert [r.line_number for r in result.records] == [1, 2, 3, 4, 5]
    assert [r.text for r in result.records] == ["int a = 0;", "", "// note", "doWork();", "}"]


def test_empty_input():
    result = analyze_lines([])
    assert result.records == ()
    assert result.overall is C.CONSTANT
    assert result.max_depth == 0


def test_blank_line_is_constant():
    result = analyze_lines([""])
    assert _classes(result) == [C.CONSTANT]


def test_triple_nested_loops():
    result = analyze_source(TRIPLE_LOOP)
    assert _classes(result) == [
        C.LINEAR,
        C.QUADRATIC,
        C.CUBIC,
        C.CONSTANT,
        C.CONSTANT,
        C.CONSTANT,
        C.CONSTANT,
    ]
    assert [r.depth for r in result.records] == [0, 1, 2, 3, 3, 2, 1]
    assert result.max_depth == 3
    assert result.overall is C.CUBIC


def test_quadruple_nesting_uses_fallback_verdict():
    lines = ["for (int i = 0; i < n; i++) {"] * 4 + ["x++;"] + ["}"] * 4
    result = analyze_lines(lines)
    assert result.max_depth == 4
    assert result.overall is C.LOG_LINEAR
    assert result.records[3].complexity is C.CUBIC


def test_sequential_loops_stay_linear():
    source = """\
for (int i = 0; i < n; i++) {
    a[i] = 0;
}
while (lo < hi) {
    lo++;
}
"""
    result = analyze_source(source)
    assert result.records[0].complexity is C.LINEAR
    assert result.records[3].complexity is C.LINEAR
    assert result.overall is C.LINEAR


def test_loop_opened_and_closed_on_one_line():
    result = analyze_lines(["for (int i = 0; i < n; i++) { sum += i; }", "x++;"])
    assert _classes(result) == [C.LINEAR, C.CONSTANT]
    assert result.records[1].depth == 0
    assert result.max_depth == 1


def test_generic_blocks_do_not_count_toward_depth():
    source = """\
void run() {
    if (ready) {
        for (int i = 0; i < n; i++) {
            step();
        }
    }
}
"""
    result = analyze_source(source)
    assert result.records[2].complexity is C.LINEAR
    assert result.overall is C.LINEAR


def test_recursive_call_is_log_linear():
    result = analyze_source(FIB)
    assert result.records[4].complexity is C.LOG_LINEAR
    assert result.records[4].function == "fib"
    assert result.functions == {"fib": 2}
    assert 5 in result.recursive_lines


def test_definition_line_matches_recursion_proxy():
    result = analyze_source(FIB)
    assert result.records[0].complexity is C.LOG_LINEAR


def test_recursion_does_not_change_overall_by_default():
    result = analyze_source(FIB)
    assert result.recursion_detected
    assert result.overall is C.CONSTANT


def test_fold_recursion_raises_overall():
    result = analyze_source(FIB, fold_recursion=True)
    assert result.overall is C.LOG_LINEAR


def test_opaque_call_is_unknown():
    result = analyze_lines(["doWork();"])
    assert _classes(result) == [C.UNKNOWN]
    assert result.overall is C.CONSTANT


def test_new_definition_overwrites_active_function():
    source = """\
void outer() {
void inner() {
    outer();
"""
    result = analyze_source(source)
    assert result.records[2].function == "inner"
    assert result.records[2].complexity is C.UNKNOWN


def test_stray_closing_braces_never_underflow():
    result = analyze_lines(["}", "}", "for (;;) {", "}", "}"])
    assert all(record.depth >= 0 for record in result.records)
    assert result.max_depth == 1


def test_max_depth_is_monotonic_over_prefixes():
    lines = TRIPLE_LOOP.splitlines() + ["for (;;) {", "}"]
    depths = [analyze_lines(lines[:n]).max_depth for n in range(len(lines) + 1)]
    assert depths == sorted(depths)
    assert min(depths) >= 0


def test_repeated_runs_are_identical():
    analyzer = ComplexityAnalyzer(FIB.splitlines() + TRIPLE_LOOP.splitlines())
    first = analyzer.analyze()
    second = analyzer.analyze()
    assert first == second


def test_custom_comment_token():
    result = analyze_lines(["# for (int i = 0; i < n; i++)", "x = 1;"], comment_token="#")
    assert result.records[0].complexity is C.CONSTANT


class RepeatMatcher(Matcher):
    name = "repeat"
    description = "'repeat' keyword"

    def match(self, line):
        return line.startswith("repeat (")


def test_matchers_are_swappable():
    result = analyze_lines(
        ["repeat (n) {", "x++;", "}"], matchers=MatcherSet(loop=RepeatMatcher())
    )
    assert result.records[0].complexity is C.LINEAR
    assert result.overall is C.LINEAR


def test_line_numbers_follow_newlines_only():
    source = "int a = 0;\x0c\nfor (i = 0; i < n; i++) {\n// note\u2028 doWork();\n}\n"
    result = analyze_source(source)
    assert len(result.records) == 4
    assert result.records[1].line_number == 2
    assert result.records[1].complexity is C.LINEAR
    assert result.records[2].complexity is C.CONSTANT


def test_recursion_found_when_definition_shares_line_with_call():
    result = analyze_lines(["x = foo(a); int g(int b) {", "    return g(b - 1) + 1;", "}"])
    assert "g" not in result.functions
    assert result.records[1].function == "g"
    assert result.records[1].complexity is C.LOG_LINEAR


def test_swapping_only_the_function_matcher_keeps_recursion():
    class LowerDefMatcher(Matcher):
        name = "def"
        description = "'def name(' headers"

        def match(self, line):
            if line.startswith("def ") and "(" in line:
                return line[4 : line.index("(")].strip()
            return None

    result = analyze_lines(
        ["def walk(node):", "    return walk(node.left) or walk(node.right)"],
        matchers=MatcherSet(function=LowerDefMatcher()),
    )
    assert result.records[1].complexity is C.LOG_LINEAR


def test_per_line_debug_logging_skipped_when_disabled(monkeypatch):
    from complexity_cli.analysis import analyzer as analyzer_module
    from complexity_cli.core.logging import configure_logging

    calls = []
    monkeypatch.setattr(
        analyzer_module, "log_debug", lambda message, **kwargs: calls.append(kwargs)
    )

    configure_logging()
    analyze_source(TRIPLE_LOOP)
    assert calls == []

    configure_logging(debug=True)
    try:
        analyze_source(TRIPLE_LOOP)
    finally:
        configure_logging()
    assert any("line" in kwargs for kwargs in calls)
