from complexity_cli.analysis.normalizer import is_comment, normalize, split_lines


def test_trims_whitespace():
    assert normalize("   int x = 1;  \t") == ("int x = 1;", False)


def test_blank_line_is_comment():
    assert normalize("") == ("", True)
    assert normalize("    ") == ("", True)


def test_line_comment():
    assert normalize("   // for (int i = 0; i < n; i++) {") == (
        "// for (int i = 0; i < n; i++) {",
        True,
    )


def test_block_comment_is_code():
    assert not is_comment("/* note */")


def test_custom_comment_token():
    assert is_comment("# note", "#")
    assert not is_comment("// note", "#")


def test_split_lines_keeps_unicode_separators():
    text = "a;\x0cb;\r\n// c\u2028 d();\n\x85e;"
    assert split_lines(text) == ["a;\x0cb;", "// c\u2028 d();", "\x85e;"]


def test_split_lines_trailing_newline_and_empty_text():
    assert split_lines("x;\n\n") == ["x;", ""]
    assert split_lines("") == []
