import pytest

from nexuslint.scanner import CommentQuoteScanner, scan_balance, strip_comments


def codes(text: str) -> list[str]:
    return [d.code for d in scan_balance(text).diagnostics()]


def test_flat_comments_are_balanced() -> None:
    report = scan_balance("A [first] ACGT [second] TTTT")

    assert report.is_balanced
    assert report.diagnostics() == []
    assert report.unclosed_region is None


def test_nested_comments_are_balanced() -> None:
    assert codes("[[[ ]]]") == []


def test_one_extra_open_reports_outermost_bracket() -> None:
    report = scan_balance("[[[ ]]")

    assert report.unclosed_openings == (0,)
    diagnostics = report.diagnostics()
    assert [d.code for d in diagnostics] == ["SCAN_UNCLOSED_COMMENT"]
    assert diagnostics[0].range.as_tuple() == (0, 1)
    assert diagnostics[0].severity == "error"


def test_several_unclosed_levels_share_one_region() -> None:
    report = scan_balance("x [[[ ]")

    assert report.unclosed_openings == (2, 3)
    assert codes("x [[[ ]") == ["SCAN_UNCLOSED_COMMENT", "SCAN_UNCLOSED_COMMENT"]
    assert report.unclosed_region is not None
    assert report.unclosed_region.as_tuple() == (2, 7)


def test_lone_closing_bracket_is_reported_at_its_offset() -> None:
    report = scan_balance("ab ] [c]")

    assert report.unexpected_closing == (3,)
    assert report.unclosed_openings == ()
    diagnostics = report.diagnostics()
    assert [d.code for d in diagnostics] == ["SCAN_UNEXPECTED_CLOSING_BRACKET"]
    assert diagnostics[0].range.as_tuple() == (3, 4)


def test_stray_closing_bracket_does_not_cancel_a_later_open() -> None:
    report = scan_balance("] [x")

    assert report.unexpected_closing == (0,)
    assert report.unclosed_openings == (2,)


def test_brackets_inside_quotes_are_literal() -> None:
    assert codes("'a [ b' ACGT") == []
    assert scan_balance("'[' ]").unexpected_closing == (4,)


def test_escaped_quote_does_not_toggle_quote_state() -> None:
    report = scan_balance("'it''s' ACGT")

    assert not report.unclosed_quote
    assert report.is_balanced


def test_unclosed_quote_is_a_warning_on_the_last_character() -> None:
    text = "A 'open ACGT"
    diagnostics = scan_balance(text).diagnostics()

    assert [d.code for d in diagnostics] == ["SCAN_UNCLOSED_QUOTE"]
    assert diagnostics[0].severity == "warning"
    assert diagnostics[0].range.as_tuple() == (len(text) - 1, len(text))
    assert "hide other bracket errors" in diagnostics[0].message


def test_unclosed_quote_hides_brackets_that_follow() -> None:
    report = scan_balance("'open ] [")

    assert report.unclosed_quote
    assert report.unexpected_closing == ()
    assert report.unclosed_openings == ()


def test_scanner_exposes_depth_and_quote_state() -> None:
    scanner = CommentQuoteScanner("[[ 'x").scan()

    assert scanner.depth == 2
    assert scanner.in_quote
    assert scanner.is_eof


def test_scanner_state_returns_to_top_level_after_balanced_text() -> None:
    scanner = CommentQuoteScanner("A [x ['y]'] ] 'it''s'")

    assert not scanner.is_eof
    scanner.scan()

    assert scanner.depth == 0
    assert not scanner.in_quote
    assert scanner.is_eof


def test_strip_comments_removes_comments_and_whitespace() -> None:
    assert strip_comments("AC[ comment ]GT  TT") == "ACGTTT"


def test_strip_comments_handles_nesting() -> None:
    assert strip_comments("A[x[y]z]C\tG\nT") == "ACGT"


def test_strip_comments_keeps_one_quote_for_an_escaped_pair() -> None:
    assert strip_comments("'x''y'") == "x'y"
    assert strip_comments("A['x''y']C") == "AC"


def test_strip_comments_keeps_quoted_brackets_as_data() -> None:
    assert strip_comments("'[ab]' c") == "[ab]c"


def test_strip_comments_drops_stray_closing_bracket() -> None:
    assert strip_comments("ACGT ]") == "ACGT"


def test_kept_text_requires_collect_mode() -> None:
    with pytest.raises(ValueError, match="collect_text"):
        CommentQuoteScanner("ACGT").scan().kept_text()
