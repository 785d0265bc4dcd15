from nexuslint.header import extract_header
from nexuslint.text import slice_text_range


def test_finds_both_counts_case_insensitively() -> None:
    source = "DIMENSIONS ntax = 12 NChar=300;"

    header = extract_header(source)

    assert header.declared_ntax == 12
    assert header.declared_nchar == 300
    assert header.ntax is not None
    assert header.ntax.range.as_tuple() == (11, 20)
    assert slice_text_range(source, header.ntax.range) == "ntax = 12"


def test_only_first_occurrence_counts() -> None:
    header = extract_header("NTAX=2;\nNTAX=5;\n")

    assert header.declared_ntax == 2


def test_missing_declarations_are_none() -> None:
    header = extract_header("#NEXUS\nBEGIN DATA;\nEND;\n")

    assert header.ntax is None
    assert header.nchar is None
    assert header.declared_ntax is None
    assert header.declared_nchar is None


def test_keyword_must_stand_alone() -> None:
    header = extract_header("MYNTAX=3 XNCHAR=4")

    assert header.ntax is None
    assert header.nchar is None


def test_value_must_be_digits() -> None:
    assert extract_header("NTAX=?").ntax is None
