"""Centralized NEXUS source cases used across parser/validator tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class NexusCase:
    name: str
    source: str
    expected_codes: tuple[str, ...] = ()


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


VALIDATION_CASES: tuple[NexusCase, ...] = (
    NexusCase(
        name="clean_dna_block",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=3 NCHAR=4;
              FORMAT DATATYPE=DNA MISSING=? GAP=-;
              MATRIX
                A ACGT
                B AC-T
                C ACG?
              ;
            END;
            """
        ),
    ),
    NexusCase(
        name="ntax_larger_than_matrix",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=3;
              MATRIX
                A ACGT
                B ACGT
              ;
            END;
            """
        ),
        expected_codes=("MATRIX_NTAX_MISMATCH",),
    ),
    NexusCase(
        name="single_short_row",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=1 NCHAR=5;
              MATRIX
                A AC[ambiguous]G T
              ;
            END;
            """
        ),
        expected_codes=("MATRIX_NCHAR_MISMATCH", "MATRIX_ROW_LENGTH_MISMATCH"),
    ),
    NexusCase(
        name="interleaved_groups",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=2 NCHAR=8;
              FORMAT DATATYPE=DNA INTERLEAVE;
              MATRIX
                [ group 1 ]
                A ACGT
                B CCGG

                [ group 2 ]
                A TTTT
                B AAAA
              ;
            END;
            """
        ),
    ),
    NexusCase(
        name="quoted_labels_with_escapes",
        source=_dedent(
            """
            #NEXUS
            BEGIN TAXA;
              DIMENSIONS NTAX=2;
            END;
            BEGIN CHARACTERS;
              DIMENSIONS NCHAR=4;
              MATRIX
                'Homo sapiens'   ACGT
                'O''Brien [x]'   AC[c]GT
              ;
            END;
            """
        ),
    ),
    NexusCase(
        name="stray_closing_bracket",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=1 NCHAR=4;
              MATRIX
                A ACGT ]
              ;
            END;
            """
        ),
        expected_codes=("SCAN_UNEXPECTED_CLOSING_BRACKET",),
    ),
    NexusCase(
        name="unclosed_header_comment",
        source=_dedent(
            """
            #NEXUS
            [ written by hand
            BEGIN DATA;
              DIMENSIONS NTAX=1 NCHAR=4;
              MATRIX
                A ACGT
              ;
            END;
            """
        ),
        expected_codes=("SCAN_UNCLOSED_COMMENT",),
    ),
    NexusCase(
        name="unclosed_label_quote",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              DIMENSIONS NTAX=1 NCHAR=4;
              MATRIX
                'Homo ACGT
              ;
            END;
            """
        ),
        expected_codes=("SCAN_UNCLOSED_QUOTE",),
    ),
    NexusCase(
        name="no_declarations",
        source=_dedent(
            """
            #NEXUS
            BEGIN DATA;
              MATRIX
                A ACGT
                B AC
              ;
            END;
            """
        ),
    ),
    NexusCase(
        name="no_matrix_block",
        source=_dedent(
            """
            #NEXUS
            BEGIN TAXA;
              DIMENSIONS NTAX=3;
              TAXLABELS A B C;
            END;
            """
        ),
    ),
)


def case_id(case: NexusCase) -> str:
    return case.name
