"""
module responsible for small utility functions and constants used throughout the rtdetect package
"""
import argparse
from typing import List

from mavis_config.constants import MavisNamespace

EXIT_OK: int = 0

COMPLETE_STAMP: str = 'RTDETECT.COMPLETE'
"""Filename for all complete stamp files"""

LIST_DELIMITER: str = ';'
"""delimiter used to join multi-valued columns in tabbed output"""


def float_fraction(num):
    """
    cast input to a float

    Args:
        num: input to cast

    Returns:
        float

    Raises:
        argparse.ArgumentTypeError: if the input cannot be cast to a float or the number is not
            between 0 and 1
    """
    try:
        num = float(num)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a value between 0 and 1')
    if num < 0 or num > 1:
        raise argparse.ArgumentTypeError('Must be a value between 0 and 1')
    return num


class SUBCOMMAND(MavisNamespace):
    """
    holds controlled vocabulary for the command line sub-programs

    Attributes:
        DETECT: find retrotransposed transcripts from breakend calls
        SETUP: write a config file with the default settings
    """

    DETECT: str = 'detect'
    SETUP: str = 'setup'


class STRAND(MavisNamespace):
    """
    holds controlled vocabulary for allowed strand values

    Attributes:
        POS: the positive/forward strand
        NEG: the negative/reverse strand
        NS: strand is not specified
    """

    POS: str = '+'
    NEG: str = '-'
    NS: str = '?'


class SEQ_STYLE(MavisNamespace):
    """
    chromosome naming conventions

    Attributes:
        UCSC: chromosomes are prefixed (chr1, chrX)
        NCBI: chromosomes are bare (1, X)
    """

    UCSC: str = 'UCSC'
    NCBI: str = 'NCBI'


class EVENT_TYPE(MavisNamespace):
    """
    holds controlled vocabulary for the breakend record categories reported

    Attributes:
        JUNCTION: the breakend supports an exon-exon junction (intronic deletion) of a transcript
        INSERTION_SITE: the breakend supports the remote insertion site of a transcript
    """

    JUNCTION: str = 'junction'
    INSERTION_SITE: str = 'insertion site'


CANONICAL_CHROMOSOMES: List[str] = [str(i) for i in range(1, 23)] + ['X', 'Y']
"""the standard autosomes and sex chromosomes, in sequence level order (NCBI style)"""


# content related to tabbed files for input/output
class COLUMNS(MavisNamespace):
    """
    Column names for i/o files used throughout the pipeline
    """

    breakend_id: str = 'breakend_id'
    partner_id: str = 'partner_id'
    chromosome: str = 'chromosome'
    position: str = 'position'
    strand: str = 'strand'
    gene_symbol: str = 'gene_symbol'
    event_type: str = 'event_type'
    exons: str = 'exons'
    transcripts: str = 'transcripts'
    gene_symbols: str = 'gene_symbols'
    transcripts_validated: str = 'transcripts_validated'
    junction_validated: str = 'junction_validated'
    start: str = 'start'
    end: str = 'end'
    exon_id: str = 'exon_id'
    transcript_name: str = 'transcript_name'
    gene_id: str = 'gene_id'
    observed_junctions: str = 'observed_junctions'
    expected_junctions: str = 'expected_junctions'
    score: str = 'score'
    passed: str = 'passed'


def sort_columns(input_columns):
    order = {}
    for i, col in enumerate(COLUMNS.values()):
        order[col] = i
    temp = sorted([c for c in input_columns if c in order], key=lambda x: order[x])
    temp = temp + sorted([c for c in input_columns if c not in order])
    return temp


INTEGER_COLUMNS = {COLUMNS.position, COLUMNS.start, COLUMNS.end}

BREAKEND_REQUIRED_COLUMNS = [
    COLUMNS.breakend_id,
    COLUMNS.partner_id,
    COLUMNS.chromosome,
    COLUMNS.position,
]

EXON_REQUIRED_COLUMNS = [
    COLUMNS.chromosome,
    COLUMNS.start,
    COLUMNS.end,
    COLUMNS.exon_id,
    COLUMNS.transcript_name,
    COLUMNS.gene_id,
]
