"""
module which holds all functions relating to loading reference files
"""
from typing import Dict, List

import pandas as pd

from ..constants import COLUMNS, EXON_REQUIRED_COLUMNS, STRAND
from ..util import NA_VALUES, logger
from .reference import ReferenceAnnotation


def load_annotations(*filepaths: str) -> ReferenceAnnotation:
    """
    loads the reference exons from tab-delimited files. Expects one row per exon-transcript
    membership with the following columns

    - chromosome: the chromosome
    - start: start of the exon, 1-based inclusive
    - end: end of the exon, 1-based inclusive
    - exon_id: the exon identifier, exons shared by transcripts repeat the same identifier
    - transcript_name: the transcript name
    - gene_id: the gene identifier
    - strand (optional): the strand of the gene
    - gene_symbol (optional): the gene symbol

    For example:

    .. code-block:: text

        chromosome  start   end     exon_id transcript_name gene_id gene_symbol
        chr1        11874   12227   1       uc001aaa.3      100287102   DDX11L1

    Args:
        filepaths: paths to the input tab-delimited files
    Returns:
        the annotation built from all files
    """
    records: List[Dict] = []
    for filepath in filepaths:
        logger.info(f'loading: {filepath}')
        df = pd.read_csv(
            filepath,
            sep='\t',
            comment='#',
            dtype={
                COLUMNS.chromosome: str,
                COLUMNS.start: int,
                COLUMNS.end: int,
                COLUMNS.exon_id: str,
                COLUMNS.transcript_name: str,
                COLUMNS.gene_id: str,
                COLUMNS.strand: str,
                COLUMNS.gene_symbol: str,
            },
            na_values=NA_VALUES,
        )
        for col in EXON_REQUIRED_COLUMNS:
            if col not in df:
                raise KeyError(f'missing required column ({col})')
        if COLUMNS.strand not in df:
            df[COLUMNS.strand] = STRAND.NS
        if COLUMNS.gene_symbol not in df:
            df[COLUMNS.gene_symbol] = df[COLUMNS.gene_id]
        df[COLUMNS.strand] = df[COLUMNS.strand].fillna(STRAND.NS)
        df = df.astype(object).where(df.notnull(), None)
        records.extend(df.to_dict('records'))

    annotation = ReferenceAnnotation.from_records(records)
    logger.info(f'loaded {annotation}')
    return annotation
