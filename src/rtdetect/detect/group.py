from dataclasses import replace
from typing import Dict, List

from ..annotate.reference import ReferenceAnnotation
from ..error import PartnerNotFoundError
from ..util import logger
from .base import BreakendRecord, GeneResult


def resolve_gene_symbols(
    records: Dict[str, BreakendRecord], annotation: ReferenceAnnotation
) -> Dict[str, BreakendRecord]:
    """
    attach the gene symbols of all transcripts of each record. Transcripts which do not resolve
    to a gene symbol contribute nothing
    """
    result = {}
    for name, record in records.items():
        symbols = set()
        for transcript in record.transcripts:
            symbols.update(annotation.transcript_gene_symbols(transcript))
        result[name] = replace(record, gene_symbols=frozenset(symbols))
    return result


def group_by_gene(
    junctions: Dict[str, BreakendRecord], insertion_sites: Dict[str, BreakendRecord]
) -> Dict[str, GeneResult]:
    """
    partition the records by gene symbol. A record with several gene symbols is reported under
    each of them. The partner of every insertion site record is reported with it, even when the
    partner has no gene symbol of its own

    Raises:
        PartnerNotFoundError: the partner of an insertion site record has no record
    """
    symbols = set()
    for record in list(junctions.values()) + list(insertion_sites.values()):
        symbols.update(record.gene_symbols)

    result = {}
    for symbol in sorted(symbols):
        gene_junctions = [
            rec for _, rec in sorted(junctions.items()) if symbol in rec.gene_symbols
        ]
        gene_insertion_sites: List[BreakendRecord] = []
        seen = set()
        for _, record in sorted(insertion_sites.items()):
            if symbol not in record.gene_symbols:
                continue
            try:
                partner = insertion_sites[record.partner]
            except KeyError:
                raise PartnerNotFoundError(
                    'insertion site partner was not reported', record.name, record.partner
                )
            for rec in [record, partner]:
                if rec.name not in seen:
                    seen.add(rec.name)
                    gene_insertion_sites.append(rec)
        result[symbol] = GeneResult(
            symbol, junctions=tuple(gene_junctions), insertion_sites=tuple(gene_insertion_sites)
        )
        logger.debug(
            f'{symbol}: {len(gene_junctions)} junction breakends, '
            f'{len(gene_insertion_sites)} insertion site breakends'
        )
    return result
