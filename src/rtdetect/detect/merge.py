from typing import Dict, Iterable, Iterator

from ..breakend import Breakend
from ..error import PartnerNotFoundError
from ..util import logger
from .base import BreakendRecord, PairHit


def hit_records(hits: Iterable[PairHit]) -> Iterator[BreakendRecord]:
    """
    split each pair hit into a record per breakend: the start side annotates the originating
    breakend and the end side annotates its partner. Sides without any transcript are skipped
    """
    for hit in hits:
        if hit.start_transcripts:
            yield BreakendRecord(
                hit.breakend, exons=hit.start_exons, transcripts=hit.start_transcripts
            )
        if hit.end_transcripts:
            yield BreakendRecord(hit.partner, exons=hit.end_exons, transcripts=hit.end_transcripts)


def merge_records(records: Iterable[BreakendRecord]) -> Dict[str, BreakendRecord]:
    """
    union the exons and transcripts of all records of the same breakend, returning a single
    record per breakend identifier
    """
    merged: Dict[str, BreakendRecord] = {}
    for record in records:
        if record.name in merged:
            merged[record.name] = merged[record.name].merge(record)
        else:
            merged[record.name] = record
    return merged


def filter_shared_exon(records: Dict[str, BreakendRecord]) -> Dict[str, BreakendRecord]:
    """
    drop breakends whose only evidence is the same single exon as their partner. A record is kept
    when its exons differ from the exons of the partner record or when it matches more than one exon.
    A partner without a record is treated as having no exons
    """
    result = {}
    for name, record in records.items():
        partner = records.get(record.partner)
        partner_exons = partner.exons if partner is not None else frozenset()
        if record.exons != partner_exons or len(record.exons) > 1:
            result[name] = record
        else:
            logger.debug(f'dropping {name}: single exon shared with partner {record.partner}')
    logger.info(f'filtered from {len(records)} down to {len(result)} junction breakends')
    return result


def complete_insertion_sites(
    insertion_sites: Dict[str, BreakendRecord],
    junctions: Dict[str, BreakendRecord],
    breakends: Dict[str, Breakend],
) -> Dict[str, BreakendRecord]:
    """
    remove insertion site breakends already reported as junctions and add the partner of every
    remaining insertion site breakend, without annotation when it had no match of its own
    """
    result = {name: rec for name, rec in insertion_sites.items() if name not in junctions}
    removed = len(insertion_sites) - len(result)
    if removed:
        logger.info(f'removed {removed} insertion site breakends reported as junctions')

    for record in list(result.values()):
        if record.partner in result or record.partner in junctions:
            continue
        try:
            partner = breakends[record.partner]
        except KeyError:
            raise PartnerNotFoundError('partner breakend is missing from the input', record.name)
        result[partner.name] = BreakendRecord(partner)
    return result
