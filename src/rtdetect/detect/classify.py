from typing import Dict, List, Set, Tuple

from ..annotate.reference import ReferenceAnnotation
from ..breakend import Breakend
from ..error import PartnerNotFoundError
from ..util import logger
from .base import PairHit


def transcripts_of(exons: Set[str], annotation: ReferenceAnnotation) -> Set[str]:
    """all transcripts reachable from a group of exons"""
    transcripts: Set[str] = set()
    for exon in exons:
        transcripts.update(annotation.exon_transcripts(exon))
    return transcripts


def _lookup(breakends: Dict[str, Breakend], name: str) -> Breakend:
    try:
        return breakends[name]
    except KeyError:
        raise PartnerNotFoundError('matched breakend is not part of the input', name)


def classify_pairs(
    breakends: Dict[str, Breakend],
    start_matches: Dict[str, Set[str]],
    end_matches: Dict[str, Set[str]],
    annotation: ReferenceAnnotation,
) -> Tuple[List[PairHit], List[PairHit]]:
    """
    join the start and end matches by the originating breakend and split the pairs
    into exon-exon junction candidates and insertion site candidates

    A pair with matches on both ends supports a junction when any transcript of the start
    side exons is also a transcript of the end side exons. The exons kept on each side
    are those belonging to a shared transcript

    Returns:
        the junction hits and the insertion site hits
    """
    junctions: List[PairHit] = []
    insertion_sites: List[PairHit] = []

    for name in sorted(set(start_matches) | set(end_matches)):
        bnd = _lookup(breakends, name)
        partner = _lookup(breakends, bnd.partner)
        start_exons = start_matches.get(name, set())
        end_exons = end_matches.get(name, set())
        start_transcripts = transcripts_of(start_exons, annotation)
        end_transcripts = transcripts_of(end_exons, annotation)

        shared = start_transcripts & end_transcripts
        if shared:
            junctions.append(
                PairHit(
                    bnd,
                    partner,
                    start_exons=frozenset(
                        e for e in start_exons if annotation.exon_transcripts(e) & shared
                    ),
                    end_exons=frozenset(
                        e for e in end_exons if annotation.exon_transcripts(e) & shared
                    ),
                    start_transcripts=frozenset(shared),
                    end_transcripts=frozenset(shared),
                    same_transcript=True,
                )
            )
        else:
            insertion_sites.append(
                PairHit(
                    bnd,
                    partner,
                    start_exons=frozenset(start_exons),
                    end_exons=frozenset(end_exons),
                    start_transcripts=frozenset(start_transcripts),
                    end_transcripts=frozenset(end_transcripts),
                )
            )
    logger.info(
        f'classified {len(junctions)} same-transcript pairs and '
        f'{len(insertion_sites)} insertion site pairs'
    )
    return junctions, insertion_sites
