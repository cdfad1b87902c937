"""
detection of retrotransposed transcripts from breakend pairs. Two patterns are reported:
breakpoint pairs joining exon boundaries of the same transcript (spliced out introns) and
breakpoint pairs with a single end at an exon boundary (the remote insertion site)
"""
from typing import Dict, Iterable, Tuple

from ..annotate.base import detect_seqlevels_style
from ..annotate.reference import ReferenceAnnotation, prepare_annotation
from ..breakend import Breakend, index_breakends
from ..constants import CANONICAL_CHROMOSOMES
from ..error import InvalidInputError
from ..util import logger
from .base import GeneResult
from .classify import classify_pairs
from .group import group_by_gene, resolve_gene_symbols
from .match import match_exon_boundaries
from .merge import complete_insertion_sites, filter_shared_exon, hit_records, merge_records
from .score import (
    TranscriptScore,
    filter_by_transcripts,
    flag_validated,
    passing_transcripts,
    score_transcripts,
)

DEFAULT_MAXGAP = 100
DEFAULT_MINSCORE = 0.4


def check_parameters(maxgap, minscore):
    """
    Raises:
        InvalidInputError: maxgap is not a non-negative integer or minscore is not between 0 and 1
    """
    if isinstance(maxgap, bool) or not isinstance(maxgap, int) or maxgap < 0:
        raise InvalidInputError('maxgap must be a non-negative integer', maxgap)
    if isinstance(minscore, bool) or not isinstance(minscore, (int, float)):
        raise InvalidInputError('minscore must be a number between 0 and 1', minscore)
    if not 0 <= minscore <= 1:
        raise InvalidInputError('minscore must be a number between 0 and 1', minscore)


def call_events(
    breakends: Iterable[Breakend],
    annotation: ReferenceAnnotation,
    maxgap: int = DEFAULT_MAXGAP,
    minscore: float = DEFAULT_MINSCORE,
    canonical_chromosomes: int = len(CANONICAL_CHROMOSOMES),
) -> Tuple[Dict[str, GeneResult], Dict[str, TranscriptScore]]:
    """
    Args:
        breakends: the breakends, each with its partner also given
        annotation: the reference exons grouped by transcript and gene
        maxgap: the maximum distance allowed between a breakend and an exon boundary
        minscore: the minimum proportion of the exon-exon junctions of a transcript which must be observed
        canonical_chromosomes: number of canonical chromosomes of the annotation to use

    Returns:
        the results by gene symbol (empty when nothing is detected) and the scores of all
        candidate transcripts

    Raises:
        InvalidInputError: the annotation is missing or empty, the breakends are empty or the
            parameters are out of range
    """
    if not isinstance(annotation, ReferenceAnnotation):
        raise InvalidInputError('annotation should be a ReferenceAnnotation', annotation)
    if not annotation.exons:
        raise InvalidInputError('annotation has no exons')
    check_parameters(maxgap, minscore)
    breakends_by_name = index_breakends(breakends)

    style = detect_seqlevels_style([bnd.chr for bnd in breakends_by_name.values()])
    annotation = prepare_annotation(annotation, style, canonical_chromosomes)

    start_matches, end_matches = match_exon_boundaries(breakends_by_name, annotation, maxgap)
    junction_hits, insertion_hits = classify_pairs(
        breakends_by_name, start_matches, end_matches, annotation
    )
    if not junction_hits and not insertion_hits:
        logger.info('There is no retroposed gene detected.')
        return {}, {}

    junctions = filter_shared_exon(merge_records(hit_records(junction_hits)))
    scores = score_transcripts(junctions, annotation)
    passed = passing_transcripts(scores, minscore)
    junctions = filter_by_transcripts(junctions, passed)

    insertion_sites = complete_insertion_sites(
        merge_records(hit_records(insertion_hits)), junctions, breakends_by_name
    )
    insertion_sites = flag_validated(insertion_sites, passed)

    junctions = resolve_gene_symbols(junctions, annotation)
    insertion_sites = resolve_gene_symbols(insertion_sites, annotation)

    result = group_by_gene(junctions, insertion_sites)
    if not result:
        logger.info('There is no retroposed gene detected.')
        return {}, scores
    logger.info(
        f'reporting {len(junctions)} junction breakends and {len(insertion_sites)} insertion site '
        f'breakends across {len(result)} genes'
    )
    return result, scores


def detect_retrotranscripts(
    breakends: Iterable[Breakend],
    annotation: ReferenceAnnotation,
    maxgap: int = DEFAULT_MAXGAP,
    minscore: float = DEFAULT_MINSCORE,
    canonical_chromosomes: int = len(CANONICAL_CHROMOSOMES),
) -> Dict[str, GeneResult]:
    """
    searches for retrotransposed transcripts by identifying breakpoint pairs supporting
    intronic deletions and fusions between exons and remote loci

    Returns:
        the junction and insertion site breakend records by gene symbol. Empty when no event is detected

    Example:
        >>> result = detect_retrotranscripts(breakends, annotation, maxgap=30, minscore=0.6)
        >>> result['TOP1'].junctions
    """
    result, _ = call_events(
        breakends,
        annotation,
        maxgap=maxgap,
        minscore=minscore,
        canonical_chromosomes=canonical_chromosomes,
    )
    return result
