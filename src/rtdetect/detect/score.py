from dataclasses import replace
from typing import Dict, NamedTuple, Set, Tuple

from ..annotate.reference import ReferenceAnnotation
from ..util import logger
from .base import BreakendRecord


class TranscriptScore(NamedTuple):
    name: str
    observed: int
    expected: int
    score: float


def score_transcripts(
    junctions: Dict[str, BreakendRecord], annotation: ReferenceAnnotation
) -> Dict[str, TranscriptScore]:
    """
    for every transcript of the junction records, the proportion of its exon-exon junctions
    observed. Each breakpoint pair counts once regardless of how many of its breakends remain.
    Scores are capped at 1 and a transcript without junctions (single exon) scores 0

    Raises:
        KeyError: a record references a transcript missing from the annotation
    """
    pairs_by_transcript: Dict[str, Set[Tuple[str, str]]] = {}
    for record in junctions.values():
        for transcript in record.transcripts:
            pairs_by_transcript.setdefault(transcript, set()).add(record.pair_key)

    scores = {}
    for transcript, pairs in pairs_by_transcript.items():
        expected = annotation.expected_junctions(transcript)
        score = min(len(pairs) / expected, 1.0) if expected else 0.0
        scores[transcript] = TranscriptScore(transcript, len(pairs), expected, score)
    return scores


def passing_transcripts(scores: Dict[str, TranscriptScore], minscore: float) -> Set[str]:
    """names of the transcripts scoring at least minscore"""
    passed = {name for name, tx_score in scores.items() if tx_score.score >= minscore}
    logger.info(f'{len(passed)} of {len(scores)} transcripts scored >= {minscore}')
    return passed


def filter_by_transcripts(
    junctions: Dict[str, BreakendRecord], passed: Set[str]
) -> Dict[str, BreakendRecord]:
    """
    narrow each junction record to its passing transcripts, dropping records left without any
    """
    result = {}
    for name, record in junctions.items():
        transcripts = record.transcripts & passed
        if transcripts:
            result[name] = replace(record, transcripts=transcripts)
    logger.info(f'filtered from {len(junctions)} down to {len(result)} junction breakends by score')
    return result


def flag_validated(
    insertion_sites: Dict[str, BreakendRecord], passed: Set[str]
) -> Dict[str, BreakendRecord]:
    """
    mark the transcripts of each insertion site record which passed the junction score filter
    """
    return {
        name: replace(record, validated_transcripts=record.transcripts & passed)
        for name, record in insertion_sites.items()
    }
