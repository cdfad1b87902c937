import os
import time
from typing import Dict, List

from ..annotate.file_io import load_annotations
from ..constants import COLUMNS, EVENT_TYPE
from ..error import InvalidInputError
from ..schemas import get_by_prefix
from ..util import (
    generate_complete_stamp,
    join_values,
    logger,
    mkdirp,
    output_tabbed_file,
    read_inputs,
)
from .base import GeneResult
from .call import call_events
from .score import TranscriptScore

JUNCTIONS_FILENAME = 'rtdetect_junctions.tab'
INSERTION_SITES_FILENAME = 'rtdetect_insertion_sites.tab'
SCORES_FILENAME = 'rtdetect_transcript_scores.tab'


def flatten_results(results: Dict[str, GeneResult]):
    """
    convert the results to rows, one per gene and breakend record

    Returns:
        Tuple[List[Dict], List[Dict]]: the junction rows and the insertion site rows
    """
    junction_rows = []
    insertion_site_rows = []
    for symbol, gene_result in sorted(results.items()):
        for record in gene_result.junctions:
            row = record.flatten()
            row[COLUMNS.gene_symbol] = symbol
            row[COLUMNS.event_type] = EVENT_TYPE.JUNCTION
            junction_rows.append(row)
        for record in gene_result.insertion_sites:
            row = record.flatten()
            row[COLUMNS.gene_symbol] = symbol
            row[COLUMNS.event_type] = EVENT_TYPE.INSERTION_SITE
            row[COLUMNS.transcripts_validated] = join_values(
                f'{tx}:{flag}' for tx, flag in record.transcripts_validated.items()
            )
            row[COLUMNS.junction_validated] = record.junction_validated
            insertion_site_rows.append(row)
    return junction_rows, insertion_site_rows


def flatten_scores(scores: Dict[str, TranscriptScore], minscore: float) -> List[Dict]:
    return [
        {
            COLUMNS.transcript_name: tx_score.name,
            COLUMNS.observed_junctions: tx_score.observed,
            COLUMNS.expected_junctions: tx_score.expected,
            COLUMNS.score: tx_score.score,
            COLUMNS.passed: tx_score.score >= minscore,
        }
        for _, tx_score in sorted(scores.items())
    ]


def main(
    inputs: List[str],
    output: str,
    config: Dict,
    start_time=int(time.time()),
    **kwargs,
):
    """
    Args:
        inputs: list of input breakend files to read
        output: path to the output directory
        config: the validated config
    """
    settings = get_by_prefix(config, 'detect.')
    if not config['reference.annotations']:
        raise InvalidInputError('no reference annotation files were given (reference.annotations)')
    breakends = read_inputs(inputs)
    annotation = load_annotations(*config['reference.annotations'])

    results, scores = call_events(
        breakends,
        annotation,
        maxgap=settings['maxgap'],
        minscore=settings['minscore'],
        canonical_chromosomes=settings['canonical_chromosomes'],
    )
    junction_rows, insertion_site_rows = flatten_results(results)

    mkdirp(output)
    output_tabbed_file(junction_rows, os.path.join(output, JUNCTIONS_FILENAME))
    output_tabbed_file(insertion_site_rows, os.path.join(output, INSERTION_SITES_FILENAME))
    output_tabbed_file(
        flatten_scores(scores, settings['minscore']), os.path.join(output, SCORES_FILENAME)
    )
    logger.info(f'detected events in {len(results)} genes')
    generate_complete_stamp(output, start_time=start_time)
    return results
