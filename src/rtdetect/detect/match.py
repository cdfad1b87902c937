"""
proximity join of breakends against exon boundaries
"""
from bisect import bisect_left, bisect_right
from typing import Callable, Dict, Iterable, List, Set, Tuple

from ..annotate.genomic import Exon
from ..annotate.reference import ReferenceAnnotation
from ..breakend import Breakend
from ..interval import Interval
from ..util import logger


class BoundaryIndex:
    """
    exon boundary positions sorted by chromosome, for finding the exons with a boundary
    within some distance of a position
    """

    def __init__(self, exons: Iterable[Exon], boundary: Callable[[Exon], int]):
        """
        Args:
            exons: the exons to index
            boundary: returns the boundary position to index for an exon
        """
        by_chr: Dict[str, List[Tuple[int, str]]] = {}
        for exon in exons:
            by_chr.setdefault(exon.chr, []).append((boundary(exon), exon.name))
        self._positions: Dict[str, List[int]] = {}
        self._names: Dict[str, List[str]] = {}
        for chrom, items in by_chr.items():
            items.sort()
            self._positions[chrom] = [pos for pos, _ in items]
            self._names[chrom] = [name for _, name in items]

    def near(self, chrom: str, pos: int, maxgap: int) -> Set[str]:
        """
        names of the exons with a boundary at most maxgap away from the position (inclusive)
        """
        positions = self._positions.get(chrom)
        if not positions:
            return set()
        window = Interval.window(pos, maxgap)
        first = bisect_left(positions, window.start)
        last = bisect_right(positions, window.end)
        return set(self._names[chrom][first:last])


def match_exon_boundaries(
    breakends: Dict[str, Breakend], annotation: ReferenceAnnotation, maxgap: int
) -> Tuple[Dict[str, Set[str]], Dict[str, Set[str]]]:
    """
    find the exons near either end of each breakpoint pair. Strand is ignored

    Args:
        breakends: breakends by identifier
        annotation: the reference exons
        maxgap: the maximum distance between a breakend and an exon boundary

    Returns:
        the start matches and the end matches. Both are keyed by the originating breakend. Start
        matches are the exons whose start is near the breakend, end matches are the exons whose
        end is near the partner of the breakend
    """
    start_index = BoundaryIndex(annotation.exons.values(), lambda exon: exon.start)
    end_index = BoundaryIndex(annotation.exons.values(), lambda exon: exon.end)

    near_end: Dict[str, Set[str]] = {}
    start_matches: Dict[str, Set[str]] = {}
    for bnd in breakends.values():
        exons = start_index.near(bnd.chr, bnd.pos, maxgap)
        if exons:
            start_matches[bnd.name] = exons
        near_end[bnd.name] = end_index.near(bnd.chr, bnd.pos, maxgap)

    end_matches: Dict[str, Set[str]] = {}
    for bnd in breakends.values():
        exons = near_end[bnd.partner]
        if exons:
            end_matches[bnd.name] = exons

    logger.info(
        f'found {sum(len(v) for v in start_matches.values())} exon start matches and '
        f'{sum(len(v) for v in end_matches.values())} exon end matches (maxgap={maxgap})'
    )
    return start_matches, end_matches
