from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Tuple

from ..breakend import Breakend
from ..constants import COLUMNS
from ..util import join_values


@dataclass(frozen=True)
class PairHit:
    """
    exon matches of a breakpoint pair seen from one of its breakends. The start side holds the
    exons whose start is near the breakend, the end side the exons whose end is near its partner
    """

    breakend: Breakend
    partner: Breakend
    start_exons: FrozenSet[str] = frozenset()
    end_exons: FrozenSet[str] = frozenset()
    start_transcripts: FrozenSet[str] = frozenset()
    end_transcripts: FrozenSet[str] = frozenset()
    same_transcript: bool = False


@dataclass(frozen=True)
class BreakendRecord:
    """
    a breakend annotated with the exons and transcripts it supports
    """

    breakend: Breakend
    exons: FrozenSet[str] = frozenset()
    transcripts: FrozenSet[str] = frozenset()
    gene_symbols: FrozenSet[str] = frozenset()
    validated_transcripts: FrozenSet[str] = frozenset()

    @property
    def name(self) -> str:
        return self.breakend.name

    @property
    def partner(self) -> str:
        return self.breakend.partner

    @property
    def pair_key(self) -> Tuple[str, str]:
        """identifies the breakpoint pair regardless of which breakend is asked"""
        return tuple(sorted([self.breakend.name, self.breakend.partner]))  # type: ignore

    @property
    def transcripts_validated(self) -> Dict[str, bool]:
        """for each transcript, True if the transcript passed the junction score filter"""
        return {tx: tx in self.validated_transcripts for tx in sorted(self.transcripts)}

    @property
    def junction_validated(self) -> bool:
        return bool(self.validated_transcripts & self.transcripts)

    def merge(self, other: 'BreakendRecord') -> 'BreakendRecord':
        """
        union the annotations of two records of the same breakend

        Raises:
            ValueError: the records are for different breakends
        """
        if other.breakend != self.breakend:
            raise ValueError('cannot merge records of different breakends', self.name, other.name)
        return replace(
            self,
            exons=self.exons | other.exons,
            transcripts=self.transcripts | other.transcripts,
            gene_symbols=self.gene_symbols | other.gene_symbols,
            validated_transcripts=self.validated_transcripts | other.validated_transcripts,
        )

    def flatten(self) -> Dict:
        """
        returns the key-value record information as can be written directly as a tab row
        """
        row = self.breakend.to_dict()
        row.update(
            {
                COLUMNS.exons: join_values(self.exons),
                COLUMNS.transcripts: join_values(self.transcripts),
                COLUMNS.gene_symbols: join_values(self.gene_symbols),
            }
        )
        return row


@dataclass(frozen=True)
class GeneResult:
    """
    the breakend records reported for a single gene symbol
    """

    gene_symbol: str
    junctions: Tuple[BreakendRecord, ...] = field(default_factory=tuple)
    insertion_sites: Tuple[BreakendRecord, ...] = field(default_factory=tuple)
