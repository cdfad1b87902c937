from typing import List, Optional

from ..constants import STRAND
from ..interval import Interval


class Exon(Interval):
    """
    an exon of the reference annotation. An exon may be shared by several transcripts,
    membership is tracked by the reference annotation rather than the exon itself
    """

    def __init__(self, chr: str, start: int, end: int, name: str, strand=STRAND.NS):
        """
        Args:
            chr: the chromosome
            start: the genomic start position of the exon (inclusive)
            end: the genomic end position of the exon (inclusive)
            name: the exon identifier
            strand (STRAND): the strand

        Example:
            >>> Exon('1', 100, 200, '12')
        """
        Interval.__init__(self, start, end)
        self.chr = str(chr)
        self.name = str(name)
        self.strand = STRAND.enforce(strand)

    @property
    def key(self):
        return (self.name, self.chr, self.start, self.end)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return 'Exon({}={}:{}-{})'.format(self.name, self.chr, self.start, self.end)


class Transcript:
    def __init__(self, name: str, gene: 'Gene', exons: Optional[List[Exon]] = None):
        """
        Args:
            name: the transcript name
            gene: the gene the transcript belongs to
            exons: the exons making up this transcript
        """
        self.name = str(name)
        self.gene = gene
        self.exons = sorted(exons or [])

    @property
    def expected_junctions(self) -> int:
        """int: the number of adjacent exon pairs, i.e. the possible exon-exon junctions"""
        return max(len(self.exons) - 1, 0)

    def __repr__(self):
        return 'Transcript({}, exons={})'.format(self.name, len(self.exons))


class Gene:
    def __init__(self, name: str, chr: str, symbol: Optional[str] = None, strand=STRAND.NS):
        """
        Args:
            name: the gene identifier
            chr: the chromosome
            symbol: the gene symbol, None when the gene has no symbol assigned
            strand (STRAND): the strand
        """
        self.name = str(name)
        self.chr = str(chr)
        self.symbol = symbol
        self.strand = STRAND.enforce(strand)
        self.transcripts: List[Transcript] = []

    def __repr__(self):
        return 'Gene({}, symbol={}, chr={})'.format(self.name, self.symbol, self.chr)
