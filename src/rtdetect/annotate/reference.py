"""
read-only snapshot of the reference exons grouped by transcript and gene
"""
from typing import Callable, Dict, Iterable, List, Optional, Set

from ..constants import CANONICAL_CHROMOSOMES, COLUMNS, STRAND
from ..error import NotSpecifiedError
from ..util import logger
from .base import convert_seqlevel, detect_seqlevels_style
from .genomic import Exon, Gene, Transcript


class ReferenceAnnotation:
    """
    Exons and their transcript/gene membership. Exons are identified by name and may
    be shared by any number of transcripts. Transcript names are expected to be unique.

    Instances are not modified after construction, any normalization returns a new snapshot
    """

    def __init__(self, genes: Iterable[Gene]):
        self.genes: Dict[str, Gene] = {}
        self.transcripts: Dict[str, Transcript] = {}
        self.exons: Dict[str, Exon] = {}
        self._exon_transcripts: Dict[str, Set[str]] = {}

        for gene in genes:
            if gene.name in self.genes:
                raise KeyError('gene identifier is not unique', gene)
            self.genes[gene.name] = gene
            for transcript in gene.transcripts:
                if transcript.name in self.transcripts:
                    raise KeyError('transcript name is not unique', gene, transcript)
                self.transcripts[transcript.name] = transcript
                for exon in transcript.exons:
                    current = self.exons.setdefault(exon.name, exon)
                    if current != exon:
                        raise KeyError('exon identifier is not unique', current, exon)
                    self._exon_transcripts.setdefault(exon.name, set()).add(transcript.name)

    def __repr__(self):
        return '{}(genes={}, transcripts={}, exons={})'.format(
            self.__class__.__name__, len(self.genes), len(self.transcripts), len(self.exons)
        )

    @property
    def seqlevels(self) -> List[str]:
        return sorted({gene.chr for gene in self.genes.values()})

    @property
    def seqlevels_style(self) -> Optional[str]:
        return detect_seqlevels_style(self.seqlevels)

    def exon_transcripts(self, exon_name: str) -> Set[str]:
        """names of the transcripts the exon is part of"""
        return set(self._exon_transcripts.get(exon_name, set()))

    def expected_junctions(self, transcript_name: str) -> int:
        """
        Raises:
            KeyError: the transcript is not part of the annotation
        """
        return self.transcripts[transcript_name].expected_junctions

    def transcript_gene_symbols(self, transcript_name: str) -> Set[str]:
        """
        the gene symbol(s) a transcript resolves to. Unknown transcripts and genes
        without a symbol resolve to an empty set
        """
        transcript = self.transcripts.get(transcript_name)
        if transcript is None or not transcript.gene.symbol:
            return set()
        return {transcript.gene.symbol}

    def _rebuild(
        self, rename: Callable[[str], str], keep: Callable[[Gene], bool]
    ) -> 'ReferenceAnnotation':
        genes = []
        for gene in self.genes.values():
            if not keep(gene):
                continue
            new_gene = Gene(gene.name, rename(gene.chr), symbol=gene.symbol, strand=gene.strand)
            for transcript in gene.transcripts:
                exons = [
                    Exon(rename(exon.chr), exon.start, exon.end, exon.name, strand=exon.strand)
                    for exon in transcript.exons
                ]
                new_gene.transcripts.append(Transcript(transcript.name, new_gene, exons))
            genes.append(new_gene)
        return ReferenceAnnotation(genes)

    def convert_style(self, style: str) -> 'ReferenceAnnotation':
        """
        copy of the annotation with the chromosomes renamed to the given naming style
        """
        return self._rebuild(lambda chrom: convert_seqlevel(chrom, style), lambda gene: True)

    def keep_seqlevels(self, seqlevels: Iterable[str]) -> 'ReferenceAnnotation':
        """
        copy of the annotation restricted to the given chromosomes. Genes on any other
        chromosome are pruned together with their transcripts and exons
        """
        kept = set(seqlevels)
        return self._rebuild(lambda chrom: chrom, lambda gene: gene.chr in kept)

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> 'ReferenceAnnotation':
        """
        build the annotation from flat exon records, one per exon-transcript membership

        Example:
            >>> ReferenceAnnotation.from_records([
            ...     {'chromosome': '1', 'start': 100, 'end': 200, 'exon_id': 'e1', 'transcript_name': 'tx1', 'gene_id': 'g1'}
            ... ])
        """
        genes: Dict[str, Gene] = {}
        exons_by_transcript: Dict[str, List[Exon]] = {}
        transcript_gene: Dict[str, str] = {}

        for row in records:
            for col in [COLUMNS.exon_id, COLUMNS.transcript_name, COLUMNS.gene_id]:
                if row.get(col) is None:
                    raise NotSpecifiedError(f'missing required annotation field ({col})', row)
            strand = row.get(COLUMNS.strand) or STRAND.NS
            gene_id = str(row[COLUMNS.gene_id])
            transcript_name = str(row[COLUMNS.transcript_name])
            gene = genes.setdefault(
                gene_id,
                Gene(
                    gene_id,
                    row[COLUMNS.chromosome],
                    symbol=row.get(COLUMNS.gene_symbol),
                    strand=strand,
                ),
            )
            if transcript_gene.setdefault(transcript_name, gene_id) != gene_id:
                raise KeyError(
                    'transcript is assigned to more than one gene',
                    transcript_name,
                    transcript_gene[transcript_name],
                    gene_id,
                )
            exons_by_transcript.setdefault(transcript_name, []).append(
                Exon(
                    gene.chr,
                    row[COLUMNS.start],
                    row[COLUMNS.end],
                    row[COLUMNS.exon_id],
                    strand=strand,
                )
            )

        for transcript_name, exons in exons_by_transcript.items():
            gene = genes[transcript_gene[transcript_name]]
            gene.transcripts.append(Transcript(transcript_name, gene, exons))
        return cls(genes.values())


def prepare_annotation(
    annotation: ReferenceAnnotation,
    style: str,
    canonical_chromosomes: int = len(CANONICAL_CHROMOSOMES),
) -> ReferenceAnnotation:
    """
    produce the annotation snapshot used for matching: chromosomes renamed to the naming
    style of the breakends and restricted to the canonical chromosomes

    Args:
        annotation: the input annotation (not modified)
        style (SEQ_STYLE): the naming style to convert to
        canonical_chromosomes: number of canonical sequence levels to keep
    """
    logger.info(f'converting annotation chromosome names to the {style} style')
    converted = annotation.convert_style(style)
    keep = [
        convert_seqlevel(chrom, style) for chrom in CANONICAL_CHROMOSOMES[:canonical_chromosomes]
    ]
    pruned = converted.keep_seqlevels(keep)
    if len(pruned.genes) < len(converted.genes):
        logger.info(
            f'pruned {len(converted.genes) - len(pruned.genes)} genes on non-canonical chromosomes'
        )
    return pruned
