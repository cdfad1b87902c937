from typing import Dict, Iterable, Optional

from .constants import COLUMNS, STRAND
from .error import InvalidInputError, PartnerNotFoundError
from .interval import Interval


class Breakend(Interval):
    """
    class for storing information about one end of a breakpoint pair.
    coordinates are given as 1-indexed
    """

    name: str
    partner: str
    chr: str
    strand: str

    @property
    def key(self):
        return (self.name, self.partner, self.chr, self.start, self.strand)

    def __init__(
        self,
        name: str,
        chr: str,
        pos: int,
        partner: str,
        strand=STRAND.NS,
        data: Optional[Dict] = None,
    ):
        """
        Args:
            name: unique identifier of this breakend
            chr: the chromosome
            pos: the genomic position of the breakend
            partner: identifier of the breakend this one is paired with
            strand (STRAND): the strand
            data: any other attributes carried from the input

        Examples:
            >>> Breakend('bnd1_1', '1', 1000, 'bnd1_2')
            >>> Breakend('bnd1_1', 'chr1', 1000, 'bnd1_2', strand='+')
        """
        Interval.__init__(self, pos)
        if name is None or partner is None:
            raise InvalidInputError(
                'breakends require an identifier and a partner identifier', name
            )
        self.name = str(name)
        self.partner = str(partner)
        self.chr = str(chr)
        self.strand = STRAND.enforce(strand)
        self.data = {} if data is None else dict(data)

    @property
    def pos(self) -> int:
        return self.start

    def __repr__(self):
        strand = '' if self.strand == STRAND.NS else self.strand
        return 'Breakend({}={}:{}{}, partner={})'.format(
            self.name, self.chr, self.start, strand, self.partner
        )

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def to_dict(self):
        row = dict(self.data)
        row.update(
            {
                COLUMNS.breakend_id: self.name,
                COLUMNS.partner_id: self.partner,
                COLUMNS.chromosome: self.chr,
                COLUMNS.position: self.start,
                COLUMNS.strand: self.strand,
            }
        )
        return row


def index_breakends(breakends: Iterable[Breakend]) -> Dict[str, Breakend]:
    """
    map breakends by their identifier, checking that every breakend is part of a complete pair

    Raises:
        InvalidInputError: the collection is empty, contains non-breakends or repeats an identifier
        PartnerNotFoundError: a partner is missing or does not reference the breakend back
    """
    if breakends is None or isinstance(breakends, (str, bytes, dict)):
        raise InvalidInputError('breakends should be a collection of Breakend objects', breakends)
    try:
        breakends = list(breakends)
    except TypeError:
        raise InvalidInputError('breakends should be a collection of Breakend objects', breakends)
    if not breakends:
        raise InvalidInputError('breakends can\'t be empty')

    by_name: Dict[str, Breakend] = {}
    for bnd in breakends:
        if not isinstance(bnd, Breakend):
            raise InvalidInputError('breakends should be a collection of Breakend objects', bnd)
        if bnd.name in by_name:
            raise InvalidInputError('breakend identifiers must be unique', bnd.name)
        by_name[bnd.name] = bnd

    for bnd in by_name.values():
        if bnd.partner == bnd.name:
            raise PartnerNotFoundError('breakend cannot be its own partner', bnd)
        partner = by_name.get(bnd.partner)
        if partner is None:
            raise PartnerNotFoundError('partner breakend is missing from the input', bnd)
        if partner.partner != bnd.name:
            raise PartnerNotFoundError('breakend pairing is not symmetric', bnd, partner)
    return by_name
