import pytest

from rtdetect.annotate.genomic import Exon
from rtdetect.breakend import index_breakends
from rtdetect.detect.match import BoundaryIndex, match_exon_boundaries

from ..mock import breakend_pair, junction_breakends, mock_annotation


@pytest.fixture
def exons():
    return [
        Exon('1', 1000, 1100, 'e1'),
        Exon('1', 2000, 2100, 'e2'),
        Exon('1', 2050, 2300, 'e3'),
        Exon('2', 2000, 2100, 'x1'),
    ]


class TestBoundaryIndex:
    def test_exact(self, exons):
        index = BoundaryIndex(exons, lambda exon: exon.start)
        assert index.near('1', 2000, 0) == {'e2'}

    def test_maxgap_inclusive(self, exons):
        index = BoundaryIndex(exons, lambda exon: exon.start)
        assert index.near('1', 1950, 50) == {'e2'}
        assert index.near('1', 1949, 50) == set()
        assert index.near('1', 2050, 50) == {'e2', 'e3'}
        assert index.near('1', 2051, 50) == {'e3'}

    def test_end_boundary(self, exons):
        index = BoundaryIndex(exons, lambda exon: exon.end)
        assert index.near('1', 1100, 10) == {'e1'}
        assert index.near('1', 2000, 10) == set()

    def test_chromosome_must_match(self, exons):
        index = BoundaryIndex(exons, lambda exon: exon.start)
        assert index.near('2', 2000, 0) == {'x1'}
        assert index.near('chr1', 2000, 0) == set()
        assert index.near('3', 2000, 1000) == set()


class TestMatchExonBoundaries:
    def test_junction_pairs(self):
        breakends = index_breakends(junction_breakends('1'))
        start_matches, end_matches = match_exon_boundaries(breakends, mock_annotation(), 50)
        assert start_matches == {'A': {'e2'}, 'C': {'e3'}}
        # keyed by the breakend whose partner is near the exon end
        assert end_matches == {'A': {'e1'}, 'C': {'e2'}}

    def test_maxgap_zero(self):
        breakends = index_breakends(junction_breakends('1'))
        start_matches, end_matches = match_exon_boundaries(breakends, mock_annotation(), 0)
        assert start_matches == {'A': {'e2'}}
        assert end_matches == {'A': {'e1'}}

    def test_strand_ignored(self):
        # GENEB is on the negative strand, matching is still by start and end coordinates
        breakends = index_breakends(breakend_pair('P', '2', 12000, 'Q', '2', 10200))
        start_matches, end_matches = match_exon_boundaries(breakends, mock_annotation(), 0)
        assert start_matches == {'P': {'b2'}}
        assert end_matches == {'P': {'b1'}}

    def test_no_matches(self):
        breakends = index_breakends(breakend_pair('P', '3', 100, 'Q', '4', 200))
        assert match_exon_boundaries(breakends, mock_annotation(), 100) == ({}, {})
