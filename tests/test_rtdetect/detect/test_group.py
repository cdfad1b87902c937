import pytest

from rtdetect.breakend import index_breakends
from rtdetect.detect.base import BreakendRecord
from rtdetect.detect.group import group_by_gene, resolve_gene_symbols
from rtdetect.error import PartnerNotFoundError

from ..mock import exon_records, insertion_site_breakends, junction_breakends, mock_annotation


@pytest.fixture
def breakends():
    return index_breakends(junction_breakends('1') + insertion_site_breakends('1'))


@pytest.fixture
def annotation():
    extra = exon_records([('n1', 7000, 7500), ('n2', 8000, 8500)], '1', 'TXN', 'g5', None)
    return mock_annotation(extra)


def record(breakends, name, transcripts=(), symbols=()):
    return BreakendRecord(
        breakends[name], transcripts=frozenset(transcripts), gene_symbols=frozenset(symbols)
    )


class TestResolveGeneSymbols:
    def test_resolve(self, breakends, annotation):
        records = {
            'A': record(breakends, 'A', ['TX1']),
            'B': record(breakends, 'B', ['TX1', 'TXB']),
            'C': record(breakends, 'C', ['TXN']),
            'D': record(breakends, 'D'),
        }
        result = resolve_gene_symbols(records, annotation)
        assert result['A'].gene_symbols == {'GENEA'}
        assert result['B'].gene_symbols == {'GENEA', 'GENEB'}
        assert result['C'].gene_symbols == frozenset()
        assert result['D'].gene_symbols == frozenset()
        # the input records are not modified
        assert records['A'].gene_symbols == frozenset()


class TestGroupByGene:
    def test_junctions(self, breakends):
        junctions = {
            'A': record(breakends, 'A', ['TX1'], ['GENEA']),
            'B': record(breakends, 'B', ['TX1', 'TXB'], ['GENEA', 'GENEB']),
            'C': record(breakends, 'C', ['TXN']),
        }
        result = group_by_gene(junctions, {})
        assert sorted(result) == ['GENEA', 'GENEB']
        assert [r.name for r in result['GENEA'].junctions] == ['A', 'B']
        assert [r.name for r in result['GENEB'].junctions] == ['B']
        assert result['GENEA'].insertion_sites == ()

    def test_insertion_site_with_partner(self, breakends):
        insertion_sites = {
            'E': record(breakends, 'E', ['TX1'], ['GENEA']),
            'F': record(breakends, 'F'),
        }
        result = group_by_gene({}, insertion_sites)
        assert list(result) == ['GENEA']
        assert [r.name for r in result['GENEA'].insertion_sites] == ['E', 'F']
        assert result['GENEA'].junctions == ()

    def test_partner_listed_once(self, breakends):
        insertion_sites = {
            'E': record(breakends, 'E', ['TX1'], ['GENEA']),
            'F': record(breakends, 'F', ['TX1'], ['GENEA']),
        }
        result = group_by_gene({}, insertion_sites)
        assert [r.name for r in result['GENEA'].insertion_sites] == ['E', 'F']

    def test_missing_partner(self, breakends):
        insertion_sites = {'E': record(breakends, 'E', ['TX1'], ['GENEA'])}
        with pytest.raises(PartnerNotFoundError):
            group_by_gene({}, insertion_sites)

    def test_no_symbols(self, breakends):
        assert group_by_gene({'C': record(breakends, 'C', ['TXN'])}, {}) == {}
