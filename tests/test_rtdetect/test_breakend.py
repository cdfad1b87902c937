import pytest

from rtdetect.breakend import Breakend, index_breakends
from rtdetect.constants import COLUMNS, STRAND
from rtdetect.error import InvalidInputError, PartnerNotFoundError

from .mock import breakend_pair


class TestBreakend:
    def test_defaults(self):
        bnd = Breakend('a', 'chr1', 100, 'b')
        assert bnd.pos == 100
        assert bnd.strand == STRAND.NS
        assert bnd.data == {}

    def test_bad_strand(self):
        with pytest.raises(KeyError):
            Breakend('a', 'chr1', 100, 'b', strand='x')

    def test_missing_partner(self):
        with pytest.raises(InvalidInputError):
            Breakend('a', 'chr1', 100, None)

    def test_eq(self):
        assert Breakend('a', '1', 100, 'b') == Breakend('a', '1', 100, 'b')
        assert Breakend('a', '1', 100, 'b') != Breakend('a', '1', 101, 'b')
        assert len({Breakend('a', '1', 100, 'b'), Breakend('a', '1', 100, 'b')}) == 1

    def test_to_dict(self):
        row = Breakend('a', '1', 100, 'b', strand='+', data={'QUAL': 30}).to_dict()
        assert row[COLUMNS.breakend_id] == 'a'
        assert row[COLUMNS.partner_id] == 'b'
        assert row[COLUMNS.position] == 100
        assert row['QUAL'] == 30


class TestIndexBreakends:
    def test_index(self):
        by_name = index_breakends(breakend_pair('a', '1', 100, 'b', '1', 500))
        assert sorted(by_name) == ['a', 'b']

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            index_breakends([])

    def test_wrong_type(self):
        with pytest.raises(InvalidInputError):
            index_breakends(None)
        with pytest.raises(InvalidInputError):
            index_breakends('chr1')
        with pytest.raises(InvalidInputError):
            index_breakends([('a', 'chr1', 100)])

    def test_duplicate_identifier(self):
        breakends = breakend_pair('a', '1', 100, 'b', '1', 500)
        with pytest.raises(InvalidInputError):
            index_breakends(breakends + [Breakend('a', '1', 900, 'b')])

    def test_missing_partner(self):
        with pytest.raises(PartnerNotFoundError):
            index_breakends([Breakend('a', '1', 100, 'b')])

    def test_asymmetric_partner(self):
        with pytest.raises(PartnerNotFoundError):
            index_breakends(
                [
                    Breakend('a', '1', 100, 'b'),
                    Breakend('b', '1', 500, 'c'),
                    Breakend('c', '1', 900, 'b'),
                ]
            )

    def test_self_partner(self):
        with pytest.raises(PartnerNotFoundError):
            index_breakends([Breakend('a', '1', 100, 'a')])
