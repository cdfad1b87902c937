import pytest

from rtdetect.breakend import index_breakends
from rtdetect.detect.base import BreakendRecord
from rtdetect.detect.score import (
    TranscriptScore,
    filter_by_transcripts,
    flag_validated,
    passing_transcripts,
    score_transcripts,
)

from ..mock import breakend_pair, exon_records, insertion_site_breakends, junction_breakends
from ..mock import mock_annotation


@pytest.fixture
def breakends():
    return index_breakends(junction_breakends('1') + insertion_site_breakends('1'))


@pytest.fixture
def annotation():
    extra = exon_records([('s1', 7000, 7500)], '1', 'TXS', 'g4', 'GENES')
    return mock_annotation(extra)


def records(breakends, names, transcripts=('TX1',)):
    return {
        name: BreakendRecord(breakends[name], transcripts=frozenset(transcripts))
        for name in names
    }


class TestScoreTranscripts:
    def test_pairs_counted_once(self, breakends, annotation):
        scores = score_transcripts(records(breakends, 'ABCD'), annotation)
        assert scores == {'TX1': TranscriptScore('TX1', 2, 4, 0.5)}

    def test_pair_with_single_breakend(self, breakends, annotation):
        scores = score_transcripts(records(breakends, 'AD'), annotation)
        assert scores['TX1'].observed == 2
        assert scores['TX1'].score == 0.5

    def test_more_evidence_never_lowers_score(self, breakends, annotation):
        fewer = score_transcripts(records(breakends, 'AB'), annotation)
        more = score_transcripts(records(breakends, 'ABCD'), annotation)
        assert fewer['TX1'].score == 0.25
        assert more['TX1'].score >= fewer['TX1'].score

    def test_capped(self, annotation):
        pairs = []
        for i in range(5):
            pos = 1000 * (i + 1)
            pairs.extend(breakend_pair(f'x{i}', '1', pos, f'y{i}', '1', pos + 100))
        breakends = index_breakends(pairs)
        scores = score_transcripts(records(breakends, breakends), annotation)
        assert scores['TX1'].observed == 5
        assert scores['TX1'].score == 1.0

    def test_single_exon_transcript(self, breakends, annotation):
        scores = score_transcripts(records(breakends, 'AB', ['TXS']), annotation)
        assert scores['TXS'] == TranscriptScore('TXS', 1, 0, 0.0)

    def test_unknown_transcript(self, breakends, annotation):
        with pytest.raises(KeyError):
            score_transcripts(records(breakends, 'AB', ['TXZ']), annotation)


class TestPassingTranscripts:
    def test_inclusive_threshold(self):
        scores = {
            'TX1': TranscriptScore('TX1', 2, 4, 0.5),
            'TX2': TranscriptScore('TX2', 1, 4, 0.25),
        }
        assert passing_transcripts(scores, 0.5) == {'TX1'}
        assert passing_transcripts(scores, 0.25) == {'TX1', 'TX2'}
        assert passing_transcripts(scores, 0.6) == set()
        assert passing_transcripts(scores, 0) == {'TX1', 'TX2'}


class TestFilterByTranscripts:
    def test_narrow(self, breakends):
        junctions = records(breakends, 'AB', ['TX1', 'TX2'])
        junctions.update(records(breakends, 'CD', ['TX2']))
        result = filter_by_transcripts(junctions, {'TX1'})
        assert sorted(result) == ['A', 'B']
        assert result['A'].transcripts == {'TX1'}

    def test_nothing_passed(self, breakends):
        assert filter_by_transcripts(records(breakends, 'AB'), set()) == {}


class TestFlagValidated:
    def test_flags(self, breakends):
        insertion_sites = records(breakends, 'E', ['TX1', 'TXB'])
        insertion_sites['F'] = BreakendRecord(breakends['F'])
        result = flag_validated(insertion_sites, {'TX1'})
        assert result['E'].transcripts_validated == {'TX1': True, 'TXB': False}
        assert result['E'].junction_validated
        assert result['F'].transcripts_validated == {}
        assert not result['F'].junction_validated
