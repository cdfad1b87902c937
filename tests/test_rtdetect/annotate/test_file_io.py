import pytest

from rtdetect.annotate.file_io import load_annotations
from rtdetect.constants import STRAND
from rtdetect.error import NotSpecifiedError

from ...util import get_data


class TestLoadAnnotations:
    def test_load(self):
        annotation = load_annotations(get_data('mock_exons.tab'))
        assert sorted(annotation.genes) == ['g1', 'g2', 'g3']
        assert annotation.expected_junctions('TX1') == 4
        assert annotation.genes['g2'].strand == STRAND.NEG
        assert annotation.genes['g1'].symbol == 'GENEA'
        assert annotation.exons['b1'].start == 10000
        assert annotation.exons['b1'].end == 10200
        assert annotation.seqlevels == ['1', '2', 'GL000192.1']

    def test_optional_columns(self, tmp_path):
        filename = tmp_path / 'exons.tab'
        filename.write_text(
            'chromosome\tstart\tend\texon_id\ttranscript_name\tgene_id\n'
            'chr1\t100\t200\t1\ttx1\tg1\n'
            'chr1\t300\t400\t2\ttx1\tg1\n'
        )
        annotation = load_annotations(str(filename))
        assert annotation.transcript_gene_symbols('tx1') == {'g1'}
        assert annotation.genes['g1'].strand == STRAND.NS
        assert sorted(annotation.exons) == ['1', '2']

    def test_multiple_files(self, tmp_path):
        filename = tmp_path / 'exons.tab'
        filename.write_text(
            'chromosome\tstart\tend\texon_id\ttranscript_name\tgene_id\tgene_symbol\n'
            '3\t100\t200\tx1\ttx3\tg5\tGENEX\n'
        )
        annotation = load_annotations(get_data('mock_exons.tab'), str(filename))
        assert sorted(annotation.transcripts) == ['TX1', 'TXB', 'TXU', 'tx3']

    def test_missing_column(self, tmp_path):
        filename = tmp_path / 'exons.tab'
        filename.write_text('chromosome\tstart\tend\texon_id\tgene_id\n1\t100\t200\te1\tg1\n')
        with pytest.raises(KeyError):
            load_annotations(str(filename))

    def test_missing_value(self, tmp_path):
        filename = tmp_path / 'exons.tab'
        filename.write_text(
            'chromosome\tstart\tend\texon_id\ttranscript_name\tgene_id\n1\t100\t200\te1\tNone\tg1\n'
        )
        with pytest.raises(NotSpecifiedError):
            load_annotations(str(filename))
