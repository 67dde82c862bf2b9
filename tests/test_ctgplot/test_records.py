import pytest

from ctgplot.error import MissingLengthError
from ctgplot.records import AlignmentRecord, RecordStore

from .mock import build_record, build_store


class TestAlignmentRecord:
    def test_from_dict(self):
        record = AlignmentRecord.from_dict({
            't_name': 'chr1', 'ts': 10, 'te': 20, 'q_name': 'ctgA', 'qs': 30, 'qe': 40, 'ctg_len': 100,
            'orientation': 1, 'ctg_orientation': 0,
            't_dup': False, 't_ovlp': True, 'q_dup': False, 'q_ovlp': False,
        })
        assert record.t_name == 'chr1'
        assert record.ts == 10
        assert record.qe == 40
        assert record.orientation == 1
        assert record.t_ovlp

    def test_query_span(self):
        assert build_record(qs=100, qe=350).query_span == 250

    def test_strand_symbol(self):
        assert build_record().strand_symbol == '+'
        assert build_record(orientation=1).strand_symbol == '-'

    def test_double_duplicate(self):
        assert build_record(t_dup=True, q_dup=True).is_double_duplicate
        assert not build_record(t_dup=True).is_double_duplicate
        assert not build_record(q_dup=True).is_double_duplicate


class TestRecordStore:
    def test_length_tables_sorted_by_id(self):
        store = RecordStore([], [(2, 'chrX', 10), (0, 'chr1', 30), (1, 'chr2', 20)], [])
        assert [e.name for e in store.target_lengths] == ['chr1', 'chr2', 'chrX']
        assert store.target_length('chr2') == 20

    def test_missing_target(self):
        with pytest.raises(MissingLengthError) as err:
            build_store([build_record(t_name='chr9')], {'chr1': 100}, {'ctgA': 100})
        assert err.value.table == 'target'
        assert err.value.name == 'chr9'

    def test_missing_query(self):
        with pytest.raises(MissingLengthError) as err:
            build_store([build_record(q_name='ctgZ')], {'chr1': 100}, {'ctgA': 100})
        assert err.value.table == 'query'
        assert 'ctgZ' in str(err.value)

    def test_missing_length_is_key_error(self):
        store = build_store([], {'chr1': 100}, {})
        with pytest.raises(KeyError):
            store.query_length('ctgA')

    def test_duplicate_name(self):
        with pytest.raises(ValueError):
            RecordStore([], [(0, 'chr1', 10), (1, 'chr1', 10)], [])

    def test_len(self):
        store = build_store([build_record(), build_record(ts=200, te=300)], {'chr1': 1000}, {'ctgA': 1000})
        assert len(store) == 2
