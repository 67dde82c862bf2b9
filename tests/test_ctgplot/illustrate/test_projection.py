import pytest

from ctgplot.illustrate.constants import CONTIG_PALETTE
from ctgplot.illustrate.projection import (
    contig_color,
    generate_ribbons,
    place_contigs,
    project_alternate_interval,
    project_query_interval,
    project_record,
    scaling_factor,
    select_representatives,
)

from ..mock import build_record, build_store


class TestContigColor:
    def test_palette_size(self):
        assert len(CONTIG_PALETTE) == 97
        assert len(set(CONTIG_PALETTE)) == 97

    def test_stable(self):
        assert contig_color('ctgA') == contig_color('ctgA')
        assert contig_color('ctgA') in CONTIG_PALETTE

    def test_custom_palette(self):
        assert contig_color('ctgA', ['#123456']) == '#123456'


class TestScalingFactor:
    def test_scale(self):
        assert scaling_factor(1400, 1120) == pytest.approx(1.0)
        assert scaling_factor(1400, 2000, plot_fraction=0.5) == pytest.approx(0.35)

    def test_empty_extent(self):
        with pytest.raises(ValueError):
            scaling_factor(1400, 0)


class TestSelectRepresentatives:
    def test_longest_span_per_query(self):
        records = [
            build_record(ts=500, te=600, q_name='ctgA', qs=0, qe=100),
            build_record(ts=0, te=300, q_name='ctgA', qs=100, qe=400),
            build_record(ts=200, te=300, q_name='ctgB', qs=0, qe=100),
        ]
        result = select_representatives(records)
        assert [(r.q_name, r.ts) for r in result] == [('ctgA', 0), ('ctgB', 200)]

    def test_tie_keeps_first(self):
        first = build_record(ts=500, te=600, qs=0, qe=100)
        second = build_record(ts=0, te=100, qs=200, qe=300)
        assert select_representatives([first, second]) == [first]


class TestPlaceContigs:
    def test_packed_by_target_start(self):
        store = build_store(
            [
                build_record('chr1', 600, 700, 'ctgA', 0, 100),
                build_record('chr1', 0, 100, 'ctgB', 0, 100, ctg_orientation=1),
            ],
            {'chr1': 1000},
            {'ctgA': 300, 'ctgB': 500},
        )
        placements = place_contigs(store, store.records)
        assert list(placements) == ['ctgB', 'ctgA']
        assert placements['ctgB'].offset == 0
        assert placements['ctgB'].ctg_orientation == 1
        assert placements['ctgA'].offset == 500
        assert placements['ctgA'].length == 300


class TestProjectQueryInterval:
    def test_forward(self):
        assert project_query_interval(100, 200, 1000, 0, 0) == (100, 200)

    def test_reverse_contig_reverse_alignment(self):
        assert project_query_interval(100, 200, 1000, 1, 1) == (800, 900)

    def test_forward_contig_reverse_alignment(self):
        assert project_query_interval(100, 200, 1000, 1, 0) == (200, 100)

    def test_reverse_contig_forward_alignment(self):
        assert project_query_interval(100, 200, 1000, 0, 1) == (900, 800)


class TestProjectAlternateInterval:
    def test_forward(self):
        assert project_alternate_interval(build_record(qs=100, qe=300), 1000, 0) == (100, 300)

    def test_reverse(self):
        assert project_alternate_interval(build_record(qs=100, qe=300), 1000, 1) == (700, 900)


class TestProjectRecord:
    def test_reverse_alignment(self):
        record = build_record('chr1', 800, 1000, 'ctgA', 900, 1100, orientation=1)
        ribbon = project_record(record, 1500, query_offset=0, target_offset=0, scale=1)
        assert (ribbon.ts, ribbon.te, ribbon.qs, ribbon.qe) == (800, 1000, 1100, 900)
        assert ribbon.points(10, 90) == [(800, 10), (1000, 10), (900, 90), (1100, 90)]
        assert ribbon.color == contig_color('ctgA')

    def test_offsets_and_scale(self):
        record = build_record('chr1', 10, 20, 'ctgA', 0, 10)
        ribbon = project_record(record, 100, query_offset=50, target_offset=1000, scale=0.5)
        assert (ribbon.ts, ribbon.te) == (505, 510)
        assert (ribbon.qs, ribbon.qe) == (525, 530)


class TestGenerateRibbons:
    def test_skips_double_duplicates(self):
        store = build_store(
            [
                build_record('chr1', 0, 100, 'ctgA', 0, 100),
                build_record('chr1', 100, 200, 'ctgA', 100, 200, t_dup=True, q_dup=True),
                build_record('chr1', 200, 300, 'ctgA', 200, 300, t_dup=True),
                build_record('chr1', 300, 400, 'ctgA', 300, 400, q_dup=True),
            ],
            {'chr1': 1000},
            {'ctgA': 1000},
        )
        placements = place_contigs(store, store.records)
        ribbons = generate_ribbons(store, store.records, placements, 0, 1)
        assert [r.record.ts for r in ribbons] == [0, 200, 300]

    def test_colors_match_contig(self):
        store = build_store(
            [build_record('chr1', 0, 100, 'ctgA', 0, 100), build_record('chr1', 200, 300, 'ctgB', 0, 100)],
            {'chr1': 1000},
            {'ctgA': 1000, 'ctgB': 1000},
        )
        placements = place_contigs(store, store.records)
        for ribbon in generate_ribbons(store, store.records, placements, 0, 1):
            assert ribbon.color == contig_color(ribbon.record.q_name)
