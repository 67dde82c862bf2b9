import os
import shutil
import sys
import tempfile
from unittest.mock import patch

import pytest

from ctgplot.constants import EXIT_ERROR, EXIT_OK, SUBCOMMAND
from ctgplot.main import main
from ctgplot.plot import output_filename

from ..util import get_data, glob_exists

CTGMAP = get_data('ctgmap_two_targets.json')


@pytest.fixture
def output_dir():
    temp_output = tempfile.mkdtemp()
    yield temp_output
    shutil.rmtree(temp_output)


class TestOutputFilename:
    def test_replaces_extension(self):
        assert output_filename('plots/sample.v1', 'svg') == 'plots/sample.svg'

    def test_no_extension(self):
        assert output_filename('plots/sample', 'html') == 'plots/sample.html'


class TestPlotOptions:
    def test_html(self, output_dir):
        prefix = os.path.join(output_dir, 'two_targets')
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, CTGMAP, prefix]):
            returncode = main()
        assert returncode == EXIT_OK
        with open(prefix + '.html') as fh:
            content = fh.read()
        assert content.startswith('<html><body>')
        assert 'id="chr2"' in content

    def test_svg(self, output_dir):
        prefix = os.path.join(output_dir, 'two_targets')
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, CTGMAP, prefix, '--svg']):
            returncode = main()
        assert returncode == EXIT_OK
        assert glob_exists(output_dir, '*.svg')
        assert not glob_exists(output_dir, '*.html')

    def test_all_options(self, output_dir):
        prefix = os.path.join(output_dir, 'nested', 'chr1')
        with patch.object(
            sys,
            'argv',
            [
                'ctgplot',
                SUBCOMMAND.PLOT,
                CTGMAP,
                prefix,
                '--ctg',
                'chr1',
                '--cytoband',
                get_data('cytobands.tab'),
                '--ref_annotation_bed',
                get_data('highlights.bed'),
                '--panel_width',
                '700',
                '--total_target_bases',
                '5000',
                '--log_level',
                'DEBUG',
            ],
        ):
            returncode = main()
        assert returncode == EXIT_OK
        with open(prefix + '.html') as fh:
            content = fh.read()
        assert 'class="cytoband"' in content
        assert '<title>100-200</title>' in content
        assert 'id="chr2"' not in content

    def test_json_cytobands(self, output_dir):
        prefix = os.path.join(output_dir, 'banded')
        with patch.object(
            sys,
            'argv',
            ['ctgplot', SUBCOMMAND.PLOT, CTGMAP, prefix, '--svg', '--cytoband', get_data('cytobands.json')],
        ):
            returncode = main()
        assert returncode == EXIT_OK
        with open(prefix + '.svg') as fh:
            content = fh.read()
        assert content.count('class="cytoband"') == 2
        assert 'stroke="#FF0"' in content

    def test_log_file(self, output_dir):
        prefix = os.path.join(output_dir, 'two_targets')
        log = os.path.join(output_dir, 'plot.log')
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, CTGMAP, prefix, '--log', log]):
            returncode = main()
        assert returncode == EXIT_OK
        with open(log) as fh:
            content = fh.read()
        assert 'writing: {}.html'.format(prefix) in content

    def test_unknown_target(self, output_dir):
        prefix = os.path.join(output_dir, 'two_targets')
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, CTGMAP, prefix, '--ctg', 'chrZ']):
            returncode = main()
        assert returncode == EXIT_ERROR
        assert not glob_exists(output_dir, 'two_targets.*')

    def test_missing_length(self, output_dir):
        prefix = os.path.join(output_dir, 'missing')
        with patch.object(
            sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, get_data('ctgmap_missing_query.json'), prefix]
        ):
            returncode = main()
        assert returncode == EXIT_ERROR
        assert not glob_exists(output_dir, 'missing.*')

    def test_missing_input(self, output_dir):
        with patch.object(
            sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, get_data('blargh.json'), os.path.join(output_dir, 'x')]
        ):
            try:
                returncode = main()
            except SystemExit as err:
                assert err.code != 0
            else:
                assert returncode != 0


class TestMergeOptions:
    def test_merge(self, output_dir):
        input_list = os.path.join(output_dir, 'inputs.tsv')
        with open(input_list, 'w') as fh:
            fh.write('hap1\t{}\n'.format(get_data('merge_hap1.bed')))
        output = os.path.join(output_dir, 'merged.bed')
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.MERGE, input_list, output]):
            returncode = main()
        assert returncode == EXIT_OK
        with open(output) as fh:
            assert fh.readline() == 'chr1\t100\t300\tmerged:1:2\n'
