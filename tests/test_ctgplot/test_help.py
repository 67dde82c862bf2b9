import sys
from unittest.mock import patch

from ctgplot.constants import SUBCOMMAND
from ctgplot.main import main


class TestHelpMenu:
    def test_main(self):
        with patch.object(sys, 'argv', ['ctgplot', '-h']):
            try:
                returncode = main()
            except SystemExit as err:
                assert err.code == 0
            else:
                assert returncode == 0

    def test_plot(self):
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, '-h']):
            try:
                returncode = main()
            except SystemExit as err:
                assert err.code == 0
            else:
                assert returncode == 0

    def test_merge(self):
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.MERGE, '-h']):
            try:
                returncode = main()
            except SystemExit as err:
                assert err.code == 0
            else:
                assert returncode == 0

    def test_bad_option(self):
        with patch.object(sys, 'argv', ['ctgplot', SUBCOMMAND.PLOT, '--blargh']):
            try:
                returncode = main()
            except SystemExit as err:
                assert err.code != 0
            else:
                assert returncode != 0
