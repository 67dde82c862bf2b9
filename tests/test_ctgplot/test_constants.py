import argparse

import pytest

from ctgplot.constants import GIEMSA_STAIN, OUTPUT_FORMAT, Namespace, float_positive
from ctgplot.illustrate.constants import DEFAULTS


class TestNamespace:
    def test_attribute_access(self):
        nspace = Namespace(thing=1, otherthing=2)
        assert nspace.thing == 1
        assert nspace.keys() == ['thing', 'otherthing']
        assert nspace.values() == [1, 2]
        assert nspace.items() == [('thing', 1), ('otherthing', 2)]
        assert list(nspace) == ['thing', 'otherthing']
        assert 'thing' in nspace
        assert 'blargh' not in nspace

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            Namespace(thing=1).blargh

    def test_read_only(self):
        nspace = Namespace(thing=1)
        with pytest.raises(AttributeError):
            nspace.thing = 2

    def test_add(self):
        nspace = Namespace()
        nspace.add('thing', 1, defn='I am a thing')
        assert nspace.thing == 1
        assert nspace.define('thing') == 'I am a thing'
        assert nspace.define('other', 'nothing') == 'nothing'
        with pytest.raises(AttributeError):
            nspace.add('thing', 2)

    def test_enforce(self):
        assert OUTPUT_FORMAT.enforce('svg') == 'svg'
        assert GIEMSA_STAIN.enforce('acen') == 'acen'
        with pytest.raises(KeyError):
            OUTPUT_FORMAT.enforce('png')

    def test_defaults_defined(self):
        for attr in DEFAULTS:
            assert DEFAULTS.define(attr)


class TestFloatPositive:
    def test_cast(self):
        assert float_positive('1.5') == 1.5

    def test_bad_values(self):
        for value in ['0', '-1', 'x']:
            with pytest.raises(argparse.ArgumentTypeError):
                float_positive(value)
