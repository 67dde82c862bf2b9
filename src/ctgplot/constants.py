"""
module responsible for small utility functions and constants used throughout the ctgplot package
"""
import argparse

PROGNAME: str = 'ctgplot'
EXIT_OK: int = 0
EXIT_ERROR: int = 1


class Namespace:
    """
    Holds a fixed vocabulary of module constants, accessed as attributes

    Example:
        >>> OUTPUT = Namespace(SVG='svg', HTML='html')
        >>> OUTPUT.SVG
        'svg'
        >>> 'SVG' in OUTPUT
        True
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_defns', {})
        for attr, value in kwargs.items():
            self.add(attr, value)

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)
        try:
            return self._members[attr]
        except KeyError:
            raise AttributeError(attr)

    def __setattr__(self, attr, value):
        raise AttributeError('constants are added with Namespace.add', attr)

    def __contains__(self, attr):
        return attr in self._members

    def __iter__(self):
        return iter(self._members)

    def add(self, attr, value, defn=None):
        """
        Add a constant, with an optional description used in help messages

        Raises:
            AttributeError: the constant already exists
        """
        if attr in self._members:
            raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
        self._members[attr] = value
        if defn:
            self._defns[attr] = defn

    def define(self, attr, default=None):
        """
        the description given for a constant, or the default when it has none
        """
        return self._defns.get(attr, default)

    def items(self):
        return list(self._members.items())

    def keys(self):
        return list(self._members)

    def values(self):
        return list(self._members.values())

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value is not a member of the namespace

        Example:
            >>> Namespace(SVG='svg', HTML='html').enforce('svg')
            'svg'
        """
        if value not in self._members.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value


def float_positive(num):
    """
    cast input to a float, must be greater than zero

    Raises:
        argparse.ArgumentTypeError: if the input cannot be cast to a float or is not positive
    """
    try:
        num = float(num)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a number greater than 0')
    if num <= 0:
        raise argparse.ArgumentTypeError('Must be a number greater than 0')
    return num


SUBCOMMAND = Namespace(PLOT='plot', MERGE='merge')
""":class:`Namespace`: the subcommands of the command line interface"""

OUTPUT_FORMAT = Namespace(SVG='svg', HTML='html')
""":class:`Namespace`: the file formats the alignment plot may be written as"""

STRAND = Namespace(POS=0, NEG=1)
"""
:class:`Namespace`: holds controlled vocabulary for the 0/1 strand flags of the alignment records

- ``POS``: forward strand
- ``NEG``: reverse strand
"""

GIEMSA_STAIN = Namespace(
    GNEG='gneg',
    GPOS25='gpos25',
    GPOS33='gpos33',
    GPOS50='gpos50',
    GPOS66='gpos66',
    GPOS75='gpos75',
    GPOS100='gpos100',
    ACEN='acen',
    GVAR='gvar',
    STALK='stalk',
)
""":class:`Namespace`: holds controlled vocabulary relating to stains of chromosome bands"""

SUMMARY_TARGET: str = 'summary'
"""the target selector value which restricts the plot to the genome-wide overview"""

TARGET_PADDING: float = 1.5e6
"""number of bases added after every target block on the layout axis"""

DETAIL_MAGNIFICATION: float = 12.0
"""magnification of the per-target detail views relative to the overview scale"""

NOT_APPLICABLE: str = 'N/A'
