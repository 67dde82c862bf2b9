import re
from typing import Iterable, Tuple

import svgwrite


def element_id(name: str, prefix: str = '') -> str:
    """
    builds an svg element id from a sequence name, replacing characters not allowed in an id.
    Names which do not start with a letter (ex. '1') are prefixed with an underscore

    Example:
        >>> element_id('chr1 (alt)', 'overview_')
        'overview_chr1__alt_'
        >>> element_id('1')
        '_1'
    """
    result = prefix + re.sub(r'[^\w.\-]', '_', name)
    if not re.match(r'^[a-zA-Z_]', result):
        result = '_' + result
    return result


def format_coordinate(value: float, precision: int = 4) -> str:
    return '{:.{}f}'.format(value, precision)


def line_path(start: float, end: float, y: float, precision: int = 4) -> str:
    """
    path data of a horizontal line

    Example:
        >>> line_path(0, 10.5, 6)
        'M 0.0000 6.0000 L 10.5000 6.0000'
    """
    y = format_coordinate(y, precision)
    return 'M {} {} L {} {}'.format(format_coordinate(start, precision), y, format_coordinate(end, precision), y)


def polygon_path(points: Iterable[Tuple[float, float]], precision: int = 4) -> str:
    """
    path data of a closed polygon

    Example:
        >>> polygon_path([(0, 0), (1, 0), (1, 1)])
        'M 0.0000 0.0000 L 1.0000 0.0000 L 1.0000 1.0000 Z'
    """
    commands = []
    for i, (x, y) in enumerate(points):
        commands.append('{} {} {}'.format(
            'L' if i else 'M', format_coordinate(x, precision), format_coordinate(y, precision)
        ))
    commands.append('Z')
    return ' '.join(commands)


class Tag(svgwrite.base.BaseElement):

    def __init__(self, elementname, content='', **kwargs):
        self.elementname = elementname
        super(Tag, self).__init__(**kwargs)
        self.content = content

    def get_xml(self):
        xml = super(Tag, self).get_xml()
        xml.text = self.content
        return xml
