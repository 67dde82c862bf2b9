"""
Helper classes for type hints
"""
from typing import Dict, List, NamedTuple, Tuple


class Cytoband(NamedTuple):
    start: int
    end: int
    name: str
    stain: str


Cytobands = Dict[str, List[Cytoband]]
HighlightRegions = Dict[str, List[Tuple[int, int]]]
