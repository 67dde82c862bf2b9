"""
holds the alignment records of a run and the target/query sequence length tables
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Sequence

from .constants import STRAND
from .error import MissingLengthError


@dataclass(frozen=True)
class AlignmentRecord:
    """
    a single precomputed contig (query) to reference (target) alignment

    coordinates are 0-based half-open on both the target and the query
    """

    t_name: str
    ts: int
    te: int
    q_name: str
    qs: int
    qe: int
    ctg_len: int
    orientation: int
    ctg_orientation: int
    t_dup: bool
    t_ovlp: bool
    q_dup: bool
    q_ovlp: bool

    @classmethod
    def from_dict(cls, row: Dict) -> 'AlignmentRecord':
        return cls(
            t_name=row['t_name'],
            ts=int(row['ts']),
            te=int(row['te']),
            q_name=row['q_name'],
            qs=int(row['qs']),
            qe=int(row['qe']),
            ctg_len=int(row['ctg_len']),
            orientation=int(row['orientation']),
            ctg_orientation=int(row['ctg_orientation']),
            t_dup=bool(row['t_dup']),
            t_ovlp=bool(row['t_ovlp']),
            q_dup=bool(row['q_dup']),
            q_ovlp=bool(row['q_ovlp']),
        )

    @property
    def query_span(self) -> int:
        return abs(self.qe - self.qs)

    @property
    def is_double_duplicate(self) -> bool:
        """True when the alignment is a duplicate on both the target and the query"""
        return self.t_dup and self.q_dup

    @property
    def strand_symbol(self) -> str:
        return '+' if self.orientation == STRAND.POS else '-'


class SequenceLength(NamedTuple):
    id: int
    name: str
    length: int


def _build_length_table(table: str, entries: Iterable[Sequence]) -> List[SequenceLength]:
    result = sorted(SequenceLength(int(e[0]), str(e[1]), int(e[2])) for e in entries)
    seen = set()
    for entry in result:
        if entry.name in seen:
            raise ValueError(f'duplicate name in the {table} length table: {entry.name}')
        seen.add(entry.name)
    return result


class RecordStore:
    """
    Read-only container for the parsed alignment records and the sequence length tables

    The length tables are sorted by ordinal id on construction. This order fixes the
    left-to-right placement of the targets in the plot.

    Raises:
        MissingLengthError: a record refers to a target or query absent from the length tables
        ValueError: a sequence name is listed more than once in a length table
    """

    def __init__(
        self,
        records: Iterable[AlignmentRecord],
        target_lengths: Iterable[Sequence],
        query_lengths: Iterable[Sequence],
    ):
        self.records: List[AlignmentRecord] = list(records)
        self.target_lengths: List[SequenceLength] = _build_length_table('target', target_lengths)
        self.query_lengths: List[SequenceLength] = _build_length_table('query', query_lengths)
        self._target_length_by_name = {e.name: e.length for e in self.target_lengths}
        self._query_length_by_name = {e.name: e.length for e in self.query_lengths}

        for record in self.records:
            self.target_length(record.t_name)
            self.query_length(record.q_name)

    def target_length(self, name: str) -> int:
        try:
            return self._target_length_by_name[name]
        except KeyError:
            raise MissingLengthError('target', name)

    def query_length(self, name: str) -> int:
        try:
            return self._query_length_by_name[name]
        except KeyError:
            raise MissingLengthError('query', name)

    def __len__(self):
        return len(self.records)
