"""
Converts alignment records into drawable geometry

All positions returned here are in drawing units: base positions on the layout axis
multiplied by the scaling factor of the pass being drawn
"""
import hashlib
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from ..constants import STRAND
from ..records import AlignmentRecord, RecordStore
from .constants import CONTIG_PALETTE


def contig_color(q_name: str, palette: Sequence[str] = CONTIG_PALETTE) -> str:
    """
    Pick the palette color of a query contig from a digest of its name

    The digest does not depend on the interpreter hash seed so a contig keeps its color
    across the overview and detail views and across separate runs
    """
    digest = hashlib.md5(q_name.encode('utf8')).digest()
    return palette[int.from_bytes(digest[:8], 'big') % len(palette)]


def scaling_factor(panel_width: float, total_extent: float, plot_fraction: float = 0.8) -> float:
    """
    the number of drawing units per base

    Raises:
        ValueError: the extent is not positive
    """
    if total_extent <= 0:
        raise ValueError('cannot scale a plot with a non-positive extent', total_extent)
    return panel_width * plot_fraction / total_extent


def select_representatives(records: Iterable[AlignmentRecord]) -> List[AlignmentRecord]:
    """
    Keep the record with the longest query span for each query contig (the first one wins ties)
    and sort them by their target start

    Returns:
        one record per query contig, by ascending target start
    """
    best: Dict[str, AlignmentRecord] = {}
    for record in records:
        current = best.get(record.q_name)
        if current is None or current.query_span < record.query_span:
            best[record.q_name] = record
    return sorted(best.values(), key=lambda r: r.ts)


@dataclass(frozen=True)
class ContigPlacement:
    """
    the placement of a query contig inside its primary target block

    Attributes:
        q_name: the query contig name
        offset: the number of bases between the block start and the contig start
        length: the query contig length
        ctg_orientation: the contig orientation of the representative record
    """

    q_name: str
    offset: float
    length: int
    ctg_orientation: int


def place_contigs(store: RecordStore, records: Iterable[AlignmentRecord]) -> Dict[str, ContigPlacement]:
    """
    Assign non-overlapping offsets to the query contigs of a target block. The contigs are
    packed left to right in the order of their representative records
    """
    placements: Dict[str, ContigPlacement] = {}
    q_offset = 0.0
    for record in select_representatives(records):
        q_len = store.query_length(record.q_name)
        placements[record.q_name] = ContigPlacement(
            q_name=record.q_name, offset=q_offset, length=q_len, ctg_orientation=record.ctg_orientation
        )
        q_offset += q_len
    return placements


def project_query_interval(
    qs: int, qe: int, q_len: int, orientation: int, ctg_orientation: int
) -> Tuple[int, int]:
    """
    Orient the query interval of an alignment along its contig's placement

    The interval is reflected onto the reverse strand when the contig is placed in reverse,
    then swapped when the alignment strand disagrees with the contig strand

    Example:
        >>> project_query_interval(100, 200, 1000, 1, 1)
        (800, 900)
        >>> project_query_interval(100, 200, 1000, 1, 0)
        (200, 100)
    """
    if ctg_orientation == STRAND.NEG:
        qs, qe = q_len - qe, q_len - qs
    if orientation != ctg_orientation:
        qs, qe = qe, qs
    return qs, qe


def project_alternate_interval(record: AlignmentRecord, q_len: int, ctg_orientation: int) -> Tuple[int, int]:
    """
    Position an alternate-target alignment along a contig placed with the given orientation

    a record at 100-300 of a 1000bp contig placed in reverse is drawn at 700-900
    """
    if ctg_orientation == STRAND.NEG:
        return q_len - record.qe, q_len - record.qs
    return record.qs, record.qe


@dataclass(frozen=True)
class Ribbon:
    """
    the quadrilateral connecting the target interval of an alignment to its query interval

    Attributes:
        record: the alignment drawn
        ts: the scaled target start
        te: the scaled target end
        qs: the scaled, oriented query start
        qe: the scaled, oriented query end
        color: the fill color
    """

    record: AlignmentRecord
    ts: float
    te: float
    qs: float
    qe: float
    color: str

    def points(self, top: float, bottom: float) -> List[Tuple[float, float]]:
        return [(self.ts, top), (self.te, top), (self.qe, bottom), (self.qs, bottom)]


def project_record(
    record: AlignmentRecord,
    q_len: int,
    query_offset: float,
    target_offset: float,
    scale: float,
    palette: Sequence[str] = CONTIG_PALETTE,
) -> Ribbon:
    """
    Project a single alignment record into scaled ribbon coordinates

    Args:
        record: the alignment
        q_len: the length of the query contig
        query_offset: the offset of the query contig within its target block
        target_offset: the offset of the target block on the axis being drawn
        scale: drawing units per base
    """
    qs, qe = project_query_interval(record.qs, record.qe, q_len, record.orientation, record.ctg_orientation)
    return Ribbon(
        record=record,
        ts=(record.ts + target_offset) * scale,
        te=(record.te + target_offset) * scale,
        qs=(qs + target_offset + query_offset) * scale,
        qe=(qe + target_offset + query_offset) * scale,
        color=contig_color(record.q_name, palette),
    )


def generate_ribbons(
    store: RecordStore,
    records: Iterable[AlignmentRecord],
    placements: Dict[str, ContigPlacement],
    target_offset: float,
    scale: float,
    palette: Sequence[str] = CONTIG_PALETTE,
) -> List[Ribbon]:
    """
    Project the records of a target block. Records which are duplicates on both the target
    and the query produce no ribbon

    Returns:
        ribbons in the same order as the input records
    """
    ribbons = []
    for record in records:
        if record.is_double_duplicate:
            continue
        ribbons.append(
            project_record(
                record,
                store.query_length(record.q_name),
                placements[record.q_name].offset,
                target_offset,
                scale,
                palette,
            )
        )
    return ribbons


def scaled_interval(start: float, end: float, offset: float, scale: float) -> Tuple[float, float]:
    return (offset + start) * scale, (offset + end) * scale

