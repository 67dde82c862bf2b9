"""
Places the targets, and the query contigs assigned to them, along a single shared base-coordinate axis
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .assign import PrimaryAssignment
from .constants import SUMMARY_TARGET, TARGET_PADDING
from .error import MissingLengthError
from .records import AlignmentRecord, RecordStore
from .util import logger


@dataclass(frozen=True)
class LayoutBlock:
    """
    the placement of a single target on the layout axis

    Attributes:
        id: the ordinal id of the target from the target length table
        name: the target name
        length: the target length
        offset: the position of the first base of the target on the layout axis
        width: the length of the axis reserved for the target, including the padding
        records: the primary records aligned against the target
    """

    id: int
    name: str
    length: int
    offset: float
    width: float
    records: Tuple[AlignmentRecord, ...] = field(default=())


@dataclass(frozen=True)
class Layout:
    blocks: Tuple[LayoutBlock, ...]
    total_extent: float
    target_filter: Optional[str] = None

    @property
    def is_single_target(self) -> bool:
        return self.target_filter is not None and self.target_filter != SUMMARY_TARGET

    @property
    def show_overview(self) -> bool:
        return not self.is_single_target

    @property
    def show_details(self) -> bool:
        return self.target_filter != SUMMARY_TARGET

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self):
        return len(self.blocks)


def primary_query_extent(store: RecordStore, records: List[AlignmentRecord]) -> int:
    """
    Sum the lengths of the distinct query contigs among a list of records

    Example:
        two records of a 1500bp contig and one record of a 500bp contig give 2000
    """
    seen = set()
    extent = 0
    for record in records:
        if record.q_name in seen:
            continue
        seen.add(record.q_name)
        extent += store.query_length(record.q_name)
    return extent


def plan_layout(
    store: RecordStore,
    assignment: PrimaryAssignment,
    target_filter: Optional[str] = None,
    padding: float = TARGET_PADDING,
) -> Layout:
    """
    Compute the global offset of every target, left to right in target table order

    Each target reserves enough of the axis to fit the larger of itself and the summed
    length of its primary query contigs, followed by a fixed padding

    Args:
        store: the records and length tables
        assignment: the primary assignment of the query contigs
        target_filter: the name of the only target to lay out. The special value 'summary' keeps all targets
        padding: the number of bases separating adjacent targets

    Returns:
        the layout blocks and the total extent of the axis
    """
    blocks = []
    offset = 0.0
    for entry in store.target_lengths:
        if target_filter is not None and target_filter != SUMMARY_TARGET and target_filter != entry.name:
            continue
        records = assignment.records_on(entry.name)
        width = max(entry.length, primary_query_extent(store, records)) + padding
        blocks.append(
            LayoutBlock(
                id=entry.id,
                name=entry.name,
                length=entry.length,
                offset=offset,
                width=width,
                records=tuple(records),
            )
        )
        offset += width

    if target_filter is not None and target_filter != SUMMARY_TARGET and not blocks:
        raise MissingLengthError('target', target_filter)
    logger.info(f'laid out {len(blocks)} targets over {offset:.0f} bases')
    return Layout(blocks=tuple(blocks), total_extent=offset, target_filter=target_filter)
