"""
Decides the primary target of every query contig and splits the alignment records into
primary and alternate sets
"""
from typing import Dict, List, Optional

from .records import AlignmentRecord, RecordStore
from .util import logger


class PrimaryAssignment:
    """
    Result of resolving the primary target for each query contig

    Attributes:
        query_to_target: primary target name by query name
        target_to_query: one query name by target name (the last query assigned to the target)
        primary_records: primary records by target name, in input order
        alt_records_by_query: alternate records by query name, in input order
        alt_records_by_target: alternate records by target name, in input order
    """

    def __init__(self):
        self.query_to_target: Dict[str, str] = {}
        self.target_to_query: Dict[str, str] = {}
        self.primary_records: Dict[str, List[AlignmentRecord]] = {}
        self.alt_records_by_query: Dict[str, List[AlignmentRecord]] = {}
        self.alt_records_by_target: Dict[str, List[AlignmentRecord]] = {}

    def primary_target(self, q_name: str) -> Optional[str]:
        return self.query_to_target.get(q_name)

    def is_primary(self, record: AlignmentRecord) -> bool:
        return self.query_to_target.get(record.q_name) == record.t_name

    def records_on(self, t_name: str) -> List[AlignmentRecord]:
        return self.primary_records.get(t_name, [])


def tally_query_coverage(records: List[AlignmentRecord]) -> Dict[str, Dict[str, int]]:
    """
    Sum the aligned query bases of each (query, target) pair, ignoring query duplicates

    Returns:
        aligned bases by target name by query name. Both levels keep first-appearance order
    """
    coverage: Dict[str, Dict[str, int]] = {}
    for record in records:
        if record.q_dup:
            continue
        per_target = coverage.setdefault(record.q_name, {})
        per_target[record.t_name] = per_target.get(record.t_name, 0) + record.query_span
    return coverage


def select_best_target(coverage_by_target: Dict[str, int]) -> Optional[str]:
    """
    Pick the target with the most aligned bases. On ties the target seen first wins

    Example:
        >>> select_best_target({'chr1': 10, 'chr2': 30, 'chr3': 30})
        'chr2'
    """
    best_target = None
    best_coverage = -1
    for t_name, covered in coverage_by_target.items():
        if covered > best_coverage:
            best_target = t_name
            best_coverage = covered
    return best_target


def resolve_primary_assignment(store: RecordStore) -> PrimaryAssignment:
    """
    Assign every query contig to the target receiving the most aligned query bases and
    partition the records into primary and alternate alignments

    Args:
        store: the records and sequence length tables of the run

    Returns:
        the primary assignment of the run
    """
    result = PrimaryAssignment()
    coverage = tally_query_coverage(store.records)

    for q_name, coverage_by_target in coverage.items():
        t_name = select_best_target(coverage_by_target)
        if t_name is None:
            continue
        result.query_to_target[q_name] = t_name
        if t_name in result.target_to_query:
            logger.debug(
                f'target {t_name} is the primary target of both {result.target_to_query[t_name]} and {q_name}; '
                f'keeping {q_name}'
            )
        result.target_to_query[t_name] = q_name

    primary_count = 0
    for record in store.records:
        if result.is_primary(record):
            result.primary_records.setdefault(record.t_name, []).append(record)
            primary_count += 1
        else:
            result.alt_records_by_query.setdefault(record.q_name, []).append(record)
            result.alt_records_by_target.setdefault(record.t_name, []).append(record)

    logger.info(
        f'assigned {len(result.query_to_target)} query contigs to {len(result.primary_records)} targets '
        f'({primary_count} primary, {len(store.records) - primary_count} alternate records)'
    )
    return result
