"""
Merges the bed intervals of several labelled input files (for example one per haplotype) and
reports, for each group of overlapping intervals, how many labels contribute to it
"""
from typing import Dict, Iterable, List, NamedTuple, Tuple

from .error import InputFileError
from .file_io import read_bed_columns
from .util import logger


class LabelledInterval(NamedTuple):
    start: int
    end: int
    label: str
    annotation: str


class IntervalGroup(NamedTuple):
    start: int
    end: int
    members: List[LabelledInterval]

    def label_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for member in self.members:
            counts[member.label] = counts.get(member.label, 0) + 1
        return counts


def load_input_list(filename: str) -> List[Tuple[str, str]]:
    """
    reads the list of labelled inputs, one tab-delimited ``label  path`` pair per line
    """
    df = read_bed_columns(filename, ['label', 'path'], {'label': str, 'path': str})
    return [(row['label'], row['path']) for row in df.to_dict('records')]


def load_labelled_intervals(inputs: Iterable[Tuple[str, str]]) -> Dict[str, List[LabelledInterval]]:
    """
    reads the intervals of every input bed file. Each line must have at least the four columns
    chrom, start, end and annotation

    Returns:
        the intervals by chromosome
    """
    intervals: Dict[str, List[LabelledInterval]] = {}
    for label, path in inputs:
        df = read_bed_columns(
            path,
            ['chrom', 'start', 'end', 'annotation'],
            {'chrom': str, 'start': int, 'end': int, 'annotation': str},
        )
        for row in df.to_dict('records'):
            intervals.setdefault(row['chrom'], []).append(
                LabelledInterval(row['start'], row['end'], label, row['annotation'])
            )
        logger.info(f'loaded {len(df)} intervals labelled {label} from {path}')
    return intervals


def group_intervals(intervals: Iterable[LabelledInterval]) -> List[IntervalGroup]:
    """
    sweep the intervals by start position, grouping those which overlap or touch. For example
    the intervals 0-10, 10-20 and 30-40 form the two groups 0-20 and 30-40
    """
    groups: List[IntervalGroup] = []
    current: List[LabelledInterval] = []
    current_start = current_end = 0
    for interval in sorted(intervals):
        if current and current_end < interval.start:
            groups.append(IntervalGroup(current_start, current_end, current))
            current = []
        if not current:
            current_start, current_end = interval.start, interval.end
        current.append(interval)
        current_end = max(current_end, interval.end)
    if current:
        groups.append(IntervalGroup(current_start, current_end, current))
    return groups


def format_groups(chrom: str, groups: Iterable[IntervalGroup]) -> List[str]:
    """
    the output bed lines of the groups on a chromosome. Each group is written as a
    ``merged:<labels>:<intervals>`` line followed by one line per member interval
    """
    lines = []
    for group in groups:
        if group.start > group.end:
            continue
        counts = group.label_counts()
        lines.append(f'{chrom}\t{group.start}\t{group.end}\tmerged:{len(counts)}:{len(group.members)}')
        for member in group.members:
            lines.append(
                f'{chrom}\t{member.start}\t{member.end}\t{member.label}:{member.annotation}:'
                f'{group.start}-{group.end}:{len(counts)}:{counts[member.label]}'
            )
    return lines


def main(input_list: str, output_path: str) -> str:
    """
    merge the labelled bed files listed in input_list and write the merged intervals to output_path

    Raises:
        InputFileError: an input file cannot be read or is malformed
    """
    inputs = load_input_list(input_list)
    if not inputs:
        raise InputFileError('no input bed files listed', input_list)
    intervals = load_labelled_intervals(inputs)

    lines = []
    for chrom in sorted(intervals):
        groups = group_intervals(intervals[chrom])
        logger.info(f'{chrom}: {len(intervals[chrom])} intervals in {len(groups)} merged groups')
        lines.extend(format_groups(chrom, groups))

    logger.info(f'writing: {output_path}')
    with open(output_path, 'w') as fh:
        for line in lines:
            fh.write(line + '\n')
    return output_path
