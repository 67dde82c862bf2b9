"""
module which holds all functions relating to loading the input files
"""
import json
import os
from typing import Dict, List

import pandas as pd
from snakemake.utils import validate as snakemake_validate

from .constants import GIEMSA_STAIN
from .error import InputFileError
from .records import AlignmentRecord, RecordStore
from .types import Cytoband, Cytobands, HighlightRegions
from .util import logger

SCHEMA_DIR = os.path.join(os.path.dirname(__file__), 'schemas')


def _load_json(filename: str, schema: str) -> Dict:
    try:
        with open(filename) as fh:
            data = json.load(fh)
    except OSError as err:
        raise InputFileError(f'cannot read the file: {err.strerror}', filename)
    except json.JSONDecodeError as err:
        raise InputFileError(f'cannot parse the json content: {err.msg}', filename, err.lineno)
    try:
        snakemake_validate(data, os.path.join(SCHEMA_DIR, schema))
    except Exception as err:
        short_msg = '. '.join(
            [line for line in str(err).split('\n') if line.strip()][:3]
        )  # these can get super long
        raise InputFileError(short_msg, filename)
    return data


def load_ctgmap(filename: str) -> RecordStore:
    """
    loads the alignment records and the sequence length tables from a json file of the form

    .. code-block:: json

        {
            "records": [
                {
                    "t_name": "chr1", "ts": 0, "te": 1000, "q_name": "ctgA", "qs": 0, "qe": 1000,
                    "ctg_len": 1500, "orientation": 0, "ctg_orientation": 0,
                    "t_dup": false, "t_ovlp": false, "q_dup": false, "q_ovlp": false
                }
            ],
            "target_length": [[0, "chr1", 1000]],
            "query_length": [[0, "ctgA", 1500]]
        }

    Args:
        filename: path to the input json file

    Raises:
        InputFileError: the file cannot be read, parsed or does not follow the format above
        MissingLengthError: a record refers to a sequence absent from the length tables
    """
    data = _load_json(filename, 'ctgmap.json')
    records = [AlignmentRecord.from_dict(row) for row in data['records']]
    try:
        store = RecordStore(records, data['target_length'], data['query_length'])
    except ValueError as err:
        raise InputFileError(str(err), filename)
    logger.info(
        f'loaded {len(store.records)} alignment records, {len(store.target_lengths)} targets '
        f'and {len(store.query_lengths)} query contigs from {filename}'
    )
    return store


def load_cytobands(filename: str) -> Cytobands:
    """
    loads the cytobands of the target sequences. Json files are expected to be of the form

    .. code-block:: json

        {"cytobands": {"chr1": [[0, 2300000, "p36.33", "gneg"], [2300000, 5400000, "p36.32", "gpos25"]]}}

    any other file is read as a UCSC cytoband file: tab-delimited, without a header, 0-indexed
    with [start,end) style, with the columns

    1. name
    2. start
    3. end
    4. band_name
    5. giemsa_stain

    for example

    .. code-block:: text

        chr1    0   2300000 p36.33  gneg
        chr1    2300000 5400000 p36.32  gpos25

    Returns:
        the bands by target name, in file order
    """
    cytobands: Cytobands = {}
    if filename.lower().endswith('.json'):
        data = _load_json(filename, 'cytobands.json')
        for name, bands in data['cytobands'].items():
            cytobands[name] = [Cytoband(*band) for band in bands]
        logger.info(f'loaded cytobands for {len(cytobands)} targets from {filename}')
        return cytobands

    header = ['name', 'start', 'end', 'band_name', 'giemsa_stain']
    try:
        df = pd.read_csv(
            filename,
            sep='\t',
            dtype={
                'start': int,
                'end': int,
                'name': str,
                'band_name': str,
                'giemsa_stain': str,
            },
            names=header,
            comment='#',
        )
    except pd.errors.EmptyDataError:
        return cytobands
    except (OSError, ValueError) as err:
        raise InputFileError(f'cannot parse the cytoband file: {err}', filename)
    try:
        df['giemsa_stain'].apply(lambda v: GIEMSA_STAIN.enforce(v))
    except KeyError as err:
        raise InputFileError(f'unexpected giemsa stain: {err.args[0]}', filename)

    for row in df.to_dict('records'):
        cytobands.setdefault(row['name'], []).append(
            Cytoband(row['start'], row['end'], row['band_name'], row['giemsa_stain'])
        )
    logger.info(f'loaded cytobands for {len(cytobands)} targets from {filename}')
    return cytobands


def read_bed_columns(filename: str, header: List[str], dtype: Dict) -> pd.DataFrame:
    """
    reads the leading columns of a tab-delimited bed file. Lines starting with '#' and blank
    lines are skipped and any trailing columns are ignored

    Raises:
        InputFileError: the file cannot be read or a line is missing a column or has a non-integer position
    """
    try:
        df = pd.read_csv(
            filename,
            sep='\t',
            header=None,
            names=header,
            usecols=list(range(len(header))),
            index_col=False,
            dtype={k: str for k in header},
            comment='#',
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame({col: pd.Series(dtype=dtype.get(col, str)) for col in header})
    except (OSError, ValueError) as err:
        raise InputFileError(f'cannot parse the bed file: {err}', filename)

    for row in df.itertuples(index=False):
        for col, value in zip(header, row):
            if pd.isnull(value):
                raise InputFileError(f'missing the {col} column: {list(row)}', filename)
            if dtype.get(col) is int:
                try:
                    int(value)
                except ValueError:
                    raise InputFileError(f'the {col} column is not an integer: {list(row)}', filename)
    return df.astype(dtype)


def load_highlight_regions(filename: str) -> HighlightRegions:
    """
    reads the regions to highlight on the targets from a bed file

    .. code-block:: text

        #chrom  start   end
        chr1    1000000 1500000 any other columns

    Returns:
        (start, end) intervals by target name, in file order
    """
    df = read_bed_columns(filename, ['chrom', 'start', 'end'], {'chrom': str, 'start': int, 'end': int})
    regions: HighlightRegions = {}
    for row in df.to_dict('records'):
        regions.setdefault(row['chrom'], []).append((row['start'], row['end']))
    logger.info(f'loaded {len(df)} highlight regions from {filename}')
    return regions
