import errno
import logging
import os
import time
from typing import Dict, Iterable, List, Optional

import pandas as pd
from mavis_config import bash_expands

from .breakend import Breakend
from .constants import (
    BREAKEND_REQUIRED_COLUMNS,
    COLUMNS,
    COMPLETE_STAMP,
    INTEGER_COLUMNS,
    LIST_DELIMITER,
    STRAND,
    sort_columns,
)

logger = logging.getLogger('rtdetect')

NA_VALUES = ['None', 'none', 'N/A', 'n/a', 'null', 'NULL', 'Null', 'nan', '<NA>', 'NaN']


def filepath(path):
    try:
        file_list = bash_expands(path)
    except FileNotFoundError:
        raise TypeError('File does not exist', path)
    else:
        if not file_list:
            raise TypeError('File not found', path)
        elif len(file_list) > 1:
            raise TypeError('File pattern match multiple files and expected only one', path)
    return file_list[0]


def log_arguments(args):
    """
    output the arguments to the console

    Args:
        args (Namespace): the namespace to print arguments for
    """
    logger.info('arguments')

    indent = ' '

    for arg, val in sorted(args.__dict__.items()):
        if isinstance(val, list):
            if len(val) <= 1:
                logger.info(f'{indent}{arg} = {val}')
                continue
            logger.info(f'{indent}{arg} = [')
            for v in val:
                logger.info(f'{indent * 2}{repr(v)}')
            logger.info(f'{indent}]')
        elif any([isinstance(val, typ) for typ in [str, int, float, bool, tuple]]) or val is None:
            logger.info(f'{indent}{arg}= {repr(val)}')
        else:
            logger.info(f'{arg} = {object.__repr__(val)}')


def mkdirp(dirname):
    """
    Make a directory or path of directories. Suppresses the error that is normally raised when the directory already exists
    """
    logger.info(f"creating output directory: '{dirname}'")
    try:
        os.makedirs(dirname)
    except OSError as exc:
        if exc.errno == errno.EEXIST and os.path.isdir(dirname):
            pass
        else:
            raise exc
    return dirname


def join_values(values: Iterable) -> str:
    """
    Example:
        >>> join_values({'b', 'a'})
        'a;b'
    """
    return LIST_DELIMITER.join(sorted(str(v) for v in values))


def output_tabbed_file(rows: List[Dict], filename: str, header=None):
    if header is None:
        custom_header = False
        header = set()
    else:
        custom_header = True
    if not custom_header:
        for row in rows:
            header.update(row.keys())
    header = sort_columns(header)
    logger.info(f'writing: {filename}')
    df = pd.DataFrame.from_records(rows, columns=header)
    df = df.fillna('None')
    df.to_csv(filename, columns=header, index=False, sep='\t')


def generate_complete_stamp(output_dir: str, start_time: Optional[int] = None) -> str:
    """
    writes a complete stamp, optionally including the run time if start_time is given

    Args:
        output_dir: path to the output dir the stamp should be written in
        start_time: the start time

    Return:
        path to the complete stamp

    Example:
        >>> generate_complete_stamp('some_output_dir')
        'some_output_dir/RTDETECT.COMPLETE'
    """
    stamp = os.path.join(output_dir, COMPLETE_STAMP)
    logger.info(f'complete: {stamp}')
    with open(stamp, 'w') as fh:
        if start_time is not None:
            duration = int(time.time()) - start_time
            hours = duration - duration % 3600
            minutes = duration - hours - (duration - hours) % 60
            seconds = duration - hours - minutes
            fh.write(
                'run time (hh/mm/ss): {}:{:02d}:{:02d}\n'.format(
                    hours // 3600, minutes // 60, seconds
                )
            )
            fh.write('run time (s): {}\n'.format(duration))
    return stamp


def read_breakends_from_input_file(filename: str) -> List[Breakend]:
    """
    reads a tab-delimited file of breakends. Each row is converted to a breakend and
    the other column data is stored in its data attribute

    Args:
        filename: path to the input file

    Returns:
        the breakends in file order
    """
    try:
        df = pd.read_csv(
            filename,
            dtype={
                **{col: pd.Int64Dtype() for col in INTEGER_COLUMNS},
                COLUMNS.breakend_id: str,
                COLUMNS.partner_id: str,
                COLUMNS.chromosome: str,
                COLUMNS.strand: str,
            },
            sep='\t',
            comment='#',
            na_values=NA_VALUES,
        )
    except pd.errors.EmptyDataError:
        return []

    for col in BREAKEND_REQUIRED_COLUMNS:
        if col not in df:
            raise KeyError(f'missing required column: {col}')

    if COLUMNS.strand not in df:
        df[COLUMNS.strand] = STRAND.NS
    else:
        df[COLUMNS.strand] = df[COLUMNS.strand].fillna(STRAND.NS)

    breakends = []
    for row in df.astype(object).where(df.notnull(), None).to_dict('records'):
        data = {
            k: v for k, v in row.items() if k not in BREAKEND_REQUIRED_COLUMNS + [COLUMNS.strand]
        }
        breakends.append(
            Breakend(
                row[COLUMNS.breakend_id],
                row[COLUMNS.chromosome],
                row[COLUMNS.position],
                row[COLUMNS.partner_id],
                strand=row[COLUMNS.strand],
                data=data,
            )
        )
    return breakends


def read_inputs(inputs: List[str]) -> List[Breakend]:
    breakends = []

    for finput in bash_expands(*inputs):
        logger.info(f'loading: {finput}')
        breakends.extend(read_breakends_from_input_file(finput))
    logger.info(f'loaded {len(breakends)} breakends')
    return breakends
