import re
from typing import Dict, Iterable, Optional

from ..constants import CANONICAL_CHROMOSOMES, SEQ_STYLE
from ..util import logger

MITOCHONDRIAL = {SEQ_STYLE.UCSC: 'chrM', SEQ_STYLE.NCBI: 'MT'}


def seqlevel_style(name: str) -> str:
    """
    Example:
        >>> seqlevel_style('chr1')
        'UCSC'
        >>> seqlevel_style('X')
        'NCBI'
    """
    if str(name).startswith('chr'):
        return SEQ_STYLE.UCSC
    return SEQ_STYLE.NCBI


def convert_seqlevel(name: str, style: str) -> str:
    """
    rename a chromosome to the given naming style. Ensures that hg19/hg38 chromosome names match

    Example:
        >>> convert_seqlevel('chr1', SEQ_STYLE.NCBI)
        '1'
        >>> convert_seqlevel('MT', SEQ_STYLE.UCSC)
        'chrM'
    """
    SEQ_STYLE.enforce(style)
    name = str(name)
    if name in MITOCHONDRIAL.values():
        return MITOCHONDRIAL[style]
    bare = re.sub(r'^chr', '', name)
    if style == SEQ_STYLE.UCSC:
        return 'chr' + bare
    return bare


def is_canonical(name: str) -> bool:
    """
    Example:
        >>> is_canonical('chrX')
        True
        >>> is_canonical('HLA-A*01:01:01:01')
        False
    """
    return convert_seqlevel(name, SEQ_STYLE.NCBI) in CANONICAL_CHROMOSOMES


def detect_seqlevels_style(names: Iterable[str]) -> Optional[str]:
    """
    determine the naming style used by a group of chromosome names. The style of the majority of
    the canonical chromosomes wins, ties go to the style seen first. When no name is canonical
    all names are counted. Names using any other style are logged and left as they are

    Returns:
        the style, or None if no names were given
    """
    names = list(dict.fromkeys(str(name) for name in names))
    counted = [name for name in names if is_canonical(name)] or names
    counts: Dict[str, int] = {}
    for name in counted:
        style = seqlevel_style(name)
        counts[style] = counts.get(style, 0) + 1
    if not counts:
        return None
    style = max(counts, key=lambda s: counts[s])
    others = [name for name in names if seqlevel_style(name) != style]
    if others:
        logger.warning(
            f'using the {style} chromosome naming style, {len(others)} chromosomes use another '
            f'style and will not match the annotation: {others}'
        )
    return style
