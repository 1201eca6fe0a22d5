"""
in-memory orchestration of grouped alignments through the chimera combiner, the breakpoint
extractor and the breakpoint clusterer
"""
from .chimera import ChimeraCombiner
from .cluster import cluster_breakpoints
from .cluster.constants import DEFAULTS as CLUSTER_DEFAULTS
from .extract import BreakpointExtractor
from .util import count_reasons, logger


def combine_chimeras(read_groups, combiner=None):
    """
    Args:
        read_groups (iterable of list of pysam.AlignedSegment): alignments grouped by read name
        combiner (ChimeraCombiner): combiner to use, one with default settings if not given

    Returns:
        iterable of SamRead: the alignments to be written, in input order
    """
    if combiner is None:
        combiner = ChimeraCombiner()
    groups = 0
    combined = 0
    for reads in read_groups:
        groups += 1
        processed = combiner.process_read_group(reads)
        if len(processed) == 1 and len(reads) > 1:
            combined += 1
        for read in processed:
            yield read
    logger.info('combined chimeric alignments for %d of %d reads', combined, groups)


def identify_sv_candidates(read_groups, extractor=None, cluster_window=CLUSTER_DEFAULTS.cluster_window, group_ids=None):
    """
    extract a breakpoint from each split read and cluster the breakpoints

    Args:
        read_groups (iterable of list of pysam.AlignedSegment): alignments grouped by read name
        extractor (BreakpointExtractor): extractor to use, one with default settings if not given
        cluster_window (int): see :func:`~splitalign.cluster.cluster_breakpoints`
        group_ids (iterator of int): see :func:`~splitalign.cluster.cluster_breakpoints`

    Returns:
        :class:`list` of :class:`~splitalign.cluster.BreakpointGroup`: the breakpoint groups
    """
    if extractor is None:
        extractor = BreakpointExtractor()
    results = [extractor.process_read_group(reads) for reads in read_groups]
    breakpoints = [result.breakpoint for result in results if result]
    for reason, count in sorted(count_reasons(results).items()):
        logger.info('skipped %d reads (%s)', count, reason)
    logger.info('extracted %d breakpoints from %d reads', len(breakpoints), len(results))
    return cluster_breakpoints(breakpoints, cluster_window=cluster_window, group_ids=group_ids)
