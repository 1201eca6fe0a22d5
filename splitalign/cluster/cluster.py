import itertools

from .constants import DEFAULTS
from ..interval import Interval
from ..util import check_minimum, logger


class BreakpointGroup:
    """
    breakpoints which are close enough on both sides to be considered the same structural variant
    """

    def __init__(self, breakpoint, group_id):
        self.group_id = group_id
        self.left_chr = breakpoint.left_chr
        self.right_chr = breakpoint.right_chr
        self.left = Interval(breakpoint.left_pos)
        self.right = Interval(breakpoint.right_pos)
        self.breakpoints = [breakpoint]
        self.sequences = {breakpoint.bases}
        self.frozen = False

    def should_merge(self, breakpoint, cluster_window=DEFAULTS.cluster_window):
        """
        True when the breakpoint is on the same chromosomes as the group and both of its positions
        are within cluster_window of the group start positions
        """
        if self.left_chr != breakpoint.left_chr or self.right_chr != breakpoint.right_chr:
            return False
        return abs(breakpoint.left_pos - self.left.start) <= cluster_window \
            and abs(breakpoint.right_pos - self.right.start) <= cluster_window

    def add(self, breakpoint):
        """
        add a breakpoint to the group unless a breakpoint with the same supporting sequence is already present

        Returns:
            bool: True if the breakpoint was added
        """
        if self.frozen:
            raise AttributeError('cannot add to a group once clustering has finished', self.group_id)
        if breakpoint.bases in self.sequences:
            return False
        self.left = Interval.union(self.left, (breakpoint.left_pos, breakpoint.left_pos))
        self.right = Interval.union(self.right, (breakpoint.right_pos, breakpoint.right_pos))
        self.breakpoints.append(breakpoint)
        self.sequences.add(breakpoint.bases)
        return True

    def freeze(self):
        self.breakpoints = tuple(self.breakpoints)
        self.sequences = frozenset(self.sequences)
        self.frozen = True

    def __len__(self):
        return len(self.breakpoints)

    def __iter__(self):
        return iter(self.breakpoints)

    def __repr__(self):
        return 'BreakpointGroup({}, {}:{}-{}=={}:{}-{}, n={})'.format(
            self.group_id, self.left_chr, self.left.start, self.left.end,
            self.right_chr, self.right.start, self.right.end, len(self))


def cluster_breakpoints(breakpoints, cluster_window=DEFAULTS.cluster_window, group_ids=None):
    """
    groups breakpoints in a single sweep over the sorted input. Only groups whose left start is within
    cluster_window of the current breakpoint are kept as candidates for merging

    Args:
        breakpoints (:class:`list` of :class:`~splitalign.breakpoint.Breakpoint`): breakpoints to cluster
        cluster_window (int): maximum distance of both positions from the start of a group
        group_ids (iterator of int): source of group identifiers. A new counter is used for each call by default

    Returns:
        :class:`list` of :class:`BreakpointGroup`: the groups, in the order they were created
    """
    check_minimum(DEFAULTS, 'cluster_window', cluster_window, 0)
    if group_ids is None:
        group_ids = itertools.count(DEFAULTS.first_group_id)

    active = []
    groups = []
    for breakpoint in sorted(breakpoints):
        still_active = []
        merged = False
        for group in active:
            if group.left_chr == breakpoint.left_chr and group.left.start >= breakpoint.left_pos - cluster_window:
                still_active.append(group)
            if not merged and group.should_merge(breakpoint, cluster_window):
                group.add(breakpoint)
                merged = True

        if not merged:
            group = BreakpointGroup(breakpoint, next(group_ids))
            groups.append(group)
            still_active.append(group)
        active = still_active

    for group in groups:
        group.freeze()
    logger.info('clustered %d breakpoints into %d groups', len(breakpoints), len(groups))
    return groups
