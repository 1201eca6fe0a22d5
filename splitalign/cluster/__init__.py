"""
Sub-package Documentation
==========================

The cluster sub-package is responsible for grouping breakpoints which describe the same structural variant.

Algorithm Overview
--------------------

- Sort breakpoints by left chromosome, left position, right chromosome, right position
- Sweep the sorted breakpoints, keeping only groups within the cluster window of the current breakpoint
- Merge each breakpoint into the first group on the same chromosomes with both positions within the window
    of the group start positions, dropping breakpoints whose supporting sequence is already in the group
- Otherwise start a new group with the next identifier from the counter owned by the run
"""
from .cluster import BreakpointGroup, cluster_breakpoints
