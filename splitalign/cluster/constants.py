from ..util import WeakNamespace


DEFAULTS = WeakNamespace()
"""
- cluster_window
- first_group_id
"""
DEFAULTS.add(
    'cluster_window',
    1000,
    defn='maximum distance (inclusive) of both breakpoint positions from the start of a group for the breakpoint '
    'to be merged into the group',
)
DEFAULTS.add('first_group_id', 1, defn='the identifier given to the first group created by a clustering run')
