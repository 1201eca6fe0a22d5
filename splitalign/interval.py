from collections import namedtuple


class Interval(namedtuple('Interval', ['start', 'end'])):
    """
    closed integer range in 1-based inclusive coordinates. A single position is given as Interval(pos)
    """

    def __new__(cls, start, end=None):
        start = int(start)
        end = start if end is None else int(end)
        if start > end:
            raise ValueError('interval start cannot be after its end', start, end)
        return super(Interval, cls).__new__(cls, start, end)

    @classmethod
    def overlaps(cls, first, other):
        """
        True if the two (start, end) ranges share at least one position

        Example:
            >>> Interval.overlaps((1, 10), (10, 11))
            True
        """
        return first[0] <= other[1] and other[0] <= first[1]

    @classmethod
    def union(cls, *intervals):
        """
        the smallest interval covering all of the input ranges

        Example:
            >>> Interval.union(Interval(4, 6), (1, 2))
            Interval(start=1, end=6)
        """
        if not intervals:
            raise ValueError('cannot compute the union of an empty set of intervals')
        return cls(min([i[0] for i in intervals]), max([i[1] for i in intervals]))
