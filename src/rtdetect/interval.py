class Interval:
    """
    closed integer interval on a genomic coordinate system (1-based, both ends inclusive)
    """

    def __init__(self, start, end=None):
        """
        Args:
            start (int): the start of the interval (inclusive)
            end (int): the end of the interval (inclusive)

        Example:
            >>> Interval(1, 10)
            Interval(1, 10)
            >>> Interval(5)
            Interval(5, 5)
        """
        self.start = int(start)
        self.end = int(end) if end is not None else self.start
        if self.start > self.end:
            raise AttributeError('interval start > end is not allowed', self.start, self.end)

    def __getitem__(self, index):
        try:
            index = int(index)
        except ValueError:
            raise IndexError('index input accessor must be an integer', index)
        if index == 0:
            return self.start
        elif index == 1:
            return self.end
        raise IndexError('index input accessor is out of bounds: 1 or 2 only', index)

    @classmethod
    def window(cls, pos: int, flank: int) -> 'Interval':
        """
        the interval of positions at most flank away from pos

        Example:
            >>> Interval.window(100, 10)
            Interval(90, 110)
        """
        if flank < 0:
            raise AttributeError('window flank cannot be negative', flank)
        return cls(pos - flank, pos + flank)

    def __eq__(self, other):
        if not hasattr(other, '__getitem__'):
            return False
        try:
            return self[0] == other[0] and self[1] == other[1]
        except IndexError:
            return False

    def __lt__(self, other):
        if self[0] < other[0]:
            return True
        elif self[0] == other[0]:
            return self[1] < other[1]
        return False

    def __hash__(self):
        return hash((self.start, self.end))

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.start, self.end)
