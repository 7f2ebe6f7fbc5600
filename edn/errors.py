

class EdnError(Exception):
    """ Base class for all edn errors"""
    pass


class EdnTypeError(EdnError, TypeError):
    """ Raised when a host value cannot be converted, or a payload has the wrong type"""


class EdnOverflowError(EdnError, OverflowError):
    """ Raised when an integer does not fit in 64 signed bits"""


class EdnParseError(EdnError):
    """ Raised (or yielded) by the reader for malformed input.

    `lo` and `hi` delimit the offending text as a half-open range of
    code point offsets into the source.
    """

    def __init__(self, lo: int, hi: int, message: str):
        super().__init__(f"{message} at [{lo}, {hi})")
        self.lo = lo
        self.hi = hi
        self.message = message

    @property
    def span(self) -> tuple[int, int]:
        return self.lo, self.hi

    def __eq__(self, other):
        if not isinstance(other, EdnParseError):
            return NotImplemented
        return (self.lo, self.hi, self.message) == (other.lo, other.hi, other.message)

    def __hash__(self):
        return hash((self.lo, self.hi, self.message))

    def __repr__(self):
        return f"EdnParseError(lo={self.lo}, hi={self.hi}, message={self.message!r})"
