from typing import Optional


# -----------------------------------------------------------------------------


class VectorException(Exception):
    """ Base class for all errors raised by vector and matrix operations.
    """


class CardinalityException(VectorException):
    """ Raised when operand sizes disagree where equality is required.

        Sizes are never adjusted implicitly, so `a.plus(b)` with
        `a.size() != b.size()` fails instead of padding or truncating.
    """

    def __init__(self, expected: 'Optional[int]' = None, actual: 'Optional[int]' = None) -> 'None':
        self.__expected, self.__actual = expected, actual
        if expected is None or actual is None:
            super().__init__("Cardinality mismatch")
        else:
            super().__init__(f"Cardinality mismatch: expected {expected}, got {actual}")

    @property
    def expected(self) -> 'Optional[int]':
        return self.__expected

    @property
    def actual(self) -> 'Optional[int]':
        return self.__actual


class IndexException(VectorException, IndexError):
    """ Raised by checked accessors when an index lies outside `[0, size)`.
    """

    def __init__(self, index: 'Optional[int]' = None, size: 'Optional[int]' = None) -> 'None':
        self.__index, self.__size = index, size
        if index is None or size is None:
            super().__init__("Index out of bounds")
        else:
            super().__init__(f"Index {index} out of bounds [0, {size})")

    @property
    def index(self) -> 'Optional[int]':
        return self.__index

    @property
    def size(self) -> 'Optional[int]':
        return self.__size


class UnboundLabelException(VectorException, KeyError):
    """ Raised on label-based access when the vector has no bindings
        or the label is not bound.
    """

    def __init__(self, label: 'Optional[str]' = None) -> 'None':
        self.__label = label
        super().__init__("No label bindings" if label is None else f"Unbound label '{label}'")

    @property
    def label(self) -> 'Optional[str]':
        return self.__label

    def __str__(self) -> 'str':
        return str(self.args[0])


class InvalidArgumentException(VectorException, ValueError):
    """ Raised when an argument is outside the domain of an operation,
        e.g. a negative norm power.
    """


class CodecException(VectorException, ValueError):
    """ Raised when a textual vector representation cannot be decoded.
    """


# -----------------------------------------------------------------------------
