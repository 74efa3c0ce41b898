from typing import Optional, Union, Iterator, Sequence, List

from vmath.util.errors import CardinalityException
from vmath.util.functions import BinaryLike, is_accumulating
from vmath.linalg.vector_base import Element, Vector
from vmath.linalg.abstract_vector import AbstractVector, equivalent
from vmath.linalg.matrix import DenseMatrix


# -----------------------------------------------------------------------------


class DenseVector(AbstractVector):
    """ Vector stored as a list of floats, one per slot.

        `DenseVector(3)` creates a zero vector of size 3,
        `DenseVector([1, 2, 3])` copies the given values (or adopts the list
        itself with `shallow_copy=True`) and `DenseVector(other)` copies the
        non-zero elements and the name of another vector.
    """

    def __init__(self, source: 'Union[int, Sequence[float], Vector]' = 0,
                 name: 'Optional[str]' = None, shallow_copy: 'bool' = False) -> 'None':
        self.__values: 'List[float]'
        if isinstance(source, Vector):
            if name is None:
                name = source.name
            self.__values = [0.0] * source.size()
            for e in source.iterate_non_zero():
                self.__values[e.index] = e.get()
        elif isinstance(source, int):
            self.__values = [0.0] * source
        elif shallow_copy and isinstance(source, list):
            self.__values = source
        else:
            self.__values = [float(v) for v in source]
        super().__init__(name, len(self.__values))

    def size(self) -> 'int':
        return len(self.__values)

    def get_quick(self, index: 'int') -> 'float':
        return self.__values[index]

    def set_quick(self, index: 'int', value: 'float') -> 'None':
        self._invalidate_length_squared()
        self.__values[index] = value

    def _shallow_copy(self) -> 'DenseVector':
        return DenseVector(self.__values, self.name)

    def like(self, size: 'Optional[int]' = None) -> 'DenseVector':
        result = DenseVector(self.size() if size is None else size)
        result.label_bindings = self.label_bindings
        return result

    def matrix_like(self, rows: 'int', columns: 'int') -> 'DenseMatrix':
        return DenseMatrix(rows, columns)

    def get_num_nondefault_elements(self) -> 'int':
        return len(self.__values)

    def iterate_non_zero(self) -> 'Iterator[Element]':
        values = self.__values
        for i in range(len(values)):
            if values[i] != 0:
                yield Element(self, i)

    def iterate_all(self) -> 'Iterator[Element]':
        for i in range(len(self.__values)):
            yield Element(self, i)

    def _assign_binary(self, other: 'Vector', function: 'BinaryLike') -> 'Vector':
        self._check_cardinality(other)
        self._invalidate_length_squared()
        values = self.__values
        if is_accumulating(function):
            for e in other.iterate_non_zero():
                i = e.index
                values[i] = function(values[i], e.get())
        else:
            for i in range(len(values)):
                values[i] = function(values[i], other.get_quick(i))
        return self

    def _compute_length_squared(self) -> 'float':
        return sum((v * v for v in self.__values), 0.0)

    def get_distance_squared(self, v: 'Vector') -> 'float':
        result = 0.0
        for i, value in enumerate(self.__values):
            delta = value - v.get_quick(i)
            result += delta * delta
        return result

    def add_to(self, v: 'Vector') -> 'None':
        if v.size() != self.size():
            raise CardinalityException(self.size(), v.size())
        for i, value in enumerate(self.__values):
            v.set_quick(i, value + v.get_quick(i))

    def __eq__(self, other) -> 'bool':
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size() != other.size() or self.name != other.name:
            return False
        if isinstance(other, DenseVector):
            return self.__values == other.__values
        return equivalent(self, other)

    __hash__ = AbstractVector.__hash__


# -----------------------------------------------------------------------------
