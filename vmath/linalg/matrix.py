from typing import List, TYPE_CHECKING
from abc import ABC, abstractmethod

from vmath.util.errors import CardinalityException, IndexException
from vmath.linalg.vector_base import Vector

if TYPE_CHECKING:
    from vmath.linalg.dense_vector import DenseVector


# -----------------------------------------------------------------------------


class Matrix(ABC):
    """ Two-dimensional counterpart of `Vector`, limited to what is needed
        to hold the result of a cross product.
    """

    @abstractmethod
    def row_size(self) -> 'int':
        pass

    @abstractmethod
    def column_size(self) -> 'int':
        pass

    @abstractmethod
    def get_quick(self, row: 'int', column: 'int') -> 'float':
        pass

    @abstractmethod
    def set_quick(self, row: 'int', column: 'int', value: 'float') -> 'None':
        pass

    def get(self, row: 'int', column: 'int') -> 'float':
        self.__check(row, column)
        return self.get_quick(row, column)

    def set(self, row: 'int', column: 'int', value: 'float') -> 'None':
        self.__check(row, column)
        self.set_quick(row, column, value)

    def assign_row(self, row: 'int', other: 'Vector') -> 'Matrix':
        if other.size() != self.column_size():
            raise CardinalityException(self.column_size(), other.size())
        if not 0 <= row < self.row_size():
            raise IndexException(row, self.row_size())
        for column in range(self.column_size()):
            self.set_quick(row, column, other.get_quick(column))
        return self

    def get_row(self, row: 'int') -> 'DenseVector':
        from vmath.linalg.dense_vector import DenseVector

        if not 0 <= row < self.row_size():
            raise IndexException(row, self.row_size())
        return DenseVector([self.get_quick(row, c) for c in range(self.column_size())])

    def __check(self, row: 'int', column: 'int') -> 'None':
        if not 0 <= row < self.row_size():
            raise IndexException(row, self.row_size())
        if not 0 <= column < self.column_size():
            raise IndexException(column, self.column_size())

    def __repr__(self) -> 'str':
        return f"{self.__class__.__name__}({self.row_size()}x{self.column_size()})"


class DenseMatrix(Matrix):
    def __init__(self, rows: 'int', columns: 'int') -> 'None':
        self.__columns = columns
        self.__values: 'List[List[float]]' = [[0.0] * columns for _ in range(rows)]

    def row_size(self) -> 'int':
        return len(self.__values)

    def column_size(self) -> 'int':
        return self.__columns

    def get_quick(self, row: 'int', column: 'int') -> 'float':
        return self.__values[row][column]

    def set_quick(self, row: 'int', column: 'int', value: 'float') -> 'None':
        self.__values[row][column] = value


# -----------------------------------------------------------------------------
