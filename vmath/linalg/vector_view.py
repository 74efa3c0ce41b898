from typing import Optional, Iterator

from vmath.util.errors import CardinalityException, IndexException
from vmath.linalg.vector_base import Element, Vector
from vmath.linalg.abstract_vector import AbstractVector
from vmath.linalg.matrix import Matrix


# -----------------------------------------------------------------------------


class VectorView(AbstractVector):
    """ Window of `size` slots over `vector`, starting at `offset`.

        The view owns no storage: reads and writes go to the parent vector,
        and changes made to the parent are visible through the view.
    """

    def __init__(self, vector: 'Vector', offset: 'int', size: 'int') -> 'None':
        super().__init__(None, size)
        self.__vector, self.__offset = vector, offset

    @property
    def vector(self) -> 'Vector':
        return self.__vector

    @property
    def offset(self) -> 'int':
        return self.__offset

    def get_quick(self, index: 'int') -> 'float':
        return self.__vector.get_quick(self.__offset + index)

    def set_quick(self, index: 'int', value: 'float') -> 'None':
        self.__vector.set_quick(self.__offset + index, value)

    def __in_view(self, index: 'int') -> 'bool':
        return self.__offset <= index < self.__offset + self.size()

    def iterate_non_zero(self) -> 'Iterator[Element]':
        for e in self.__vector.iterate_non_zero():
            if self.__in_view(e.index):
                yield Element(self, e.index - self.__offset)

    def like(self, size: 'Optional[int]' = None) -> 'Vector':
        result = self.__vector.like(self.size() if size is None else size)
        result.label_bindings = self.label_bindings
        return result

    def _shallow_copy(self) -> 'VectorView':
        clone = VectorView(self.__vector.clone(), self.__offset, self.size())
        clone.name = self.name
        return clone

    def matrix_like(self, rows: 'int', columns: 'int') -> 'Matrix':
        return self.__vector.matrix_like(rows, columns)

    def get_num_nondefault_elements(self) -> 'int':
        return self.size()

    def view_part(self, offset: 'int', length: 'int') -> 'Vector':
        if length > self.size():
            raise CardinalityException(self.size(), length)
        if offset < 0 or offset + length > self.size():
            raise IndexException(offset, self.size())
        return VectorView(self.__vector, self.__offset + offset, length)

    def get_length_squared(self) -> 'float':
        result = 0.0
        for i in range(self.size()):
            value = self.get_quick(i)
            result += value * value
        return result


# -----------------------------------------------------------------------------
