from typing import Optional, Union, Iterator, Sequence, Mapping, Dict, TYPE_CHECKING
from abc import ABC, abstractmethod

from vmath.util.functions import UnaryLike, BinaryLike

if TYPE_CHECKING:
    from vmath.linalg.matrix import Matrix


# -----------------------------------------------------------------------------


class Element:
    """ Handle bound to one slot of a vector.

        Reading goes through `get_quick` and writing through `set_quick` of the
        owning vector, so an element always sees the live value and writes
        through it invalidate any cached state of the vector.

        Iterators of this package create a new element on every step,
        so elements may be retained after the iteration moves on.
    """

    __slots__ = ('__vector', '__index')

    def __init__(self, vector: 'Vector', index: 'int') -> 'None':
        self.__vector, self.__index = vector, index

    @property
    def index(self) -> 'int':
        return self.__index

    def get(self) -> 'float':
        return self.__vector.get_quick(self.__index)

    def set(self, value: 'float') -> 'None':
        self.__vector.set_quick(self.__index, value)

    @property
    def value(self) -> 'float':
        return self.get()

    @value.setter
    def value(self, v: 'float') -> 'None':
        self.set(v)

    def __repr__(self) -> 'str':
        return f"Element({self.__index}, {self.get()})"


# -----------------------------------------------------------------------------


Index = Union[int, str]


class Vector(ABC):
    """ Capabilities shared by every vector representation.

        Vectors are plain mutable objects without any synchronization.
        Concurrent mutation of a vector (or of a vector and its views)
        from several threads requires external locking.
    """

    @abstractmethod
    def size(self) -> 'int':
        pass

    @abstractmethod
    def get_quick(self, index: 'int') -> 'float':
        """ Returns the value at `index` without bounds checking.
        """

    @abstractmethod
    def set_quick(self, index: 'int', value: 'float') -> 'None':
        """ Stores `value` at `index` without bounds checking.
        """

    @abstractmethod
    def get(self, index: 'Index') -> 'float':
        pass

    @abstractmethod
    def set(self, index: 'Index', value: 'float') -> 'None':
        pass

    @abstractmethod
    def set_labeled(self, label: 'str', index: 'int', value: 'float') -> 'None':
        pass

    @abstractmethod
    def iterate_non_zero(self) -> 'Iterator[Element]':
        """ Yields elements of non-zero slots in ascending index order.
        """

    @abstractmethod
    def iterate_all(self) -> 'Iterator[Element]':
        """ Yields an element for every slot in ascending index order.
        """

    @abstractmethod
    def like(self, size: 'Optional[int]' = None) -> 'Vector':
        """ Returns a zero-filled vector of the same kind, of the same size
            unless `size` is given. Label bindings are carried over.
        """

    @abstractmethod
    def clone(self) -> 'Vector':
        pass

    @abstractmethod
    def get_element(self, index: 'int') -> 'Element':
        pass

    @abstractmethod
    def matrix_like(self, rows: 'int', columns: 'int') -> 'Matrix':
        pass

    @abstractmethod
    def get_num_nondefault_elements(self) -> 'int':
        pass

    @property
    @abstractmethod
    def name(self) -> 'Optional[str]':
        pass

    @name.setter
    @abstractmethod
    def name(self, value: 'Optional[str]') -> 'None':
        pass

    @property
    @abstractmethod
    def label_bindings(self) -> 'Optional[Dict[str, int]]':
        pass

    @label_bindings.setter
    @abstractmethod
    def label_bindings(self, bindings: 'Optional[Mapping[str, int]]') -> 'None':
        pass

    @abstractmethod
    def dot(self, x: 'Vector') -> 'float':
        pass

    @abstractmethod
    def plus(self, x: 'Union[float, Vector]') -> 'Vector':
        pass

    @abstractmethod
    def minus(self, x: 'Vector') -> 'Vector':
        pass

    @abstractmethod
    def times(self, x: 'Union[float, Vector]') -> 'Vector':
        pass

    @abstractmethod
    def divide(self, x: 'float') -> 'Vector':
        pass

    @abstractmethod
    def assign(self, x: 'Union[float, Sequence[float], Vector, UnaryLike]',
               function: 'Optional[BinaryLike]' = None) -> 'Vector':
        pass

    @abstractmethod
    def add_to(self, v: 'Vector') -> 'None':
        pass

    @abstractmethod
    def z_sum(self) -> 'float':
        pass

    @abstractmethod
    def max_value(self) -> 'float':
        pass

    @abstractmethod
    def max_value_index(self) -> 'int':
        pass

    @abstractmethod
    def norm(self, power: 'float') -> 'float':
        pass

    @abstractmethod
    def normalize(self, power: 'Optional[float]' = None) -> 'Vector':
        pass

    @abstractmethod
    def get_length_squared(self) -> 'float':
        pass

    @abstractmethod
    def get_distance_squared(self, v: 'Vector') -> 'float':
        pass

    @abstractmethod
    def cross(self, other: 'Vector') -> 'Matrix':
        pass

    @abstractmethod
    def view_part(self, offset: 'int', length: 'int') -> 'Vector':
        pass

    @abstractmethod
    def as_format_string(self) -> 'str':
        pass

    def __len__(self) -> 'int':
        return self.size()

    def __getitem__(self, index: 'Index') -> 'float':
        return self.get(index)

    def __setitem__(self, index: 'Index', value: 'float') -> 'None':
        self.set(index, value)

    def __iter__(self) -> 'Iterator[float]':
        return (self.get_quick(i) for i in range(self.size()))


# -----------------------------------------------------------------------------
