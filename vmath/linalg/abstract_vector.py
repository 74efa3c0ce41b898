from typing import Optional, Union, Iterator, Sequence, Mapping, Dict, TYPE_CHECKING
from abc import ABC, abstractmethod
import logging
import math
import numbers
import struct

from vmath.util.errors import CardinalityException, IndexException, \
    UnboundLabelException, InvalidArgumentException
from vmath.util.functions import UnaryLike, BinaryLike
from vmath.linalg.vector_base import Element, Index, Vector

if TYPE_CHECKING:
    from vmath.linalg.matrix import Matrix


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


class AbstractVector(Vector, ABC):
    """ Implementation of every vector operation that can be expressed through
        the storage primitives `get_quick`, `set_quick`, `size`,
        `iterate_non_zero` and `like`.

        Operations other than `assign` and `add_to` never modify their
        operands and return fresh vectors.

        The squared length is cached. Subclasses must call
        `_invalidate_length_squared` from every primitive that changes a value.
    """

    def __init__(self, name: 'Optional[str]' = None, size: 'int' = 0) -> 'None':
        self.__name = name
        self.__size = size
        self.__bindings: 'Optional[Dict[str, int]]' = None
        self.__length_squared: 'Optional[float]' = None

    # ---- storage primitives -------------------------------------------------

    def size(self) -> 'int':
        return self.__size

    @abstractmethod
    def get_quick(self, index: 'int') -> 'float':
        pass

    @abstractmethod
    def set_quick(self, index: 'int', value: 'float') -> 'None':
        pass

    @abstractmethod
    def iterate_non_zero(self) -> 'Iterator[Element]':
        pass

    @abstractmethod
    def like(self, size: 'Optional[int]' = None) -> 'Vector':
        pass

    def iterate_all(self) -> 'Iterator[Element]':
        for i in range(self.size()):
            yield Element(self, i)

    def get_element(self, index: 'int') -> 'Element':
        return Element(self, index)

    def get_num_nondefault_elements(self) -> 'int':
        return sum(1 for _ in self.iterate_non_zero())

    def clone(self) -> 'AbstractVector':
        clone = self._shallow_copy()
        if self.__bindings is not None:
            clone.__bindings = dict(self.__bindings)
        return clone

    @abstractmethod
    def _shallow_copy(self) -> 'AbstractVector':
        """ Returns a copy owning its own storage, with bindings not yet copied.
        """

    def _invalidate_length_squared(self) -> 'None':
        self.__length_squared = None

    # ---- identity -----------------------------------------------------------

    @property
    def name(self) -> 'Optional[str]':
        return self.__name

    @name.setter
    def name(self, value: 'Optional[str]') -> 'None':
        self.__name = value

    @property
    def label_bindings(self) -> 'Optional[Dict[str, int]]':
        return self.__bindings

    @label_bindings.setter
    def label_bindings(self, bindings: 'Optional[Mapping[str, int]]') -> 'None':
        self.__bindings = None if bindings is None else dict(bindings)

    # ---- checked access -----------------------------------------------------

    def get(self, index: 'Index') -> 'float':
        i = self.__resolve(index)
        if 0 <= i < self.size():
            return self.get_quick(i)
        raise IndexException(i, self.size())

    def set(self, index: 'Index', value: 'float') -> 'None':
        i = self.__resolve(index)
        if 0 <= i < self.size():
            self.set_quick(i, value)
        else:
            raise IndexException(i, self.size())

    def set_labeled(self, label: 'str', index: 'int', value: 'float') -> 'None':
        """ Binds `label` to `index` and stores `value` there.
            A label bound earlier is rebound.
        """
        if self.__bindings is None:
            self.__bindings = {}
        self.__bindings[label] = index
        self.set(index, value)

    def __resolve(self, index: 'Index') -> 'int':
        if not isinstance(index, str):
            return index
        if self.__bindings is None:
            raise UnboundLabelException()
        i = self.__bindings.get(index)
        if i is None:
            raise UnboundLabelException(index)
        return i

    def _check_cardinality(self, x: 'Vector') -> 'None':
        if self.size() != x.size():
            raise CardinalityException(self.size(), x.size())

    # ---- arithmetic ---------------------------------------------------------

    def dot(self, x: 'Vector') -> 'float':
        self._check_cardinality(x)
        result = 0.0
        for e in self.iterate_non_zero():
            result += e.get() * x.get_quick(e.index)
        return result

    def plus(self, x: 'Union[float, Vector]') -> 'Vector':
        if not isinstance(x, Vector):
            result = self.clone()
            for i in range(result.size()):
                result.set_quick(i, self.get_quick(i) + x)
            return result
        self._check_cardinality(x)
        result = self.clone()
        for e in x.iterate_non_zero():
            i = e.index
            result.set_quick(i, self.get_quick(i) + e.get())
        return result

    def minus(self, x: 'Vector') -> 'Vector':
        self._check_cardinality(x)
        result = self.clone()
        for e in x.iterate_non_zero():
            i = e.index
            result.set_quick(i, self.get_quick(i) - e.get())
        return result

    def times(self, x: 'Union[float, Vector]') -> 'Vector':
        if not isinstance(x, Vector):
            result = self.clone()
            for e in self.iterate_non_zero():
                result.set_quick(e.index, e.get() * x)
            return result
        self._check_cardinality(x)
        result = self.clone()
        for e in result.iterate_non_zero():
            e.set(e.get() * x.get_quick(e.index))
        return result

    def divide(self, x: 'float') -> 'Vector':
        result = self.clone()
        for e in result.iterate_non_zero():
            e.set(e.get() / x)
        return result

    def assign(self, x: 'Union[float, Sequence[float], Vector, UnaryLike]',
               function: 'Optional[BinaryLike]' = None) -> 'Vector':
        """ Overwrites every slot of this vector and returns it.

            - `assign(value)` fills all slots with `value`;
            - `assign(values)` copies a sequence of the same length;
            - `assign(other)` copies a vector of the same size;
            - `assign(f)` replaces every slot with `f(slot)`;
            - `assign(value, f)` replaces every slot with `f(slot, value)`;
            - `assign(other, f)` replaces every slot with `f(slot, other[i])`.
        """
        if function is not None:
            if isinstance(x, Vector):
                return self._assign_binary(x, function)
            for i in range(self.size()):
                self.set_quick(i, function(self.get_quick(i), x))
            return self
        if isinstance(x, Vector):
            self._check_cardinality(x)
            for i in range(self.size()):
                self.set_quick(i, x.get_quick(i))
        elif isinstance(x, numbers.Real):
            for i in range(self.size()):
                self.set_quick(i, x)
        elif callable(x):
            for i in range(self.size()):
                self.set_quick(i, x(self.get_quick(i)))
        else:
            if len(x) != self.size():
                raise CardinalityException(self.size(), len(x))
            for i in range(self.size()):
                self.set_quick(i, x[i])
        return self

    def _assign_binary(self, other: 'Vector', function: 'BinaryLike') -> 'Vector':
        self._check_cardinality(other)
        for i in range(self.size()):
            self.set_quick(i, function(self.get_quick(i), other.get_quick(i)))
        return self

    def add_to(self, v: 'Vector') -> 'None':
        """ Adds this vector into `v` in place, touching only the slots
            that are non-zero here. Sizes are not checked.
        """
        for e in self.iterate_non_zero():
            i = e.index
            v.set_quick(i, v.get_quick(i) + e.get())

    def z_sum(self) -> 'float':
        return sum((e.get() for e in self.iterate_non_zero()), 0.0)

    def max_value(self) -> 'float':
        result = -math.inf
        for i in range(self.size()):
            result = max(result, self.get_quick(i))
        return result

    def max_value_index(self) -> 'int':
        result, best = -1, -math.inf
        for i in range(self.size()):
            value = self.get_quick(i)
            if value > best:
                result, best = i, value
        return result

    def norm(self, power: 'float') -> 'float':
        if power < 0.0:
            raise InvalidArgumentException("Power must be >= 0")
        if math.isinf(power):
            return self.max_value()
        if power == 2.0:
            return math.sqrt(self.dot(self))
        if power == 1.0:
            return self.z_sum()
        if power == 0.0:
            return float(sum(1 for e in self.iterate_non_zero() if e.get() != 0))
        val = sum((_pow(e.get(), power) for e in self.iterate_non_zero()), 0.0)
        return _pow(val, 1.0 / power)

    def normalize(self, power: 'Optional[float]' = None) -> 'Vector':
        """ Divides this vector by its norm.

            Without `power` the euclidean length is used. The zero vector
            has no non-zero slots to divide, so it is returned as a zero vector.
            When the norm is zero but some slot is not (e.g. `[1, -1]` with
            `power=1`), those slots become signed infinities.
        """
        divisor = math.sqrt(self.dot(self)) if power is None else self.norm(power)
        if divisor != 0:
            return self.divide(divisor)
        result = self.clone()
        for e in result.iterate_non_zero():
            e.set(_divide_by_zero(e.get(), divisor))
        return result

    def get_length_squared(self) -> 'float':
        if self.__length_squared is None:
            self.__length_squared = self._compute_length_squared()
        return self.__length_squared

    def _compute_length_squared(self) -> 'float':
        return self.dot(self)

    def get_distance_squared(self, v: 'Vector') -> 'float':
        """ Sums `(self[i] - v[i]) ** 2` over the non-zero slots of this vector.

            Slots where only `v` is non-zero are not visited, so the result is
            smaller than the true squared distance when this vector is sparser
            than `v`. Dense vectors scan every slot instead.
        """
        d = 0.0
        for e in self.iterate_non_zero():
            diff = e.get() - v.get_quick(e.index)
            d += diff * diff
        return d

    def cross(self, other: 'Vector') -> 'Matrix':
        result = self.matrix_like(self.size(), other.size())
        logger.debug("Cross product into %s of %dx%d", type(result).__name__, self.size(), other.size())
        for row in range(self.size()):
            result.assign_row(row, other.times(self.get_quick(row)))
        return result

    def view_part(self, offset: 'int', length: 'int') -> 'Vector':
        from vmath.linalg.vector_view import VectorView

        if length > self.size():
            raise CardinalityException(self.size(), length)
        if offset < 0 or offset + length > self.size():
            raise IndexException(offset, self.size())
        return VectorView(self, offset, length)

    # ---- textual form -------------------------------------------------------

    def as_format_string(self) -> 'str':
        from vmath.codec import encode

        return encode(self)

    @staticmethod
    def decode_vector(formatted: 'str') -> 'Vector':
        from vmath.codec import decode

        return decode(formatted)

    # ---- equality -----------------------------------------------------------

    def __eq__(self, other) -> 'bool':
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size() == other.size() and self.name == other.name and equivalent(self, other)

    def __hash__(self) -> 'int':
        prime = 31
        result = prime + (0 if self.name is None else hash(self.name))
        result = _to_int32(prime * result + self.size())
        for e in self.iterate_non_zero():
            result = _to_int32(result + e.index * _fold_bits(e.get()))
        return result

    # ---- operators ----------------------------------------------------------

    def __add__(self, other: 'Union[float, Vector]') -> 'Vector':
        return self.plus(other)

    def __radd__(self, other: 'float') -> 'Vector':
        return self.plus(other)

    def __sub__(self, other: 'Union[float, Vector]') -> 'Vector':
        if isinstance(other, Vector):
            return self.minus(other)
        return self.plus(-other)

    def __mul__(self, other: 'Union[float, Vector]') -> 'Vector':
        return self.times(other)

    def __rmul__(self, other: 'float') -> 'Vector':
        return self.times(other)

    def __truediv__(self, other: 'float') -> 'Vector':
        return self.divide(other)

    def __neg__(self) -> 'Vector':
        return self.times(-1.0)

    def __repr__(self) -> 'str':
        values = ", ".join(repr(v) for v in self)
        prefix = "" if self.name is None else f"{self.name!r}, "
        return f"{self.__class__.__name__}({prefix}[{values}])"


# -----------------------------------------------------------------------------


def equivalent(left: 'Vector', right: 'Vector') -> 'bool':
    """ Tells whether two vectors have the same size and the same values,
        regardless of their representation and name.
    """
    if left is right:
        return True
    size = left.size()
    if size != right.size():
        return False
    return all(left.get_quick(i) == right.get_quick(i) for i in range(size))


def strict_equivalence(left: 'Vector', right: 'Vector') -> 'bool':
    """ Tells whether two vectors have the same representation, the same name
        (or are both unnamed) and are `equivalent`.
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if left.name != right.name:
        return False
    return equivalent(left, right)


def _pow(x: 'float', y: 'float') -> 'float':
    try:
        return math.pow(x, y)
    except ValueError:
        return math.nan


def _divide_by_zero(x: 'float', zero: 'float') -> 'float':
    if math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, zero)


def _fold_bits(value: 'float') -> 'int':
    bits = struct.unpack('>q', struct.pack('>d', value))[0]
    return _to_int32(bits ^ (bits >> 32))


def _to_int32(value: 'int') -> 'int':
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


# -----------------------------------------------------------------------------
