from typing import Any, Callable, Union
from typing_extensions import Protocol
from abc import abstractmethod
import math


# -----------------------------------------------------------------------------


class UnaryFunction(Protocol):
    @abstractmethod
    def __call__(self, a: 'float') -> 'float':
        pass


class BinaryFunction(Protocol):
    @abstractmethod
    def __call__(self, a: 'float', b: 'float') -> 'float':
        pass


UnaryLike = Union[UnaryFunction, Callable[[float], float]]
BinaryLike = Union[BinaryFunction, Callable[[float, float], float]]


def is_accumulating(function: 'Any') -> 'bool':
    """ Tells whether `function(0, x) == x` for every `x`.

        Only functions that declare it through the `accumulating` attribute
        are recognized; arbitrary callables are assumed not to be.
    """
    return getattr(function, 'accumulating', False) is True


# -----------------------------------------------------------------------------


class _BinaryBase:
    accumulating = False

    def apply(self, a: 'float', b: 'float') -> 'float':
        return self(a, b)

    def __call__(self, a: 'float', b: 'float') -> 'float':
        raise NotImplementedError

    def __repr__(self) -> 'str':
        return f"{self.__class__.__name__}()"


class PlusFunction(_BinaryBase):
    accumulating = True

    def __call__(self, a: 'float', b: 'float') -> 'float':
        return a + b


class PlusWithScaleFunction(_BinaryBase):
    """ Computes `a + scale * b`. Used for in-place axpy style updates.
    """

    accumulating = True

    def __init__(self, scale: 'float') -> 'None':
        self.__scale = scale

    @property
    def scale(self) -> 'float':
        return self.__scale

    def __call__(self, a: 'float', b: 'float') -> 'float':
        return a + self.__scale * b

    def __repr__(self) -> 'str':
        return f"PlusWithScaleFunction({self.__scale})"


class MinusFunction(_BinaryBase):
    def __call__(self, a: 'float', b: 'float') -> 'float':
        return a - b


class MultFunction(_BinaryBase):
    def __call__(self, a: 'float', b: 'float') -> 'float':
        return a * b


class DivFunction(_BinaryBase):
    def __call__(self, a: 'float', b: 'float') -> 'float':
        return a / b


class MaxFunction(_BinaryBase):
    def __call__(self, a: 'float', b: 'float') -> 'float':
        return max(a, b)


class MinFunction(_BinaryBase):
    def __call__(self, a: 'float', b: 'float') -> 'float':
        return min(a, b)


plus = PlusFunction()
minus = MinusFunction()
mult = MultFunction()
div = DivFunction()


# -----------------------------------------------------------------------------


def abs_function(a: 'float') -> 'float':
    return abs(a)


def negate(a: 'float') -> 'float':
    return -a


def sqrt_function(a: 'float') -> 'float':
    return math.sqrt(a)


def square(a: 'float') -> 'float':
    return a * a


# -----------------------------------------------------------------------------
