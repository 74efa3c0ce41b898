from vmath.util.errors import VectorException, CardinalityException, IndexException, \
    UnboundLabelException, InvalidArgumentException, CodecException
from vmath.util.functions import UnaryFunction, BinaryFunction, is_accumulating, \
    PlusFunction, PlusWithScaleFunction, MinusFunction, MultFunction, DivFunction, \
    MaxFunction, MinFunction, plus, minus, mult, div, \
    abs_function, negate, sqrt_function, square
