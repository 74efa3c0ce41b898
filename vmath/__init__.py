from vmath.util import VectorException, CardinalityException, IndexException, \
    UnboundLabelException, InvalidArgumentException, CodecException
from vmath.linalg import Element, Vector, AbstractVector, DenseVector, VectorView, \
    Matrix, DenseMatrix, equivalent, strict_equivalence
from vmath.codec import encode, decode
