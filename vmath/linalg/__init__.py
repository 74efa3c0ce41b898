from vmath.linalg.vector_base import Element, Vector
from vmath.linalg.abstract_vector import AbstractVector, equivalent, strict_equivalence
from vmath.linalg.matrix import Matrix, DenseMatrix
from vmath.linalg.dense_vector import DenseVector
from vmath.linalg.vector_view import VectorView
