from typing import Any, Callable, Dict, Mapping, Tuple
import json
import logging

from vmath.util.errors import CodecException
from vmath.linalg.vector_base import Vector
from vmath.linalg.dense_vector import DenseVector
from vmath.linalg.vector_view import VectorView


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


_Payload = Dict[str, Any]


def _dense_to_payload(v: 'Vector') -> '_Payload':
    return {'name': v.name, 'size': v.size(), 'values': list(v)}


def _dense_from_payload(payload: 'Mapping[str, Any]') -> 'Vector':
    values = payload['values']
    if len(values) != payload['size']:
        raise CodecException(f"Expected {payload['size']} values, got {len(values)}")
    return DenseVector(values, payload.get('name'))


def _view_to_payload(v: 'Vector') -> '_Payload':
    assert isinstance(v, VectorView)
    return {'name': v.name, 'offset': v.offset, 'size': v.size(), 'parent': _to_json(v.vector)}


def _view_from_payload(payload: 'Mapping[str, Any]') -> 'Vector':
    parent = _from_json(payload['parent'])
    view = parent.view_part(payload['offset'], payload['size'])
    view.name = payload.get('name')
    return view


_CODECS: 'Dict[str, Tuple[Callable[[Vector], _Payload], Callable[[Mapping[str, Any]], Vector]]]' = {
    'DenseVector': (_dense_to_payload, _dense_from_payload),
    'VectorView': (_view_to_payload, _view_from_payload),
}


# -----------------------------------------------------------------------------


def _to_json(v: 'Vector') -> '_Payload':
    cls = type(v).__name__
    codec = _CODECS.get(cls)
    if codec is None:
        raise CodecException(f"Cannot encode vector of class '{cls}'")
    return {'class': cls, 'vector': codec[0](v)}


def _from_json(obj: 'Any') -> 'Vector':
    if not isinstance(obj, dict) or 'class' not in obj or 'vector' not in obj:
        raise CodecException("Expected an object with 'class' and 'vector' members")
    cls = obj['class']
    codec = _CODECS.get(cls)
    if codec is None:
        raise CodecException(f"Unknown vector class '{cls}'")
    logger.debug("Decoding %s", cls)
    try:
        return codec[1](obj['vector'])
    except CodecException:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise CodecException(f"Malformed {cls} payload: {e}") from e


def encode(v: 'Vector') -> 'str':
    """ Returns the JSON representation of `v`.

        The representation keeps the class, size, values and name of
        the vector; label bindings are not included.
    """
    logger.debug("Encoding %s", type(v).__name__)
    return json.dumps(_to_json(v))


def decode(text: 'str') -> 'Vector':
    """ Rebuilds a vector from the output of `encode`.
    """
    try:
        obj = json.loads(text)
    except ValueError as e:
        raise CodecException(f"Invalid JSON: {e}") from e
    return _from_json(obj)


# -----------------------------------------------------------------------------
