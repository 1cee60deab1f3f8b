"""
numvec – векторы фиксированного размера и кватернионы на базе NumPy.
Сравнение с допуском, скалярное/векторное произведение, угол,
произведение Гамильтона, сопряжение и обратный кватернион.
"""

from numvec.utils import logger, Config
from numvec.errors import (
    NumvecError, BoundsError, DimensionMismatchError, ScalarTypeMismatchError
)
from numvec.operators import (
    PRECISION_FACTOR, precision_boundary, is_equal, round, to_degrees, to_radians
)
from numvec.vector import NumVector, vector, vector_type, dot, cross, angle
from numvec.quaternion import Quaternion, ImagPart, quaternion_type, hamilton_product

__version__ = "1.0.0"

# round сознательно не в __all__: `from numvec import *` не должен
# перекрывать встроенный round
__all__ = [
    "logger",
    "Config",
    "NumvecError",
    "BoundsError",
    "DimensionMismatchError",
    "ScalarTypeMismatchError",
    "PRECISION_FACTOR",
    "precision_boundary",
    "is_equal",
    "to_degrees",
    "to_radians",
    "NumVector",
    "vector",
    "vector_type",
    "dot",
    "cross",
    "angle",
    "Quaternion",
    "ImagPart",
    "quaternion_type",
    "hamilton_product",
]
