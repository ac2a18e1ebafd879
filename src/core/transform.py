# core/transform.py
"""
Model transforms for the primitives.

Every primitive lives in a canonical object space (unit sphere, unit
cylinder, unit cone). Its placement in the world is a single 4x4 matrix
built from a position, three Euler angles (radians) and a per-axis scale:

    M = T * Rx * Ry * Rz * S

Applied to a column vector this scales first, then rotates about Z, Y and X,
and translates last. Matrices are numpy float64 arrays and are returned
read-only so a primitive cannot be altered after construction.
"""
import logging
import math
from typing import Sequence, Tuple, Union

import numpy as np

from core.errors import ConfigurationError
from core.vector import Vector3

logger = logging.getLogger(__name__)

# Scale components closer to zero than this make the transform singular.
SCALE_EPSILON = 1e-12

VectorLike = Union[Vector3, Sequence[float], np.ndarray]


def as_vector3(value: VectorLike, name: str) -> Vector3:
    """
    Converts a Vector3, 3-sequence or numpy array into a Vector3, raising
    ConfigurationError for anything that is not three finite numbers.
    """
    try:
        vec = Vector3.from_any(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be three numbers, got {value!r}") from e
    if not all(math.isfinite(c) for c in vec):
        raise ConfigurationError(f"{name} must be finite, got {vec!r}")
    return vec


def translation_matrix(offset: Vector3) -> np.ndarray:
    m = np.identity(4)
    m[0, 3] = offset.x
    m[1, 3] = offset.y
    m[2, 3] = offset.z
    return m


def rotation_matrix_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_matrix_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_matrix_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scale_matrix(scale: Vector3) -> np.ndarray:
    return np.diag([scale.x, scale.y, scale.z, 1.0])


def build_transform(position: VectorLike,
                    orientation: VectorLike,
                    scale: VectorLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Builds the model transform and its inverse.

    Args:
        position: Translation applied last.
        orientation: Euler angles in radians about X, Y and Z.
        scale: Per-axis scale applied first.

    Returns:
        (transform, inverse_transform), both read-only 4x4 float64 arrays.

    Raises:
        ConfigurationError: If a scale component is zero or the composed
            matrix cannot be inverted.
    """
    position = as_vector3(position, "position")
    orientation = as_vector3(orientation, "orientation")
    scale = as_vector3(scale, "scale")

    if min(abs(c) for c in scale) < SCALE_EPSILON:
        logger.warning("Rejecting non-invertible scale %r", scale)
        raise ConfigurationError(f"Scale {scale!r} has a zero component; the transform is not invertible")

    transform = (translation_matrix(position)          # translation (last)
                 @ rotation_matrix_x(orientation.x)
                 @ rotation_matrix_y(orientation.y)
                 @ rotation_matrix_z(orientation.z)
                 @ scale_matrix(scale))                # scaling (first)

    try:
        inverse = np.linalg.inv(transform)
    except np.linalg.LinAlgError as e:
        logger.warning("Rejecting singular transform built from scale %r", scale)
        raise ConfigurationError(f"Transform built from scale {scale!r} is singular") from e

    transform.setflags(write=False)
    inverse.setflags(write=False)
    return transform, inverse


def transform_point(matrix: np.ndarray, p: Vector3) -> Vector3:
    """
    Applies a 4x4 matrix to a point (w = 1).
    """
    x, y, z, _ = matrix @ np.append(p.to_array(), 1.0)
    return Vector3(x, y, z)


def transform_direction(matrix: np.ndarray, d: Vector3) -> Vector3:
    """
    Applies a 4x4 matrix to a direction (w = 0), ignoring translation.
    """
    x, y, z, _ = matrix @ np.append(d.to_array(), 0.0)
    return Vector3(x, y, z)


def transform_normal(inverse: np.ndarray, n: Vector3) -> Vector3:
    """
    Maps an object-space normal to world space with the inverse-transpose
    of the model transform and renormalizes it. Takes the inverse matrix,
    not the forward one.
    """
    x, y, z, _ = inverse.T @ np.append(n.to_array(), 0.0)
    return Vector3(x, y, z).normalize()
