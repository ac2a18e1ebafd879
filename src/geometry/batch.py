# geometry/batch.py
"""
Intersect many rays against one primitive at once.

Each ray is independent, so the primitive's kernel runs over all of them in
a parallel loop, one ray per iteration. Rays go into object space and
results come back out with whole-array matrix products instead of per-ray
calls.

Example:
    >>> import numpy as np
    >>> from geometry.sphere import Sphere
    >>> from geometry.batch import intersect_batch
    >>> origins = np.array([[0.0, 0.0, 5.0], [3.0, 0.0, 5.0]])
    >>> directions = np.array([[0.0, 0.0, -1.0], [0.0, 0.0, -1.0]])
    >>> result = intersect_batch(Sphere(), origins, directions)
    >>> result.hit.tolist()
    [True, False]
"""
import functools
import logging
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from geometry.hittable import Geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Per-ray intersection results, in world space.

    Attributes:
        hit: (N,) bool, whether each ray hit the primitive.
        t: (N,) ray parameter of each hit.
        points: (N, 3) hit points.
        normals: (N, 3) unit normals.
        uvs: (N, 2) texture coordinates.

    Rows for rays that missed are all zero.
    """

    hit: npt.NDArray[np.bool_]
    t: npt.NDArray[np.float64]
    points: npt.NDArray[np.float64]
    normals: npt.NDArray[np.float64]
    uvs: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return self.hit.shape[0]


@functools.lru_cache(maxsize=None)
def _batch_runner(kernel):
    """Compile a parallel loop around one primitive kernel."""

    @njit(parallel=True)
    def run(origins, directions, hit, t, points, normals, uvs):
        for i in prange(origins.shape[0]):
            h, ti, px, py, pz, nx, ny, nz, u, v = kernel(
                origins[i, 0], origins[i, 1], origins[i, 2],
                directions[i, 0], directions[i, 1], directions[i, 2],
            )
            if h:
                hit[i] = True
                t[i] = ti
                points[i, 0] = px
                points[i, 1] = py
                points[i, 2] = pz
                normals[i, 0] = nx
                normals[i, 1] = ny
                normals[i, 2] = nz
                uvs[i, 0] = u
                uvs[i, 1] = v

    return run


def _as_rays(values: npt.ArrayLike, name: str) -> npt.NDArray[np.float64]:
    array = np.ascontiguousarray(values, dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError(f"{name} must have shape (N, 3), got {array.shape}")
    return array


def intersect_batch(geometry: Geometry,
                    origins: npt.ArrayLike,
                    directions: npt.ArrayLike) -> BatchResult:
    """Intersect N world-space rays with a primitive.

    Args:
        geometry: The primitive to test against.
        origins: (N, 3) ray origins.
        directions: (N, 3) ray directions. Not normalized; their length
            scales t exactly as in Geometry.intersect.

    Returns:
        A BatchResult whose row i matches geometry.intersect(ray i).

    Raises:
        ValueError: If the arrays are not (N, 3) or N differs between them.
    """
    origins = _as_rays(origins, "origins")
    directions = _as_rays(directions, "directions")
    if origins.shape[0] != directions.shape[0]:
        raise ValueError(
            f"origins and directions differ in length: {origins.shape[0]} != {directions.shape[0]}"
        )

    m = geometry.transform
    inv = geometry.inverse_transform

    # Row-vector form of M @ p: p @ M[:3, :3].T + M[:3, 3].
    obj_origins = np.ascontiguousarray(origins @ inv[:3, :3].T + inv[:3, 3])
    obj_directions = directions @ inv[:3, :3].T

    # Unit object-space directions, as in Geometry.intersect. Zero rows stay
    # zero and miss.
    lengths = np.linalg.norm(obj_directions, axis=1)
    obj_directions = np.ascontiguousarray(np.divide(
        obj_directions, lengths[:, None],
        out=np.zeros_like(obj_directions), where=lengths[:, None] > 0.0,
    ))

    n = origins.shape[0]
    hit = np.zeros(n, dtype=np.bool_)
    t = np.zeros(n)
    points = np.zeros((n, 3))
    normals = np.zeros((n, 3))
    uvs = np.zeros((n, 2))

    if n > 0:
        _batch_runner(type(geometry).kernel)(
            obj_origins, obj_directions, hit, t, points, normals, uvs
        )

    # Back to the caller's direction length.
    t = np.divide(t, lengths, out=np.zeros_like(t), where=hit)

    # Points use the forward transform, normals the inverse-transpose
    # (row-vector form: n @ inv).
    points = np.where(hit[:, None], points @ m[:3, :3].T + m[:3, 3], 0.0)
    normals = normals @ inv[:3, :3]
    normal_lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    normals = np.divide(normals, normal_lengths, out=np.zeros_like(normals),
                        where=normal_lengths > 0.0)

    logger.debug("Batch of %d rays against %s: %d hits", n, type(geometry).__name__, int(hit.sum()))
    return BatchResult(hit=hit, t=t, points=points, normals=normals, uvs=uvs)
