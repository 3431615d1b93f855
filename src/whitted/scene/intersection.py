"""Ray-object intersection records and per-ray intersection lists.

An ``Intersection`` is built eagerly from a ray, an object and a distance:
the hit point, eye vector, (eye-facing) normal, reflection vector and the
two epsilon-offset points are all computed up front.

The refractive indices on either side of the crossing (``n1`` entering from,
``n2`` leaving into) depend on every other crossing along the ray, so they
are filled in by ``Intersections`` once the whole list is known:

    1. collect and stable-sort all crossings by distance
    2. walk the sorted list with a stack of the volumes the ray is inside,
       recording the index of the innermost volume before and after each
       crossing

Reading ``n1``/``n2`` from a record that did not go through step 2 raises
``RuntimeError``.

Example:
    >>> from whitted.scene.intersection import Intersections
    >>> xs = world.intersect(ray)
    >>> hit = xs.hit()
    >>> if hit is not None:
    ...     colour = world.shade_hit(hit, remaining=5)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import TYPE_CHECKING, overload

from whitted.core.ray import Ray
from whitted.core.vector import EPSILON, Vec4, dot, reflect
from whitted.materials.material import VACUUM

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


@dataclass(frozen=True)
class Intersection:
    """A ray crossing an object's surface.

    Attributes:
        distance: Ray parameter of the crossing.
        obj: The object that was crossed.
        point: World-space crossing point.
        eyev: Vector back toward the ray origin (-direction).
        normalv: Surface normal, flipped to face the eye.
        inside: True if the normal was flipped (ray is inside the object).
        reflectv: Ray direction mirrored about ``normalv``.
        over_point: ``point`` nudged along ``normalv``; origin for shadow and
            reflection rays.
        under_point: ``point`` nudged against ``normalv``; origin for
            refraction rays.
        refractive_indices: ``(n1, n2)`` once the list-level pass has run.
    """

    distance: float
    obj: SceneObject
    point: Vec4
    eyev: Vec4
    normalv: Vec4
    inside: bool
    reflectv: Vec4
    over_point: Vec4
    under_point: Vec4
    refractive_indices: tuple[float, float] | None = None

    @property
    def has_refractive_indices(self) -> bool:
        return self.refractive_indices is not None

    def _indices(self) -> tuple[float, float]:
        if self.refractive_indices is None:
            raise RuntimeError(
                "Refractive indices are only known after the crossing has been placed "
                "in an Intersections list"
            )
        return self.refractive_indices

    @property
    def n1(self) -> float:
        """Refractive index of the medium the ray travels from."""
        return self._indices()[0]

    @property
    def n2(self) -> float:
        """Refractive index of the medium the ray travels into."""
        return self._indices()[1]

    def with_refractive_indices(self, n1: float, n2: float) -> Intersection:
        return replace(self, refractive_indices=(n1, n2))

    def schlick(self) -> float:
        return schlick(self)


def make_intersection(ray: Ray, obj: SceneObject, distance: float) -> Intersection:
    """Build an intersection record with all geometric quantities computed.

    Args:
        ray: The world-space ray.
        obj: The object crossed.
        distance: Ray parameter at the crossing.

    Returns:
        An Intersection without refractive indices.
    """
    point = ray.position(distance)
    eyev = -ray.direction
    normalv = obj.normal_at(point)
    inside = dot(normalv, eyev) < 0.0
    if inside:
        normalv = -normalv

    return Intersection(
        distance=distance,
        obj=obj,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
    )


def _assign_refractive_indices(ordered: Sequence[Intersection]) -> Iterator[Intersection]:
    """Annotate sorted crossings with the indices on either side.

    Membership in the container stack is by value: an equal object is the
    same volume.
    """
    containers: list[SceneObject] = []
    for crossing in ordered:
        n1 = containers[-1].material.refractive_index if containers else VACUUM

        if crossing.obj in containers:
            containers.remove(crossing.obj)
        else:
            containers.append(crossing.obj)

        n2 = containers[-1].material.refractive_index if containers else VACUUM
        yield crossing.with_refractive_indices(n1, n2)


class Intersections(Sequence[Intersection]):
    """All crossings of one ray, sorted by distance and index-annotated.

    Sorting is stable, so crossings at equal distances keep the order in
    which they were supplied.
    """

    __slots__ = ("_items",)

    def __init__(self, crossings: Iterable[Intersection] = ()) -> None:
        ordered = sorted(crossings, key=attrgetter("distance"))
        self._items: tuple[Intersection, ...] = tuple(_assign_refractive_indices(ordered))

    @classmethod
    def empty(cls) -> Intersections:
        return cls()

    @classmethod
    def merge(cls, *groups: Iterable[Intersection]) -> Intersections:
        """Combine crossings from several objects into one list.

        The indices are recomputed over the combined list, since they depend
        on every volume along the ray.
        """
        return cls(crossing for group in groups for crossing in group)

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Intersection, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[round(i.distance, 5) for i in self._items]})"

    def distances(self) -> list[float]:
        return [crossing.distance for crossing in self._items]

    def hit(self) -> Intersection | None:
        """The nearest crossing strictly in front of the ray origin.

        Crossings at distance zero or behind the origin never count.

        Returns:
            The hit, or None if the ray hits nothing ahead of it.
        """
        for crossing in self._items:
            if crossing.distance > 0.0:
                return crossing
        return None


def schlick(comps: Intersection) -> float:
    """Approximate the Fresnel reflectance at a crossing (Schlick).

    Args:
        comps: An index-annotated intersection.

    Returns:
        The fraction of light reflected, in [0, 1]. Exactly 1.0 under total
        internal reflection.
    """
    n1, n2 = comps.n1, comps.n2
    cos = dot(comps.eyev, comps.normalv)

    if n1 > n2:
        n_ratio = n1 / n2
        sin2_t = n_ratio**2 * (1.0 - cos**2)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((n1 - n2) / (n1 + n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
