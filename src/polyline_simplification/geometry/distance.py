# polyline_simplification/geometry/distance.py
"""
Squared distance kernels shared by the simplification algorithms.

All kernels return squared distances so callers can compare against a
squared tolerance without taking square roots. Whenever a direction vector
has a squared length within epsilon of zero, the kernel falls back to the
distance to the first defining point instead of dividing.
"""

from polyline_simplification.geometry.point import Point2, approx_equal


def point_distance2(p: Point2, q: Point2) -> float:
    """
    Squared Euclidean distance between two points.

    Args:
        p: First point.
        q: Second point.

    Returns:
        float: Squared distance.
    """
    return p.distance2_to(q)


def line_distance2(l1: Point2, l2: Point2, p: Point2) -> float:
    """
    Squared distance from a point to the infinite line through two points.

    Args:
        l1: First point on the line.
        l2: Second point on the line.
        p: Point to measure.

    Returns:
        float: Squared distance from ``p`` to its projection on the line.
    """
    v = l2 - l1
    w = p - l1

    cv = v.dot(v)
    cw = w.dot(v)

    if approx_equal(cv, 0):
        return point_distance2(p, l1)

    return point_distance2(p, l1.lerp(l2, cw / cv))


def segment_distance2(s1: Point2, s2: Point2, p: Point2) -> float:
    """
    Squared distance from a point to a line segment.

    Args:
        s1: Segment start.
        s2: Segment end.
        p: Point to measure.

    Returns:
        float: Squared distance from ``p`` to the closest point of the segment.
    """
    v = s2 - s1
    w = p - s1

    cw = w.dot(v)
    if cw <= 0:
        # Projection falls before s1
        return point_distance2(p, s1)

    cv = v.dot(v)
    if cv <= cw:
        # Projection falls past s2
        return point_distance2(p, s2)

    if approx_equal(cv, 0):
        return point_distance2(p, s1)

    return point_distance2(p, s1.lerp(s2, cw / cv))


def ray_distance2(r1: Point2, r2: Point2, p: Point2) -> float:
    """
    Squared distance from a point to the ray starting at ``r1`` through ``r2``.

    Args:
        r1: Ray origin.
        r2: A point defining the ray direction.
        p: Point to measure.

    Returns:
        float: Squared distance from ``p`` to the closest point of the ray.
    """
    v = r2 - r1
    w = p - r1

    cv = v.dot(v)
    cw = w.dot(v)

    if cw <= 0:
        # Projection falls behind the origin
        return point_distance2(p, r1)

    if approx_equal(cv, 0):
        return point_distance2(p, r1)

    return point_distance2(p, r1.lerp(r2, cw / cv))
