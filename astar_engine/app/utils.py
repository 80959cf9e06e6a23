import math

EARTH_RADIUS_M = 6371000.0


def haversine(lat1, lon1, lat2, lon2):
    """Great-circle distance in meters between two lat/lon points."""
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = (math.sin(dphi / 2) ** 2
         + math.cos(p1) * math.cos(p2) * math.sin(dlmb / 2) ** 2)
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


def euclidean(x1, y1, x2, y2):
    return math.hypot(x2 - x1, y2 - y1)
