"""Custom exception hierarchy for alongroute."""


class AlongRouteError(Exception):
    """Base exception for all alongroute errors."""


class MalformedPolyline(AlongRouteError):
    """An encoded polyline cannot be decoded safely."""

    def __init__(self, encoded: str, position: int, reason: str):
        self.encoded = encoded
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed polyline at position {position}: {reason}")


class InsufficientRouteLength(AlongRouteError):
    """A route has too few points for the requested computation."""

    def __init__(self, length: int, required: int = 2):
        self.length = length
        self.required = required
        super().__init__(
            f"Route has {length} point(s); at least {required} required"
        )


class NoRouteFound(AlongRouteError):
    """A routing-service response carries no usable route."""

    def __init__(self, code: str | None, message: str = ""):
        self.code = code
        detail = f": {message}" if message else ""
        super().__init__(f"No route found (code={code!r}){detail}")


class InvalidPlacesResponse(AlongRouteError):
    """A places-service response is missing its element list."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid places response: {detail}")
