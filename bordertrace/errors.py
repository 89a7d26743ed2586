# errors.py
# exception hierarchy shared by the tracer, registry and raster I/O


class BordertraceError(Exception):
    """Base class for all bordertrace failures."""


class ImageFormatError(BordertraceError):
    """Raster could not be decoded (bad P3 header, bad token, unreadable file)."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class RegistryError(BordertraceError):
    """A contour could not be stored; the scan is aborted."""


class TraceError(BordertraceError):
    """Tracing from a start cell can never return to it."""

    def __init__(self, start, steps: int, cycle: bool = False):
        self.start = start
        self.steps = steps
        self.cycle = cycle
        why = "revisited a (cell, heading) state" if cycle else "hit the step cap"
        super().__init__(f"trace from {start} {why} after {steps} steps without closing")
