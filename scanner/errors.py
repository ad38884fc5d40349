"""Error types raised while scanning and querying the mention graph."""


class MdLinksError(Exception):
    """Base class for all mdlinks errors."""


class WalkError(MdLinksError):
    """Directory enumeration or file read failed."""


class DecodeError(MdLinksError):
    """A link target is not valid percent-encoded text."""


class PathResolutionError(MdLinksError):
    """Two paths cannot be expressed relative to each other."""


class NotFound(MdLinksError):
    """A queried path has no node in the graph."""

    def __init__(self, path: str):
        super().__init__(f"No file found: {path}")
        self.path = path


class InternalInvariantError(MdLinksError):
    """
    A structurally impossible state was reached.

    This indicates a bug in mdlinks, not bad input.
    """
