"""Path resolution utilities for mapping link targets to canonical paths."""

import os
import posixpath
import re
from pathlib import Path
from typing import Union
from urllib.parse import unquote_to_bytes

from .errors import DecodeError, PathResolutionError

PathLike = Union[str, Path]

# A percent sign must introduce exactly two hex digits.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def relative_path(base: PathLike, target: PathLike) -> str:
    """
    Express ``target`` relative to ``base``.

    The computation is purely lexical; neither path has to exist.

    Args:
        base: Directory the result is relative to.
        target: Path to express.

    Returns:
        Relative path using forward slashes, with leading ``../`` segments
        when ``target`` lies outside ``base``.

    Raises:
        PathResolutionError: If the two paths share no common root.
    """
    try:
        rel = os.path.relpath(os.fspath(target), os.fspath(base))
    except ValueError as e:
        raise PathResolutionError(f"cannot make {target} relative to {base}: {e}") from e
    return rel.replace(os.sep, "/")


def decode_link_target(raw: str) -> str:
    """
    Percent-decode a raw link target.

    Follows query-unescape rules: ``%XX`` escapes are decoded and ``+``
    becomes a space.

    Raises:
        DecodeError: On a malformed escape or a result that is not UTF-8.
    """
    bad = _BAD_ESCAPE.search(raw)
    if bad is not None:
        raise DecodeError(f"invalid URL escape {raw[bad.start():bad.start() + 3]!r} in {raw!r}")
    try:
        return unquote_to_bytes(raw.replace("+", " ")).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"link target {raw!r} does not decode to UTF-8: {e}") from e


def canonical_path(root: PathLike, path: PathLike) -> str:
    """Get the canonical key of ``path``: relative to ``root``, forward slashes."""
    return relative_path(root, path)


def resolve_link_target(
    root: PathLike,
    source_file: PathLike,
    raw_target: str,
) -> str:
    """
    Resolve a raw link target found in ``source_file`` to a canonical path.

    The decoded target is joined onto the directory containing the source
    file, so ``./``, ``../`` and sibling references resolve the way a
    markdown viewer would. A leading ``/`` does not escape that directory.
    The target does not have to exist.

    Args:
        root: Project root the result is relative to.
        source_file: File the link was found in.
        raw_target: Target span as written in the file, possibly encoded.

    Returns:
        Canonical root-relative path of the target.

    Raises:
        DecodeError: If ``raw_target`` is not valid percent-encoded text.
        PathResolutionError: If the target cannot be made relative to root.
    """
    target = decode_link_target(raw_target)
    source_dir = os.path.dirname(os.fspath(source_file)).replace(os.sep, "/")
    joined = posixpath.normpath(posixpath.join(source_dir, "./" + target.lstrip("/")))
    return relative_path(root, joined)
