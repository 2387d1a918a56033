"""Textdomain resolution.

A textdomain names where a translatable string comes from. Callers may
name one explicitly; otherwise the file that called the façade is used.
"""

import inspect
import os
from pathlib import PurePosixPath, PureWindowsPath
from typing import AbstractSet, Optional, Union

from infrastructure.i18n.models import COMMON_ALIAS
from infrastructure.observability import get_module_logger

logger = get_module_logger()

_PACKAGE_DIR = os.path.normcase(os.path.dirname(os.path.abspath(__file__)))


def _normalize_filename(filename: str) -> str:
    return os.path.normcase(os.path.abspath(filename))


def is_internal_file(filename: str, skip_files: AbstractSet[str] = frozenset()) -> bool:
    """Check whether filename belongs to the façade or to a registered wrapper.

    Args:
        filename: Source file of a stack frame.
        skip_files: Additional normalized file paths to treat as façade code.

    Returns:
        True if frames from this file must be skipped.
    """
    normalized = _normalize_filename(filename)
    return os.path.dirname(normalized) == _PACKAGE_DIR or normalized in skip_files


def _is_usable_filename(filename: str) -> bool:
    # Code compiled from strings or the REPL reports "<string>", "<stdin>", ...
    return bool(filename) and not (filename.startswith("<") and filename.endswith(">"))


def find_caller_file(skip_files: AbstractSet[str] = frozenset()) -> Optional[str]:
    """Return the source file of the nearest caller outside the façade.

    Walks outward from the current frame, skipping frames from the façade
    package and from skip_files.

    Args:
        skip_files: Normalized file paths of wrappers to skip as well.

    Returns:
        The caller's file path, or None if it is not a real file.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if not is_internal_file(filename, skip_files):
                return filename if _is_usable_filename(filename) else None
            frame = frame.f_back
        return None
    finally:
        del frame


def resolve_textdomain(
    textdomain: Optional[str],
    default_textdomain: str,
    common_textdomain: str,
    skip_files: AbstractSet[str] = frozenset(),
) -> str:
    """Determine the textdomain a lookup runs against.

    Args:
        textdomain: Textdomain given by the caller, or None to detect it.
        default_textdomain: Used when no caller file can be determined.
        common_textdomain: What the "common" alias maps to.
        skip_files: Normalized wrapper file paths to skip during detection.

    Returns:
        The resolved textdomain.
    """
    if textdomain is None:
        caller = find_caller_file(skip_files)
        if caller is None:
            logger.debug("textdomain_defaulted", textdomain=default_textdomain)
            return default_textdomain
        return caller
    if textdomain == COMMON_ALIAS:
        return common_textdomain
    return textdomain


def normalize_textdomain(
    textdomain: str, root_path: Optional[Union[str, os.PathLike]] = None
) -> str:
    """Make file textdomains independent of where the site is installed.

    Absolute paths below root_path become root-relative and all path
    separators become forward slashes. Other textdomains are returned as is.

    Args:
        textdomain: Resolved textdomain.
        root_path: Installation root, if known.

    Returns:
        The normalized textdomain.

    Example:
        >>> normalize_textdomain("/var/www/site/templates/home.php", "/var/www")
        'site/templates/home.php'
    """
    if "\\" in textdomain:
        textdomain = PureWindowsPath(textdomain).as_posix()
    if root_path is None:
        return textdomain

    root = os.fspath(root_path).replace("\\", "/").rstrip("/")
    path = PurePosixPath(textdomain)
    if root and path.is_absolute():
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            return textdomain
    return textdomain


def wrapper_files(*filenames: str) -> frozenset:
    """Normalize wrapper file paths for use as skip_files."""
    return frozenset(_normalize_filename(name) for name in filenames)
