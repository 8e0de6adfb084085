"""Path pattern helpers shared by the detectors.

Detectors match plain substrings and affixes against path strings, and
pull package names and versions out of fixed path grammars. Paths may use
either separator: Windows paths keep their backslashes even when the
detection runs on a POSIX host.
"""

import re
from collections.abc import Iterable

# Node package segments that are infrastructure, never package names
NODE_INFRA_SEGMENTS: frozenset[str] = frozenset({".bin"})

# /nix/store/{32-char hash}-{name}[-{version}]/...
_NIX_STORE_RE = re.compile(r"/nix/store/[0-9a-z]{32}-([^/]+)")

# {prefix}/Cellar/{name}/{version}/...
_CELLAR_RE = re.compile(
    r"(?:/opt/homebrew|/usr/local|/home/linuxbrew/\.linuxbrew)/Cellar/([^/]+)/([^/]+)/"
)


def with_windows_forms(*markers: str) -> tuple[str, ...]:
    """Return each POSIX marker together with its backslash form.

    Args:
        markers: Markers written with forward slashes.

    Returns:
        Tuple of the original markers followed by their Windows forms.
    """
    windows = tuple(m.replace("/", "\\") for m in markers)
    return markers + tuple(w for w in windows if w not in markers)


def contains_any(text: str, markers: Iterable[str]) -> bool:
    """Check if any marker occurs in the text."""
    return any(marker in text for marker in markers)


def ends_with_any(text: str, suffixes: Iterable[str]) -> bool:
    """Check if the text ends with any of the suffixes."""
    return text.endswith(tuple(suffixes))


def starts_with_any(text: str, prefixes: Iterable[str]) -> bool:
    """Check if the text starts with any of the prefixes."""
    return text.startswith(tuple(prefixes))


def segments_after(text: str, marker: str, start: int = 0) -> list[str] | None:
    """Split the part of a path that follows a marker into segments.

    The separator is taken from the marker itself, so ``/pipx/venvs/``
    splits on '/' and ``\\pipx\\venvs\\`` on '\\'.

    Args:
        text: Path string to search.
        marker: Marker to look for.
        start: Index to start searching from.

    Returns:
        List of segments after the first occurrence, or None if the marker
        does not occur.
    """
    idx = text.find(marker, start)
    if idx < 0:
        return None
    separator = "\\" if "\\" in marker else "/"
    return text[idx + len(marker) :].split(separator)


def first_segment_after(text: str, markers: Iterable[str]) -> str | None:
    """Return the first non-empty segment following any of the markers.

    Args:
        text: Path string to search.
        markers: Markers to try, in order.

    Returns:
        The segment, or None if no marker is followed by a segment.
    """
    for marker in markers:
        parts = segments_after(text, marker)
        if parts and parts[0]:
            return parts[0]
    return None


def extract_node_package(
    text: str,
    skip: frozenset[str] = NODE_INFRA_SEGMENTS,
) -> str | None:
    """Extract a package name from a node_modules path.

    Handles ``.../node_modules/{name}/...`` and scoped packages
    ``.../node_modules/@{scope}/{name}/...``. Segments listed in ``skip``
    are infrastructure (e.g. ``.bin``) and are never returned; the search
    continues with the next node_modules occurrence instead.

    Args:
        text: Path string to search.
        skip: Segments that are not package names.

    Returns:
        Package name (``@scope/name`` for scoped packages), or None.
    """
    for marker in ("/node_modules/", "\\node_modules\\"):
        start = 0
        while (parts := segments_after(text, marker, start)) is not None:
            start = text.find(marker, start) + len(marker)
            first = parts[0]
            if not first or first in skip:
                continue
            if first.startswith("@"):
                if len(parts) >= 2 and parts[1]:
                    return f"{first}/{parts[1]}"
                continue
            return first
    return None


def split_name_version(name_version: str) -> tuple[str, str | None]:
    """Split ``{name}-{version}`` where the version starts with a digit.

    Args:
        name_version: Combined name and optional version.

    Returns:
        Tuple of (name, version); version is None when the last dash is not
        followed by a digit.
    """
    head, sep, tail = name_version.rpartition("-")
    if sep and head and tail[:1].isdigit():
        return head, tail
    return name_version, None


def extract_nix_store_package(text: str) -> tuple[str, str | None] | None:
    """Extract name and version from a Nix store path.

    Args:
        text: Path such as ``/nix/store/{hash}-hello-2.10/bin/hello``.

    Returns:
        Tuple of (name, version) or None if the path is not a store path.
    """
    match = _NIX_STORE_RE.search(text)
    if match is None:
        return None
    return split_name_version(match.group(1))


def extract_cellar_package(text: str) -> tuple[str, str] | None:
    """Extract formula name and version from a Homebrew Cellar path.

    Args:
        text: Path such as ``/opt/homebrew/Cellar/git/2.51.2/bin/git``.

    Returns:
        Tuple of (name, version) or None if the path is not in a Cellar.
    """
    match = _CELLAR_RE.search(text)
    if match is None:
        return None
    return match.group(1), match.group(2)


def extract_snap_name(text: str) -> str | None:
    """Extract the snap name from a snap mount path.

    Handles ``/snap/{name}/{revision}/...`` and the
    ``/var/lib/snapd/snap/{name}/...`` layout. The ``bin`` launcher
    directory is not a snap name.

    Args:
        text: Path string to search.

    Returns:
        Snap name, or None.
    """
    rest: str | None = None
    if text.startswith("/snap/"):
        rest = text[len("/snap/") :]
    else:
        parts = segments_after(text, "/snapd/snap/")
        if parts is not None:
            rest = "/".join(parts)

    if rest is None:
        return None

    first = rest.split("/")[0]
    if not first or first == "bin":
        return None
    return first


def extract_snap_launcher(text: str) -> str | None:
    """Extract the snap name from a ``/snap/bin`` launcher path.

    Launchers are named ``{snap}`` for the snap's main app and
    ``{snap}.{app}`` for its other apps (``lxd.lxc``, ``microk8s.kubectl``).
    Short aliases such as ``lxc`` are symlinks to the dotted launcher.

    Args:
        text: Path string to search.

    Returns:
        Snap name, or None if the path is not a launcher.
    """
    if text.startswith("/snap/bin/"):
        launcher = text[len("/snap/bin/") :]
    else:
        parts = segments_after(text, "/snapd/snap/bin/")
        launcher = "/".join(parts) if parts is not None else ""

    if not launcher or "/" in launcher:
        return None
    return launcher.split(".", 1)[0] or None
