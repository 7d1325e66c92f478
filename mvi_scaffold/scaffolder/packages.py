"""Directory handles and package-name resolution.

The generators never touch the file system themselves; they work against
the small ``DirectoryHandle`` protocol below.  ``LocalDirectory`` backs it
with a real directory and ``MemoryDirectory`` with an in-memory tree (used
for dry runs and tests).

``PackageResolver`` turns a directory into the dotted Kotlin package of the
files placed in it.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol, Sequence, runtime_checkable

# Folder names that mark the start of a package path when no source root is known.
SOURCE_MARKERS: tuple[str, ...] = ("kotlin", "java")


# ---------------------------------------------------------------------------
# Directory handles
# ---------------------------------------------------------------------------


@runtime_checkable
class DirectoryHandle(Protocol):
    """A directory the generators can navigate and extend."""

    @property
    def path(self) -> str: ...

    def find_child(self, name: str) -> "DirectoryHandle | None": ...

    def create_child(self, name: str) -> "DirectoryHandle": ...

    def find_file(self, name: str) -> str | None: ...


class LocalDirectory:
    """``DirectoryHandle`` over a directory on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"LocalDirectory({self.path!r})"

    @property
    def path(self) -> str:
        return self._path.as_posix()

    def find_child(self, name: str) -> "LocalDirectory | None":
        child = self._path / name
        return LocalDirectory(child) if child.is_dir() else None

    def create_child(self, name: str) -> "LocalDirectory":
        child = self._path / name
        child.mkdir(parents=True, exist_ok=True)
        return LocalDirectory(child)

    def find_file(self, name: str) -> str | None:
        candidate = self._path / name
        return candidate.as_posix() if candidate.is_file() else None


class MemoryDirectory:
    """``DirectoryHandle`` over an in-memory tree.

    Files are stored in :attr:`files` by name; ``MemoryFileSink`` writes
    into them.
    """

    def __init__(self, path: str = "/") -> None:
        self._path = path
        self.children: dict[str, MemoryDirectory] = {}
        self.files: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"MemoryDirectory({self._path!r})"

    @property
    def path(self) -> str:
        return self._path

    def find_child(self, name: str) -> "MemoryDirectory | None":
        return self.children.get(name)

    def create_child(self, name: str) -> "MemoryDirectory":
        if name not in self.children:
            self.children[name] = MemoryDirectory(str(PurePosixPath(self._path) / name))
        return self.children[name]

    def find_file(self, name: str) -> str | None:
        if name in self.files:
            return str(PurePosixPath(self._path) / name)
        return None

    def walk(self) -> dict[str, str]:
        """Every file below this directory as ``{relative path: content}``."""
        result = dict(self.files)
        for name, child in self.children.items():
            for rel, content in child.walk().items():
                result[f"{name}/{rel}"] = content
        return result


def find_or_create_child(parent: DirectoryHandle, name: str) -> DirectoryHandle:
    """Return the existing subdirectory *name* of *parent*, creating it if absent."""
    return parent.find_child(name) or parent.create_child(name)


# ---------------------------------------------------------------------------
# Package resolution
# ---------------------------------------------------------------------------


def join_package(*parts: str) -> str:
    """Join dotted package fragments, skipping empty ones.

    ``join_package("", "home", "viewmodel")`` -> ``"home.viewmodel"``
    """
    return ".".join(part for part in parts if part)


class PackageResolver:
    """Derives a dotted package name for a directory.

    Primary strategy: find the configured source root that contains the
    directory and use the relative path.  Fallback: take the segments after
    the last ``kotlin``/``java`` folder in the absolute path.  When neither
    applies the default (empty) package is returned, never an error.
    """

    def __init__(
        self,
        source_roots: Sequence[str | Path] = (),
        markers: Sequence[str] = SOURCE_MARKERS,
    ) -> None:
        self.source_roots = [PurePosixPath(Path(root).as_posix()) for root in source_roots]
        self.markers = tuple(markers)

    def source_root_for(self, directory: DirectoryHandle) -> PurePosixPath | None:
        """The innermost configured source root containing *directory*."""
        target = PurePosixPath(directory.path)
        containing = [
            root for root in self.source_roots
            if target == root or root in target.parents
        ]
        if not containing:
            return None
        return max(containing, key=lambda root: len(root.parts))

    def resolve(self, directory: DirectoryHandle) -> str:
        """Return the dotted package of *directory* (possibly empty)."""
        target = PurePosixPath(directory.path)
        root = self.source_root_for(directory)
        if root is not None:
            return ".".join(target.relative_to(root).parts)
        return package_from_markers(target.parts, self.markers)


def package_from_markers(parts: Sequence[str], markers: Sequence[str] = SOURCE_MARKERS) -> str:
    """Join the segments following the last source marker in *parts*.

    ``("", "app", "src", "main", "kotlin", "com", "acme")`` -> ``"com.acme"``
    """
    for index in range(len(parts) - 1, -1, -1):
        if parts[index] in markers:
            return ".".join(parts[index + 1:])
    return ""
