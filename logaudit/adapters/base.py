"""Abstract base adapter for source-language integration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from logaudit.adapters.java_nodes import JavaNode


__all__ = ["SourceUnit", "ParseFailure", "ParseResult", "BaseSourceAdapter"]


@dataclass(frozen=True)
class SourceUnit:
    """A successfully parsed source file."""

    file_path: Path
    root: JavaNode


@dataclass(frozen=True)
class ParseFailure:
    """A source file that could not be parsed or analysed."""

    file_path: Path
    reason: str


ParseResult = Union[SourceUnit, ParseFailure]


class BaseSourceAdapter(ABC):
    """Interface that each language adapter must implement."""

    extensions: tuple[str, ...] = ()

    def __init__(self, root_dir: Path, extensions: list[str] | None = None) -> None:
        self.root_dir = root_dir.resolve()
        if extensions:
            self.extensions = tuple(extensions)

    def discover_sources(self) -> Iterator[Path]:
        """Yield candidate source files under the root, in a stable order."""
        found: set[Path] = set()
        for ext in self.extensions:
            found.update(p for p in self.root_dir.rglob(f"*{ext}") if p.is_file())
        yield from sorted(found)

    def parse(self, path: Path) -> ParseResult:
        try:
            source = path.read_bytes()
        except OSError as exc:
            return ParseFailure(file_path=path, reason=f"unreadable: {exc}")
        return self.parse_source(source, path)

    @abstractmethod
    def parse_source(self, source: bytes | str, file_path: Path) -> ParseResult:
        """Parse source text into a :class:`SourceUnit` or a :class:`ParseFailure`."""
