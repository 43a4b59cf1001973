"""Exercise and solution model handed to analyzers."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class Exercise:
    """An exercise identified by its slug (e.g., "two-fer")."""

    slug: str


@dataclass(frozen=True, kw_only=True)
class Solution:
    """A stored solution to an exercise, one directory of source files."""

    directory: Path
    exercise: Exercise

    def source_files(self) -> Sequence[Path]:
        """List the solution's files, skipping hidden entries and directories."""
        return sorted(
            path
            for path in self.directory.iterdir()
            if path.is_file() and not path.name.startswith(".")
        )

    async def read(self, name: str) -> str:
        """Read one file of the solution."""
        return await asyncio.to_thread((self.directory / name).read_text)
