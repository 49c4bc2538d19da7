"""UnitOfWork over JSON data files.

On ``begin()`` the current contents of every participating file are
kept in memory; ``rollback()`` writes them back.  This makes a group of
repository writes all-or-nothing for a single process.  It does not
lock the files against other processes.
"""

from __future__ import annotations

from pathlib import Path

from shopcart.domain.repository.unit_of_work import UnitOfWork


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_paths: list[Path]) -> None:
        self._file_paths = list(file_paths)
        self._snapshot: dict[Path, str | None] = {}

    def begin(self) -> None:
        self._snapshot = {
            path: path.read_text(encoding="utf-8") if path.exists() else None
            for path in self._file_paths
        }

    def _do_commit(self) -> None:
        # Repository writes already went to disk; only forget the snapshot.
        self._snapshot = {}

    def rollback(self) -> None:
        for path, content in self._snapshot.items():
            if content is None:
                path.unlink(missing_ok=True)
            else:
                path.write_text(content, encoding="utf-8")
        self._snapshot = {}
