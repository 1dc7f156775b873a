# src/catalog/file_system.py

import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """
    File access used by the catalog manager.
    Kept behind an interface so the manager can be tested without a disk.
    """

    @abstractmethod
    def exists(self, path: str) -> bool: ...

    @abstractmethod
    def read_text(self, path: str) -> str: ...

    @abstractmethod
    def write_text(self, path: str, content: str) -> None: ...

    @abstractmethod
    def combine(self, base: str, *parts: str) -> str: ...

    @abstractmethod
    def directory_name(self, path: str) -> str: ...

    @abstractmethod
    def create_directory(self, path: str) -> None: ...

    @abstractmethod
    def allow_writes_on_directory(self, path: str) -> bool: ...


class LocalFileSystem(FileSystem):
    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        """
        Write through a temp file in the same directory, then replace the target.
        A failed write leaves the previous file untouched.
        """
        target = Path(path)
        mode = stat.S_IMODE(target.stat().st_mode) | stat.S_IWRITE if target.exists() else 0o644
        fd, temp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(temp_path, mode)
            os.replace(temp_path, target)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def combine(self, base: str, *parts: str) -> str:
        return str(Path(base).joinpath(*parts))

    def directory_name(self, path: str) -> str:
        return str(Path(path).parent)

    def create_directory(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def allow_writes_on_directory(self, path: str) -> bool:
        """
        Clear read-only protection on the directory and the files directly inside it.

        Returns:
            False when the directory does not exist
        """
        directory = Path(path)
        if not directory.is_dir():
            return False

        directory.chmod(directory.stat().st_mode | stat.S_IWRITE | stat.S_IEXEC)
        for entry in os.scandir(directory):
            if entry.is_file(follow_symlinks=False):
                os.chmod(entry.path, entry.stat().st_mode | stat.S_IWRITE)
        return True
