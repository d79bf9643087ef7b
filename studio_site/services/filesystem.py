"""File system service for directory listing and file management."""

from pathlib import Path

import structlog

log = structlog.stdlib.get_logger()


class FileSystemService:
    """Service for file system operations with logging."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Initialize the file system service.

        Args:
            base_path: Base directory that relative paths resolve against
                (defaults to current working directory)
        """
        self.base_path = base_path or Path.cwd()
        log.info("File system service initialized", base_path=str(self.base_path))

    def resolve(self, path: Path) -> Path:
        """Resolve a possibly relative path against the base path."""
        return path if path.is_absolute() else self.base_path / path

    def list_files(self, directory: Path, suffixes: frozenset[str] | None = None) -> list[Path]:
        """List the files directly inside a directory, sorted by name.

        Args:
            directory: Directory to list
            suffixes: Lower-case suffixes (with the dot) to keep; None keeps all

        Returns:
            Matching file paths

        Raises:
            FileNotFoundError: If directory does not exist
            NotADirectoryError: If the path is not a directory
            OSError: If the directory cannot be read
        """
        directory = self.resolve(directory)
        try:
            if not directory.exists():
                raise FileNotFoundError(f"Directory not found: {directory}")

            if not directory.is_dir():
                raise NotADirectoryError(f"Path is not a directory: {directory}")

            file_paths = sorted(
                (entry for entry in directory.iterdir() if entry.is_file()),
                key=lambda p: p.name,
            )
            if suffixes is not None:
                file_paths = [p for p in file_paths if p.suffix.lower() in suffixes]

            log.debug(
                "Listed files in directory",
                directory=str(directory),
                count=len(file_paths),
            )

            return file_paths

        except OSError as e:
            log.warning("Failed to list files", directory=str(directory), error=str(e))
            raise
