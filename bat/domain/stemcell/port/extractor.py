from abc import abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from bat.domain.shared.port import Port


@runtime_checkable
class ArchiveExtractor(Port, Protocol):
    """Extract single entries from compressed archives."""

    @abstractmethod
    def extract(self, archive: Path, entry: str, destination: Path) -> None:
        """
        Write the archive member ``entry`` into ``destination``.

        Args:
            archive: Gzip-compressed tar archive
            entry: Member name inside the archive (e.g., stemcell.MF)
            destination: Existing directory to extract into

        Raises:
            ArchiveExtractionError: If the archive is missing or corrupt,
                or does not contain ``entry``
        """
        ...
