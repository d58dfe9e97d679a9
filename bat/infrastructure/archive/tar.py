import subprocess
from pathlib import Path

import logfire

from bat.domain.shared.error import ArchiveExtractionError
from bat.domain.stemcell.port.extractor import ArchiveExtractor


class TarArchiveExtractor(ArchiveExtractor):
    """Extracts entries from .tgz archives by running ``tar``."""

    def __init__(self, tar_binary: str = "tar", timeout: float = 60):
        self._tar_binary = tar_binary
        self._timeout = timeout

    def extract(self, archive: Path, entry: str, destination: Path) -> None:
        if not archive.is_file():
            raise ArchiveExtractionError(f"Archive {archive} does not exist", archive=archive)

        command = [
            self._tar_binary,
            "xzf",
            str(archive),
            f"--directory={destination}",
            entry,
        ]
        logfire.debug("Extracting archive entry", archive=str(archive), entry=entry)

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise ArchiveExtractionError(
                f"Cannot run {self._tar_binary!r}: {e.strerror}", archive=archive
            ) from e
        except subprocess.TimeoutExpired as e:
            logfire.error("tar timed out", archive=str(archive), timeout=self._timeout)
            raise ArchiveExtractionError(
                f"Extracting {entry} from {archive} timed out after {self._timeout}s",
                archive=archive,
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logfire.error(
                "tar failed",
                archive=str(archive),
                entry=entry,
                returncode=result.returncode,
                stderr=stderr,
            )
            raise ArchiveExtractionError(
                f"Extracting {entry} from {archive} failed "
                f"(exit {result.returncode}): {stderr}",
                archive=archive,
            )
