"""StemcellResolver - works out which stemcell an acceptance run deploys."""

import logging
import tempfile
from pathlib import Path
from urllib.parse import urlparse

from bat.domain.shared.error import ArchiveExtractionError, ConfigurationError, ParseError
from bat.domain.shared.service import Service
from bat.domain.stemcell.model.document import BatFile, StemcellManifest, load_document
from bat.domain.stemcell.model.value import (
    LATEST_VERSION,
    STEMCELL_MANIFEST_ENTRY,
    Stemcell,
)
from bat.domain.stemcell.port.extractor import ArchiveExtractor

logger = logging.getLogger(__name__)


def _is_uri(path_or_uri: str) -> bool:
    # Windows drive letters parse as one-letter schemes
    return "://" in path_or_uri and len(urlparse(path_or_uri).scheme) > 1


class StemcellResolver(Service):
    """Resolves the stemcell named by a bat file.

    A concrete version in the bat file is taken as-is. The ``latest`` version
    is resolved by reading the manifest embedded in the local stemcell archive,
    whose name and version then win over the bat file.
    """

    extractor: ArchiveExtractor

    def resolve(self, config_path: Path, path_or_uri: str) -> Stemcell:
        """Resolve the stemcell for an acceptance run.

        Args:
            config_path: Bat file declaring ``properties.stemcell.name`` and
                ``properties.stemcell.version``.
            path_or_uri: Where the stemcell artifact lives. Must be a local
                file when the version is ``latest``.

        Returns:
            Stemcell with non-empty name and version.

        Raises:
            ConfigurationError: If the bat file is unreadable or incomplete, or
                ``latest`` is requested without a local stemcell.
            ArchiveExtractionError: If the manifest cannot be extracted.
            ParseError: If the bat file or manifest is malformed.
        """
        bat_file = load_document(Path(config_path), BatFile, error=ConfigurationError)
        name = bat_file.properties.stemcell.name
        version = bat_file.properties.stemcell.version

        if version != LATEST_VERSION:
            logger.debug("Using stemcell %s-%s from %s", name, version, config_path)
            return Stemcell(name=name, version=version, path=path_or_uri)

        manifest = self._read_manifest(path_or_uri)
        stemcell = Stemcell(name=manifest.name, version=manifest.version, path=path_or_uri)
        logger.info("Resolved latest stemcell to %s from %s", stemcell, path_or_uri)
        return stemcell

    def _read_manifest(self, path_or_uri: str) -> StemcellManifest:
        archive = Path(path_or_uri)
        if _is_uri(path_or_uri) or not archive.is_file():
            raise ConfigurationError(
                f'Specifying "{LATEST_VERSION}" requires a local stemcell, '
                f"got {path_or_uri!r}",
                field="properties.stemcell.version",
            )

        with tempfile.TemporaryDirectory(prefix="stemcell-") as tmpdir:
            destination = Path(tmpdir)
            self.extractor.extract(archive, STEMCELL_MANIFEST_ENTRY, destination)

            manifest_path = destination / STEMCELL_MANIFEST_ENTRY
            if manifest_path.is_symlink():
                raise ArchiveExtractionError(
                    f"{STEMCELL_MANIFEST_ENTRY} in {archive} is a symlink, not a regular file",
                    archive=archive,
                )
            if not manifest_path.is_file():
                raise ArchiveExtractionError(
                    f"{STEMCELL_MANIFEST_ENTRY} not found in {archive}",
                    archive=archive,
                )
            return load_document(
                manifest_path,
                StemcellManifest,
                error=ParseError,
                read_error=ArchiveExtractionError,
            )
