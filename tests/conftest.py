"""Global test fixtures."""

import io
import tarfile
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

BatFileFactory = Callable[..., Path]
ArchiveFactory = Callable[..., Path]


@pytest.fixture
def write_bat_file(tmp_path: Path) -> BatFileFactory:
    """Write a bat file declaring the given stemcell name and version."""

    def _write(name: object = "bosh-stemcell", version: object = "3000", **extra) -> Path:
        path = tmp_path / "bat.yml"
        document = {"properties": {"stemcell": {"name": name, "version": version}, **extra}}
        path.write_text(yaml.safe_dump(document))
        return path

    return _write


@pytest.fixture
def make_stemcell_archive(tmp_path: Path) -> ArchiveFactory:
    """Build a gzip-compressed tar stemcell holding the given manifest text."""

    def _make(manifest: str | None, filename: str = "stemcell.tgz") -> Path:
        path = tmp_path / filename
        with tarfile.open(path, "w:gz") as tar:
            members = {"image": b"not really a disk image"}
            if manifest is not None:
                members["stemcell.MF"] = manifest.encode()
            for member_name, payload in members.items():
                info = tarfile.TarInfo(member_name)
                info.size = len(payload)
                tar.addfile(info, io.BytesIO(payload))
        return path

    return _make


@pytest.fixture
def isolated_tempdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the tempfile module at an empty directory we can inspect."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch
