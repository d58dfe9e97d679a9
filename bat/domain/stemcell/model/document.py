"""Typed documents read while resolving a stemcell.

Both the bat file and the ``stemcell.MF`` manifest are YAML. Loading goes
through :func:`load_document`, which turns every failure into a bat error that
names the offending path or field.
"""

import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from bat.domain.shared.error import ArchiveExtractionError, ConfigurationError, ParseError
from bat.domain.stemcell.model.value import NonEmptyStr

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Document(BaseModel):
    """Base for YAML documents: unknown keys ignored, numbers read as strings."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class StemcellSection(Document):
    name: NonEmptyStr
    version: NonEmptyStr


class BatProperties(Document):
    stemcell: StemcellSection


class BatFile(Document):
    """The acceptance-test configuration file."""

    properties: BatProperties


class StemcellManifest(Document):
    """The ``stemcell.MF`` entry embedded in a stemcell archive."""

    name: NonEmptyStr
    version: NonEmptyStr


def _describe(exc: PydanticValidationError) -> tuple[str, str]:
    """Return (first failing field, one line per failing field)."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        lines.append(f"{loc}: {err['msg']}")
    first = ".".join(str(part) for part in exc.errors()[0]["loc"])
    return first, "; ".join(lines)


def load_document(
    path: Path,
    model: type[M],
    *,
    error: type[ParseError] | type[ConfigurationError] = ParseError,
    read_error: type[ConfigurationError] | type[ArchiveExtractionError] = ConfigurationError,
) -> M:
    """Read a YAML file and validate it into ``model``.

    Args:
        path: File to read.
        model: Document model to validate against.
        error: Error class raised for missing or invalid fields.
        read_error: Error class raised when the file cannot be read.

    Raises:
        read_error: If the file cannot be read.
        ParseError: If the file is not UTF-8 YAML or its top level is not a mapping.
        error: If required fields are missing or invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}") from e
    except OSError as e:
        raise read_error(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"{path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"{path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        document = model.model_validate(data)
    except PydanticValidationError as e:
        field, detail = _describe(e)
        raise error(f"Invalid {model.__name__} in {path}: {detail}", field=field) from e

    logger.debug("Loaded %s from %s", model.__name__, path)
    return document
