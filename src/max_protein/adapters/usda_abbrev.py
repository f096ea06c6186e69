"""USDA SR "ABBREV" flat-file adapter."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import httpx

from max_protein.domain.foods import Food, InvalidFoodError

_MAX_FIELDS = 53
_DESCRIPTION_FIELD = 1
_KCAL_FIELD = 3
_PROTEIN_FIELD = 4
_AMOUNT_G_FIELD = 48
_AMOUNT_FIELD = 49

_logger = logging.getLogger(__name__)


class AbbrevFormatError(RuntimeError):
    """Raised when an ABBREV file is not in the expected format."""


def parse_abbrev_line(line: str) -> Food | None:
    """Parse one ``^``-separated ABBREV record.

    Returns ``None`` for records that are missing a required field.
    """
    fields = line.rstrip("\r\n").split("^")
    if len(fields) > _MAX_FIELDS:
        raise AbbrevFormatError(
            f"Expected at most {_MAX_FIELDS} fields, got {len(fields)}"
        )
    if len(fields) <= _AMOUNT_FIELD:
        return None

    description = _strip_tildes(fields[_DESCRIPTION_FIELD])
    amount = _strip_tildes(fields[_AMOUNT_FIELD])
    amount_g = _parse_rounded(fields[_AMOUNT_G_FIELD])
    kcal = _parse_rounded(fields[_KCAL_FIELD])
    protein_g = _parse_rounded(fields[_PROTEIN_FIELD])
    if (
        description is None
        or amount is None
        or amount_g is None
        or kcal is None
        or protein_g is None
    ):
        return None
    try:
        return Food(
            description=description,
            amount=amount,
            amount_g=amount_g,
            kcal=kcal,
            protein_g=protein_g,
        )
    except InvalidFoodError:
        _logger.debug("Skipping invalid ABBREV record: %s", description)
        return None


def parse_abbrev_lines(lines: Iterable[str]) -> list[Food]:
    """Parse ABBREV records, skipping the ones without usable values."""
    foods: list[Food] = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        food = parse_abbrev_line(line)
        if food is None:
            skipped += 1
            continue
        foods.append(food)
    if skipped:
        _logger.info("ABBREV load skipped %s incomplete records", skipped)
    return foods


@dataclass
class AbbrevFileRepository:
    """Food repository backed by an ABBREV file on disk."""

    path: Path

    def load_foods(self) -> list[Food]:
        """Load all valid foods from the file."""
        with self.path.open(encoding="latin-1") as handle:
            foods = parse_abbrev_lines(handle)
        _logger.info("Loaded %s foods from %s", len(foods), self.path)
        return foods


@dataclass
class HttpxAbbrevDownloader:
    """HTTPX-backed downloader for the ABBREV database."""

    http_client: httpx.AsyncClient

    @classmethod
    def create(cls) -> "HttpxAbbrevDownloader":
        """Create a downloader with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(follow_redirects=True))

    async def download(self, url: str, path: Path) -> Path:
        """Download the database from ``url`` and write it to ``path``."""
        response = await self.http_client.get(url, timeout=60)
        response.raise_for_status()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)
        _logger.info("Downloaded ABBREV database to %s", path)
        return path

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _strip_tildes(field: str) -> str | None:
    if len(field) < 3 or not field.startswith("~") or not field.endswith("~"):
        return None
    return field[1:-1]


def _parse_rounded(field: str) -> int | None:
    try:
        value = float(field)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    # Half away from zero, unlike the built-in round().
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
