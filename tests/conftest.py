from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterable, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from ybsc.catalog import ENTRY_DTYPE, HEADER_DTYPE

BLANK = (" ", " ")


def pack_header(
    starn: int,
    *,
    stnum: int = 0,
    mprop: int = 0,
    nbent: int = 32,
    star0: int = 0,
    star1: int = 0,
    nmag: int = 0,
) -> bytes:
    header = np.zeros(1, dtype=HEADER_DTYPE)
    header["star0"] = star0
    header["star1"] = star1
    header["starn"] = starn
    header["stnum"] = stnum
    header["mprop"] = mprop
    header["nmag"] = nmag
    header["nbent"] = nbent
    return header.tobytes()


def pack_entries(rows: Sequence[dict]) -> bytes:
    entries = np.zeros(len(rows), dtype=ENTRY_DTYPE)
    for idx, row in enumerate(rows):
        spectral = row.get("spectral", ("A", "0"))
        entries["xno"][idx] = row.get("xno", float(idx + 1))
        entries["sra0"][idx] = row.get("sra0", 0.0)
        entries["sdec0"][idx] = row.get("sdec0", 0.0)
        entries["is0"][idx] = ord(spectral[0])
        entries["is1"][idx] = ord(spectral[1])
        entries["mag"][idx] = row.get("mag", 0)
        entries["xrpm"][idx] = row.get("xrpm", 0.0)
        entries["xdpm"][idx] = row.get("xdpm", 0.0)
    return entries.tobytes()


def build_catalog(rows: Sequence[dict], *, starn: int | None = None, trailer: bytes = b"", **header) -> bytes:
    count = len(rows) if starn is None else starn
    return pack_header(count, **header) + pack_entries(rows) + trailer


class CatalogFactory:
    """Builds synthetic catalogues as in-memory streams or files."""

    def __init__(self, tmp_path: Path) -> None:
        self._tmp_path = tmp_path

    def stream(self, rows: Iterable[dict] = (), **kwargs) -> io.BytesIO:
        return io.BytesIO(build_catalog(list(rows), **kwargs))

    def file(self, rows: Iterable[dict] = (), name: str = "BSC5", **kwargs) -> Path:
        path = self._tmp_path / name
        path.write_bytes(build_catalog(list(rows), **kwargs))
        return path


@pytest.fixture
def catalog_factory(tmp_path: Path) -> CatalogFactory:
    return CatalogFactory(tmp_path)


@pytest.fixture
def sample_rows() -> list[dict]:
    return [
        {"xno": 1.0, "sra0": 0.0226, "sdec0": 0.7893, "spectral": ("A", "1"), "mag": 670},
        {"xno": 2.0, "spectral": BLANK, "mag": 999},
        {"xno": 3.0, "sra0": 0.0089, "sdec0": -0.0059, "spectral": ("K", "0"), "mag": -46},
        {"xno": 4.0, "spectral": BLANK},
        {"xno": 5.0, "sra0": 1.2, "sdec0": 0.4, "spectral": (" ", "B"), "mag": 512},
    ]
