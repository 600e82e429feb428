"""Decoder for little-endian Yale Bright Star Catalog (``BSC5``) binary files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, List, Tuple
import logging
import math

import numpy as np

from .errors import BadEntrySizeError, InvalidStarNumberError, InvalidStnumError
from .readers import read_char, read_f32, read_f64, read_i16, read_i32

logger = logging.getLogger(__name__)

HEADER_SIZE = 28
ENTRY_SIZE = 32
MAG_SCALE = 100.0
U32_MAX = (1 << 32) - 1

# On-disk layout, for callers that want to map a whole file with np.frombuffer.
# The decoder itself reads field by field.
HEADER_DTYPE = np.dtype(
    [
        ("star0", "<i4"),
        ("star1", "<i4"),
        ("starn", "<i4"),
        ("stnum", "<i4"),
        ("mprop", "<i4"),
        ("nmag", "<i4"),
        ("nbent", "<i4"),
    ]
)

ENTRY_DTYPE = np.dtype(
    [
        ("xno", "<f4"),
        ("sra0", "<f8"),
        ("sdec0", "<f8"),
        ("is0", "u1"),
        ("is1", "u1"),
        ("mag", "<i2"),
        ("xrpm", "<f4"),
        ("xdpm", "<f4"),
    ]
)

STAR_DTYPE = np.dtype(
    [
        ("xno", "<u4"),
        ("sra0", "<f8"),
        ("sdec0", "<f8"),
        ("spectral", "<U2"),
        ("mag", "<f4"),
        ("xrpm", "<f4"),
        ("xdpm", "<f4"),
    ]
)


class Equinox(Enum):
    """Equinox-epoch the stored coordinates refer to."""

    B1950 = "B1950"
    J2000 = "J2000"


class IdType(Enum):
    """Kind of star identification numbers a catalogue carries."""

    NONE = 0
    SEE_CATALOG = 1
    INCLUDED = 2

    @classmethod
    def from_stnum(cls, stnum: int) -> "IdType":
        try:
            return cls(stnum)
        except ValueError as exc:
            raise InvalidStnumError(stnum) from exc


@dataclass(frozen=True)
class RawHeader:
    star0: int
    star1: int
    starn: int
    stnum: int
    mprop: bool
    nmag: int
    nbent: int

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "RawHeader":
        star0 = read_i32(stream)
        star1 = read_i32(stream)
        starn = read_i32(stream)
        stnum = read_i32(stream)
        mprop = read_i32(stream) != 0
        nmag = read_i32(stream)
        nbent = read_i32(stream)
        return cls(
            star0=star0,
            star1=star1,
            starn=starn,
            stnum=stnum,
            mprop=mprop,
            nmag=nmag,
            nbent=nbent,
        )

    @property
    def equinox(self) -> Equinox:
        return Equinox.J2000 if self.starn < 0 else Equinox.B1950

    @property
    def record_count(self) -> int:
        return abs(self.starn)


@dataclass(frozen=True)
class Star:
    """One catalogue entry as exposed to callers.

    Coordinates are in radians for the catalogue equinox, proper motions in
    radians per year. ``mag`` is the V magnitude.
    """

    xno: int
    sra0: float
    sdec0: float
    spectral: Tuple[str, str]
    mag: float
    xrpm: float
    xdpm: float

    @property
    def spectral_type(self) -> str:
        return "".join(self.spectral)

    def to_dict(self) -> Dict[str, object]:
        return {
            "xno": self.xno,
            "sra0": self.sra0,
            "sdec0": self.sdec0,
            "spectral": self.spectral_type,
            "mag": self.mag,
            "xrpm": self.xrpm,
            "xdpm": self.xdpm,
        }


@dataclass(frozen=True)
class RawEntry:
    """A 32-byte entry with the on-disk field types (``mag`` in hundredths)."""

    xno: float
    sra0: float
    sdec0: float
    spectral: Tuple[str, str]
    mag: int
    xrpm: float
    xdpm: float

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "RawEntry":
        xno = read_f32(stream)
        sra0 = read_f64(stream)
        sdec0 = read_f64(stream)
        is0 = read_char(stream)
        is1 = read_char(stream)
        mag = read_i16(stream)
        xrpm = read_f32(stream)
        xdpm = read_f32(stream)
        return cls(
            xno=xno,
            sra0=sra0,
            sdec0=sdec0,
            spectral=(is0, is1),
            mag=mag,
            xrpm=xrpm,
            xdpm=xdpm,
        )

    def valid(self) -> bool:
        """Blank spectral type marks an unused slot."""
        return self.spectral[0] != " " or self.spectral[1] != " "

    def to_star(self) -> Star:
        return convert_entry(self)


def convert_entry(raw: RawEntry) -> Star:
    """Validate *raw* and convert it to a :class:`Star`."""
    xno = raw.xno
    if not math.isfinite(xno) or xno < 0.0:
        raise InvalidStarNumberError(xno)
    mag = np.float32(raw.mag) / np.float32(MAG_SCALE)
    return Star(
        xno=min(int(xno), U32_MAX),
        sra0=raw.sra0,
        sdec0=raw.sdec0,
        spectral=raw.spectral,
        mag=float(mag),
        xrpm=raw.xrpm,
        xdpm=raw.xdpm,
    )


@dataclass(frozen=True)
class Ybsc:
    """In-memory Yale Bright Star Catalog."""

    equinox: Equinox
    id_type: IdType
    have_proper_motion: bool
    stars: Tuple[Star, ...]

    def __len__(self) -> int:
        return len(self.stars)

    def __iter__(self) -> Iterator[Star]:
        return iter(self.stars)

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "Ybsc":
        header = RawHeader.read_from(stream)
        if header.nbent != ENTRY_SIZE:
            raise BadEntrySizeError(header.nbent)
        equinox = header.equinox
        nstar = header.record_count
        id_type = IdType.from_stnum(header.stnum)
        logger.debug(
            "YBSC header: %d entr(y/ies), equinox %s, ids %s, proper motion %s",
            nstar,
            equinox.value,
            id_type.name,
            header.mprop,
        )
        stars: List[Star] = []
        for _ in range(nstar):
            entry = RawEntry.read_from(stream)
            if entry.valid():
                stars.append(convert_entry(entry))
        logger.debug("YBSC decoded: kept %d star(s), skipped %d blank slot(s)", len(stars), nstar - len(stars))
        return cls(
            equinox=equinox,
            id_type=id_type,
            have_proper_motion=header.mprop,
            stars=tuple(stars),
        )

    @classmethod
    def load(cls, path: Path | str) -> "Ybsc":
        source = Path(path).expanduser()
        with source.open("rb") as handle:
            return cls.read_from(handle)

    def to_dict(self) -> Dict[str, object]:
        return {
            "equinox": self.equinox.value,
            "id_type": self.id_type.name,
            "have_proper_motion": self.have_proper_motion,
            "stars": [star.to_dict() for star in self.stars],
        }

    def to_array(self) -> np.ndarray:
        """Return the stars as a structured array with :data:`STAR_DTYPE`."""
        out = np.zeros(len(self.stars), dtype=STAR_DTYPE)
        if not self.stars:
            return out
        out["xno"] = [star.xno for star in self.stars]
        out["sra0"] = [star.sra0 for star in self.stars]
        out["sdec0"] = [star.sdec0 for star in self.stars]
        out["spectral"] = [star.spectral_type for star in self.stars]
        out["mag"] = [star.mag for star in self.stars]
        out["xrpm"] = [star.xrpm for star in self.stars]
        out["xdpm"] = [star.xdpm for star in self.stars]
        return out


def read_header(stream: BinaryIO) -> RawHeader:
    return RawHeader.read_from(stream)


def decode(stream: BinaryIO) -> Ybsc:
    """Decode a catalogue from a binary stream positioned at the header."""
    return Ybsc.read_from(stream)


def load(path: Path | str) -> Ybsc:
    """Open *path*, decode it and close the file."""
    return Ybsc.load(path)
