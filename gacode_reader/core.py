from dataclasses import dataclass, field, fields
from typing import Optional
from enum import Enum
import numpy as np

from .config import get_sentinel


class ReadStatus(Enum):
    OK = "ok"
    OPEN_ERROR = "open_error"


@dataclass(eq=False)
class Plasma:
    """
    Plasma profiles read from an input.gacode file.

    Species arrays have length nion, profile arrays have length nexp and
    the per-species profiles ni/ti are (nion, nexp) matrices. All arrays
    are allocated once, when both sizes are known, and never resized.
    """
    shot: int
    nexp: int
    nion: int
    masse: Optional[float] = None
    ze: Optional[float] = None
    species_identifiers: list[str] = field(default_factory=list)
    mass: np.ndarray = field(default_factory=lambda: np.zeros(0))
    z: np.ndarray = field(default_factory=lambda: np.zeros(0))
    polflux: np.ndarray = field(default_factory=lambda: np.zeros(0))
    ne: np.ndarray = field(default_factory=lambda: np.zeros(0))
    te: np.ndarray = field(default_factory=lambda: np.zeros(0))
    ni: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    ti: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    seen: list[str] = field(default_factory=list)

    @classmethod
    def allocate(cls, shot: int, nexp: int, nion: int) -> 'Plasma':
        """Build a zero-filled container sized for nexp grid points and nion species."""
        return cls(
            shot=shot,
            nexp=nexp,
            nion=nion,
            mass=np.zeros(nion),
            z=np.zeros(nion),
            polflux=np.zeros(nexp),
            ne=np.zeros(nexp),
            te=np.zeros(nexp),
            ni=np.zeros((nion, nexp)),
            ti=np.zeros((nion, nexp)),
        )

    @classmethod
    def sentinel(cls) -> 'Plasma':
        """Container returned when the input could not be opened."""
        marker = get_sentinel()
        return cls.allocate(marker['shot'], marker['nexp'], marker['nion'])

    @property
    def is_sentinel(self) -> bool:
        marker = get_sentinel()
        return (self.shot, self.nexp, self.nion) == (marker['shot'], marker['nexp'], marker['nion'])

    def species(self, name: str) -> int:
        """
        Index of a species by identifier.

        Raises:
            KeyError: If no species carries that identifier
        """
        try:
            return self.species_identifiers.index(name)
        except ValueError:
            raise KeyError(
                f"Unknown species '{name}'. Available: {self.species_identifiers}"
            ) from None

    def __eq__(self, other):
        if not isinstance(other, Plasma):
            return NotImplemented
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            if isinstance(mine, np.ndarray):
                if not np.array_equal(mine, theirs):
                    return False
            elif mine != theirs:
                return False
        return True


@dataclass
class ReadResult:
    status: ReadStatus
    plasma: Plasma
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK
