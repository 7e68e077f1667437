"""Biomes and the suppliers that choose a biome for a position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Biome(Enum):
    PLAINS = "Plains"
    SNOWY_TIGA = "SnowyTiga"


@dataclass(frozen=True)
class MultiNoiseSampler:
    """Noise values that biome suppliers sample from."""


class BiomeSupplier(ABC):
    """Chooses the biome at a position."""

    @abstractmethod
    def biome(self, x: int, y: int, z: int, noise: MultiNoiseSampler) -> Biome:
        """The biome at ``x``, ``y``, ``z``."""


class DebugBiomeSupplier(BiomeSupplier):
    """Plains everywhere."""

    def biome(self, x: int, y: int, z: int, noise: MultiNoiseSampler) -> Biome:
        return Biome.PLAINS