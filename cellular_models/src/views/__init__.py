"""Lazily evaluated views over a source model."""

from .cross_section import ModelCrossSection
from .diagonal_cross_section import ModelDiagonalCrossSection
from .sub_model import SubModel

__all__ = ["ModelCrossSection", "ModelDiagonalCrossSection", "SubModel"]
