"""Five dimensional grids, symmetric folding and generation deltas."""

from .model5d import AXES, Model5D, ModelAs5D
from .symmetry import (
    AsymmetricModelSection5D,
    IsotropicHypercubicModel5D,
    IsotropicHypercubicModel5DA,
    SymmetricModel5D,
    canonicalize,
)
from .hyperrectangular import (
    HyperrectangularArrayGrid5D,
    RegularArrayGrid5D,
    RegularBooleanGrid5D,
    RegularIntGrid5D,
    RegularLongGrid5D,
    RegularNumericGrid5D,
)
from .anisotropic import AnisotropicArrayGrid5D, IsotropicHypercubicArrayModel5DA, StepRule
from .delta import IsotropicHypercubicArrayModel5DStepsDelta

__all__ = [
    "AXES",
    "AnisotropicArrayGrid5D",
    "AsymmetricModelSection5D",
    "HyperrectangularArrayGrid5D",
    "IsotropicHypercubicArrayModel5DA",
    "IsotropicHypercubicArrayModel5DStepsDelta",
    "IsotropicHypercubicModel5D",
    "IsotropicHypercubicModel5DA",
    "Model5D",
    "ModelAs5D",
    "RegularArrayGrid5D",
    "RegularBooleanGrid5D",
    "RegularIntGrid5D",
    "RegularLongGrid5D",
    "RegularNumericGrid5D",
    "StepRule",
    "SymmetricModel5D",
    "canonicalize",
]
