from .bivariate import BivarCommitment, BivarPoly
from .commitment import Commitment
from .univariate import Poly

__all__ = ["BivarCommitment", "BivarPoly", "Commitment", "Poly"]
