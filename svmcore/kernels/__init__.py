# svmcore.kernels: Kernel (interface), variantes e fábrica make_kernel
from ..errors import NoCoef0, NoDegree, NoGamma, ParsingError, parse_float, parse_int
from ..logger import Logger
from .base import Kernel
from .linear import Linear
from .poly import Poly
from .rbf import Rbf

__all__ = [
    "Kernel",
    "Linear",
    "Poly",
    "Rbf",
    "make_kernel",
]


def _as_degree(degree):
    # aceita "3" e 3.0, mas não 2.5
    value = parse_float(degree)
    if not value.is_integer():
        raise ParsingError("ParseIntError")
    return parse_int(value)


def make_kernel(kind, gamma=None, coef0=None, degree=None, backend=None):
    """
    Cria o kernel a partir do kernel_type do modelo ('linear', 'poly'/'polynomial', 'rbf').

    Os hiperparâmetros podem vir como texto ("0.5", "3"); falhas de conversão viram
    ParsingError("ParseFloatError" / "ParseIntError").
    Hiperparâmetros ausentes (None) só são erro quando o kernel precisa deles:
      - rbf  : gamma                  -> NoGamma
      - poly : gamma, coef0, degree   -> NoGamma, NoCoef0, NoDegree (nesta ordem)
    O linear nunca exige nada.
    """
    name = str(kind).strip().lower()
    if name == "linear":
        kernel = Linear(backend=backend)
    elif name == "rbf":
        if gamma is None:
            raise NoGamma()
        kernel = Rbf(parse_float(gamma), backend=backend)
    elif name in ("poly", "polynomial"):
        if gamma is None:
            raise NoGamma()
        if coef0 is None:
            raise NoCoef0()
        if degree is None:
            raise NoDegree()
        kernel = Poly(_as_degree(degree), parse_float(gamma), parse_float(coef0), backend=backend)
    else:
        raise ParsingError("UnknownKernel")
    Logger.info(f"Kernel selecionado: {kernel!r}")
    return kernel
