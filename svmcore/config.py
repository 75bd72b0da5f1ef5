"""
Configuração do svmcore, lida uma única vez das variáveis de ambiente.

Variáveis reconhecidas:
- SVMCORE_LOG_LEVEL : NONE | WARNING | ERROR | STEP | MACRO | INFO | MICRO (padrão WARNING)
- SVMCORE_BACKEND   : numpy | torch (padrão numpy)
- SVMCORE_N_JOBS    : inteiro, workers para svmcore.batch (padrão 1; -1 = todos os núcleos)
- SVMCORE_DTYPE     : float32 | float64 (dtype de armazenamento dos vetores de suporte)

Valores inválidos caem no padrão com um aviso.
"""
import os

import numpy as np

from .logger import LogLevel, Logger

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BACKEND = "numpy"
DEFAULT_N_JOBS = 1
DEFAULT_DTYPE_NAME = "float32"

BACKENDS = ("numpy", "torch")
DTYPES = {"float32": np.float32, "float64": np.float64}

# last_index reportado por AttributesUnordered quando nenhum atributo foi aceito ainda
ROW_SENTINEL = -1


def _env_choice(name, choices, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        Logger.warning(f"{name}={raw!r} inválido; usando {default!r}. Opções: {list(choices)}")
        return default
    return value


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        Logger.warning(f"{name}={raw!r} não é inteiro; usando {default}")
        return default


LOG_LEVEL = _env_choice(
    "SVMCORE_LOG_LEVEL", [name.lower() for name in LogLevel.__members__], DEFAULT_LOG_LEVEL.lower()
).upper()
BACKEND = _env_choice("SVMCORE_BACKEND", BACKENDS, DEFAULT_BACKEND)
N_JOBS = _env_int("SVMCORE_N_JOBS", DEFAULT_N_JOBS)
DEFAULT_DTYPE = DTYPES[_env_choice("SVMCORE_DTYPE", DTYPES, DEFAULT_DTYPE_NAME)]
