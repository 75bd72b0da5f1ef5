"""
Loader centralizado para dependências opcionais (lazy import + cache).

Uso:
- from svmcore.optional_deps import get_torch, has_package
- get_torch() -> retorna o módulo torch (ou levanta ImportError se ausente)
- has_package(name) -> checa a disponibilidade sem importar (usado por resolve_backend)

Decisão de design:
- usa importlib.util.find_spec para checar disponibilidade sem importar.
- importa e cacheia o módulo na primeira chamada (thread-safe).
"""
from __future__ import annotations
from typing import Dict
import importlib
import importlib.util
import threading

__all__ = [
    "has_package",
    "get_torch",
    "clear_optional_cache",
]

_lock = threading.Lock()
_cache: Dict[str, object] = {}


def has_package(name: str) -> bool:
    """
    Verifica se um pacote está disponível (não importa o módulo).
    name: nome de import (ex.: 'torch', 'sklearn').
    """
    return importlib.util.find_spec(name) is not None


def _load_torch():
    try:
        return importlib.import_module("torch")
    except Exception as e:
        raise ImportError(
            "backend='torch' requer PyTorch. Instale com: pip install 'svmcore[torch]'"
        ) from e


def get_torch():
    """
    Retorna o módulo torch. Faz lazy import + cache.
    Lança ImportError se torch não estiver instalado.
    """
    key = "torch"
    if key in _cache:
        return _cache[key]
    with _lock:
        if key in _cache:
            return _cache[key]
        torch = _load_torch()
        _cache[key] = torch
        return torch


def clear_optional_cache():
    """
    Limpa o cache interno. Útil em testes que simulam ausência de pacotes
    (para forçar novo import).
    """
    with _lock:
        _cache.clear()
