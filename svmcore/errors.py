"""
Taxonomia de erros do svmcore.

Todos os erros de domínio derivam de SVMError, um por tipo de falha:
- AttributesUnordered : índices de atributo fora de sequência (0, 1, 2, ...)
- NoProbabilities     : modelo sem parâmetros de calibração (treinado sem -b 1)
- IterationsExceeded  : limite de iterações do acoplamento de probabilidades
- NoGamma / NoCoef0 / NoDegree : hiperparâmetro ausente para o kernel escolhido
- ParsingError        : qualquer falha de parsing textual, com uma tag curta

Falhas heterogêneas da camada de parsing (ValueError de float()/int(), valor
opcional ausente) são convertidas em ParsingError na fronteira, via
parse_float / parse_int / parsing_errors.
"""
from contextlib import contextmanager

__all__ = [
    "SVMError",
    "AttributesUnordered",
    "NoProbabilities",
    "IterationsExceeded",
    "NoGamma",
    "NoCoef0",
    "NoDegree",
    "ParsingError",
    "parse_float",
    "parse_int",
    "parsing_errors",
]


class SVMError(Exception):
    """Base de todos os erros de domínio do svmcore."""


class AttributesUnordered(SVMError):
    """
    Atributos de um vetor fora da ordem 0, 1, 2, ..., n.

    index      : índice recebido (não sucessor direto do anterior)
    value      : valor associado a index
    last_index : último índice aceito (-1 se nenhum foi aceito ainda);
                 o esperado era index == last_index + 1
    """

    def __init__(self, index, value, last_index):
        self.index = index
        self.value = value
        self.last_index = last_index
        super().__init__(f"attributes unordered: index={index}, value={value}, last_index={last_index}")

    def __reduce__(self):
        return (type(self), (self.index, self.value, self.last_index))


class NoProbabilities(SVMError):
    def __init__(self, message="model was not trained with probability estimates"):
        super().__init__(message)


class IterationsExceeded(SVMError):
    def __init__(self, message="probability estimation exceeded its iteration limit"):
        super().__init__(message)


class NoGamma(SVMError):
    def __init__(self, message="model has no gamma set"):
        super().__init__(message)


class NoCoef0(SVMError):
    def __init__(self, message="model has no coef0 set"):
        super().__init__(message)


class NoDegree(SVMError):
    def __init__(self, message="model has no degree set"):
        super().__init__(message)


class ParsingError(SVMError):
    """Falha de parsing normalizada; message é uma tag curta (ex.: 'ParseFloatError')."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


@contextmanager
def parsing_errors(tag):
    """Converte ValueError/TypeError levantados no bloco em ParsingError(tag)."""
    try:
        yield
    except (ValueError, TypeError) as e:
        raise ParsingError(tag) from e


def parse_float(text):
    with parsing_errors("ParseFloatError"):
        return float(text)


def parse_int(text):
    with parsing_errors("ParseIntError"):
        return int(text)
