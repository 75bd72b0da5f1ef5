"""
Reconstrução densa de vetores a partir de atributos esparsos (index, value).

Os índices de cada vetor precisam ser exatamente 0, 1, 2, ..., em ordem e sem
buracos no meio; posições finais não informadas mantêm o valor de preenchimento
do armazenamento (normalmente zero), que é como os zeros implícitos do formato
esparso aparecem no layout denso.
"""
import time

from . import config
from .errors import AttributesUnordered, ParsingError
from .logger import Logger
from .vectors import DenseVectors

__all__ = ["AttributeReconstructor", "reconstruct_row", "load_sparse_vectors"]


class AttributeReconstructor:
    """
    Máquina de estados para preencher uma linha de um DenseVectors.

    Estados: Expecting(next_index) -> ... -> Done. Começa em Expecting(0).
      - accept(index, value): aceita somente index == next_index; senão levanta
        AttributesUnordered(index, value, last_index=next_index - 1). O sentinela
        para "nenhum atributo aceito" é config.ROW_SENTINEL (-1). A linha fica
        com o conteúdo parcial; quem chamou deve descartá-la.
      - finish(): vai para Done; nenhuma escrita é aceita depois disso.
    """

    def __init__(self, vectors, index_vector):
        self.vectors = vectors
        self.index_vector = vectors._check_row(index_vector)
        self.next_index = 0
        self.done = False

    @property
    def last_index(self):
        return self.next_index - 1 if self.next_index > 0 else config.ROW_SENTINEL

    def accept(self, index, value):
        if self.done:
            raise RuntimeError(f"row {self.index_vector} already finished; no more attributes accepted")
        if index != self.next_index:
            raise AttributesUnordered(index, value, self.last_index)
        if self.next_index >= self.vectors.attributes:
            raise ParsingError("AttributeOverflow")
        self.vectors.set(self.index_vector, self.next_index, value)
        self.next_index += 1

    def finish(self):
        self.done = True
        return self.next_index


def reconstruct_row(vectors, index_vector, pairs):
    """Alimenta a linha index_vector com os pares (index, value) e finaliza. Retorna quantos foram aceitos."""
    reconstructor = AttributeReconstructor(vectors, index_vector)
    for index, value in pairs:
        reconstructor.accept(index, value)
    return reconstructor.finish()


def load_sparse_vectors(rows, attributes, fill=0.0, dtype=None):
    """
    Monta um DenseVectors a partir de uma sequência de linhas esparsas.
    rows: sequência (com len) de iteráveis de pares (index, value)
    dtype: None usa config.DEFAULT_DTYPE, qualquer que seja o tipo de fill
    """
    t0 = time.time()
    dtype = config.DEFAULT_DTYPE if dtype is None else dtype
    vectors = DenseVectors.with_dimension(len(rows), attributes, fill, dtype=dtype)
    for i, pairs in enumerate(rows):
        try:
            accepted = reconstruct_row(vectors, i, pairs)
        except AttributesUnordered as e:
            Logger.error(f"Vetor {i}: atributos fora de ordem (index={e.index}, last_index={e.last_index})", e)
        Logger.micro(f"Vetor {i}: {accepted} atributos")
    Logger.bench(f"load_sparse_vectors ({vectors.vectors} x {attributes})", t0, time.time())
    return vectors
