"""
Armazenamento denso e contíguo de N vetores de largura fixa.

Todos os vetores (ex.: vetores de suporte) ficam num único buffer numpy 1-D,
linha após linha (row-major). A linha i ocupa data[i*attributes:(i+1)*attributes];
offset(i, j) é a única fórmula de endereçamento e todo acesso passa por ela.
"""
import operator

import numpy as np

from . import config

__all__ = ["DenseVectors", "DenseVectorsIter"]


def _resolve_dtype(fill, dtype):
    if dtype is not None:
        return np.dtype(dtype)
    fill_dtype = np.asarray(fill).dtype
    if np.issubdtype(fill_dtype, np.floating):
        return np.dtype(config.DEFAULT_DTYPE)
    return fill_dtype


class DenseVectors:
    """
    "Matriz" básica usada pelos kernels: na prática um vetor de vetores,
    pensado principalmente para leitura.

    Atributos:
      - vectors    : número de vetores (linhas)
      - attributes : número de atributos por vetor (largura da linha)
      - data       : buffer numpy 1-D com vectors * attributes elementos

    Exemplo:
      sv = DenseVectors.with_dimension(3, 4, 0.0)
      sv.set_row(1, [1.0, 2.0, 3.0, 4.0])
      for row in sv:
          ...
    """

    def __init__(self, vectors, attributes, data):
        vectors = operator.index(vectors)
        attributes = operator.index(attributes)
        if vectors < 0 or attributes < 0:
            raise ValueError(f"dimensions must be >= 0, got ({vectors}, {attributes})")
        data = np.ascontiguousarray(data)
        if data.ndim != 1:
            raise ValueError(f"data must be a flat (1-D) buffer, got shape {data.shape}")
        if data.size != vectors * attributes:
            raise ValueError(
                f"data has {data.size} elements, expected {vectors} * {attributes} = {vectors * attributes}"
            )
        self.vectors = vectors
        self.attributes = attributes
        self.data = data

    @classmethod
    def with_dimension(cls, vectors, attributes, fill=0.0, dtype=None):
        """Cria o armazenamento com todas as células iguais a fill."""
        dtype = _resolve_dtype(fill, dtype)
        data = np.full(operator.index(vectors) * operator.index(attributes), fill, dtype=dtype)
        return cls(vectors, attributes, data)

    @classmethod
    def from_flat(cls, data, vectors, attributes):
        """Usa um buffer plano já existente com as dimensões dadas (sem cópia quando possível)."""
        return cls(vectors, attributes, data)

    @property
    def dtype(self):
        return self.data.dtype

    def offset(self, index_vector, index_attribute):
        return index_vector * self.attributes + index_attribute

    def _check_row(self, index_vector):
        index_vector = operator.index(index_vector)
        if not 0 <= index_vector < self.vectors:
            raise IndexError(f"vector index {index_vector} out of range [0, {self.vectors})")
        return index_vector

    def _check_attribute(self, index_attribute):
        index_attribute = operator.index(index_attribute)
        if not 0 <= index_attribute < self.attributes:
            raise IndexError(f"attribute index {index_attribute} out of range [0, {self.attributes})")
        return index_attribute

    def row(self, index_vector):
        """View somente-leitura da linha index_vector."""
        view = self.row_mut(index_vector)
        view.flags.writeable = False
        return view

    def row_mut(self, index_vector):
        """View gravável da linha index_vector (escritas alteram o buffer)."""
        start = self.offset(self._check_row(index_vector), 0)
        return self.data[start:start + self.attributes]

    def _check_cast(self, values):
        # float -> int truncaria em silêncio
        if not np.can_cast(values.dtype, self.dtype, "same_kind"):
            raise ValueError(f"cannot store {values.dtype} values in a {self.dtype} buffer")
        return values

    def set_row(self, index_vector, values):
        values = np.asarray(values)
        if values.shape != (self.attributes,):
            raise ValueError(f"row must have shape ({self.attributes},), got {values.shape}")
        self.row_mut(index_vector)[:] = self._check_cast(values)

    def get(self, index_vector, index_attribute):
        index = self.offset(self._check_row(index_vector), self._check_attribute(index_attribute))
        return self.data[index]

    def set(self, index_vector, index_attribute, value):
        index = self.offset(self._check_row(index_vector), self._check_attribute(index_attribute))
        self.data[index] = self._check_cast(np.asarray(value))

    def as_matrix(self):
        """View (vectors, attributes) somente-leitura do mesmo buffer."""
        view = self.data.reshape(self.vectors, self.attributes)
        view.flags.writeable = False
        return view

    def __len__(self):
        return self.vectors

    def __iter__(self):
        return DenseVectorsIter(self)

    def __repr__(self):
        return f"({self.vectors}, {self.attributes}, [data])"


class DenseVectorsIter:
    """Cursor sequencial sobre as linhas de um DenseVectors, em ordem crescente."""

    def __init__(self, matrix):
        self.matrix = matrix
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.index >= self.matrix.vectors:
            raise StopIteration
        self.index += 1
        return self.matrix.row(self.index - 1)
