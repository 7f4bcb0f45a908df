import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from knn_classifier.errors import EmptyInputError, LengthMismatchError, RaggedVectorsError

logger = logging.getLogger(__name__)


def as_vector(v):
    """转成一维 float64 数组；嵌套或不规则的输入返回 None，非数值仍抛 ValueError"""
    try:
        row = np.asarray(v, dtype=np.float64)
    except ValueError:
        try:
            items = np.asarray(v, dtype=object).ravel()
        except ValueError:
            return None
        if any(np.ndim(item) > 0 for item in items):
            return None
        raise
    return row if row.ndim == 1 else None


@dataclass(frozen=True)
class TrainingExample:
    """一条训练样本：特征向量 + 标签"""
    vector: Tuple[float, ...]
    label: str


class ModelStore:
    """保存训练数据（特征矩阵与标签，按插入顺序）"""

    def __init__(self):
        self._vectors = None
        self._labels = []

    def replace(self, vectors, labels):
        """校验并整体替换训练数据，校验失败时原数据保持不变"""
        vectors = list(vectors)
        labels = [str(label) for label in labels]

        if len(vectors) != len(labels):
            raise LengthMismatchError(
                f"got {len(vectors)} vectors but {len(labels)} labels")
        if not vectors:
            raise EmptyInputError("at least one training example is required")

        rows = [as_vector(v) for v in vectors]
        for i, row in enumerate(rows):
            if row is None:
                raise RaggedVectorsError(f"vector {i} is not a flat sequence of numbers")
        dim = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != dim:
                raise RaggedVectorsError(
                    f"vector {i} has {len(row)} features, expected {dim}")
        if dim == 0:
            raise EmptyInputError("feature vectors must have at least one feature")

        matrix = np.vstack(rows)
        matrix.flags.writeable = False
        self._vectors = matrix
        self._labels = labels
        logger.debug(f"模型数据已替换: {len(labels)} 条样本, 维度 {dim}")

    def is_empty(self) -> bool:
        return self._vectors is None

    @property
    def dimensionality(self) -> Optional[int]:
        if self._vectors is None:
            return None
        return self._vectors.shape[1]

    @property
    def vectors(self) -> Optional[np.ndarray]:
        return self._vectors

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    @property
    def examples(self) -> List[TrainingExample]:
        if self._vectors is None:
            return []
        return [TrainingExample(tuple(float(x) for x in row), label)
                for row, label in zip(self._vectors, self._labels)]

    def __len__(self):
        return len(self._labels)
