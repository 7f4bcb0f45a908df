import logging
import numbers

import numpy as np

from knn_classifier import text_format
from knn_classifier.errors import (
    DimensionMismatchError,
    EmptyInputError,
    EmptyModelError,
    InvalidKError,
    LengthMismatchError,
)
from knn_classifier.model_store import ModelStore, as_vector

logger = logging.getLogger(__name__)


def squared_euclidean(X, x):
    """每一行到 x 的欧氏距离平方"""
    return np.sum((X - x) ** 2, axis=1)


def euclidean(X, x):
    """欧氏距离"""
    return np.sqrt(squared_euclidean(X, x))


class KNNClassifier:
    """K近邻分类器（暴力搜索，多数投票）"""

    def __init__(self, k=3, distance=squared_euclidean):
        if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1:
            raise InvalidKError(f"k must be a positive integer, got {k!r}")
        self._k = int(k)
        self.distance = distance
        self.store = ModelStore()

    @property
    def k(self):
        return self._k

    def fit(self, X, y):
        """训练模型（整体替换已存储的训练数据）"""
        self.store.replace(X, y)
        logger.info(f"KNN(k={self.k}) 已训练: {len(self.store)} 条样本, 维度 {self.store.dimensionality}")
        return self

    def kneighbors(self, x):
        """返回最近的 min(k, n) 个样本的 (距离, 下标)，按距离升序，距离相同按插入顺序"""
        if self.store.is_empty():
            raise EmptyModelError("the classifier has not been fitted")
        dim = self.store.dimensionality
        row = as_vector(x)
        if row is None or len(row) != dim:
            raise DimensionMismatchError(
                f"query {x!r} is not a flat vector of {dim} numbers")
        x = row

        distances = np.asarray(self.distance(self.store.vectors, x), dtype=np.float64)
        n = min(self.k, len(self.store))
        k_indices = np.argsort(distances, kind="stable")[:n]
        return distances[k_indices], k_indices

    def predict_one(self, x):
        """预测单个样本"""
        _, k_indices = self.kneighbors(x)
        labels = self.store.labels
        k_nearest_labels = [labels[i] for i in k_indices]

        # 投票；dict 保留首次出现的顺序，票数相同时离得最近的标签胜出
        counts = {}
        for label in k_nearest_labels:
            counts[label] = counts.get(label, 0) + 1
        best = max(counts.values())
        return next(label for label, count in counts.items() if count == best)

    def predict(self, X):
        """预测，任何一个样本出错则整批失败"""
        return [self.predict_one(x) for x in X]

    def score(self, X, y):
        """计算准确率"""
        y = [str(label) for label in y]
        X = list(X)
        if len(X) != len(y):
            raise LengthMismatchError(f"got {len(X)} vectors but {len(y)} labels")
        if not X:
            raise EmptyInputError("cannot score an empty set")
        predictions = self.predict(X)
        return float(np.mean(np.array(predictions) == np.array(y)))

    def to_text(self, delimiter=","):
        """导出训练数据为分隔文本，每行 特征...,标签"""
        text_format.check_delimiter(delimiter, [])
        if self.store.is_empty():
            return ""
        return text_format.dumps(self.store.vectors, self.store.labels, delimiter)

    def from_text(self, text, delimiter=",", label_col=-1, skip_header=False, strip=False):
        """从分隔文本加载训练数据（整体替换），k 保持不变"""
        X, y = text_format.loads(text, delimiter, label_col=label_col,
                                 skip_header=skip_header, strip=strip)
        self.store.replace(X, y)
        logger.info(f"从文本加载了 {len(self.store)} 条样本, 维度 {self.store.dimensionality}")
        return self
