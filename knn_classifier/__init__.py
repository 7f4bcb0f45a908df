"""
k近邻分类器

暴力搜索 + 欧氏距离 + 多数投票，训练数据可以导出为分隔文本再加载回来。
"""

__version__ = "0.1.0"

from .errors import (
    DelimiterConflictError,
    DimensionMismatchError,
    EmptyInputError,
    EmptyModelError,
    InvalidKError,
    KNNError,
    LengthMismatchError,
    ParseError,
    PredictError,
    RaggedVectorsError,
    ShapeError,
)
from .knn_class import KNNClassifier, euclidean, squared_euclidean
from .model_store import ModelStore, TrainingExample

__all__ = [
    "KNNClassifier",
    "ModelStore",
    "TrainingExample",
    "euclidean",
    "squared_euclidean",
    "KNNError",
    "InvalidKError",
    "ShapeError",
    "LengthMismatchError",
    "EmptyInputError",
    "RaggedVectorsError",
    "PredictError",
    "DimensionMismatchError",
    "EmptyModelError",
    "ParseError",
    "DelimiterConflictError",
]
