"""k近邻分类器的异常类型"""


class KNNError(Exception):
    """所有分类器异常的基类"""


class InvalidKError(KNNError, ValueError):
    """k 不是正整数"""


class ShapeError(KNNError, ValueError):
    """训练数据形状不合法"""


class LengthMismatchError(ShapeError):
    """特征向量数量与标签数量不一致"""


class EmptyInputError(ShapeError):
    """没有提供任何训练样本"""


class RaggedVectorsError(ShapeError):
    """特征向量长度不一致"""


class PredictError(KNNError):
    """预测失败"""


class DimensionMismatchError(PredictError, ValueError):
    """查询向量维度与训练数据不一致"""


class EmptyModelError(PredictError, RuntimeError):
    """模型尚未训练"""


class ParseError(KNNError, ValueError):
    """文本行无法解析"""

    def __init__(self, line_index, message):
        self.line_index = line_index
        super().__init__(f"line {line_index}: {message}")


class DelimiterConflictError(KNNError, ValueError):
    """分隔符与标签冲突，序列化结果会有歧义"""
