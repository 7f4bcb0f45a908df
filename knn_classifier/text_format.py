"""
按行分隔的文本格式

每行一个训练样本：feature_1<d>...<d>feature_d<d>label，无表头、无引号转义。
标签中不能出现分隔符或换行符，否则 dumps 直接报错。
"""

from typing import List, Sequence, Tuple

from knn_classifier.errors import DelimiterConflictError, ParseError


def format_number(value) -> str:
    """最短可还原的十进制表示，整数值去掉末尾的 .0"""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def check_delimiter(delimiter: str, labels: Sequence[str]):
    if not delimiter:
        raise DelimiterConflictError("delimiter must be a non-empty string")
    if "\n" in delimiter or "\r" in delimiter:
        raise DelimiterConflictError("delimiter must not contain a line break")
    for i, label in enumerate(labels):
        if delimiter in label:
            raise DelimiterConflictError(
                f"label {label!r} of example {i} contains the delimiter {delimiter!r}")
        if "\n" in label or "\r" in label:
            raise DelimiterConflictError(
                f"label {label!r} of example {i} contains a line break")


def dumps(vectors, labels: Sequence[str], delimiter: str = ",") -> str:
    """把特征矩阵和标签写成文本"""
    check_delimiter(delimiter, labels)
    lines = []
    for row, label in zip(vectors, labels):
        fields = [format_number(x) for x in row]
        fields.append(label)
        lines.append(delimiter.join(fields) + "\n")
    return "".join(lines)


def loads(text: str, delimiter: str = ",", label_col: int = -1,
          skip_header: bool = False, strip: bool = False) -> Tuple[List[List[float]], List[str]]:
    """解析文本，返回 (特征向量列表, 标签列表)"""
    if not delimiter:
        raise DelimiterConflictError("delimiter must be a non-empty string")

    vectors = []
    labels = []
    # 只按 \n 分行（兼容 \r\n），标签里的其它 Unicode 行分隔符原样保留
    for line_index, line in enumerate(text.split("\n")):
        if line.endswith("\r"):
            line = line[:-1]
        if skip_header and line_index == 0:
            continue
        if not line.strip():
            continue

        fields = line.split(delimiter)
        if strip:
            fields = [f.strip() for f in fields]
        if len(fields) < 2:
            raise ParseError(line_index, "a row needs at least one feature and a label")
        if not -len(fields) <= label_col < len(fields):
            raise ParseError(line_index, f"label column {label_col} is out of range")

        label_pos = label_col % len(fields)
        vector = []
        for pos, field in enumerate(fields):
            if pos == label_pos:
                continue
            try:
                vector.append(float(field))
            except ValueError:
                raise ParseError(line_index, f"cannot parse {field!r} as a number") from None
        vectors.append(vector)
        labels.append(fields[label_pos])
    return vectors, labels
