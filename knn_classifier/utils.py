import logging

import numpy as np
from sklearn.datasets import load_iris
from sklearn.model_selection import train_test_split

from knn_classifier.knn_class import KNNClassifier

logger = logging.getLogger(__name__)


def load_data(test_size=0.3, val_size=0.5, random_state=42):
    """加载鸢尾花数据集，标签为类别名称"""
    iris = load_iris()
    X = iris.data
    y = iris.target_names[iris.target].astype(str)

    # 划分训练集、验证集和测试集
    X_train, X_temp, y_train, y_temp = train_test_split(
        X, y, test_size=test_size, random_state=random_state, stratify=y
    )
    X_val, X_test, y_val, y_test = train_test_split(
        X_temp, y_temp, test_size=val_size, random_state=random_state, stratify=y_temp
    )

    return X_train, X_val, X_test, y_train, y_val, y_test


def compute_accuracy(y_true, y_pred):
    """计算准确率"""
    return float(np.mean(np.asarray(y_true) == np.asarray(y_pred)))


def save_model(clf, path, delimiter=","):
    """把模型的训练数据写入文本文件"""
    text = clf.to_text(delimiter)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(f"💾 模型已保存至 {path}")


def load_model(path, k, delimiter=",", **kwargs):
    """从文本文件读取训练数据，k 需要调用方提供"""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    clf = KNNClassifier(k=k)
    clf.from_text(text, delimiter, **kwargs)
    return clf
