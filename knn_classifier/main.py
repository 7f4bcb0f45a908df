import logging
import os
import sys
from dataclasses import dataclass, field

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from sklearn.metrics import confusion_matrix

from knn_classifier.errors import KNNError
from knn_classifier.knn_class import KNNClassifier
from knn_classifier.utils import compute_accuracy, load_data, load_model, save_model

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class Config:
    """实验配置"""
    # 数据相关
    test_size: float = 0.3
    val_size: float = 0.5
    random_state: int = 42

    # 模型相关
    k_values: list = field(default_factory=lambda: [1, 3, 5, 7, 9])
    delimiter: str = ","

    # 输出相关
    save_dir: str = "outputs"
    model_file: str = "iris_knn.csv"
    plot: bool = True

    def __post_init__(self):
        """参数检查"""
        if not self.k_values:
            raise ValueError("k_values must not be empty")
        if not 0 < self.test_size < 1 or not 0 < self.val_size < 1:
            raise ValueError("test_size and val_size must be in (0, 1)")
        os.makedirs(self.save_dir, exist_ok=True)

    @property
    def model_path(self):
        return os.path.join(self.save_dir, self.model_file)


def plot_k_selection(k_values, val_accuracies, save_path):
    """绘制 k 值与验证集准确率的关系"""
    plt.figure(figsize=(8, 5))
    plt.plot(k_values, val_accuracies, 'o-', linewidth=2)
    plt.xlabel('k')
    plt.ylabel('Validation accuracy')
    plt.title('KNN hyperparameter selection')
    plt.xticks(k_values)
    plt.grid(alpha=0.3)
    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close()


def run_experiment(config: Config):
    """k 值选择 → 保存模型 → 从文件重新加载 → 测试集评估"""
    X_train, X_val, X_test, y_train, y_val, y_test = load_data(
        config.test_size, config.val_size, config.random_state)
    logger.info(f"训练集: {X_train.shape}, 验证集: {X_val.shape}, 测试集: {X_test.shape}")

    best_k = None
    best_val_acc = -1.0
    val_accuracies = []
    for k in config.k_values:
        knn = KNNClassifier(k=k).fit(X_train, y_train)
        val_acc = knn.score(X_val, y_val)
        val_accuracies.append(val_acc)
        logger.info(f"k={k}, 验证集准确率: {val_acc:.4f}")
        if val_acc > best_val_acc:
            best_val_acc = val_acc
            best_k = k
    logger.info(f"最佳k值: {best_k}")

    knn = KNNClassifier(k=best_k).fit(X_train, y_train)
    save_model(knn, config.model_path, config.delimiter)

    # k 不在文本里，重新加载时单独提供
    reloaded = load_model(config.model_path, best_k, config.delimiter)
    y_pred = reloaded.predict(X_test)
    test_acc = compute_accuracy(y_test, y_pred)
    logger.info(f"测试集准确率: {test_acc:.4f}")

    labels = sorted(set(y_train))
    cm = confusion_matrix(y_test, y_pred, labels=labels)
    logger.info(f"混淆矩阵 (行: 真实, 列: 预测, 顺序 {labels}):\n{cm}")

    if config.plot:
        plot_path = os.path.join(config.save_dir, 'knn_hyperparameter.png')
        plot_k_selection(config.k_values, val_accuracies, plot_path)
        logger.info(f"📊 k值选择图已保存至 {plot_path}")

    return {
        'best_k': best_k,
        'val_accuracies': dict(zip(config.k_values, val_accuracies)),
        'test_accuracy': test_acc,
        'confusion_matrix': cm,
    }


def main():
    logger.info("=" * 60)
    logger.info("鸢尾花 KNN 分类实验")
    logger.info("=" * 60)
    try:
        run_experiment(Config())
    except KNNError as e:
        logger.error(f"❌ 实验失败: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
