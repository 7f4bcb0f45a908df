"""
Unit tests for the model store.

Tests shape validation, replacement semantics and read-only storage.
"""

import numpy as np
import pytest

from knn_classifier import (
    EmptyInputError,
    LengthMismatchError,
    ModelStore,
    RaggedVectorsError,
    ShapeError,
    TrainingExample,
)


@pytest.fixture
def store():
    """Store holding three 2-d examples."""
    s = ModelStore()
    s.replace([[1, 2], [3, 4], [5, 6]], ["a", "b", "a"])
    return s


def test_new_store_is_empty():
    """Test the initial state of a store."""
    s = ModelStore()
    assert s.is_empty()
    assert s.dimensionality is None
    assert s.examples == []
    assert len(s) == 0


def test_replace_sets_contents(store):
    """Test that replace stores examples in insertion order."""
    assert not store.is_empty()
    assert store.dimensionality == 2
    assert len(store) == 3
    assert store.examples == [
        TrainingExample((1.0, 2.0), "a"),
        TrainingExample((3.0, 4.0), "b"),
        TrainingExample((5.0, 6.0), "a"),
    ]


def test_replace_overwrites(store):
    """Test that a second replace discards the first data set."""
    store.replace([[7, 8, 9]], ["z"])
    assert store.dimensionality == 3
    assert store.examples == [TrainingExample((7.0, 8.0, 9.0), "z")]


@pytest.mark.parametrize("vectors,labels,error", [
    ([[1, 2], [3, 4]], ["a"], LengthMismatchError),
    ([[1, 2]], ["a", "b"], LengthMismatchError),
    ([], [], EmptyInputError),
    ([[]], ["a"], EmptyInputError),
    ([[1, 2], [3]], ["a", "b"], RaggedVectorsError),
    ([[1, 2], [[3, 4]]], ["a", "b"], RaggedVectorsError),
    ([5], ["a"], RaggedVectorsError),
])
def test_replace_rejects_bad_shapes(store, vectors, labels, error):
    """Test shape errors and that the old contents survive them."""
    before = store.examples
    with pytest.raises(error):
        store.replace(vectors, labels)
    assert store.examples == before
    assert store.dimensionality == 2


def test_length_checked_before_raggedness():
    """Test that a count mismatch is reported even with ragged vectors."""
    with pytest.raises(LengthMismatchError):
        ModelStore().replace([[1, 2], [3]], ["a"])


def test_shape_errors_share_base():
    """Test that every shape error derives from ShapeError and ValueError."""
    for error in (LengthMismatchError, EmptyInputError, RaggedVectorsError):
        assert issubclass(error, ShapeError)
        assert issubclass(error, ValueError)


def test_labels_are_coerced_to_str():
    """Test that non-string labels are stored as text."""
    s = ModelStore()
    s.replace([[0], [1]], [1, np.int64(2)])
    assert s.labels == ["1", "2"]


def test_stored_vectors_are_read_only(store):
    """Test that the stored matrix cannot be modified in place."""
    with pytest.raises(ValueError):
        store.vectors[0, 0] = 100.0


def test_store_copies_input():
    """Test that mutating the caller's data does not leak into the store."""
    data = np.array([[1.0, 2.0], [3.0, 4.0]])
    labels = ["a", "b"]
    s = ModelStore()
    s.replace(data, labels)
    data[0, 0] = 99.0
    labels[0] = "changed"
    assert s.examples[0] == TrainingExample((1.0, 2.0), "a")


@pytest.mark.parametrize("vectors", [
    [[1.0, [2.0]], [3.0, 4.0]],
    [[1.0, 2.0], [[3.0], [4.0, 5.0]]],
])
def test_replace_rejects_nested_vectors(store, vectors):
    """Test that nested training vectors raise RaggedVectorsError."""
    with pytest.raises(RaggedVectorsError):
        store.replace(vectors, ["a", "b"])
    assert store.dimensionality == 2


def test_replace_non_numeric_is_not_shape_error():
    """Test that a non-numeric feature keeps numpy's ValueError."""
    with pytest.raises(ValueError) as exc_info:
        ModelStore().replace([["tall", 2.0]], ["a"])
    assert not isinstance(exc_info.value, ShapeError)
