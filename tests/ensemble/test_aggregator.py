# tests/ensemble/test_aggregator.py
from __future__ import annotations

import numpy as np
import pytest

from covresample.data.dataset import ClassAttribute, Dataset, Instance
from covresample.ensemble.aggregator import predict, predict_label, predict_many
from covresample.utils.errors import DistributionShapeError, UnsupportedTargetType


def test_predict_sums_and_normalizes(make_ensemble, instance):
    ensemble = make_ensemble([[1, 0, 0], [0, 1, 1]])

    np.testing.assert_allclose(predict(ensemble, instance), [1 / 3, 1 / 3, 1 / 3])


def test_predict_weights_members_equally(make_ensemble, instance):
    ensemble = make_ensemble([[0.8, 0.2, 0.0], [0.6, 0.0, 0.4]])

    dist = predict(ensemble, instance)

    np.testing.assert_allclose(dist, [0.7, 0.1, 0.2])
    assert dist.sum() == pytest.approx(1.0)


def test_zero_distribution_returned_unnormalized(make_ensemble, instance):
    ensemble = make_ensemble([[0, 0, 0], [0, 0, 0]])

    np.testing.assert_array_equal(predict(ensemble, instance), [0, 0, 0])


def test_near_zero_sum_is_not_normalized(make_ensemble, instance):
    ensemble = make_ensemble([[1e-8, 0, 0]])

    np.testing.assert_allclose(predict(ensemble, instance), [1e-8, 0, 0])


def test_empty_ensemble_predicts_zeros(make_ensemble, instance):
    ensemble = make_ensemble([])

    np.testing.assert_array_equal(predict(ensemble, instance), np.zeros(3))


def test_member_shape_mismatch(make_ensemble, instance):
    ensemble = make_ensemble([[1, 0, 0], [1, 0]])

    with pytest.raises(DistributionShapeError):
        predict(ensemble, instance)


def test_numeric_instance_rejected(make_ensemble):
    ensemble = make_ensemble([[1, 0, 0]])
    numeric = Instance(
        values=np.zeros(3),
        class_value=None,
        class_attribute=ClassAttribute(name="y", numeric=True),
    )

    with pytest.raises(UnsupportedTargetType):
        predict(ensemble, numeric)


def test_predict_label(make_ensemble, instance):
    ensemble = make_ensemble([[0.2, 0.5, 0.3], [0.1, 0.6, 0.3]])

    assert predict_label(ensemble, instance) == "b"


def test_predict_label_none_when_no_votes(make_ensemble, instance):
    assert predict_label(make_ensemble([[0, 0, 0]]), instance) is None


def test_predict_many(make_ensemble, class_attribute):
    ensemble = make_ensemble([[1, 0, 0], [0, 0, 1]])
    ds = Dataset.from_arrays(np.zeros((4, 3)), ["a", "b", "c", "a"], labels=class_attribute.labels)

    out = predict_many(ensemble, ds)

    assert out.shape == (4, 3)
    np.testing.assert_allclose(out, np.tile([0.5, 0.0, 0.5], (4, 1)))


def test_predict_many_empty(make_ensemble, class_attribute):
    ensemble = make_ensemble([[1, 0, 0]])

    assert predict_many(ensemble, Dataset(class_attribute=class_attribute)).shape == (0, 3)
