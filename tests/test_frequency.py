import math
import random
import statistics

import pytest

from numlab.frequency import describe, frequency_table


SAMPLE = [3.2, 7.9, 1.4, 5.5, 9.1, 2.8, 6.6, 4.0, 8.3, 5.0]


def test_describe_matches_population_statistics():
    stats = describe(SAMPLE)
    assert stats.count == len(SAMPLE)
    assert stats.mean == pytest.approx(statistics.fmean(SAMPLE))
    assert stats.variance == pytest.approx(statistics.pvariance(SAMPLE))
    assert stats.std == pytest.approx(math.sqrt(stats.variance))
    assert stats.maximum == max(SAMPLE)
    assert stats.minimum == min(SAMPLE)


def test_describe_constant_sample_has_zero_variance():
    stats = describe([4.0, 4.0, 4.0])
    assert stats.variance == 0.0
    assert stats.std == 0.0


def test_describe_empty_rejected():
    with pytest.raises(ValueError):
        describe([])


def test_frequency_table_worked_example():
    table = frequency_table([1, 2, 3, 4, 5], 2)
    assert [c.frequency for c in table] == [2, 2]
    assert table[0].lower == 0.5
    assert table[-1].cumulative == 4


def test_frequency_table_structure():
    values = [random.Random(9).uniform(1, 50) for _ in range(1)]
    values = random.Random(9).sample(range(1, 200), 60)
    k = 7
    table = frequency_table(values, k)
    assert len(table) == k
    assert table[0].lower == min(values) - 0.5
    width = math.ceil((max(values) - min(values)) / k)
    for cls in table:
        assert cls.width == pytest.approx(width)
        assert cls.midpoint == pytest.approx((cls.lower + cls.upper) / 2)
        assert cls.relative == pytest.approx(cls.frequency / len(values))
        assert cls.cumulative_relative == pytest.approx(cls.cumulative / len(values))
    for prev, cur in zip(table, table[1:]):
        assert cur.lower == prev.upper
        assert cur.cumulative == prev.cumulative + cur.frequency


def test_frequency_table_counts_half_open_intervals():
    values = random.Random(4).sample(range(0, 100), 40)
    table = frequency_table(values, 5)
    for cls in table:
        expected = sum(1 for v in values if cls.lower <= v < cls.upper)
        assert cls.frequency == expected
    assert table[-1].cumulative <= len(values)


def test_frequency_table_custom_unit():
    table = frequency_table([10.0, 20.0, 30.0], 3, unit=0.2)
    assert table[0].lower == pytest.approx(9.9)


@pytest.mark.parametrize("k", [0, -2])
def test_frequency_table_rejects_bad_class_count(k):
    with pytest.raises(ValueError):
        frequency_table(SAMPLE, k)


def test_frequency_table_rejects_empty():
    with pytest.raises(ValueError):
        frequency_table([], 3)