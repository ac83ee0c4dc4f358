"""Unit tests for sampsize.core.sweep."""

import numpy as np
import pandas as pd
import pytest

from sampsize import InvalidParameter, calculate_sample_size
from sampsize.core.sweep import effect_size_grid, sweep_effect_size


class TestEffectSizeGrid:
    """Grid construction."""

    def test_andrews_range(self):
        grid = effect_size_grid(1.0, 5.0, 0.1)
        assert len(grid) == 41
        assert grid[0] == 1.0
        assert grid[-1] == 5.0

    def test_small_effect_range(self):
        grid = effect_size_grid(0.1, 5.0, 0.1)
        assert len(grid) == 50
        assert grid[-1] == 5.0

    def test_exact_decimals(self):
        grid = effect_size_grid(1.0, 2.0, 0.1)
        np.testing.assert_array_equal(grid, [1.0, 1.1, 1.2, 1.3, 1.4, 1.5, 1.6, 1.7, 1.8, 1.9, 2.0])

    def test_partial_last_step_excluded(self):
        grid = effect_size_grid(1.0, 2.0, 0.3)
        np.testing.assert_allclose(grid, [1.0, 1.3, 1.6, 1.9])

    def test_invalid_range(self):
        with pytest.raises(InvalidParameter):
            effect_size_grid(5.0, 1.0, 0.1)

    def test_many_points_warns(self):
        with pytest.warns(UserWarning, match="Large number of effect sizes"):
            grid = effect_size_grid(0.001, 5.0, 0.001)
        assert len(grid) == 5000


class TestSweepEffectSize:
    """Sweeping the calculation over effect sizes."""

    def test_matches_pointwise(self, reference_query):
        grid = effect_size_grid(1.0, 5.0, 0.5)
        result = sweep_effect_size(reference_query, grid)
        expected = [calculate_sample_size(es, 4.0, 0.05, 0.8, 0.2, 1.0) for es in grid]
        assert result.sample_sizes.tolist() == expected

    def test_base_query_unchanged(self, reference_query):
        result = sweep_effect_size(reference_query, [1.0, 2.0])
        assert result.query is reference_query
        assert reference_query.effect_size == 3.0

    def test_non_increasing(self, reference_query):
        result = sweep_effect_size(reference_query, effect_size_grid(0.1, 5.0, 0.1))
        assert np.all(np.diff(result.sample_sizes) <= 0)

    def test_reference_point_in_sweep(self, reference_query):
        result = sweep_effect_size(reference_query, effect_size_grid(1.0, 5.0, 0.1))
        idx = int(np.flatnonzero(result.effect_sizes == 3.0)[0])
        assert result.sample_sizes[idx] == 48

    def test_len(self, reference_query):
        assert len(sweep_effect_size(reference_query, [1.0, 2.0, 3.0])) == 3

    def test_to_dataframe(self, reference_query):
        df = sweep_effect_size(reference_query, [1.0, 3.0]).to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["effect_size", "sample_size"]
        assert df["sample_size"].tolist() == [422, 48]

    def test_to_dict(self, reference_query):
        d = sweep_effect_size(reference_query, [3.0]).to_dict()
        assert d == {"effect_sizes": [3.0], "sample_sizes": [48]}

    def test_zero_effect_in_grid_rejected(self, reference_query):
        with pytest.raises(InvalidParameter, match="effect_size must be nonzero"):
            sweep_effect_size(reference_query, [0.0, 1.0])
