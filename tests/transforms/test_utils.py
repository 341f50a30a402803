import math

import pandas as pd

from walmart_dashboard.transforms import safe_mean


class TestUtils:
    def test_safe_mean(self):
        assert safe_mean(pd.Series([1.0, 2.0, 4.5])) == 2.5

    def test_safe_mean_empty(self):
        result = safe_mean(pd.Series([], dtype=float))

        assert result == 0.0
        assert not math.isnan(result)
