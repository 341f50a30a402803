def safe_mean(values):
    """Mean of a numeric Series, 0.0 when there is nothing to average"""
    return float(values.mean()) if len(values) else 0.0


def count_stores(store_numbers):
    """Distinct store numbers, with a missing store number counted once"""
    return int(store_numbers.nunique(dropna=False))
