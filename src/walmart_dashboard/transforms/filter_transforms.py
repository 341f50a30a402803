import logging

import numpy as np


def filter_valid_sales(records, drop_invalid_dates=False):
    """Keep records whose weekly sales are a finite number above zero.

    This is the single data-quality gate before aggregation. Rows with an
    unparseable date pass it unless drop_invalid_dates is set.
    """
    sales = records['weekly_sales']
    keep = np.isfinite(sales) & (sales > 0)
    if drop_invalid_dates:
        keep &= records['date'].notna()

    clean = records[keep].reset_index(drop=True)
    logging.info(f"Kept {len(clean)} of {len(records)} records ({len(records) - len(clean)} dropped)")
    return clean
