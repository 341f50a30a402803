from dataclasses import dataclass

"""Configuration class for the Walmart dashboard pipeline.

This class manages the parameters needed to load the sales snapshot,
including the input location, the delimiters to sniff and the bucket
sizes used by the environmental-factor tables.
"""


@dataclass
class PipelineConfig:
    input_csv: str = "Walmart_sales_analysis.csv"
    delimiters: str = ",\t|;"
    cpi_column: str = " CPI "
    temperature_bucket_width: int = 10
    fuel_price_steps_per_dollar: int = 4
    top_stores: int = 10
    drop_invalid_dates: bool = False
    log_level: str = "INFO"
