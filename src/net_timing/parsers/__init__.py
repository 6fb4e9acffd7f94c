from .records import load_records, parse_records, records_from_dataframe, records_to_dataframe

__all__ = ["load_records", "parse_records", "records_from_dataframe", "records_to_dataframe"]
