from .summary import export_summary_csv, summary_to_dataframe

__all__ = ["export_summary_csv", "summary_to_dataframe"]
