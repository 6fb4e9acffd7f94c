from .summary import SUMMARY, Summary, SummaryByOrigin, SummaryKey, summarize

__all__ = ["SUMMARY", "Summary", "SummaryByOrigin", "SummaryKey", "summarize"]
