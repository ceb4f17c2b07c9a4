from .reader import CsvReadError, read_csv_columns, read_csv_rows

__all__ = ["CsvReadError", "read_csv_columns", "read_csv_rows"]
