"""CSV import of business records (workers, clients, products)."""

__version__ = "0.1.0"
