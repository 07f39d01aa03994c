"""Value types, conversions, byte buffers, SQL time arithmetic and transaction helpers for MariaDB clients."""

__version__ = "0.1.0"

__all__ = ["types", "exceptions", "conversion", "data", "time_span", "transaction", "sqltime"]