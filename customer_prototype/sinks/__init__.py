"""Output sinks for exporting customer records."""

from customer_prototype.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
