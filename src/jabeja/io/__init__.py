"""
Input/output around the engine.

- ResultSink, TabularFileSink, MemorySink: where round records go
- load_config: read a JabejaConfig from YAML
"""

from jabeja.io.sink import ResultSink, TabularFileSink, MemorySink
from jabeja.io.config_file import load_config

__all__ = [
    "ResultSink",
    "TabularFileSink",
    "MemorySink",
    "load_config",
]
