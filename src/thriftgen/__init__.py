"""Thriftgen: regenerate Thrift sources from .thrift schemas."""

__version__ = "0.1.0"
