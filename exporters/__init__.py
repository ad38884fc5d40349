"""Exporters for converting the mention graph to various output formats."""

from .text_exporter import describe_inbound, describe_all, describe_orphans
from .mermaid_exporter import to_mermaid
from .json_exporter import to_json

__all__ = ["describe_inbound", "describe_all", "describe_orphans", "to_mermaid", "to_json"]
