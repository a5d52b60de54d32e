"""Schema building: chain aggregation, variant grouping and naming."""

from mistcss.schema.builder import SchemaBuilder, parse
from mistcss.schema.grouping import (
    ChainedGrouping,
    DashPrefixGrouping,
    Grouping,
    GroupingPolicy,
    NoGrouping,
    VariantGroup,
    VocabularyGrouping,
    default_policy,
)
from mistcss.schema.naming import camel_case, component_name, pascal_case

__all__ = [
    "SchemaBuilder",
    "parse",
    "GroupingPolicy",
    "Grouping",
    "VariantGroup",
    "NoGrouping",
    "DashPrefixGrouping",
    "VocabularyGrouping",
    "ChainedGrouping",
    "default_policy",
    "camel_case",
    "pascal_case",
    "component_name",
]
