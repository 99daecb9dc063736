# Annotations
from .annotations import (
    Alias,
    Attribute,
    Class,
    ClassMod,
    NoDoc,
    Param,
    Return,
    See,
    extract_aliases,
    parse_attribute,
    simplify_type,
)

# Chunking
from .chunking import Chunk, assemble_chunks

# Configuration
from .config import ConverterConfig, load_config

# Conversion
from .converter import ConversionReport, Converter

# Errors
from .errors import AliasOrderError, LdocGenError, SourceParseError

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import LuaParser, SourceParser

# Rendering
from .rendering import regroup_chunks, render_chunks, rewrite_examples

__all__ = [
    # Annotations
    "Alias",
    "Attribute",
    "Class",
    "ClassMod",
    "NoDoc",
    "Param",
    "Return",
    "See",
    "extract_aliases",
    "parse_attribute",
    "simplify_type",
    # Chunking
    "Chunk",
    "assemble_chunks",
    # Configuration
    "ConverterConfig",
    "load_config",
    # Conversion
    "ConversionReport",
    "Converter",
    # Errors
    "AliasOrderError",
    "LdocGenError",
    "SourceParseError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "LuaParser",
    "SourceParser",
    # Rendering
    "regroup_chunks",
    "render_chunks",
    "rewrite_examples",
]
