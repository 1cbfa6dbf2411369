from schema_compiler.sources.adapters import to_generic
from schema_compiler.sources.loader import load_json, load_schema, load_target

__all__ = ["load_json", "load_schema", "load_target", "to_generic"]
