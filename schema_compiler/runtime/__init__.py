from schema_compiler.runtime.engine import coerce_target, is_valid_node, validate_node

__all__ = ["coerce_target", "is_valid_node", "validate_node"]
