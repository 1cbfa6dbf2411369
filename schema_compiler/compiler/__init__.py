from schema_compiler.compiler.compile import compile_keywords, compile_schema

__all__ = ["compile_keywords", "compile_schema"]
