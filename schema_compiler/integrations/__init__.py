"""
Framework integrations. Each submodule imports its framework lazily by
being imported explicitly, e.g. `schema_compiler.integrations.fastapi`.
"""
