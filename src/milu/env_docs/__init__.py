"""Annotated .env parsing and markdown documentation rendering.

Submodules:
  patterns     -- annotation prefixes/suffixes and the table header constants
  classifiers  -- LineKind enum and line classification / content extraction
  schema       -- FieldSlot enum and the EnvDocRow Pydantic model
  accumulator  -- FieldAccumulator, the in-progress row
  formatting   -- markdown header and row rendering
  pipeline     -- iter_rows(), run() and generate() entry points
"""
