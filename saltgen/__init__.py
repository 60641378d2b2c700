"""Figma → Salt Design System code generation package.

Subpackages:
- mapping: Design node model, component catalog, classifier, prop extraction, tree mapper
- integrations: External service clients (LLM completion + Q&A endpoints)
- codegen: Prompt rendering, example fetching, response parsing/validation, generator
"""
