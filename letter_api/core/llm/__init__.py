"""LLM integration layer.

This package is intentionally small:
- No prompt/output logging (messages may contain personal data).
- Configurable via environment variables.
- One client per process, built at startup and injected into services.
"""
