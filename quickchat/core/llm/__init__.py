"""LLM integration layer.

This package is intentionally small and conservative:
- No prompt/output logging.
- Configurable via environment variables.
- One named environment (pooled HTTP client) per process, created on first use.
"""
