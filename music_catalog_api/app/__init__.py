"""
Application package initializer.

The project is organised into layers: ``core`` (configuration,
logging, the catalog store and errors), ``schemas`` (pydantic
payloads), ``services`` (reference checks, filter composition and
write orchestration) and ``api`` (versioned routers and error
handlers).
"""

from .main import app  # noqa: F401
