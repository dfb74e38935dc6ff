"""API package grouping versioned routers and the error handlers."""
