"""Settings HTTP API routers."""
