"""Business logic called by the API routers."""
