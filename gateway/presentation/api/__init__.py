"""HTTP API package (middleware, routing, validation, error rendering)."""
