"""Core building blocks: exceptions, error handlers, middleware and security."""
