"""Settings, logging, error types and record store backends."""
