"""Infrastructure — database engine/session lifecycle and structured logging."""
