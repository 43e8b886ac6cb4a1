"""Application layer - facade and service orchestration."""
