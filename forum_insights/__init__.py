"""Owner-scoped engagement insights for the forum."""
