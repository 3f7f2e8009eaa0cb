"""Session state and the operations that drive it."""
