"""Value, function, environment and evaluation-state types for stepl."""
