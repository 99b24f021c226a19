"""Default primitives, actions and macros that sessions usually start with."""
