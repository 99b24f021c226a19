"""The stepping evaluator: one-step reducer, special forms, driver and macro expansion."""
