"""HTTP API for the plan engine."""
