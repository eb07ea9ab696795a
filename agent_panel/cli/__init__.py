"""Command-line interface for AgentPanel config."""
