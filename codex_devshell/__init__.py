"""Development launcher for the Codex desktop shell."""
