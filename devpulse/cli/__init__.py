"""DevPulse command-line interface."""
