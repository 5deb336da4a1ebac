"""Core domain, ports and use cases (no network or framework code)."""
