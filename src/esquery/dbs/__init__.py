"""Search client adapters."""
