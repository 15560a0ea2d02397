"""Core model: drone base, capability contracts, config, logging and missions."""
