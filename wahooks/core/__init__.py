"""Core configuration, logging, events and shared types for wahooks."""
