"""DreamWeaver: local-first sleep tracking and coaching service."""
