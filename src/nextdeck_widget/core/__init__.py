"""Core logic: snapshot access, widget resolution and settings."""
