"""Value objects and the error taxonomy; no I/O."""
