"""Value types and helpers shared by every event family."""
