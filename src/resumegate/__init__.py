"""resumegate - content-safety gate for resume processing."""
