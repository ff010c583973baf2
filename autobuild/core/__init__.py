"""Assembly core: artifact registry, run paths, archive locations and the
pipeline assembler."""
