"""Per-line transforms: slugs, line extraction, completeness checks."""
