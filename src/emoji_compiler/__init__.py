"""Unicode emoji data compiler."""
