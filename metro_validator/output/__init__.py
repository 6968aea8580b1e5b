"""Output formatting for validation reports."""
