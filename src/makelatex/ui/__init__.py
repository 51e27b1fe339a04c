"""User interfaces for make-latex."""
