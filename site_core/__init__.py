"""Content model, loading and selection logic of the portfolio site."""
