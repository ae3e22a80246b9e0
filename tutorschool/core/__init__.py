"""Domain core: pure scheduling logic, caching, reference data and exceptions."""
