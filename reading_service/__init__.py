"""Reading service package."""
