"""URL shortener service package."""
