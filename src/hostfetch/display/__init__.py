"""Terminal display: colors, art, and layout."""
