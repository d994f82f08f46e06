"""Remote access services."""
