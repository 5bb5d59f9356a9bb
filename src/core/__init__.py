"""core — configuration, logging and exceptions shared by every package."""
