"""Core - error hierarchy shared by all layers."""
