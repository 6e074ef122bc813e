"""Gradio user interface for Fluxworks."""
