"""Streamlit presentation layer for Harvest Valley."""
