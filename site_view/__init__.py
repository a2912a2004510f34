"""Streamlit rendering helpers for the portfolio pages."""
