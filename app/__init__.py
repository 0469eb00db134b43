"""Streamlit front end for the VM Inventory Browser."""
