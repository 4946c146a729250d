"""
Core package for the organizational KPI dashboard.

Submodules provide CSV feed loading, KPI catalog construction, aggregation,
radar scaling, and Streamlit rendering helpers that are orchestrated by the
top-level `app.py`.
"""
