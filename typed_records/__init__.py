"""Core logic for Typed Records.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- decode JSON into explicitly typed records
- look up attributes by dot-path, descending into nested records
- render attribute values as display strings
- sort and filter record collections by attribute value
"""
