#!/usr/bin/env python3
"""
Streamlit entry point for the Sales Dashboard.

Run with: streamlit run sales_dashboard_streamlit.py
"""
import sys
import os

if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    app_path = os.path.join(current_dir, "sales_dashboard", "ui", "streamlit_app.py")
    
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)
    
    import runpy
    runpy.run_path(app_path, run_name="__main__")
