"""
Command-line scripts. Run from the backend directory with python -m scripts.<name>.
"""
