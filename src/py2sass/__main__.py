"""Entry point for running py2sass as a module.

Usage:
    python -m py2sass build styles.py --output build/style.css
    python -m py2sass check
"""

from py2sass.cli import app

if __name__ == "__main__":
    app()
