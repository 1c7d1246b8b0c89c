# faultline/__main__.py
# Entry point for `python -m faultline`

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="faultline")
