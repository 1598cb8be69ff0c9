from slisp.cli import app

app()
