from properties2json.cli import app

app()
