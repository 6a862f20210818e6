from diffbudget.cli import app

app()
